#Creates a connection engine to your database.
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
#Base class for SQLAlchemy ORM models.
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi import Request

# Create Base class
Base = declarative_base()


def build_engine(database_url: str) -> Engine:
    """Create the SQLAlchemy engine for the configured database."""
    if database_url.startswith("sqlite"):
        #SQLite connections are shared with FastAPI's worker threads
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url or database_url in ("sqlite://", "sqlite:///"):
            #one connection, otherwise every session sees its own empty database
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, **kwargs)
    return create_engine(database_url, pool_pre_ping=True)


def build_session_factory(engine: Engine) -> sessionmaker:
    # Create SessionLocal class
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Dependency to get DB session
def get_db(request: Request):
    #Creates a new database session from the factory built at app start.
    db = request.app.state.session_factory()
    try:
        #Makes it available to route functions.
        yield db
    finally:
        db.close() #Ensures the session is closed properly


        #This module provides the SQLAlchemy setup: a declarative base, an engine/session factory built from settings, and a per-request session dependency with safe cleanup
