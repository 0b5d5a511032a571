import logging
from contextlib import asynccontextmanager
from datetime import datetime, timedelta, timezone

from fastapi import FastAPI, Request
#Handles Cross-Origin Resource Sharing
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from .config import DEFAULT_SECRET_KEY, Settings, get_settings
#SQLAlchemy declarative base and engine/session factories
from .database import Base, build_engine, build_session_factory
from .errors import StorageError, TrackingError, Unauthenticated, ValidationFailed
from .middleware import SecurityHeadersMiddleware
#Models - imported for table creation
from .models import User, Customer  # noqa: F401
#Routers - modular route groups for auth, customers, users
from .routers import auth_router, customers_router, users_router
from .utils.auth import PasswordHasher, TokenService

logger = logging.getLogger(__name__)


def _error_response(error: TrackingError) -> JSONResponse:
    content = {"success": False, "message": error.message}
    if isinstance(error, ValidationFailed) and error.errors:
        content["errors"] = error.errors
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(error, Unauthenticated) else None
    return JSONResponse(status_code=error.status_code, content=content, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(TrackingError)
    async def tracking_error_handler(request: Request, exc: TrackingError):
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = [
            {"field": ".".join(str(part) for part in err["loc"][1:]), "message": err["msg"]}
            for err in exc.errors()
        ]
        return _error_response(ValidationFailed(errors))

    #internal details stay in the logs
    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
        return _error_response(StorageError())

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return _error_response(TrackingError())


def create_app(settings: Settings = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    # Production guardrails (fail fast with clear logs)
    if settings.is_production and settings.secret_key == DEFAULT_SECRET_KEY:
        raise RuntimeError("SECRET_KEY must be set to a strong value in production.")

    engine = build_engine(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Automatically create database tables
        Base.metadata.create_all(bind=engine)
        yield
        engine.dispose()

    # Initialize FastAPI app
    #Adds API metadata
    app = FastAPI(
        title="Customer Tracking API",
        description="Customer records with owner-scoped access for sales teams",
        version="1.0.0",
        lifespan=lifespan,
    )

    #read-only collaborators shared by every request
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.password_hasher = PasswordHasher(rounds=settings.bcrypt_rounds)
    app.state.token_service = TokenService(
        secret_key=settings.secret_key,
        algorithm=settings.algorithm,
        expires_in=timedelta(days=settings.access_token_expire_days),
    )

    # Configure CORS(Cross-Origin Resource Sharing)
    #allows the frontend to access this API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)

    register_exception_handlers(app)

    # Include routers
    app.include_router(auth_router)  #authentication endpoints
    app.include_router(customers_router)
    app.include_router(users_router)

    @app.get("/api/health")
    async def health_check():
        return {
            "status": "ok",
            "message": "Customer Tracking API is running",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    logger.info("Application created (environment=%s)", settings.environment)
    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
