import pytest
from fastapi.testclient import TestClient

from tracking.config import Settings
from tracking.database import Base, build_engine, build_session_factory
from tracking.main import create_app
from tracking.models.user import UserRole
from tracking.repositories.users import UserRepository
from tracking.utils.auth import PasswordHasher

SECRET = "test-secret-key-that-is-long-enough-for-hs256"


# -----------------------
# Fixtures
# -----------------------

@pytest.fixture
def settings():
    #4 is bcrypt's minimum work factor; keeps the suite fast
    return Settings(database_url="sqlite://", secret_key=SECRET, bcrypt_rounds=4)


@pytest.fixture
def session_factory():
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield build_session_factory(engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    s = session_factory()
    yield s
    s.close()


@pytest.fixture
def fast_hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def client(settings):
    app = create_app(settings)
    #the context manager runs the lifespan, which creates the tables
    with TestClient(app) as c:
        yield c


# -----------------------
# Helpers
# -----------------------

def register(client, username, password="secret123", email=None):
    response = client.post(
        "/api/auth/register",
        json={"username": username, "email": email or f"{username}@example.com", "password": password},
    )
    assert response.status_code == 201, response.text
    return response.json()


def login(client, username, password="secret123"):
    response = client.post("/api/auth/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["token"]


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


def promote(client, user_id):
    """Out-of-band elevation straight through the credential store."""
    s = client.app.state.session_factory()
    try:
        assert UserRepository(s).set_role(user_id, UserRole.ADMINISTRATOR)
    finally:
        s.close()


def create_customer(client, token, **fields):
    payload = {"company_name": "Acme Pte Ltd", "business_address": "1 Marina Blvd"}
    payload.update(fields)
    response = client.post("/api/customers", json=payload, headers=auth_headers(token))
    assert response.status_code == 201, response.text
    return response.json()["data"]
