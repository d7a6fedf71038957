"""Pytest configuration: in-memory SQLite database injected into the app."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["ENVIRONMENT"] = "development"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["AUTO_CREATE_TABLES"] = "false"
for _key in ("SUPABASE_URL", "SUPABASE_SERVICE_ROLE"):
    os.environ.pop(_key, None)

import pytest
from fastapi.testclient import TestClient

from app.db.session import Database
from app.main import create_app
from app.repositories.user_repository import UserRepository
from app.services.auth import AuthService


class FakeSessionStore:
    """Stands in for the cookie adapter in service-level tests."""

    def __init__(self, token=None, admin=False):
        self.token = token
        self.admin = admin

    def read(self):
        return self.token

    def write(self, token):
        self.token = token

    def clear(self):
        self.token = None

    def has_admin_marker(self):
        return self.admin


@pytest.fixture
def database():
    """Fresh schema per test."""
    db = Database("sqlite://")
    db.create_all()
    yield db
    db.drop_all()
    db.dispose()


@pytest.fixture
def db_session(database):
    session = database.SessionLocal()
    yield session
    session.close()


@pytest.fixture
def users(db_session):
    return UserRepository(db_session)


@pytest.fixture
def session_store():
    return FakeSessionStore()


@pytest.fixture
def auth_service(users, session_store):
    return AuthService(users, session_store)


@pytest.fixture
def client(database):
    """Test client fixture."""
    return TestClient(create_app(database))


@pytest.fixture
def register(client):
    """POST /api/auth/register on the default client (or the one passed in)."""
    def _register(name="Ada", email="ada@example.com", password="longenough1", via=None):
        return (via or client).post(
            "/api/auth/register",
            json={"name": name, "email": email, "password": password},
        )
    return _register
