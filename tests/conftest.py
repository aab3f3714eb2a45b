"""Shared test fixtures for kvault."""

import pytest

from kvault.auth.schemas import RegisterRequest
from kvault.auth.service import AuthService
from kvault.config import Settings
from kvault.db import Database
from kvault.dependencies import get_services
from kvault.main import create_app
from kvault.store.service import DataService

TEST_SECRET = "test-secret-key"


@pytest.fixture
def settings():
    """Settings for tests: in-memory database, fast bcrypt, fixed secret."""
    return Settings(
        database_path=":memory:",
        jwt_secret_key=TEST_SECRET,
        bcrypt_work_factor=4,
    )


@pytest.fixture
def test_db():
    """Create in-memory test database with schema."""
    database = Database(":memory:")
    database.init_schema()

    yield database

    database.close()


@pytest.fixture
def auth_service(test_db, settings):
    return AuthService(test_db, settings)


@pytest.fixture
def data_service(test_db):
    return DataService(test_db)


@pytest.fixture
def app(settings):
    """Flask app with a fresh in-memory database per test."""
    app = create_app(settings)
    app.config['TESTING'] = True
    yield app
    app.extensions["kvault"].database.close()


@pytest.fixture
def client(app):
    """Create test client for API testing."""
    with app.test_client() as client:
        yield client


@pytest.fixture
def test_user(app):
    """Register a user through the app's auth service.

    Returns a tuple of (user, password) where user is the stored User
    schema and password is the plain text password.
    """
    password = "pw123"
    with app.app_context():
        user = get_services().auth.register(RegisterRequest(
            username="alice",
            email="alice@x.com",
            password=password,
            full_name="Alice A",
        ))
    return user, password


@pytest.fixture
def auth_headers(client, test_user):
    """Authorization header with a token issued by POST /api/token."""
    user, password = test_user
    response = client.post(
        "/api/token",
        json={"username": user.username, "password": password}
    )
    token = response.get_json()["data"]["access_token"]
    return {"Authorization": f"Bearer {token}"}
