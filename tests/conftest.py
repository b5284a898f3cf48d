"""Pytest fixtures and configuration for eventplanner tests."""

import os

# Must be set before eventplanner modules read the environment.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-eventplanner-tests-0123456789")
os.environ.setdefault("JWT_ISSUER", "eventplanner-test")
os.environ.setdefault("JWT_AUDIENCE", "eventplanner-test-clients")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from datetime import date, time

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from eventplanner.auth.jwt import JwtSettings, TokenIssuer
from eventplanner.auth.passwords import hash_password
from eventplanner.database import models  # noqa: F401
from eventplanner.database.database import Base
from eventplanner.database.event_repository import EventRepository
from eventplanner.database.user_repository import UserRepository
from eventplanner.models.event import Event, EventType
from eventplanner.models.user import User
from eventplanner.services.auth_service import AuthService
from eventplanner.services.event_service import EventService
from eventplanner.services.user_service import UserService

# Use in-memory SQLite database for tests
TEST_DATABASE_URL = "sqlite:///:memory:"

TEST_PASSWORD = "correct-horse-battery"


@pytest.fixture(scope="function")
def db_session():
    """Create a database session for testing.

    Uses an in-memory SQLite database that is created fresh for each test.
    """
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    # Foreign keys must be on for events to cascade with their user
    @event.listens_for(engine, "connect")
    def set_sqlite_pragmas(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def user_repository(db_session: Session):
    return UserRepository(db_session)


@pytest.fixture
def event_repository(db_session: Session):
    return EventRepository(db_session)


@pytest.fixture
def jwt_settings():
    """JWT settings matching the test environment."""
    return JwtSettings(
        secret_key=os.environ["JWT_SECRET_KEY"],
        issuer=os.environ["JWT_ISSUER"],
        audience=os.environ["JWT_AUDIENCE"],
        expiration_seconds=3600,
    )


@pytest.fixture
def token_issuer(jwt_settings):
    return TokenIssuer(jwt_settings)


@pytest.fixture
def auth_service(user_repository, token_issuer):
    return AuthService(user_repository, token_issuer)


@pytest.fixture
def event_service(event_repository):
    return EventService(event_repository)


@pytest.fixture
def user_service(user_repository):
    return UserService(user_repository)


@pytest.fixture
def test_user(user_repository) -> User:
    """A stored user whose password is TEST_PASSWORD."""
    return user_repository.create(
        User(name="Test User", email="test@example.com", password_hash=hash_password(TEST_PASSWORD))
    )


@pytest.fixture
def other_user(user_repository) -> User:
    return user_repository.create(
        User(name="Other User", email="other@example.com", password_hash=hash_password(TEST_PASSWORD))
    )


@pytest.fixture
def sample_event_base(test_user):
    """Base event data for creating test events.

    Returns a dict with default event attributes that can be overridden.
    """
    return {
        "user_id": test_user.id,
        "title": "Standup",
        "description": "Daily sync",
        "start_date": date(2023, 10, 15),
        "end_date": date(2023, 10, 15),
        "start_time": time(9, 0),
        "end_time": time(10, 0),
        "timezone": "Asia/Kolkata",
        "event_type": EventType.WORK,
    }


@pytest.fixture
def sample_event(sample_event_base):
    """An unsaved Event built from sample_event_base."""
    return Event(**sample_event_base)


@pytest.fixture
def test_client(db_session: Session, token_issuer):
    """FastAPI test client bound to the test database and JWT settings."""
    from eventplanner.api.app import app
    from eventplanner.auth.dependencies import get_token_issuer
    from eventplanner.database.database import get_db

    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Don't close the session here, let the fixture handle it

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_token_issuer] = lambda: token_issuer

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(test_user, token_issuer):
    """Authorization header carrying a valid token for test_user."""
    token = token_issuer.issue(test_user).token
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def test_password():
    """Plaintext password of test_user and other_user."""
    return TEST_PASSWORD
