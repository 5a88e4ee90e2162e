import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from chefai.models.base import Base
from chefai.models.user import User
from chefai.services.auth import AuthService


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(scope="session")
def engine():
    """SQLite in-memory engine for fast model tests."""
    eng = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(eng)
    return eng


@pytest.fixture
def db_session(engine):
    """Provide a transactional session that rolls back after each test."""
    connection = engine.connect()
    transaction = connection.begin()
    session = Session(bind=connection)
    yield session
    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture
def auth():
    return AuthService(secret_key="test-secret-key-for-jwt-signing-only")


@pytest.fixture
def make_user(db_session):
    """Factory for persisted users with unique emails and usernames."""
    counter = {"n": 0}

    def _make(**kwargs) -> User:
        counter["n"] += 1
        n = counter["n"]
        fields = {
            "email": f"user{n}@example.com",
            "password_hash": "not-a-real-hash",
            "name": f"User {n}",
            "username": f"user_{n}",
        }
        fields.update(kwargs)
        user = User(**fields)
        db_session.add(user)
        db_session.flush()
        return user

    return _make
