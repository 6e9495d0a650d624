# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set test environment before importing app
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["DEFAULT_ANNUAL_ALLOWANCE_DAYS"] = "30.0"
os.environ["DEFAULT_REGION"] = "berlin"

from timetrack.database import get_db
from timetrack.main import app
from timetrack.models import Region, User
from timetrack.models.base import Base
from timetrack.schemas.user import UserCreate
from timetrack.services import user_service

# Test database setup
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _create_user(
    db_session,
    email: str = "test@example.com",
    region: Region = Region.BERLIN,
    half_day_holidays_enabled: bool = False,
) -> User:
    return user_service.create_user(
        db_session,
        UserCreate(
            email=email,
            full_name="Test User",
            region=region,
            half_day_holidays_enabled=half_day_holidays_enabled,
        ),
    )


@pytest.fixture
def make_user(db_session):
    """Factory for users with the default working week."""

    def factory(**kwargs) -> User:
        return _create_user(db_session, **kwargs)

    return factory


@pytest.fixture
def test_user(db_session) -> User:
    """Create a Berlin user with the default working week."""
    return _create_user(db_session)


@pytest.fixture
def other_user(db_session) -> User:
    """Create a second user for ownership checks."""
    return _create_user(db_session, email="other@example.com")
