"""
Test configuration for the patient credential backend.
"""
import os

# Settings are read when the application is imported
os.environ["SECRET_KEY"] = "test-signing-key"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from src.auth.tokens import TokenService
from src.database import Base, get_db
from src.main import app
from src.patients.repository import SQLAlchemyPatientRepository

TEST_SECRET_KEY = "test-signing-key"

# Create test database engine
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db():
    """
    Create a fresh database for each test.
    """
    # Create tables
    Base.metadata.create_all(bind=engine)

    # Create session
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

    # Drop tables after test
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def repository(db):
    """
    Patient repository over the test session.
    """
    return SQLAlchemyPatientRepository(db)


@pytest.fixture
def token_service():
    """
    Token service signed with the same key as the application.
    """
    return TokenService(TEST_SECRET_KEY, ttl=timedelta(minutes=30))


@pytest.fixture(scope="function")
def client(db):
    """
    Create a test client with a test database session.
    """
    def override_get_db():
        try:
            yield db
        finally:
            pass

    # Override the get_db dependency
    app.dependency_overrides[get_db] = override_get_db

    # Create test client
    with TestClient(app) as client:
        yield client

    # Remove dependency override
    app.dependency_overrides = {}
