# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set test environment before importing app
os.environ["PERSIST_STATE"] = "false"
os.environ["DATABASE_URL"] = "sqlite://"

from src.main import create_app
from src.models import Base
from src.schemas.rbac import UserCreate
from src.services.rbac_seed_service import seed_store
from src.store import AuthorizationStore

SUPERADMIN_EMAIL = "superadmin@example.com"
SUPERADMIN_PASSWORD = "test123"

# In-memory database shared across connections
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
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


@pytest.fixture
def session_factory(db_session):
    """Session factory bound to the test database."""
    return TestingSessionLocal


@pytest.fixture
def empty_store() -> AuthorizationStore:
    """Create a store with no data."""
    return AuthorizationStore()


@pytest.fixture
def store() -> AuthorizationStore:
    """Create a store holding the seed data."""
    seeded = AuthorizationStore()
    seed_store(seeded)
    return seeded


@pytest.fixture
def open_store() -> AuthorizationStore:
    """Create a seeded store whose login accepts any user with password 'secret'."""
    seeded = AuthorizationStore(authenticator=lambda email, password: password == "secret")
    seed_store(seeded)
    return seeded


@pytest.fixture
def basic_user(open_store):
    """Add a user holding the seeded 'user' role."""
    return open_store.add_user(
        UserCreate(email="basic@example.com", name="Basic User", role_id="user")
    )


@pytest.fixture(scope="function")
def client(store):
    """Create a test client around the seeded store."""
    with TestClient(create_app(store)) as test_client:
        yield test_client


@pytest.fixture
def authenticated_client(client):
    """Create a test client logged in as the superadmin."""
    response = client.post(
        "/api/v1/auth/login",
        json={"email": SUPERADMIN_EMAIL, "password": SUPERADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return client


@pytest.fixture
def basic_client(open_store, basic_user):
    """Create a test client logged in as a user with the 'user' role."""
    with TestClient(create_app(open_store)) as test_client:
        response = test_client.post(
            "/api/v1/auth/login",
            json={"email": basic_user.email, "password": "secret"},
        )
        assert response.status_code == 200
        yield test_client
