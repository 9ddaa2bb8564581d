"""Shared fixtures: memory backend, API client and signed-in users."""

import os

# Settings are cached on first import, so the test environment goes in first
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from ponsectors.application.services.access_policy import actor_for
from ponsectors.application.services.auth_service import register_user
from ponsectors.domain.enums import StakeholderType, UserRole
from ponsectors.domain.schemas.auth import UserCreate
from ponsectors.infrastructure.memory_store import MemoryStore
from ponsectors.interfaces.deps import get_store
from ponsectors.main import app

ADMIN_EMAIL = "admin@ponsectors.com"
PASSWORD = "secret123"


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_actor(store):
    """Register a user directly in the store and return its Actor."""

    def _make(name: str, role: UserRole = UserRole.STANDARD, email: str = None):
        user = register_user(
            store,
            UserCreate(
                email=email or f"{name.lower()}@example.com",
                password=PASSWORD,
                name=name,
                stakeholder_type=StakeholderType.INDIVIDUAL,
            ),
            role=role,
        )
        return actor_for(user)

    return _make


@pytest.fixture
def sign_up(client):
    """Register through the API, log in, and return the auth headers."""

    def _sign_up(name: str, email: str = None):
        email = email or f"{name.lower()}@example.com"
        response = client.post(
            "/api/auth/register",
            json={"email": email, "password": PASSWORD, "name": name},
        )
        assert response.status_code == 201, response.text
        response = client.post("/api/auth/login", json={"email": email, "password": PASSWORD})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    return _sign_up


@pytest.fixture
def project_payload():
    def _payload(**overrides):
        payload = {
            "title": "Clean Water for Bahir Dar",
            "description": "Community-run filtration points along the lake shore.",
            "thematic_area": "Water, Sanitation, and Hygiene (WASH)",
            "country": "Ethiopia",
            "city": "Bahir Dar",
            "status": "Draft",
        }
        payload.update(overrides)
        return payload

    return _payload
