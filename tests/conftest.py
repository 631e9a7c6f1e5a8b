"""Shared fixtures: an in-memory MongoDB and a TestClient wired to it."""

import os

# Settings are read at import time and JWT_SECRET has no default
os.environ.setdefault("JWT_SECRET", "test-secret-key")

import mongomock
import pytest
from fastapi.testclient import TestClient

from placement_portal.core.auth import generate_token
from placement_portal.main import app
from placement_portal.services.mongo_service import (
    AdminService,
    CompanyService,
    get_admin_service,
    get_company_service,
)


@pytest.fixture()
def mongo_db():
    """Fresh in-memory database per test."""
    return mongomock.MongoClient()["placement_test"]


@pytest.fixture()
def companies(mongo_db):
    return mongo_db["companies"]


@pytest.fixture()
def admins(mongo_db):
    return mongo_db["admins"]


@pytest.fixture()
def client(companies, admins):
    """TestClient whose services point at the in-memory collections (lifespan not run)."""
    app.dependency_overrides[get_company_service] = lambda: CompanyService(companies)
    app.dependency_overrides[get_admin_service] = lambda: AdminService(admins)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def auth_headers():
    token = generate_token({"id": "abc123", "email": "tpo@chitkara.edu.in", "role": "admin"})
    return {"Authorization": f"Bearer {token}"}
