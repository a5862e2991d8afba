# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Points the app at a throwaway SQLite file BEFORE anything imports
# integrations_api.app.core.config, which reads settings at import time.
# =============================================================================

import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="integrations-tests-")
os.environ["DATABASE_URL"] = os.path.join(_TMP_DIR, "test.db")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from integrations_api.app.core.db import get_cursor, init_db
from integrations_api.app.main import app


@pytest.fixture(autouse=True)
def clean_database():
    """Start every test with empty tables."""
    init_db()
    with get_cursor() as cursor:
        for table in ("users", "payables", "assignors"):
            cursor.execute(f"DELETE FROM {table}")
    yield


@pytest.fixture
def client():
    """TestClient with the lifespan (migrations) applied."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def payable_payload():
    return {
        "id": "p1",
        "value": 1500.75,
        "emission_date": "2024-01-31",
        "assignor": "a1",
    }


@pytest.fixture
def assignor_payload():
    return {
        "id": "a1",
        "document": "12345678000199",
        "email": "billing@example.com",
        "phone": "+55 11 99999-0000",
        "name": "ACME Ltda",
    }


@pytest.fixture
def user_payload():
    return {"login": "operator", "password": "s3cret"}
