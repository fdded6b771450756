"""
Test configuration for the customer portal project.

Ensures the project root is on sys.path so tests can import `portal.*` modules,
and provides an app wired with zero delays and a deterministic gateway.
"""
import os
import sys


PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import pytest
from fastapi.testclient import TestClient

from portal.core.config import Settings
from portal.core.local_storage import LocalStorage
from portal.main import create_app


@pytest.fixture
def storage_path(tmp_path):
    return str(tmp_path / "portal_storage.json")


@pytest.fixture
def storage(storage_path):
    return LocalStorage(storage_path)


@pytest.fixture
def settings(storage_path):
    """Settings with no artificial latency and no simulated declines."""
    return Settings(
        claim_processing_delay=0,
        payment_processing_delay=0,
        auth_delay=0,
        contact_delay=0,
        payment_failure_rate=0.0,
        storage_path=storage_path,
    )


@pytest.fixture
def client(settings):
    return TestClient(create_app(settings))


@pytest.fixture
def auth_headers(client):
    response = client.post(
        "/api/auth/login",
        json={"email": "john.doe@email.com", "password": "password123"},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
