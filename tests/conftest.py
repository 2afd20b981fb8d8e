"""
Shared fixtures for the API tests.

Each test gets its own SQLite file under tmp_path and an app built around it.
"""
import os

os.environ.setdefault("LOG_FILE", "")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app

ADMIN_TOKEN = "backup-secret"


@pytest.fixture
def app_config(tmp_path):
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'ledger.db'}",
        SECRET_KEY="test-secret-key",
        ADMIN_TOKEN=ADMIN_TOKEN,
        LOG_FILE="",
    )


@pytest.fixture
def client(app_config):
    app = create_app(app_config)
    with TestClient(app) as test_client:
        yield test_client


def register(client, email="a@x.com", password="p1", company_name=None):
    body = {"email": email, "password": password}
    if company_name is not None:
        body["company_name"] = company_name
    response = client.post("/auth/register", json=body)
    assert response.status_code == 200, response.text
    return response.json()


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers(client):
    """Auth headers for a freshly registered user"""
    return bearer(register(client)["token"])


@pytest.fixture
def other_headers(client):
    """Auth headers for a second user (isolation tests)"""
    return bearer(register(client, email="b@x.com", password="p2")["token"])
