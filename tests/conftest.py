"""Shared pytest fixtures for the Bucket List API tests."""
import os
import sys
from datetime import datetime, timedelta, timezone

import pytest

# Add project root to path
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, _PROJECT_ROOT)

# Deterministic test environment, set BEFORE models/ creates the storage singleton
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["APP_ENV"] = "testing"

from models import storage  # noqa: E402
from bucketlist_api import create_app  # noqa: E402
from utils.security import TokenSettings  # noqa: E402


class FakeClock:
    """Controllable UTC clock for token issuance and verification."""

    def __init__(self, start=None):
        self.now = start or datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture(autouse=True)
def _reset_db():
    """Fresh schema for every test."""
    storage.drop_all()
    storage.reload()
    yield
    storage.close()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def settings():
    return TokenSettings(access_secret="unit-access-secret", refresh_secret="unit-refresh-secret")


@pytest.fixture
def app(clock):
    return create_app("testing", clock=clock)


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def register(client):
    def _register(email="alice@example.com", password="secret123", name="Alice"):
        resp = client.post("/users", json={"email": email, "password": password, "name": name})
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()["data"]

    return _register


@pytest.fixture
def login(client):
    def _login(email="alice@example.com", password="secret123"):
        return client.post("/login", json={"email": email, "password": password})

    return _login


def auth_header(token):
    return {"Authorization": f"Bearer {token}"}
