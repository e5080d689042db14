import os

# Must be set before core.logger configures handlers on first import
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from core.config import Settings
from internal.api.app import create_app, create_storage
from repositories import MemStorage

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "test-password"


class TickingClock:
    """Deterministic clock: every call returns a strictly later timestamp."""

    def __init__(self, start=None, step=timedelta(minutes=1)):
        self.current = start or datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self):
        value = self.current
        self.current += self.step
        return value


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def storage(clock):
    """Seeded store without an admin account."""
    return MemStorage(clock=clock)


@pytest.fixture
def empty_storage(clock):
    return MemStorage(seed=False, clock=clock)


@pytest.fixture
def settings():
    return Settings(
        ADMIN_USERNAME=ADMIN_USERNAME,
        ADMIN_PASSWORD=ADMIN_PASSWORD,
        JWT_SECRET_KEY="test-secret",
        BCRYPT_ROUNDS=4,
        LOG_TO_FILE=False,
    )


@pytest.fixture
def app(settings):
    return create_app(settings=settings, storage=create_storage(settings))


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_token(client):
    response = client.post(
        "/api/auth/login",
        json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def admin_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}
