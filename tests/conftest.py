import itertools

import pytest
from fastapi.testclient import TestClient

from flowing_links.config.settings import (
    AccountSettings,
    Config,
    DatabaseSettings,
    JwtSettings,
)
from flowing_links.fastapi_app import create_fastapi_app

JWT_KEY = "test-signing-key-with-at-least-32-characters"
ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin"
DEFAULT_USER_PASSWORD = "123456"

_usernames = itertools.count(1)


@pytest.fixture()
def config(tmp_path):
    """Configuration pointing at a throwaway SQLite file."""
    return Config(
        jwt=JwtSettings(key=JWT_KEY, issuer="FlowingLinks", audience="FlowingLinks"),
        database=DatabaseSettings(
            provider="sqlite",
            sqlite_database_path=str(tmp_path / "flowing_links_test.db"),
        ),
        accounts=AccountSettings(
            admin_username=ADMIN_USERNAME,
            admin_password=ADMIN_PASSWORD,
            default_user_password=DEFAULT_USER_PASSWORD,
            bcrypt_rounds=4,
        ),
        LOG_LEVEL="WARNING",
        TESTING=True,
    )


@pytest.fixture()
def app(config):
    """Create and configure a new FastAPI app instance for each test."""
    return create_fastapi_app(config)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app; entering it runs startup (schema + admin seed)."""
    with TestClient(app) as test_client:
        yield test_client


def login(client, username, password):
    return client.post("/Auth", json={"username": username, "password": password})


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def auth_headers(client):
    """Authentication headers of the seeded admin (user id 1)."""
    res = login(client, ADMIN_USERNAME, ADMIN_PASSWORD)
    assert res.status_code == 200, res.text
    return bearer(res.json()["token"])


@pytest.fixture()
def create_user(client, auth_headers):
    """Factory: the admin creates a user; returns (user json, that user's auth headers)."""

    def _create(name="Test User", username=None):
        username = username or f"user{next(_usernames)}"
        res = client.post("/User", headers=auth_headers, json={"name": name, "username": username})
        assert res.status_code == 200, res.text
        token = login(client, username, DEFAULT_USER_PASSWORD).json()["token"]
        return res.json(), bearer(token)

    return _create
