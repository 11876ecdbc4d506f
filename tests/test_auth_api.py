import dataclasses

import jwt
import pytest
from fastapi.testclient import TestClient

from conftest import JWT_KEY, bearer, login
from flowing_links.config.settings import JwtSettings
from flowing_links.domain.exceptions import ConfigurationError
from flowing_links.fastapi_app import create_fastapi_app


def test_admin_login_returns_token_for_user_one(client):
    res = login(client, "admin", "admin")
    assert res.status_code == 200, res.text

    body = res.json()
    assert body["name"] == "Administrator"
    assert body["isAdmin"] is True
    assert body["expires"]

    claims = jwt.decode(
        body["token"], JWT_KEY, algorithms=["HS256"], audience="FlowingLinks", issuer="FlowingLinks"
    )
    assert claims["sub"] == "1"
    assert claims["unique_name"] == "admin"


def test_wrong_password_is_401_with_generic_message(client):
    res = login(client, "admin", "wrong")
    assert res.status_code == 401
    assert res.json() == {"message": "Invalid username or password"}


def test_unknown_user_gets_identical_message(client):
    res = login(client, "nobody", "admin")
    assert res.status_code == 401
    assert res.json() == {"message": "Invalid username or password"}


def test_blank_username_message(client):
    res = login(client, "  ", "admin")
    assert res.status_code == 401
    assert res.json() == {"message": "Username cannot be empty"}


def test_protected_endpoint_without_token_is_401(client):
    res = client.get("/Link")
    assert res.status_code == 401
    assert res.json() == {"message": "Unauthenticated"}


def test_protected_endpoint_with_bad_token_is_401(client):
    res = client.get("/Link", headers=bearer("not-a-jwt"))
    assert res.status_code == 401
    assert res.json() == {"message": "Invalid JWT token"}


def test_token_signed_with_other_key_is_rejected(client):
    forged = jwt.encode(
        {"sub": "1", "iss": "FlowingLinks", "aud": "FlowingLinks", "exp": 4102444800},
        "x" * 40,
        algorithm="HS256",
    )
    assert client.get("/Link", headers=bearer(forged)).status_code == 401


def test_responses_carry_security_and_correlation_headers(client):
    res = client.get("/Health", headers={"X-Correlation-ID": "abc-123"})
    assert res.headers["X-Correlation-ID"] == "abc-123"
    assert res.headers["X-Content-Type-Options"] == "nosniff"
    assert res.headers["X-Frame-Options"] == "SAMEORIGIN"


@pytest.mark.parametrize("key", ["", "too-short"])
def test_app_refuses_to_start_with_unusable_signing_key(config, key):
    app = create_fastapi_app(dataclasses.replace(config, jwt=JwtSettings(key=key)))
    with pytest.raises(ConfigurationError):
        with TestClient(app):
            pass
