"""
Test registration, login and token handling.
"""

from datetime import timedelta

import pytest

from healthwallet.core.security import create_access_token
from healthwallet.models import User
from tests.conftest import auth_headers, register


def test_register_returns_token_and_user(client):
    body = register(client, name="Alice", email="Alice@Example.com")
    assert body["message"] == "User registered successfully"
    assert body["token"]
    assert body["user"]["email"] == "alice@example.com"
    assert body["user"]["role"] == "Owner"
    assert "password_hash" not in body["user"]


def test_register_duplicate_email(client):
    register(client)
    response = client.post(
        "/api/auth/register",
        json={"name": "Other", "email": "ALICE@example.com", "password": "x"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "User with this email already exists"


def test_register_requires_valid_email(client):
    response = client.post(
        "/api/auth/register",
        json={"name": "Alice", "email": "not-an-email", "password": "secret"},
    )
    assert response.status_code == 400


def test_login_and_me(client):
    register(client)
    response = client.post(
        "/api/auth/login",
        json={"email": "alice@example.com", "password": "secret123"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Login successful"

    me = client.get("/api/auth/me", headers=auth_headers(body["token"]))
    assert me.status_code == 200
    assert me.json()["user"]["email"] == "alice@example.com"


def test_login_wrong_password(client):
    register(client)
    response = client.post(
        "/api/auth/login",
        json={"email": "alice@example.com", "password": "wrong"},
    )
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid email or password"


@pytest.mark.parametrize("email", ["", "   "])
def test_login_requires_email(client, email):
    response = client.post("/api/auth/login", json={"email": email, "password": "x"})
    assert response.status_code == 400


def test_login_unknown_email(client):
    response = client.post(
        "/api/auth/login",
        json={"email": "nobody@example.com", "password": "whatever"},
    )
    assert response.status_code == 401


def test_missing_token_is_401(client):
    response = client.get("/api/auth/me")
    assert response.status_code == 401
    assert response.json()["detail"] == "Access token required"


def test_invalid_token_is_403(client):
    response = client.get("/api/auth/me", headers=auth_headers("not.a.token"))
    assert response.status_code == 403
    assert response.json()["detail"] == "Invalid or expired token"


def test_expired_token_is_403(client, settings):
    user = register(client)["user"]
    token = create_access_token(
        user["id"], user["email"], settings, expires_delta=timedelta(seconds=-10)
    )
    response = client.get("/api/auth/me", headers=auth_headers(token))
    assert response.status_code == 403


def test_token_signed_with_other_secret_is_403(client, settings):
    user = register(client)["user"]
    other = settings.model_copy(update={"jwt_secret_key": "another-secret"})
    token = create_access_token(user["id"], user["email"], other)
    response = client.get("/api/auth/me", headers=auth_headers(token))
    assert response.status_code == 403


def test_token_for_deleted_user_is_rejected(client, database):
    body = register(client)
    with database.session_scope() as db:
        db.query(User).filter(User.id == body["user"]["id"]).delete()

    response = client.get("/api/auth/me", headers=auth_headers(body["token"]))
    assert response.status_code == 403
    assert response.json()["detail"] == "User not found"
