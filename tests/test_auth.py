"""Вход, регистрация, выход и обновление токена."""

import pytest

from app.core.dependencies import get_token_store
from app.main import app
from app.repository.cache import InMemoryCacheBackend
from tests.conftest import USER_EMAIL, USER_PASSWORD

INVALID_CREDENTIALS = "Email or password invalid."
UNAUTHENTICATED = "Unauthenticated."


async def test_login_returns_bearer_token(client, user):
    response = await client.post("/login", json={"email": USER_EMAIL, "password": USER_PASSWORD})

    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["access_token"]


async def test_token_from_login_opens_protected_route(client, token):
    response = await client.get("/clients", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200


@pytest.mark.parametrize(
    "email, password",
    [
        (USER_EMAIL, "wrong-password"),
        ("nobody@example.com", USER_PASSWORD),
    ],
    ids=["wrong-password", "unknown-email"],
)
async def test_login_failure_is_generic(client, user, email, password):
    response = await client.post("/login", json={"email": email, "password": password})

    assert response.status_code == 401
    body = response.json()
    assert body["message"] == INVALID_CREDENTIALS
    assert body["error_type"] == "invalid_credentials"
    assert "access_token" not in body


async def test_login_validates_input(client):
    response = await client.post("/login", json={"email": "not-an-email", "password": "123"})

    assert response.status_code == 422
    errors = response.json()["errors"]
    assert set(errors) == {"email", "password"}


async def test_register_creates_user(client):
    payload = {
        "name": "New User",
        "email": "new@example.com",
        "password": "secret123",
        "password_confirmation": "secret123",
    }

    response = await client.post("/register", json=payload)

    assert response.status_code == 201
    assert response.json() == {"message": "Created successfully"}
    assert "secret123" not in response.text

    login = await client.post("/login", json={"email": "new@example.com", "password": "secret123"})
    assert login.status_code == 200


async def test_register_duplicate_email_fails_validation(client, user):
    payload = {
        "name": "Twin",
        "email": USER_EMAIL,
        "password": "secret123",
        "password_confirmation": "secret123",
    }

    response = await client.post("/register", json=payload)

    assert response.status_code == 422
    body = response.json()
    assert body["message"] == "The given data was invalid."
    assert body["errors"] == {"email": ["The email has already been taken."]}


async def test_register_password_confirmation_must_match(client):
    payload = {
        "name": "New User",
        "email": "new@example.com",
        "password": "secret123",
        "password_confirmation": "secret124",
    }

    response = await client.post("/register", json=payload)

    assert response.status_code == 422
    assert response.json()["errors"] == {"password_confirmation": ["The password confirmation does not match."]}


async def test_register_rejects_short_name(client):
    payload = {
        "name": "A",
        "email": "new@example.com",
        "password": "secret123",
        "password_confirmation": "secret123",
    }

    response = await client.post("/register", json=payload)

    assert response.status_code == 422
    assert "name" in response.json()["errors"]


async def test_logout_revokes_token(client, auth_headers):
    response = await client.post("/logout", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"message": "Successfully logged out"}

    again = await client.post("/logout", headers=auth_headers)
    assert again.status_code == 401
    assert again.json()["message"] == UNAUTHENTICATED

    clients = await client.get("/clients", headers=auth_headers)
    assert clients.status_code == 401


async def test_refresh_issues_new_token_and_revokes_old(client, token):
    old_headers = {"Authorization": f"Bearer {token}"}

    response = await client.post("/refresh", headers=old_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["access_token"] != token

    new_headers = {"Authorization": f"Bearer {body['access_token']}"}
    assert (await client.get("/clients", headers=new_headers)).status_code == 200
    assert (await client.get("/clients", headers=old_headers)).status_code == 401


@pytest.mark.parametrize(
    "headers",
    [
        {},
        {"Authorization": "Bearer not-a-jwt"},
        {"Authorization": "Basic dXNlcjpwYXNz"},
    ],
    ids=["missing", "malformed", "wrong-scheme"],
)
async def test_token_errors_share_one_response(client, headers):
    response = await client.post("/logout", headers=headers)

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"
    body = response.json()
    assert body["message"] == UNAUTHENTICATED
    assert body["error_type"] == "authentication_error"


class RejectingTokenStore(InMemoryCacheBackend):
    async def set(self, key, value, ttl=None):
        return False


async def test_login_fails_when_token_store_rejects_write(client, user):
    app.dependency_overrides[get_token_store] = RejectingTokenStore

    response = await client.post("/login", json={"email": USER_EMAIL, "password": USER_PASSWORD})

    assert response.status_code == 503
    body = response.json()
    assert body["error_type"] == "dependencies_error"
    assert "access_token" not in body
