"""TokenManager и TokenService без HTTP."""

import uuid
from types import SimpleNamespace

import pytest
from jose import jwt

from app.core.exceptions import (
    ServiceUnavailableException,
    TokenExpiredError,
    TokenInvalidError,
    TokenMissingError,
)
from app.core.security import TokenManager, TokenType
from app.repository.cache import InMemoryCacheBackend, NoCacheBackend
from app.services.v1.token import TokenService


@pytest.fixture
def fake_user():
    return SimpleNamespace(id=uuid.uuid4(), email="manager@example.com")


def test_access_token_payload(fake_user):
    token, jti = TokenManager.create_access_token(fake_user)

    payload = TokenManager.decode_token(token)

    assert payload["sub"] == str(fake_user.id)
    assert payload["email"] == fake_user.email
    assert payload["type"] == TokenType.ACCESS.value
    assert payload["jti"] == jti
    assert payload["expires_at"] > payload["iat"]
    assert TokenManager.get_user_id(payload) == fake_user.id


def test_expired_payload_is_rejected(fake_user):
    payload = TokenManager.create_payload(fake_user)
    payload["expires_at"] = payload["iat"] - 1

    with pytest.raises(TokenExpiredError):
        TokenManager.get_user_id(payload)


def test_wrong_token_type_is_rejected(fake_user):
    payload = TokenManager.create_payload(fake_user)
    payload["type"] = "refresh"

    with pytest.raises(TokenInvalidError):
        TokenManager.validate_token_payload(payload)


def test_foreign_signature_is_rejected(fake_user):
    payload = TokenManager.create_payload(fake_user)
    token = jwt.encode(payload, key="another-secret", algorithm="HS256")

    with pytest.raises(TokenInvalidError):
        TokenManager.decode_token(token)


def test_payload_without_jti_is_rejected(fake_user):
    payload = TokenManager.create_payload(fake_user)
    del payload["jti"]
    token = TokenManager.generate_token(payload)

    with pytest.raises(TokenInvalidError):
        TokenManager.decode_token(token)


def test_empty_token_is_missing():
    with pytest.raises(TokenMissingError):
        TokenManager.decode_token("")


async def test_revoked_token_is_rejected(fake_user):
    service = TokenService(InMemoryCacheBackend())
    token = await service.create_access_token(fake_user)
    payload = await service.validate_access_token(token)

    await service.revoke(payload)

    with pytest.raises(TokenInvalidError):
        await service.validate_access_token(token)
    with pytest.raises(TokenInvalidError):
        await service.revoke(payload)


async def test_refresh_replaces_token(fake_user):
    service = TokenService(InMemoryCacheBackend())
    old_token = await service.create_access_token(fake_user)
    payload = await service.validate_access_token(old_token)

    new_token = await service.refresh(payload, fake_user)

    assert new_token != old_token
    assert (await service.validate_access_token(new_token))["sub"] == str(fake_user.id)
    with pytest.raises(TokenInvalidError):
        await service.validate_access_token(old_token)


async def test_unsaved_token_is_not_issued(fake_user):
    service = TokenService(NoCacheBackend())

    with pytest.raises(ServiceUnavailableException):
        await service.create_access_token(fake_user)
