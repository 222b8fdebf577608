"""Сервисы версии v1."""

from .auth import AuthService
from .clients import ClientService
from .token import TokenService

__all__ = [
    "AuthService",
    "ClientService",
    "TokenService",
]
