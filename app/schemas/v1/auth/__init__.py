"""Схемы для аутентификации."""

from .requests import LoginRequestSchema, RegisterRequestSchema
from .responses import TokenResponseSchema, respond_with_token

__all__ = [
    # Requests
    "LoginRequestSchema",
    "RegisterRequestSchema",
    # Responses
    "TokenResponseSchema",
    "respond_with_token",
]
