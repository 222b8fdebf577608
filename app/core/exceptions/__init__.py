from .auth import (
    AuthenticationError,
    InvalidCredentialsError,
    TokenExpiredError,
    TokenInvalidError,
    TokenMissingError,
)
from .base import BaseAPIException
from .clients import ClientNotFoundError, ClientPersistenceError
from .common import NotFoundError, ValidationError
from .dependencies import ServiceUnavailableException
from .handlers import register_exception_handlers
from .users import UserCreationError

__all__ = [
    # Base
    "BaseAPIException",
    # Common
    "NotFoundError",
    "ValidationError",
    # Handlers
    "register_exception_handlers",
    # Dependencies
    "ServiceUnavailableException",
    # Auth
    "AuthenticationError",
    "InvalidCredentialsError",
    "TokenMissingError",
    "TokenExpiredError",
    "TokenInvalidError",
    # Users
    "UserCreationError",
    # Clients
    "ClientNotFoundError",
    "ClientPersistenceError",
]
