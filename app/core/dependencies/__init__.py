"""
Модуль зависимостей FastAPI.

Содержит все зависимости для внедрения в роуты и сервисы приложения.
"""

from .auth import AuthServiceDep
from .cache import CacheDep, TokenStoreDep, get_cache_backend, get_token_store
from .clients import ClientServiceDep
from .database import AsyncSessionDep, get_async_session
from .health import HealthServiceDep
from .pagination import PaginationDep
from .token import TokenServiceDep

__all__ = [
    # Database dependencies
    "AsyncSessionDep",
    "get_async_session",
    # Cache dependencies
    "CacheDep",
    "TokenStoreDep",
    "get_cache_backend",
    "get_token_store",
    # Health dependencies
    "HealthServiceDep",
    # Pagination dependencies
    "PaginationDep",
    # Auth dependencies
    "AuthServiceDep",
    "TokenServiceDep",
    # Client dependencies
    "ClientServiceDep",
]
