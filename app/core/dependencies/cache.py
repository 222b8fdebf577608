"""
Зависимости для работы с кешем в FastAPI.

- get_cache_backend: кеш списка клиентов, выбирается по CACHE_BACKEND
- get_token_store: хранилище активных токенов

При CACHE_BACKEND=none отключается только кеш списка: токены
по-прежнему хранятся в Redis, иначе ни один токен не был бы действующим.
При CACHE_BACKEND=memory оба хранилища используют один InMemoryCacheBackend.
"""

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from app.core.settings import settings
from app.repository.cache import (
    CacheBackend,
    InMemoryCacheBackend,
    NoCacheBackend,
    RedisCacheBackend,
)

logger = logging.getLogger(__name__)


@lru_cache
def _memory_backend() -> InMemoryCacheBackend:
    return InMemoryCacheBackend()


@lru_cache
def _redis_backend() -> RedisCacheBackend:
    return RedisCacheBackend()


def get_cache_backend() -> CacheBackend:
    """
    Зависимость для получения кеш-бэкенда.

    Returns:
        CacheBackend: Реализация по настройке CACHE_BACKEND (redis, memory, none).

    Usage:
        ```python
        @router.get("/clients")
        async def index(cache: CacheDep):
            return await cache.remember_forever("clients", build_page)
        ```
    """
    if settings.CACHE_BACKEND == "memory":
        return _memory_backend()
    if settings.CACHE_BACKEND == "none":
        return NoCacheBackend()
    return _redis_backend()


def get_token_store() -> CacheBackend:
    """Хранилище активных токенов (Redis или память процесса)."""
    if settings.CACHE_BACKEND == "memory":
        return _memory_backend()
    return _redis_backend()


CacheDep = Annotated[CacheBackend, Depends(get_cache_backend)]
TokenStoreDep = Annotated[CacheBackend, Depends(get_token_store)]
