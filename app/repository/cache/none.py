"""
Заглушка для отключенного кеша (CACHE_BACKEND=none).

remember_forever всегда вычисляет значение заново, forget ничего не делает.
"""

import logging
from typing import Any

from .backend import CacheBackend

logger = logging.getLogger(__name__)


class NoCacheBackend(CacheBackend):
    """Пустая реализация кеша (No-Op)."""

    async def get(self, key: str) -> Any | None:
        logger.debug("NoCacheBackend: get(%s) -> None (cache disabled)", key)
        return None

    async def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        logger.debug("NoCacheBackend: set(%s) -> False (cache disabled)", key)
        return False

    async def delete(self, key: str) -> bool:
        logger.debug("NoCacheBackend: delete(%s) -> False (cache disabled)", key)
        return False
