"""
In-memory кеш для разработки и тестирования.

Хранит значения в словаре процесса, поддерживает TTL и записи без срока действия.
"""

import logging
import time
from typing import Any

from .backend import CacheBackend

logger = logging.getLogger(__name__)


class InMemoryCacheBackend(CacheBackend):
    """
    In-memory кеш с поддержкой TTL.

    Warning:
        Данные теряются при перезапуске и не разделяются между процессами.

    Attributes:
        _storage (dict): Значения по ключам.
        _expiry (dict): Время истечения (timestamp) для ключей с TTL.
    """

    def __init__(self):
        self._storage: dict[str, Any] = {}
        self._expiry: dict[str, float] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._storage and not self._is_expired(key)

    def _is_expired(self, key: str) -> bool:
        expires_at = self._expiry.get(key)
        return expires_at is not None and time.time() > expires_at

    def _remove(self, key: str) -> None:
        self._storage.pop(key, None)
        self._expiry.pop(key, None)

    async def get(self, key: str) -> Any | None:
        if key not in self._storage:
            logger.debug("Cache MISS: %s (not found)", key)
            return None

        if self._is_expired(key):
            logger.debug("Cache MISS: %s (expired)", key)
            self._remove(key)
            return None

        logger.debug("Cache HIT: %s", key)
        return self._storage[key]

    async def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        self._storage[key] = value
        if ttl is None:
            self._expiry.pop(key, None)
        else:
            self._expiry[key] = time.time() + ttl

        logger.debug("Cache SET: %s (TTL=%s)", key, ttl if ttl is not None else "forever")
        return True

    async def delete(self, key: str) -> bool:
        if key in self._storage:
            self._remove(key)
            logger.debug("Cache DELETE: %s", key)
            return True

        logger.debug("Cache DELETE (not found): %s", key)
        return False

    async def clear(self) -> None:
        """Очистить весь кеш."""
        self._storage.clear()
        self._expiry.clear()
        logger.debug("Cache CLEAR: all keys removed")
