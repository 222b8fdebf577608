"""
Реализация кеша через Redis.

Использует общий Redis клиент из app.core.connections.cache.
Значения сериализуются в JSON. Ошибки Redis логируются и не пробрасываются:
кеш работает по принципу best-effort.
"""

import json
import logging
from typing import Any

from redis.asyncio import Redis
from redis.exceptions import RedisError

from app.core.connections.cache import get_redis_client

from .backend import CacheBackend

logger = logging.getLogger(__name__)


class RedisCacheBackend(CacheBackend):
    """
    Реализация кеша через Redis.

    Attributes:
        _redis (Optional[Redis]): Клиент Redis (ленивая инициализация).

    Example:
        >>> cache = RedisCacheBackend()
        >>> await cache.set("clients", payload)  # без TTL
        >>> await cache.get("clients")
    """

    def __init__(self, redis: Redis | None = None):
        self._redis = redis

    async def _get_redis(self) -> Redis:
        if self._redis is None:
            self._redis = await get_redis_client()
        return self._redis

    async def get(self, key: str) -> Any | None:
        try:
            redis = await self._get_redis()
            raw_value = await redis.get(key)
        except RedisError as e:
            logger.error("Redis error on GET %s: %s", key, e)
            return None

        if raw_value is None:
            logger.debug("Cache MISS: %s", key)
            return None

        try:
            value = json.loads(raw_value)
        except (TypeError, ValueError) as e:
            logger.error("Failed to deserialize cache value for %s: %s", key, e)
            return None

        logger.debug("Cache HIT: %s", key)
        return value

    async def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        try:
            serialized = json.dumps(value, default=str)
        except (TypeError, ValueError) as e:
            logger.error("Failed to serialize value for %s: %s", key, e)
            return False

        try:
            redis = await self._get_redis()
            await redis.set(key, serialized, ex=ttl)
        except RedisError as e:
            logger.error("Redis error on SET %s: %s", key, e)
            return False

        logger.debug("Cache SET: %s (TTL=%s)", key, ttl if ttl is not None else "forever")
        return True

    async def delete(self, key: str) -> bool:
        try:
            redis = await self._get_redis()
            result = await redis.delete(key)
        except RedisError as e:
            logger.error("Redis error on DELETE %s: %s", key, e)
            return False

        logger.debug("Cache DELETE: %s (removed=%d)", key, result)
        return result > 0
