"""
Модуль для работы с Redis.

- RedisClient: singleton-клиент, держит один пул соединений на процесс.
- get_redis_client: получение подключённого клиента.

Redis используется как хранилище кэша списка клиентов и активных токенов.
"""

import asyncio
from typing import Optional

from redis.asyncio import Redis, from_url

from app.core.connections.base import BaseClient
from app.core.settings import Settings, settings


class RedisClient(BaseClient[Redis]):
    """
    Клиент для работы с Redis.

    Attributes:
        _redis_params (dict): Параметры подключения к Redis из конфигурации
        _client (Optional[Redis]): Экземпляр подключения к Redis
    """

    _instance: Optional["RedisClient"] = None
    _lock = asyncio.Lock()

    def __new__(cls, _settings: Settings = settings) -> "RedisClient":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, _settings: Settings = settings) -> None:
        if getattr(self, "_initialized", False):
            return
        super().__init__()
        self._redis_params = _settings.redis_params
        self._client: Redis | None = None
        self._initialized = True

    async def connect(self) -> Redis:
        """
        Создает подключение к Redis (один раз на процесс).

        Returns:
            Redis: Экземпляр подключенного Redis клиента
        """
        if self._client is not None:
            return self._client

        async with self._lock:
            if self._client is not None:
                return self._client

            self.logger.debug("Подключение к Redis...")
            self._client = from_url(**self._redis_params)
            self.logger.info("Подключение к Redis установлено")
        return self._client

    async def close(self) -> None:
        """Закрывает подключение к Redis и сбрасывает singleton."""
        async with self._lock:
            if self._client:
                self.logger.debug("Закрытие подключения к Redis...")
                await self._client.aclose()
                self._client = None
                RedisClient._instance = None
                self._initialized = False
                self.logger.info("Подключение к Redis закрыто")

    async def _health_check_probe(self) -> None:
        client = await self.connect()
        await client.ping()


async def get_redis_client(_settings: Settings = settings) -> Redis:
    """
    Возвращает подключённый глобальный клиент Redis.

    Usage:
        ```python
        redis = await get_redis_client()
        await redis.set("key", "value")
        ```
    """
    client = RedisClient(_settings)
    return await client.connect()
