"""
Абстрактный интерфейс кеш-бэкенда.

Реализации:
- Redis (production)
- In-Memory (development/testing)
- None (отключенный кеш)

Помимо get/set/delete базовый класс предоставляет семантику
"remember forever" / "forget": значение вычисляется при промахе,
хранится без TTL и удаляется только явной инвалидацией.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Any

logger = logging.getLogger(__name__)


class CacheBackend(ABC):
    """
    Абстрактный интерфейс для кеш-бэкенда.

    Все реализации асинхронные. Значения должны быть JSON-сериализуемыми.

    Example:
        >>> payload = await cache.remember_forever("clients", build_page)
        >>> await cache.forget("clients")
    """

    @abstractmethod
    async def get(self, key: str) -> Any | None:
        """
        Получить значение из кеша по ключу.

        Args:
            key (str): Ключ для поиска в кеше.

        Returns:
            Optional[Any]: Закешированное значение или None, если не найдено.
        """

    @abstractmethod
    async def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        """
        Сохранить значение в кеш.

        Args:
            key (str): Ключ для сохранения.
            value (Any): Значение для кеширования.
            ttl (int | None): Время жизни в секундах, None - без срока действия.

        Returns:
            bool: True если успешно, False иначе.
        """

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """
        Удалить значение из кеша.

        Args:
            key (str): Ключ для удаления.

        Returns:
            bool: True если удалено, False если ключ не существовал.
        """

    async def remember_forever(self, key: str, callback: Callable[[], Awaitable[Any]]) -> Any:
        """
        Вернуть значение из кеша или вычислить и сохранить его без TTL.

        Одновременные промахи не синхронизируются: каждый запрос может
        вычислить значение сам, последний set перезапишет предыдущий.

        Args:
            key (str): Ключ кеша.
            callback: Корутина, вычисляющая значение при промахе.

        Returns:
            Any: Закешированное или только что вычисленное значение.
        """
        value = await self.get(key)
        if value is not None:
            return value

        value = await callback()
        await self.set(key, value, ttl=None)
        return value

    async def forget(self, key: str) -> bool:
        """
        Удалить ключ, не прерывая вызывающую операцию при ошибке кеша.

        Args:
            key (str): Ключ для удаления.

        Returns:
            bool: True если ключ был удалён.
        """
        try:
            return await self.delete(key)
        except Exception as e:  # noqa: BLE001
            logger.warning("Не удалось удалить ключ кеша %s: %s", key, e)
            return False
