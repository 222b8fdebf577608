"""
Базовые интерфейсы подключений к внешним сервисам.

- BaseClient: клиент с явными connect/close и проверкой состояния.
- BaseContextManager: async with поверх клиента.
"""

import logging
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class BaseClient(ABC, Generic[T]):
    """
    Базовый клиент подключения.

    Attributes:
        logger (logging.Logger): Логгер с именем класса наследника.
    """

    def __init__(self) -> None:
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    async def connect(self) -> T:
        """Устанавливает подключение и возвращает его."""

    @abstractmethod
    async def close(self) -> None:
        """Закрывает подключение."""

    @abstractmethod
    async def _health_check_probe(self) -> None:
        """Лёгкий запрос к сервису, бросает исключение при недоступности."""

    async def health_check(self) -> bool:
        """
        Проверяет состояние подключения.

        Returns:
            bool: True если сервис отвечает, False иначе
        """
        try:
            await self._health_check_probe()
            return True
        except Exception as e:  # noqa: BLE001
            self.logger.warning("Проверка состояния не пройдена: %s", e)
            return False


class BaseContextManager(ABC, Generic[T]):
    """Контекстный менеджер, открывающий подключение на входе и закрывающий на выходе."""

    def __init__(self) -> None:
        self.logger = logging.getLogger(self.__class__.__name__)

    async def __aenter__(self) -> T:
        return await self.connect()

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @abstractmethod
    async def connect(self) -> T:
        """Открывает подключение или сессию."""

    @abstractmethod
    async def close(self) -> None:
        """Закрывает подключение или сессию."""
