"""
Модуль для работы с базой данных.

Предоставляет классы для управления подключением к PostgreSQL через SQLAlchemy:
- DatabaseClient: singleton, владеет engine и фабрикой сессий
- DatabaseContextManager: сессия на время блока async with
- get_db_session: генератор сессий для FastAPI-зависимостей
"""

import asyncio
from collections.abc import AsyncGenerator
from typing import Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.core.connections.base import BaseClient, BaseContextManager
from app.core.settings import Settings, settings


class DatabaseClient(BaseClient[async_sessionmaker[AsyncSession]]):
    """
    Singleton клиент для работы с базой данных.

    Attributes:
        _settings (Settings): Конфигурация с параметрами подключения к БД
        _engine (Optional[AsyncEngine]): Асинхронный движок SQLAlchemy
        _session_factory (Optional[async_sessionmaker]): Фабрика сессий
    """

    _instance: Optional["DatabaseClient"] = None
    _lock = asyncio.Lock()

    def __new__(cls, _settings: Settings = settings) -> "DatabaseClient":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, _settings: Settings = settings) -> None:
        if getattr(self, "_initialized", False):
            return

        super().__init__()
        self._settings = _settings
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None
        self._initialized = True

    async def connect(self) -> async_sessionmaker[AsyncSession]:
        """
        Создает подключение к базе данных (если еще не создано).

        Returns:
            async_sessionmaker: Фабрика для создания асинхронных сессий

        Usage:
            ```python
            session_factory = await DatabaseClient().connect()
            async with session_factory() as session:
                result = await session.execute(query)
            ```
        """
        if self._session_factory is not None:
            return self._session_factory

        async with self._lock:
            if self._session_factory is not None:
                return self._session_factory

            self.logger.debug("Инициализация подключения к базе данных...")

            self._engine = create_async_engine(
                url=self._settings.database_url,
                **self._settings.engine_params,
            )
            self._session_factory = async_sessionmaker(bind=self._engine, **self._settings.session_params)

            self.logger.info("Подключение к базе данных установлено")

        return self._session_factory

    async def close(self) -> None:
        """Освобождает пул соединений и сбрасывает singleton."""
        async with self._lock:
            if self._engine:
                self.logger.debug("Закрытие подключения к базе данных...")
                await self._engine.dispose()
                self._engine = None
                self._session_factory = None
                DatabaseClient._instance = None
                self._initialized = False
                self.logger.info("Подключение к базе данных закрыто")

    def get_engine(self) -> AsyncEngine:
        """
        Текущий движок базы данных.

        Raises:
            RuntimeError: если connect() еще не вызывался
        """
        if self._engine is None:
            raise RuntimeError("База данных не инициализирована. Вызовите connect() перед использованием.")
        return self._engine

    @property
    def is_connected(self) -> bool:
        """Проверяет, установлено ли подключение к базе данных."""
        return self._engine is not None

    async def _health_check_probe(self) -> None:
        session_factory = await self.connect()
        async with session_factory() as session:
            await session.execute(text("SELECT 1"))


class DatabaseContextManager(BaseContextManager[AsyncSession]):
    """
    Сессия базы данных на время блока async with.

    Attributes:
        session (AsyncSession | None): Текущая сессия SQLAlchemy
    """

    def __init__(self) -> None:
        super().__init__()
        self.session: AsyncSession | None = None

    async def connect(self) -> AsyncSession:
        """
        Создает новую сессию из фабрики DatabaseClient.

        Returns:
            AsyncSession: Асинхронная сессия SQLAlchemy
        """
        session_factory = await DatabaseClient().connect()
        self.session = session_factory()
        self.logger.debug("Создана новая сессия базы данных")
        return self.session

    async def rollback(self) -> None:
        """Откатывает текущую транзакцию."""
        if not self.session:
            raise RuntimeError("Сессия не инициализирована. Вызовите connect() сначала.")

        await self.session.rollback()
        self.logger.debug("Транзакция откачена")

    async def close(self) -> None:
        """Закрывает текущую сессию."""
        if self.session:
            await self.session.close()
            self.session = None
            self.logger.debug("Сессия базы данных закрыта")


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Асинхронный генератор сессий базы данных.

    При исключении внутри блока незафиксированная транзакция откатывается.

    Usage:
        ```python
        async for session in get_db_session():
            ...
        ```
    """
    manager = DatabaseContextManager()
    try:
        session = await manager.connect()
        yield session
    except Exception:
        await manager.rollback()
        raise
    finally:
        await manager.close()
