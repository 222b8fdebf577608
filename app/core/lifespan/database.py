"""
Инициализация и завершение работы с базой данных.

- initialize_database: подключение к PostgreSQL и, при CREATE_TABLES=true,
  создание недостающих таблиц по метаданным моделей.
- close_database_connection: освобождение пула соединений.
"""

import logging

from fastapi import FastAPI

from app.core.connections.database import DatabaseClient
from app.core.lifespan.base import register_shutdown_handler, register_startup_handler
from app.core.settings import settings
from app.models import BaseModel

logger = logging.getLogger("app.core.lifespan.database")


@register_startup_handler
async def initialize_database(app: FastAPI):
    """
    Подключает PostgreSQL и сохраняет клиента в app.state.
    """
    client = DatabaseClient()
    await client.connect()
    app.state.pg_client = client

    if settings.CREATE_TABLES:
        async with client.get_engine().begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)
        logger.info("Таблицы базы данных созданы (если отсутствовали)")


@register_shutdown_handler
async def close_database_connection(app: FastAPI):
    """
    Закрывает подключение к PostgreSQL, если оно было инициализировано.
    """
    if hasattr(app.state, "pg_client"):
        await app.state.pg_client.close()
