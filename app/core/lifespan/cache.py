"""
Инициализация и завершение работы с Redis.

При CACHE_BACKEND=memory Redis не используется и не подключается.
"""

from fastapi import FastAPI

from app.core.connections.cache import RedisClient
from app.core.lifespan.base import register_shutdown_handler, register_startup_handler
from app.core.settings import settings


@register_startup_handler
async def initialize_cache(app: FastAPI):
    """
    Подключает Redis и сохраняет клиента в app.state.

    Args:
        app (FastAPI): Экземпляр приложения FastAPI.
    """
    if settings.CACHE_BACKEND == "memory":
        return

    client = RedisClient()
    await client.connect()
    app.state.redis_client = client


@register_shutdown_handler
async def close_cache_connection(app: FastAPI):
    """
    Закрывает подключение к Redis, если оно было инициализировано.

    Args:
        app (FastAPI): Экземпляр приложения FastAPI.
    """
    if hasattr(app.state, "redis_client"):
        await app.state.redis_client.close()
