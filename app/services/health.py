"""
Сервис для проверки состояния приложения и его зависимостей.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.connections.cache import RedisClient
from app.core.exceptions import ServiceUnavailableException
from app.repository.health import HealthRepository
from app.services.base import BaseService


class HealthService(BaseService):
    """
    Сервис для проверки состояния приложения и его зависимостей.

    Attributes:
        repository (HealthRepository): Репозиторий для проверки состояния БД
        redis_client (RedisClient): Клиент Redis

    Methods:
        check: Проверяет состояние приложения и его зависимостей (БД, Redis)
        check_liveness: Быстрая проверка жизнеспособности без зависимостей
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.repository = HealthRepository(session)
        self.redis_client = RedisClient()

    async def check(self) -> dict[str, str]:
        """
        Проверяет состояние приложения и его зависимостей.

        Redis проверяется только при CACHE_BACKEND=redis.

        Returns:
            Dict[str, str]: Словарь со статусами сервисов (app, db, redis)

        Raises:
            ServiceUnavailableException: Если база данных недоступна
        """
        self.logger.info("Checking application health")

        db_ok = await self.repository.check_database_connection()
        if not db_ok:
            self.logger.error("Критичная проверка сервиса не пройдена: база данных недоступна")
            raise ServiceUnavailableException("Database (Postgres)")

        if self.settings.CACHE_BACKEND == "redis":
            redis_status = "ok" if await self.redis_client.health_check() else "fail"
        else:
            redis_status = "unknown"

        status = {"app": "ok", "db": "ok", "redis": redis_status}
        self.logger.info("Health check completed: %s", status)
        return status

    async def check_liveness(self) -> dict[str, str]:
        """
        Быстрая проверка жизнеспособности без проверки зависимостей.

        Returns:
            Dict[str, str]: Минимальный словарь со статусом (app, остальные=unknown)
        """
        self.logger.debug("Liveness check")
        return {"app": "ok", "db": "unknown", "redis": "unknown"}
