"""
Эндпоинты проверки состояния приложения.
"""

from app.core.dependencies.health import HealthServiceDep
from app.routers.base import BaseRouter
from app.schemas import HealthCheckDataSchema, HealthCheckResponseSchema


class HealthRouter(BaseRouter):
    """
    Роутер для проверки состояния приложения.

    Endpoints:
        GET /health - Проверка приложения, базы данных и Redis
        GET /health/live - Проверка процесса без внешних зависимостей
    """

    def __init__(self):
        super().__init__(prefix="health", tags=["Health"])

    def configure(self):
        @self.router.get(
            path="",
            response_model=HealthCheckResponseSchema,
            description="""\
## 🩺 Проверка состояния приложения

Возвращает статусы: приложение, база данных, Redis.
Недоступная база данных возвращает 503.
""",
        )
        async def health_check(health_service: HealthServiceDep) -> HealthCheckResponseSchema:
            status = await health_service.check()
            message = "Все сервисы работают" if status["redis"] != "fail" else "Кеш недоступен"
            return HealthCheckResponseSchema(message=message, data=HealthCheckDataSchema(**status))

        @self.router.get(path="/live", response_model=HealthCheckResponseSchema)
        async def liveness_check(health_service: HealthServiceDep) -> HealthCheckResponseSchema:
            """💓 Приложение запущено (внешние зависимости не проверяются)."""
            status = await health_service.check_liveness()
            return HealthCheckResponseSchema(message="Приложение работает", data=HealthCheckDataSchema(**status))
