"""
Зависимость для сервиса проверки состояния.

Providers:
    - get_health_service: Провайдер для HealthService

Typed Dependencies:
    - HealthServiceDep: Типизированная зависимость для HealthService
"""

import logging
from typing import Annotated

from fastapi import Depends

from app.core.dependencies.database import AsyncSessionDep
from app.services.health import HealthService

logger = logging.getLogger(__name__)


def get_health_service(session: AsyncSessionDep) -> HealthService:
    """
    Провайдер для HealthService.

    Args:
        session: Асинхронная сессия базы данных

    Returns:
        HealthService: Настроенный сервис проверки здоровья
    """
    logger.debug("Создание экземпляра HealthService")
    return HealthService(session=session)


HealthServiceDep = Annotated[HealthService, Depends(get_health_service)]
