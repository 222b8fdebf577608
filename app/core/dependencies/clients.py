"""
Зависимости для сервиса клиентов.

Providers:
    - get_client_service: Провайдер для ClientService

Typed Dependencies:
    - ClientServiceDep: Типизированная зависимость для ClientService
"""

import logging
from typing import Annotated

from fastapi import Depends

from app.core.dependencies.cache import CacheDep
from app.core.dependencies.database import AsyncSessionDep
from app.services.v1.clients import ClientService

logger = logging.getLogger(__name__)


async def get_client_service(session: AsyncSessionDep, cache: CacheDep) -> ClientService:
    """
    Провайдер для ClientService.

    Args:
        session: Асинхронная сессия базы данных.
        cache: Кеш списка клиентов.
    """
    logger.debug("Создание экземпляра ClientService")
    return ClientService(session=session, cache=cache)


ClientServiceDep = Annotated[ClientService, Depends(get_client_service)]
