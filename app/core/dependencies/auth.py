"""
Зависимости для сервиса аутентификации.

Providers:
    - get_auth_service: Провайдер для AuthService

Typed Dependencies:
    - AuthServiceDep: Типизированная зависимость для AuthService

Usage:
    ```python
    from app.core.dependencies import AuthServiceDep

    @router.post("/login")
    async def login(auth_service: AuthServiceDep, credentials: LoginRequestSchema):
        return await auth_service.authenticate(credentials)
    ```
"""

import logging
from typing import Annotated

from fastapi import Depends

from app.core.dependencies.database import AsyncSessionDep
from app.core.dependencies.token import TokenServiceDep
from app.services.v1.auth import AuthService

logger = logging.getLogger(__name__)


async def get_auth_service(
    session: AsyncSessionDep,
    token_service: TokenServiceDep,
) -> AuthService:
    """
    Провайдер для AuthService.

    Args:
        session: Асинхронная сессия базы данных.
        token_service: Сервис для работы с токенами.

    Returns:
        AuthService: Настроенный экземпляр сервиса аутентификации.
    """
    logger.debug("Создание экземпляра AuthService")
    return AuthService(session=session, token_service=token_service)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
