"""
Зависимости для сервиса работы с токенами.

Providers:
    - get_token_service: Провайдер для TokenService

Typed Dependencies:
    - TokenServiceDep: Типизированная зависимость для TokenService

Usage:
    ```python
    from app.core.dependencies import TokenServiceDep

    async def some_handler(token_service: TokenServiceDep):
        access_token = await token_service.create_access_token(user)
    ```
"""

import logging
from typing import Annotated

from fastapi import Depends

from app.core.dependencies.cache import TokenStoreDep
from app.services.v1.token import TokenService

logger = logging.getLogger(__name__)


async def get_token_service(cache: TokenStoreDep) -> TokenService:
    """
    Провайдер для TokenService.

    Args:
        cache: Хранилище активных токенов.

    Returns:
        TokenService: Настроенный экземпляр сервиса токенов.
    """
    logger.debug("Создание экземпляра TokenService")
    return TokenService(cache=cache)


TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]
