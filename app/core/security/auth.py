"""
Модуль аутентификации пользователей.

Основные компоненты:
- HTTPBearer: схема безопасности для документации OpenAPI
- get_current_token: проверенный payload токена из заголовка Authorization
- get_current_user: текущий пользователь по токену

Примеры использования:

1. Защита всех маршрутов роутера (см. ProtectedRouter):
    ```
    APIRouter(dependencies=[Depends(get_current_user)])
    ```

2. Получение пользователя в обработчике:
    ```
    @router.post("/refresh")
    async def refresh(user: CurrentUserDep, payload: CurrentTokenDep):
        ...
    ```
"""

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.dependencies.database import AsyncSessionDep
from app.core.dependencies.token import TokenServiceDep
from app.core.exceptions import TokenInvalidError, TokenMissingError
from app.core.security.token_manager import TokenManager
from app.models.v1.users import UserModel
from app.repository.v1.users import UserRepository

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(
    scheme_name="BearerAuth",
    description="Токен из POST /login",
    auto_error=False,
)


async def get_current_token(
    token_service: TokenServiceDep,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> dict:
    """
    Проверяет bearer-токен: подпись, срок действия и наличие в хранилище.

    Returns:
        dict: Payload токена.

    Raises:
        TokenMissingError: Заголовок Authorization не передан.
        TokenInvalidError: Токен повреждён или отозван.
        TokenExpiredError: Срок действия истёк.
    """
    if credentials is None or not credentials.credentials:
        raise TokenMissingError()

    return await token_service.validate_access_token(credentials.credentials)


async def get_current_user(
    session: AsyncSessionDep,
    payload: dict = Depends(get_current_token),
) -> UserModel:
    """
    Получает текущего аутентифицированного пользователя.

    Returns:
        UserModel: Владелец токена.

    Raises:
        TokenInvalidError: Пользователь из токена не существует.
    """
    user_id = TokenManager.get_user_id(payload)
    user = await UserRepository(session).get_item_by_id(user_id)
    if user is None:
        logger.warning("Пользователь из токена не найден", extra={"user_id": str(user_id)})
        raise TokenInvalidError(reason="token owner does not exist")

    logger.debug("Аутентифицирован пользователь %s", user.id)
    return user


CurrentTokenDep = Annotated[dict, Depends(get_current_token)]
CurrentUserDep = Annotated[UserModel, Depends(get_current_user)]
