"""
Сервис для работы с JWT токенами.

Предоставляет методы для:
- Создания access токенов
- Сохранения токенов в хранилище активных токенов
- Проверки токенов
- Отзыва токенов

Используется в AuthService и в зависимости get_current_user.
"""

from app.core.exceptions import ServiceUnavailableException, TokenInvalidError
from app.core.integrations.cache import AuthCacheManager
from app.core.security import TokenManager
from app.models.v1.users import UserModel
from app.repository.cache import CacheBackend
from app.services.base import BaseService


class TokenService(BaseService):
    """
    Сервис для работы с JWT токенами.

    Использует TokenManager для генерации и AuthCacheManager для хранения.

    Attributes:
        cache: Кеш-бэкенд, в котором хранятся активные токены.
        cache_manager: Менеджер активных токенов.

    Example:
        >>> token_service = TokenService(cache=cache)
        >>> access_token = await token_service.create_access_token(user)
        >>> await token_service.revoke(payload)
    """

    def __init__(self, cache: CacheBackend):
        # TokenService не работает с БД, поэтому session=None
        super().__init__(session=None)
        self.cache = cache
        self.cache_manager = AuthCacheManager(cache)

    async def create_access_token(self, user: UserModel) -> str:
        """
        Создание JWT access токена с регистрацией в хранилище.

        Args:
            user: Пользователь, для которого выпускается токен.

        Returns:
            str: Сгенерированный access токен.

        Raises:
            ServiceUnavailableException: Хранилище токенов не приняло запись.
        """
        access_token, jti = TokenManager.create_access_token(user)
        if not await self.cache_manager.save_token(jti, user.id):
            raise ServiceUnavailableException("Token store")

        self.logger.info("Access токен создан", extra={"user_id": str(user.id)})
        return access_token

    async def validate_access_token(self, token: str) -> dict:
        """
        Декодирует токен и проверяет, что он не отозван.

        Args:
            token: JWT из заголовка Authorization.

        Returns:
            dict: Payload токена.

        Raises:
            TokenMissingError: Токен не передан.
            TokenExpiredError: Срок действия истёк.
            TokenInvalidError: Токен повреждён или отозван.
        """
        payload = TokenManager.decode_token(token)
        user_id = TokenManager.get_user_id(payload)

        stored_user_id = await self.cache_manager.get_user_id(payload["jti"])
        if stored_user_id is None:
            raise TokenInvalidError(reason="token has been revoked")
        if stored_user_id != user_id:
            raise TokenInvalidError(reason="token owner mismatch")

        return payload

    async def revoke(self, payload: dict) -> None:
        """
        Отзывает токен.

        Raises:
            TokenInvalidError: Токен уже отозван.
        """
        jti = payload["jti"]
        if not await self.cache_manager.remove_token(jti):
            raise TokenInvalidError(reason="token has already been revoked")

        self.logger.info("Токен отозван", extra={"user_id": payload.get("sub")})

    async def refresh(self, payload: dict, user: UserModel) -> str:
        """
        Выпускает новый токен взамен текущего.

        Текущий токен отзывается.

        Returns:
            str: Новый access токен.
        """
        await self.revoke(payload)
        return await self.create_access_token(user)
