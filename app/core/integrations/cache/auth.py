"""
Менеджер кеша для аутентификации.

Хранит активные access-токены по их jti: запись token:{jti} -> user_id
живёт столько же, сколько сам токен. Токен без записи считается отозванным.
"""

import logging
from uuid import UUID

from app.core.settings import settings
from app.repository.cache import CacheBackend

logger = logging.getLogger(__name__)

TOKEN_KEY_PREFIX = "token:"


class AuthCacheManager:
    """
    Хранилище активных токенов поверх CacheBackend.

    Example:
        >>> manager = AuthCacheManager(cache)
        >>> await manager.save_token(jti, user.id)
        >>> await manager.get_user_id(jti)
    """

    def __init__(self, cache: CacheBackend):
        self.cache = cache

    @staticmethod
    def _key(jti: str) -> str:
        return f"{TOKEN_KEY_PREFIX}{jti}"

    async def save_token(self, jti: str, user_id: UUID) -> bool:
        """
        Регистрирует выданный токен.

        Args:
            jti: Идентификатор токена из payload.
            user_id: Владелец токена.

        Returns:
            bool: True если запись сохранена.
        """
        saved = await self.cache.set(self._key(jti), str(user_id), ttl=settings.access_token_max_age)
        if not saved:
            logger.warning("Не удалось сохранить токен %s в кеше", jti)
        return saved

    async def get_user_id(self, jti: str) -> UUID | None:
        """
        Возвращает владельца активного токена.

        Returns:
            UUID | None: ID пользователя или None, если токен отозван или истёк.
        """
        value = await self.cache.get(self._key(jti))
        if value is None:
            return None
        return UUID(str(value))

    async def remove_token(self, jti: str) -> bool:
        """Отзывает токен."""
        removed = await self.cache.delete(self._key(jti))
        logger.debug("Токен %s удалён из кеша: %s", jti, removed)
        return removed
