"""
Модуль для работы с паролями.

Предоставляет класс PasswordManager для:
- Хеширования паролей через Argon2
- Проверки паролей
"""

import logging

import passlib.exc
from passlib.context import CryptContext

from app.core.settings import settings

pwd_context = CryptContext(**settings.crypt_context_params)

logger = logging.getLogger(__name__)


class PasswordManager:
    """
    Класс для хеширования и проверки паролей.

    Открытый пароль нигде не сохраняется и не логируется.
    """

    @staticmethod
    def hash_password(password: str) -> str:
        """
        Генерирует хеш пароля с использованием argon2.

        Args:
            password: Пароль для хеширования

        Returns:
            Хешированный пароль
        """
        return pwd_context.hash(password)

    @staticmethod
    def verify(hashed_password: str, plain_password: str) -> bool:
        """
        Проверяет пароль по хешу.

        Args:
            hashed_password: Хеш пароля из базы
            plain_password: Пароль из запроса

        Returns:
            True, если пароль совпадает
        """
        try:
            return pwd_context.verify(plain_password, hashed_password)
        except passlib.exc.UnknownHashError:
            logger.warning("Неизвестный формат хеша пароля")
            return False
