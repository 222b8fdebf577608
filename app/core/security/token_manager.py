"""
Библиотека методов TokenManager

_base_payload(token_type, expires_delta) - создаёт базовый payload с iat, expires_at, jti, type.
_validate_payload_structure(payload) - приватный метод для проверки структуры payload.
generate_token(payload) - кодирует JWT.
decode_token(token) - декодирует JWT.
is_expired(expires_at) - проверяет, истёк ли токен.
_validate_required_keys(payload) - приватный метод для проверки обязательных ключей.
validate_token_payload(payload, expected_type) - проверяет payload и тип токена.
create_payload(user) - создаёт payload для access-токена.
create_access_token(user) - генерирует access-токен и возвращает его вместе с jti.
get_user_id(payload) - извлекает user_id из access payload.
"""

import uuid
from datetime import UTC, datetime, timedelta
from enum import Enum
from typing import Any

from jose import ExpiredSignatureError, JWTError, jwt

from app.core.exceptions import (
    TokenExpiredError,
    TokenInvalidError,
    TokenMissingError,
)
from app.core.settings import settings


class TokenType(str, Enum):
    """Константы для типов токенов."""

    ACCESS = "access"


class TokenManager:
    """
    TokenManager для работы с JWT.

    Содержит методы:
     Генерация токена
     Декодирование токена
     Проверка токена и срока действия
     Создание access-токена

    Сам по себе JWT не делает токен действующим: активные токены
    хранятся по jti в кеше (см. AuthCacheManager), logout удаляет запись.
    """

    @staticmethod
    def _base_payload(token_type: TokenType, expires_delta: timedelta) -> dict[str, Any]:
        """
        Создаёт базовый payload с общими полями для всех типов токенов.

        Args:
            token_type (TokenType): Тип токена.
            expires_delta (timedelta): Время жизни токена.

        Returns:
            dict[str, Any]: Словарь с базовыми полями payload.
        """
        now_ts = int(datetime.now(UTC).timestamp())
        exp_ts = now_ts + int(expires_delta.total_seconds())
        return {
            "iat": now_ts,
            "expires_at": exp_ts,
            "jti": str(uuid.uuid4()),
            "type": token_type.value,
        }

    @staticmethod
    def _validate_payload_structure(payload: dict) -> None:
        if not payload or not isinstance(payload, dict):
            raise TokenInvalidError(reason="payload is empty or not a dict")

    @staticmethod
    def generate_token(payload: dict) -> str:
        """
        Генерирует JWT токен по переданному payload.

        Args:
            payload: Данные токена.

        Returns:
            str: Закодированный JWT токен.

        Raises:
            TokenInvalidError: Если 'sub' отсутствует в payload.
        """
        TokenManager._validate_payload_structure(payload)

        if "sub" not in payload:
            raise TokenInvalidError(reason='payload must contain "sub"')

        return jwt.encode(
            payload,
            key=settings.TOKEN_SECRET_KEY.get_secret_value(),
            algorithm=settings.TOKEN_ALGORITHM,
        )

    @staticmethod
    def decode_token(token: str) -> dict:
        """
        Декодирует JWT токен и проверяет его подпись.

        Args:
            token: JWT токен в виде строки.

        Returns:
            dict: Декодированные данные токена.

        Raises:
            TokenMissingError: Если токен отсутствует.
            TokenInvalidError: Если токен некорректен или имеет неверную структуру.
            TokenExpiredError: Если подпись верна, но токен истёк.
        """
        if not token:
            raise TokenMissingError()

        try:
            payload = jwt.decode(
                token,
                key=settings.TOKEN_SECRET_KEY.get_secret_value(),
                algorithms=[settings.TOKEN_ALGORITHM],
            )
        except ExpiredSignatureError as exc:
            raise TokenExpiredError() from exc
        except JWTError as exc:
            raise TokenInvalidError(reason="malformed token") from exc

        TokenManager._validate_required_keys(payload)
        return payload

    @staticmethod
    def is_expired(expires_at: int | None, leeway_in_seconds: int = 0) -> bool:
        """
        Проверяет, истек ли срок действия токена, с учетом допуска.

        Args:
            expires_at: Unix timestamp окончания действия токена.
            leeway_in_seconds: Допуск в секундах.

        Returns:
            bool: True, если токен истёк, иначе False.
        """
        if expires_at is None:
            return True
        current_timestamp = int(datetime.now(UTC).timestamp())
        return current_timestamp > expires_at + leeway_in_seconds

    @staticmethod
    def _validate_required_keys(payload: dict) -> None:
        TokenManager._validate_payload_structure(payload)
        for key in ("sub", "expires_at", "jti"):
            if key not in payload:
                raise TokenInvalidError(reason=f'payload is missing "{key}"')

    @staticmethod
    def validate_token_payload(payload: dict, expected_type: TokenType = TokenType.ACCESS) -> dict:
        """
        Проверяет тип токена и срок действия.

        Args:
            payload: Раскодированные данные токена.
            expected_type: Ожидаемый тип токена.

        Raises:
            TokenInvalidError: Если тип токена не совпадает.
            TokenExpiredError: Если токен просрочен.
        """
        TokenManager._validate_payload_structure(payload)

        token_type = payload.get("type")
        if token_type != expected_type.value:
            raise TokenInvalidError(reason=f"expected {expected_type.value} token, got {token_type}")

        if TokenManager.is_expired(payload.get("expires_at")):
            raise TokenExpiredError()

        return payload

    @staticmethod
    def create_payload(user: Any) -> dict:
        """
        Создает payload для access-токена.

        Args:
            user: Объект пользователя с атрибутами `id` и `email`.

        Returns:
            dict: Словарь с данными токена.
        """
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        payload = TokenManager._base_payload(TokenType.ACCESS, expires_delta)
        payload.update(
            {
                "sub": str(user.id),
                "email": user.email,
            }
        )
        return payload

    @staticmethod
    def create_access_token(user: Any) -> tuple[str, str]:
        """
        Генерирует access-токен.

        Returns:
            tuple[str, str]: JWT и его jti (ключ в хранилище активных токенов).
        """
        payload = TokenManager.create_payload(user)
        return TokenManager.generate_token(payload), payload["jti"]

    @staticmethod
    def get_user_id(payload: dict) -> uuid.UUID:
        """
        Проверяет access payload и извлекает из него user_id.

        Raises:
            TokenInvalidError: Если sub не является UUID.
            TokenExpiredError: Если токен просрочен.
        """
        TokenManager.validate_token_payload(payload, TokenType.ACCESS)
        try:
            return uuid.UUID(str(payload.get("sub")))
        except ValueError as exc:
            raise TokenInvalidError(reason="sub is not a valid user id") from exc
