"""
Исключения аутентификации.

Все ошибки токена отдаются клиенту одинаково: "Unauthenticated." и тип
authentication_error. Конкретная причина (нет токена, истёк, отозван)
остаётся только в логах. Ошибка входа всегда "Email or password invalid."
независимо от того, какое из полей не подошло.
"""

import logging

from starlette.status import HTTP_401_UNAUTHORIZED

from .base import BaseAPIException

logger = logging.getLogger(__name__)

UNAUTHENTICATED_MESSAGE = "Unauthenticated."
INVALID_CREDENTIALS_MESSAGE = "Email or password invalid."


class AuthenticationError(BaseAPIException):
    """
    Базовая ошибка аутентификации (401).

    Args:
        reason: Внутренняя причина, пишется в лог и не попадает в ответ.
    """

    def __init__(self, reason: str = "authentication failed"):
        self.reason = reason
        logger.debug("Отказ в аутентификации: %s", reason)
        super().__init__(
            status_code=HTTP_401_UNAUTHORIZED,
            detail=UNAUTHENTICATED_MESSAGE,
            error_type="authentication_error",
            headers={"WWW-Authenticate": "Bearer"},
        )


class TokenMissingError(AuthenticationError):
    """Заголовок Authorization отсутствует."""

    def __init__(self):
        super().__init__(reason="token is missing")


class TokenExpiredError(AuthenticationError):
    """Срок действия токена истёк."""

    def __init__(self):
        super().__init__(reason="token has expired")


class TokenInvalidError(AuthenticationError):
    """Токен повреждён, подписан чужим ключом или отозван."""

    def __init__(self, reason: str = "token is invalid"):
        super().__init__(reason=reason)


class InvalidCredentialsError(BaseAPIException):
    """Неверная пара email/пароль."""

    def __init__(self):
        super().__init__(
            status_code=HTTP_401_UNAUTHORIZED,
            detail=INVALID_CREDENTIALS_MESSAGE,
            error_type="invalid_credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
