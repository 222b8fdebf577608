"""
Исключения модуля пользователей.

- UserCreationError: ошибка записи пользователя в БД.
"""

from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from .base import BaseAPIException


class UserCreationError(BaseAPIException):
    """
    Ошибка при создании пользователя.

    Транзакция откатывается, пользователь не создаётся.
    """

    def __init__(self, detail: str = "Failed to create user."):
        super().__init__(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            error_type="user_creation_error",
        )
