"""
Исключения модуля клиентов.

- ClientNotFoundError: клиент с указанным id не существует.
- ClientPersistenceError: ошибка записи клиента и связанных данных (телефоны, продавцы).
"""

from typing import Any

from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from .base import BaseAPIException
from .common import NotFoundError


class ClientNotFoundError(NotFoundError):
    """
    Клиент не найден.

    Args:
        client_id: Идентификатор, по которому искали клиента.
    """

    def __init__(self, client_id: Any):
        super().__init__(
            detail="Client not found.",
            field="id",
            value=client_id,
            error_type="client_not_found",
        )


class ClientPersistenceError(BaseAPIException):
    """
    Ошибка при создании или обновлении клиента.

    Вся операция откатывается целиком, частично сохранённых данных не остаётся.
    """

    def __init__(self, operation: str):
        super().__init__(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to {operation} client.",
            error_type="client_persistence_error",
            extra={"operation": operation},
        )
