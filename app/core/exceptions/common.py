"""
Общие исключения для API.

Содержит исключения, которые используются в разных частях приложения.
"""

from typing import Any

from starlette.status import HTTP_404_NOT_FOUND, HTTP_422_UNPROCESSABLE_CONTENT

from .base import BaseAPIException

VALIDATION_MESSAGE = "The given data was invalid."


class NotFoundError(BaseAPIException):
    """
    Исключение для случая, когда запрашиваемый ресурс не найден.

    Attributes:
        status_code (int): HTTP_404_NOT_FOUND.
        detail (str): Подробное сообщение об ошибке.
        error_type (str): Тип ошибки "not_found".
    """

    def __init__(
        self,
        detail: str = "Resource not found.",
        field: str | None = None,
        value: Any | None = None,
        error_type: str = "not_found",
    ):
        """
        Args:
            detail (str): Сообщение об ошибке.
            field (str, optional): Название поля, по которому искали.
            value (Any, optional): Значение, которое не было найдено.
            error_type (str): Тип ошибки для наследников.
        """
        extra = {"field": field, "value": str(value)} if field and value is not None else None

        super().__init__(
            status_code=HTTP_404_NOT_FOUND,
            detail=detail,
            error_type=error_type,
            extra=extra,
        )


class ValidationError(BaseAPIException):
    """
    Ошибка валидации данных, обнаруженная за пределами pydantic-схем
    (уникальность, существование связанных записей).

    Тело ответа совпадает с ответом на RequestValidationError:
    message и словарь errors вида {поле: [сообщения]}.
    """

    def __init__(
        self,
        errors: dict[str, list[str]],
        detail: str = VALIDATION_MESSAGE,
    ):
        """
        Args:
            errors: Сообщения об ошибках по полям.
            detail: Общее сообщение об ошибке.
        """
        self.errors = errors

        super().__init__(
            status_code=HTTP_422_UNPROCESSABLE_CONTENT,
            detail=detail,
            error_type="validation_error",
            extra={"errors": errors},
        )

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        """Ошибка валидации одного поля."""
        return cls(errors={field: [message]})
