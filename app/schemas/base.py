"""
Базовые схемы данных.

- CommonBaseSchema: общая конфигурация (from_attributes) для всех схем.
- BaseSchema: схема записи с id и датами.
- BaseRequestSchema: входные данные (без id и дат).
- BaseResponseSchema: ответ с success и message.
- MessageResponseSchema: ответ только с message.
- ErrorResponseSchema / ValidationErrorResponseSchema: формат ошибок для документации.
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CommonBaseSchema(BaseModel):
    """
    Общая базовая схема для всех моделей.

    Attributes:
        model_config (ConfigDict): Разрешает строить схему из атрибутов ORM-модели.
    """

    model_config = ConfigDict(from_attributes=True)


class BaseSchema(CommonBaseSchema):
    """
    Базовая схема записи БД.

    Attributes:
        id (uuid.UUID): Идентификатор записи.
        created_at (datetime): Дата и время создания записи.
        updated_at (datetime): Дата и время последнего обновления записи.
    """

    id: uuid.UUID
    created_at: datetime | None = None
    updated_at: datetime | None = None


class BaseRequestSchema(CommonBaseSchema):
    """
    Базовая схема для входных данных.

    id и даты создания/обновления клиент не передаёт.
    """


class BaseResponseSchema(CommonBaseSchema):
    """
    Базовая схема для ответов API.

    Attributes:
        success (bool): Указывает, успешен ли запрос.
        message (Optional[str]): Сообщение, связанное с ответом.
    """

    success: bool = True
    message: str | None = None


class MessageResponseSchema(CommonBaseSchema):
    """Ответ, состоящий из одного сообщения."""

    message: str = Field(description="Сообщение о результате операции")


class ErrorResponseSchema(CommonBaseSchema):
    """
    Формат ошибки API (см. app.core.exceptions.handlers).

    Attributes:
        message: Сообщение об ошибке
        error_type: Тип ошибки для идентификации на клиенте
        status_code: HTTP код ответа
        timestamp: Временная метка возникновения ошибки
        request_id: Идентификатор запроса
    """

    message: str
    error_type: str
    status_code: int
    timestamp: str
    request_id: str


class ValidationErrorResponseSchema(ErrorResponseSchema):
    """
    Формат ошибки валидации.

    Attributes:
        errors: Сообщения об ошибках по полям, например {"email": ["..."]}
    """

    errors: dict[str, list[str]]
