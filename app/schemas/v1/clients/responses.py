"""Схемы ответов для клиентов."""

from pydantic import Field

from app.schemas.base import BaseResponseSchema
from app.schemas.pagination import PaginatedResponseSchema

from .base import ClientSchema


class ClientResponseSchema(BaseResponseSchema):
    """
    Ответ с одним клиентом.

    Attributes:
        data: Ресурс клиента.
    """

    data: ClientSchema = Field(description="Клиент")


class ClientCollectionResponseSchema(PaginatedResponseSchema[ClientSchema]):
    """Страница клиентов с метаданными пагинации."""
