"""Схемы для пагинации."""

import math
from typing import Generic, Literal, TypeVar

from pydantic import Field

from app.core.settings import settings
from app.schemas.base import BaseResponseSchema, CommonBaseSchema

T = TypeVar("T")

SortField = Literal["created_at", "updated_at", "name"]


class PaginationParamsSchema(CommonBaseSchema):
    """
    Параметры пагинации и сортировки.

    Attributes:
        page (int): Номер страницы (начиная с 1).
        page_size (int): Количество элементов на странице (1-100).
        sort_by (SortField): Поле для сортировки (created_at, updated_at, name).
        sort_desc (bool): Флаг сортировки по убыванию.
    """

    page: int = Field(1, ge=1, description="Номер страницы (начиная с 1)")
    page_size: int = Field(settings.CLIENTS_PAGE_SIZE, ge=1, le=100, description="Количество элементов на странице")
    sort_by: SortField = Field("created_at", description="Поле сортировки")
    sort_desc: bool = Field(False, description="Сортировка по убыванию")


class PaginationMetaSchema(CommonBaseSchema):
    """
    Метаданные пагинации.

    Attributes:
        total (int): Общее количество элементов.
        page (int): Текущая страница.
        page_size (int): Размер страницы.
        total_pages (int): Общее количество страниц.
        has_next (bool): Есть ли следующая страница.
        has_prev (bool): Есть ли предыдущая страница.
    """

    total: int = Field(description="Общее количество элементов")
    page: int = Field(description="Текущая страница")
    page_size: int = Field(description="Размер страницы")
    total_pages: int = Field(description="Общее количество страниц")
    has_next: bool = Field(description="Есть ли следующая страница")
    has_prev: bool = Field(description="Есть ли предыдущая страница")

    @classmethod
    def build(cls, total: int, pagination: PaginationParamsSchema) -> "PaginationMetaSchema":
        """Считает метаданные по общему количеству и параметрам запроса."""
        total_pages = math.ceil(total / pagination.page_size) if total else 0
        return cls(
            total=total,
            page=pagination.page,
            page_size=pagination.page_size,
            total_pages=total_pages,
            has_next=pagination.page < total_pages,
            has_prev=pagination.page > 1,
        )


class PaginatedDataSchema(CommonBaseSchema, Generic[T]):
    """
    Данные с пагинацией.

    Attributes:
        items (List[T]): Список элементов.
        pagination (PaginationMetaSchema): Метаданные пагинации.
    """

    items: list[T] = Field(default_factory=list, description="Список элементов")
    pagination: PaginationMetaSchema = Field(description="Метаданные пагинации")


class PaginatedResponseSchema(BaseResponseSchema, Generic[T]):
    """
    Схема ответа с пагинацией.
    """

    data: PaginatedDataSchema[T] = Field(description="Данные с пагинацией")
