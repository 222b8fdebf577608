"""Схемы запросов создания и обновления клиента."""

import uuid
from typing import Annotated

from pydantic import EmailStr, Field, StringConstraints, field_validator

from app.schemas.base import BaseRequestSchema

PhoneNumber = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=3, max_length=32, pattern=r"^\+?[0-9 ()\-]+$"),
]


class ClientCreateSchema(BaseRequestSchema):
    """
    Данные для создания клиента.

    Attributes:
        name: Наименование клиента (обязательное).
        email: Контактный email.
        document: ИНН или регистрационный номер.
        notes: Заметки.
        client_type_id: ID типа клиента из справочника.
        phones: Телефоны в порядке отображения.
        seller_ids: ID продавцов из справочника.
    """

    name: str = Field(min_length=2, max_length=255, description="Наименование клиента")
    email: EmailStr | None = Field(None, description="Контактный email")
    document: str | None = Field(None, max_length=32, description="ИНН или регистрационный номер")
    notes: str | None = Field(None, description="Заметки")
    client_type_id: uuid.UUID | None = Field(None, description="ID типа клиента")
    phones: list[PhoneNumber] = Field(default_factory=list, max_length=20, description="Телефоны")
    seller_ids: list[uuid.UUID] = Field(default_factory=list, description="ID продавцов")


class ClientUpdateSchema(BaseRequestSchema):
    """
    Данные для обновления клиента.

    Все поля необязательные: обновляются только переданные.
    Переданные phones и seller_ids заменяют текущие списки целиком.
    """

    name: str | None = Field(None, min_length=2, max_length=255, description="Наименование клиента")
    email: EmailStr | None = Field(None, description="Контактный email")
    document: str | None = Field(None, max_length=32, description="ИНН или регистрационный номер")
    notes: str | None = Field(None, description="Заметки")
    client_type_id: uuid.UUID | None = Field(None, description="ID типа клиента")
    phones: list[PhoneNumber] | None = Field(None, max_length=20, description="Телефоны")
    seller_ids: list[uuid.UUID] | None = Field(None, description="ID продавцов")

    @field_validator("name", "phones", "seller_ids")
    @classmethod
    def not_null(cls, v):
        """Поле можно не передавать, но нельзя передать null."""
        if v is None:
            raise ValueError("The field may not be null.")
        return v
