"""
Схемы ресурса клиента (ClientResource).

Фиксированная JSON-проекция клиента со связями: тип, телефоны, продавцы.
"""

from pydantic import Field

from app.schemas.base import BaseSchema, CommonBaseSchema


class ClientTypeSchema(BaseSchema):
    """Тип клиента."""

    name: str = Field(description="Название типа клиента")


class SellerSchema(BaseSchema):
    """Продавец, закреплённый за клиентом."""

    name: str = Field(description="Имя продавца")
    email: str = Field(description="Email продавца")


class PhoneSchema(CommonBaseSchema):
    """Телефон клиента."""

    number: str = Field(description="Номер телефона")
    position: int = Field(description="Порядок в списке телефонов")


class ClientSchema(BaseSchema):
    """
    Ресурс клиента.

    Example:
        ```json
        {
            "id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
            "name": "ACME Ltd",
            "email": "office@acme.test",
            "document": "7707083893",
            "notes": null,
            "client_type": {"id": "...", "name": "Компания"},
            "phones": [{"number": "+7 999 123-45-67", "position": 0}],
            "sellers": [{"id": "...", "name": "Jane", "email": "jane@shop.test"}],
            "created_at": "2024-01-15T10:30:00Z",
            "updated_at": "2024-01-15T10:30:00Z"
        }
        ```
    """

    name: str = Field(description="Наименование клиента")
    email: str | None = Field(None, description="Контактный email")
    document: str | None = Field(None, description="ИНН или регистрационный номер")
    notes: str | None = Field(None, description="Заметки")
    client_type: ClientTypeSchema | None = Field(None, description="Тип клиента")
    phones: list[PhoneSchema] = Field(default_factory=list, description="Телефоны в заданном порядке")
    sellers: list[SellerSchema] = Field(default_factory=list, description="Продавцы клиента")
