"""
Модели клиентов.

Клиент (ClientModel) ссылается на тип клиента (ClientTypeModel), владеет
упорядоченным списком телефонов (PhoneModel) и связан со множеством
продавцов (SellerModel) через таблицу client_sellers.
"""

from uuid import UUID

from sqlalchemy import ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import BaseModel


class ClientTypeModel(BaseModel):
    """
    Справочник типов клиентов (например: "Физическое лицо", "Компания").

    Attributes:
        name (str): Название типа (уникальное).
    """

    __tablename__ = "client_types"

    name: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        nullable=False,
        comment="Название типа клиента",
    )

    def __repr__(self) -> str:
        return f"<ClientTypeModel(name={self.name})>"


class SellerModel(BaseModel):
    """
    Справочник продавцов, закреплённых за клиентами.

    Attributes:
        name (str): Имя продавца.
        email (str): Email продавца (уникальный).
    """

    __tablename__ = "sellers"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Имя продавца",
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        comment="Email продавца",
    )

    clients: Mapped[list["ClientModel"]] = relationship(
        "ClientModel",
        secondary="client_sellers",
        back_populates="sellers",
    )

    def __repr__(self) -> str:
        return f"<SellerModel(email={self.email})>"


class ClientModel(BaseModel):
    """
    Клиент.

    Attributes:
        name (str): Наименование клиента.
        email (str | None): Контактный email.
        document (str | None): ИНН или другой регистрационный номер.
        notes (str | None): Заметки.
        client_type_id (UUID | None): Внешний ключ на ClientTypeModel.

    Relationships:
        client_type: Many-to-One связь с ClientTypeModel.
        phones: One-to-Many связь с PhoneModel, упорядочена по position.
        sellers: Many-to-Many связь с SellerModel.

    Note:
        Связи нужно загружать заранее (selectinload): ленивая загрузка
        в AsyncSession недоступна.
    """

    __tablename__ = "clients"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Наименование клиента",
    )

    email: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="Контактный email",
    )

    document: Mapped[str | None] = mapped_column(
        String(32),
        nullable=True,
        comment="ИНН или регистрационный номер",
    )

    notes: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Заметки",
    )

    client_type_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("client_types.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
        comment="ID типа клиента",
    )

    # Связи
    client_type: Mapped["ClientTypeModel | None"] = relationship("ClientTypeModel")

    phones: Mapped[list["PhoneModel"]] = relationship(
        "PhoneModel",
        back_populates="client",
        cascade="all, delete-orphan",
        order_by="PhoneModel.position",
    )

    sellers: Mapped[list["SellerModel"]] = relationship(
        "SellerModel",
        secondary="client_sellers",
        back_populates="clients",
    )

    def __repr__(self) -> str:
        return f"<ClientModel(name={self.name})>"


class PhoneModel(BaseModel):
    """
    Телефон клиента.

    Attributes:
        number (str): Номер телефона.
        position (int): Порядок телефона в списке клиента (начиная с 0).
        client_id (UUID): Внешний ключ на ClientModel.
    """

    __tablename__ = "phones"

    number: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        comment="Номер телефона",
    )

    position: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        comment="Порядок в списке телефонов клиента",
    )

    client_id: Mapped[UUID] = mapped_column(
        ForeignKey("clients.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="ID клиента",
    )

    client: Mapped["ClientModel"] = relationship("ClientModel", back_populates="phones")

    def __repr__(self) -> str:
        return f"<PhoneModel(number={self.number}, position={self.position})>"


class ClientSellerModel(BaseModel):
    """
    Связующая таблица для Many-to-Many связи между клиентами и продавцами.

    Attributes:
        client_id (UUID): ID клиента.
        seller_id (UUID): ID продавца.
    """

    __tablename__ = "client_sellers"
    __table_args__ = (UniqueConstraint("client_id", "seller_id", name="uq_client_sellers_client_seller"),)

    client_id: Mapped[UUID] = mapped_column(
        ForeignKey("clients.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="ID клиента",
    )

    seller_id: Mapped[UUID] = mapped_column(
        ForeignKey("sellers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="ID продавца",
    )

    def __repr__(self) -> str:
        return f"<ClientSellerModel(client_id={self.client_id}, seller_id={self.seller_id})>"
