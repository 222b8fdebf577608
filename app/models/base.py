"""
Базовый класс моделей SQLAlchemy.

   BaseModel - общие поля (id, created_at, updated_at) для всех моделей.
"""

import uuid
from datetime import UTC, datetime

from sqlalchemy import DateTime, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    """
    Базовый класс, используемый для определения моделей.

    Args:
        id (Mapped[UUID]): Первичный ключ в формате UUID (нативный UUID в PostgreSQL).
        created_at (Mapped[datetime]): Дата и время создания записи.
        updated_at (Mapped[datetime]): Дата и время последнего обновления записи.
    """

    __abstract__ = True

    id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"
