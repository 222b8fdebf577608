from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from ..base import BaseModel


class UserModel(BaseModel):
    """
    Пользователь API.

    Создаётся при регистрации, читается при входе. Через API не изменяется и не удаляется.

    Attributes:
        name (str): Имя пользователя.
        email (str): Email для входа (уникальный).
        password_hash (str): Хеш пароля (passlib), исходный пароль не хранится.

    Example:
        >>> user = UserModel(
        ...     name="John Doe",
        ...     email="john@example.com",
        ...     password_hash=PasswordManager.hash_password("secret123"),
        ... )
    """

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Имя пользователя",
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="Email для входа",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Хеш пароля",
    )

    def __repr__(self) -> str:
        return f"<UserModel(email={self.email})>"
