"""Схемы запросов для аутентификации и регистрации."""

from pydantic import EmailStr, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from app.schemas.base import BaseRequestSchema


class LoginRequestSchema(BaseRequestSchema):
    """
    Схема для входа в систему.

    Attributes:
        email: Email пользователя для входа.
        password: Пароль пользователя.
    """

    email: EmailStr = Field(description="Email пользователя")
    password: str = Field(min_length=6, description="Пароль (минимум 6 символов)")


class RegisterRequestSchema(BaseRequestSchema):
    """
    Схема регистрации пользователя.

    Attributes:
        name: Имя пользователя (2-255 символов).
        email: Email, должен быть уникальным (проверяется в AuthService).
        password: Пароль (минимум 6 символов).
        password_confirmation: Повтор пароля, должен совпадать с password.

    Example:
        ```json
        {
            "name": "John Doe",
            "email": "john@example.com",
            "password": "secret123",
            "password_confirmation": "secret123"
        }
        ```
    """

    name: str = Field(min_length=2, max_length=255, description="Имя пользователя")
    email: EmailStr = Field(max_length=255, description="Email пользователя")
    password: str = Field(min_length=6, description="Пароль (минимум 6 символов)")
    password_confirmation: str = Field(description="Повтор пароля")

    @field_validator("password_confirmation")
    @classmethod
    def passwords_match(cls, v: str, info: ValidationInfo) -> str:
        """
        Проверяет совпадение пароля и подтверждения.

        Если сам password не прошёл валидацию, его нет в info.data,
        и ошибка остаётся только у поля password.
        """
        password = info.data.get("password")
        if password is not None and v != password:
            raise PydanticCustomError("password_mismatch", "The password confirmation does not match.")
        return v
