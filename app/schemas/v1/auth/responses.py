"""Схемы ответов для аутентификации."""

from pydantic import Field

from app.schemas.base import CommonBaseSchema


class TokenResponseSchema(CommonBaseSchema):
    """
    Ответ с токеном доступа.

    Note:
        Swagger UI для OAuth2 password flow ожидает поля access_token
        и token_type на верхнем уровне.
    """

    access_token: str = Field(description="JWT токен доступа")
    token_type: str = Field(default="bearer", description="Тип токена")


def respond_with_token(token: str) -> TokenResponseSchema:
    """Оборачивает строку токена в стандартный ответ {access_token, token_type}."""
    return TokenResponseSchema(access_token=token, token_type="bearer")
