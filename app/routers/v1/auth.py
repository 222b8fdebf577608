"""
Роутеры аутентификации.

- POST /login - Вход в систему
- POST /register - Регистрация
- POST /logout - Выход из системы (нужен токен)
- POST /refresh - Обновление токена (нужен токен)
"""

from fastapi import status

from app.core.dependencies import AuthServiceDep
from app.core.security.auth import CurrentTokenDep, CurrentUserDep
from app.routers.base import BaseRouter, ProtectedRouter
from app.schemas import (
    ErrorResponseSchema,
    LoginRequestSchema,
    MessageResponseSchema,
    RegisterRequestSchema,
    TokenResponseSchema,
    ValidationErrorResponseSchema,
)


class AuthRouter(BaseRouter):
    """
    Публичные эндпоинты аутентификации: вход и регистрация.
    """

    def __init__(self):
        super().__init__(prefix="", tags=["Authentication"])

    def configure(self):
        """Настройка endpoints роутера."""

        # ==================== LOGIN ====================

        @self.router.post(
            path="/login",
            response_model=TokenResponseSchema,
            status_code=status.HTTP_200_OK,
            description="""\
## 🔐 Вход в систему

### Параметры:
- **email** - email пользователя
- **password** - пароль (минимум 6 символов)

### Returns:
- **access_token** - JWT токен доступа
- **token_type** - тип токена (bearer)

Неверный email и неверный пароль дают одинаковый ответ 401.
""",
            responses={
                401: {"model": ErrorResponseSchema, "description": "Email or password invalid."},
                422: {"model": ValidationErrorResponseSchema, "description": "Ошибка валидации"},
            },
        )
        async def login(
            credentials: LoginRequestSchema,
            auth_service: AuthServiceDep,
        ) -> TokenResponseSchema:
            return await auth_service.authenticate(credentials)

        # ==================== REGISTER ====================

        @self.router.post(
            path="/register",
            response_model=MessageResponseSchema,
            status_code=status.HTTP_201_CREATED,
            description="""\
## 📝 Регистрация пользователя

### Параметры:
- **name** - имя (2-255 символов)
- **email** - уникальный email
- **password** - пароль (минимум 6 символов)
- **password_confirmation** - повтор пароля

### Returns:
- **message** - "Created successfully"
""",
            responses={
                422: {"model": ValidationErrorResponseSchema, "description": "Ошибка валидации или email занят"},
            },
        )
        async def register(
            data: RegisterRequestSchema,
            auth_service: AuthServiceDep,
        ) -> MessageResponseSchema:
            """
            Регистрация нового пользователя.

            Пароль хешируется и в ответ не попадает.
            """
            return await auth_service.register(data)


class AuthSessionRouter(ProtectedRouter):
    """
    Эндпоинты, работающие с текущим токеном.
    """

    def __init__(self):
        super().__init__(prefix="", tags=["Authentication"])

    def configure(self):
        """Настройка endpoints роутера."""

        @self.router.post(
            path="/logout",
            response_model=MessageResponseSchema,
            description="""\
## 🚪 Выход из системы

Отзывает текущий токен. Повторный вызов с тем же токеном возвращает 401.
""",
            responses={401: {"model": ErrorResponseSchema, "description": "Unauthenticated."}},
        )
        async def logout(
            payload: CurrentTokenDep,
            auth_service: AuthServiceDep,
        ) -> MessageResponseSchema:
            return await auth_service.logout(payload)

        @self.router.post(
            path="/refresh",
            response_model=TokenResponseSchema,
            description="""\
## 🔄 Обновление токена

Выдаёт новый токен, текущий перестаёт действовать.
""",
            responses={401: {"model": ErrorResponseSchema, "description": "Unauthenticated."}},
        )
        async def refresh(
            payload: CurrentTokenDep,
            current_user: CurrentUserDep,
            auth_service: AuthServiceDep,
        ) -> TokenResponseSchema:
            return await auth_service.refresh(payload, current_user)
