"""
Сервис для аутентификации пользователей.

Предоставляет методы для:
- Входа по email и паролю (login)
- Регистрации (register)
- Выхода из системы (logout)
- Обновления токена (refresh)
"""

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import (
    InvalidCredentialsError,
    UserCreationError,
    ValidationError,
)
from app.core.security import PasswordManager
from app.models.v1.users import UserModel
from app.repository.v1.users import UserRepository
from app.schemas import (
    LoginRequestSchema,
    MessageResponseSchema,
    RegisterRequestSchema,
    TokenResponseSchema,
    respond_with_token,
)
from app.services.base import BaseService
from app.services.v1.token import TokenService

EMAIL_TAKEN_MESSAGE = "The email has already been taken."


class AuthService(BaseService):
    """
    Сервис для аутентификации пользователей.

    Attributes:
        repository: Репозиторий для работы с UserModel.
        token_service: Сервис для работы с токенами.
    """

    def __init__(self, session: AsyncSession, token_service: TokenService):
        """
        Инициализация сервиса аутентификации.

        Args:
            session: Асинхронная сессия базы данных.
            token_service: Сервис для работы с токенами.
        """
        super().__init__(session)
        self.token_service = token_service
        self.repository = UserRepository(session=session)

    # ==================== АУТЕНТИФИКАЦИЯ ====================

    async def authenticate(self, credentials: LoginRequestSchema) -> TokenResponseSchema:
        """
        Аутентифицирует пользователя по email и паролю.

        Args:
            credentials: Email и пароль.

        Returns:
            TokenResponseSchema: Токен доступа.

        Raises:
            InvalidCredentialsError: Если email или пароль неверные
                (ответ не различает эти случаи).
        """
        self.logger.info("Попытка аутентификации пользователя: %s", credentials.email)

        user = await self.repository.get_user_by_email(credentials.email)
        if not user:
            self.logger.warning("Пользователь не найден", extra={"email": credentials.email})
            raise InvalidCredentialsError()

        if not PasswordManager.verify(user.password_hash, credentials.password):
            self.logger.warning(
                "Неверный пароль пользователя",
                extra={"email": credentials.email, "user_id": str(user.id)},
            )
            raise InvalidCredentialsError()

        access_token = await self.token_service.create_access_token(user)

        self.logger.info("Аутентификация успешна", extra={"user_id": str(user.id)})
        return respond_with_token(access_token)

    # ==================== РЕГИСТРАЦИЯ ====================

    async def register(self, data: RegisterRequestSchema) -> MessageResponseSchema:
        """
        Регистрирует нового пользователя.

        Args:
            data: Имя, email и пароль с подтверждением (уже проверены схемой).

        Returns:
            MessageResponseSchema: {"message": "Created successfully"}

        Raises:
            ValidationError: Email уже занят.
            UserCreationError: Ошибка записи в БД.
        """
        email = data.email.lower()

        if await self.repository.email_exists(email):
            self.logger.info("Регистрация с занятым email", extra={"email": email})
            raise ValidationError.for_field("email", EMAIL_TAKEN_MESSAGE)

        user_data = {
            "name": data.name,
            "email": email,
            "password_hash": PasswordManager.hash_password(data.password),
        }

        try:
            user = await self.repository.create_item(user_data)
        except IntegrityError as e:
            # Параллельная регистрация с тем же email
            self.logger.info("Нарушение уникальности email при регистрации: %s", e)
            raise ValidationError.for_field("email", EMAIL_TAKEN_MESSAGE) from e
        except SQLAlchemyError as e:
            raise UserCreationError() from e

        self.logger.info("Пользователь зарегистрирован", extra={"user_id": str(user.id)})
        return MessageResponseSchema(message="Created successfully")

    # ==================== ВЫХОД И ОБНОВЛЕНИЕ ====================

    async def logout(self, payload: dict) -> MessageResponseSchema:
        """
        Отзывает текущий токен.

        Args:
            payload: Payload текущего (уже проверенного) токена.

        Raises:
            TokenInvalidError: Токен уже отозван.
        """
        await self.token_service.revoke(payload)
        return MessageResponseSchema(message="Successfully logged out")

    async def refresh(self, payload: dict, user: UserModel) -> TokenResponseSchema:
        """
        Выпускает новый токен и отзывает текущий.

        Args:
            payload: Payload текущего токена.
            user: Владелец токена.
        """
        access_token = await self.token_service.refresh(payload, user)
        self.logger.info("Токен обновлён", extra={"user_id": str(user.id)})
        return respond_with_token(access_token)
