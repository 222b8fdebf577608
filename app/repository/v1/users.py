"""
Репозиторий для работы с пользователями.

Используется при регистрации и входе, а также при проверке токена.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.v1.users import UserModel
from app.repository.base import BaseRepository


class UserRepository(BaseRepository[UserModel]):
    """
    Репозиторий для работы с пользователями.

    Наследует CRUD операции от BaseRepository.
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session, UserModel)

    async def get_user_by_email(self, email: str) -> UserModel | None:
        """
        Поиск пользователя по email без учёта регистра.

        Args:
            email: Email пользователя.

        Returns:
            UserModel или None, если не найден.
        """
        return await self.get_item_by_field("email", email.lower())

    async def email_exists(self, email: str) -> bool:
        """Проверяет, занят ли email."""
        return await self.exists_by_field("email", email.lower())
