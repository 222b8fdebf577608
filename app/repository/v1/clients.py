"""
Репозитории клиентов и справочников.

ClientRepository всегда загружает связи клиента (тип, телефоны, продавцы)
через selectinload: ленивая загрузка в AsyncSession недоступна.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.v1.clients import ClientModel, ClientTypeModel, SellerModel
from app.repository.base import BaseRepository


class ClientRepository(BaseRepository[ClientModel]):
    """
    Репозиторий клиентов.

    Наследует CRUD операции от BaseRepository.
    """

    default_options = [
        selectinload(ClientModel.sellers),
        selectinload(ClientModel.phones),
        selectinload(ClientModel.client_type),
    ]

    def __init__(self, session: AsyncSession):
        super().__init__(session, ClientModel)


class ClientTypeRepository(BaseRepository[ClientTypeModel]):
    """Репозиторий справочника типов клиентов."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, ClientTypeModel)


class SellerRepository(BaseRepository[SellerModel]):
    """Репозиторий справочника продавцов."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, SellerModel)
