"""
Сервис клиентов.

Список клиентов кешируется целиком под ключом "clients" без TTL
(remember forever). Любое успешное изменение клиента удаляет этот ключ,
и только после commit: неудачная операция кеш не трогает.
"""

from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ClientNotFoundError, ClientPersistenceError, ValidationError
from app.models.v1.clients import ClientModel, PhoneModel, SellerModel
from app.repository.cache import CacheBackend
from app.repository.v1.clients import ClientRepository, ClientTypeRepository, SellerRepository
from app.schemas import (
    ClientCreateSchema,
    ClientSchema,
    ClientUpdateSchema,
    PaginatedDataSchema,
    PaginationMetaSchema,
    PaginationParamsSchema,
)
from app.services.base import BaseService

CLIENTS_CACHE_KEY = "clients"


class ClientService(BaseService):
    """
    Сервис для работы с клиентами.

    Attributes:
        repository: Репозиторий клиентов.
        client_type_repository: Справочник типов клиентов.
        seller_repository: Справочник продавцов.
        cache: Кеш списка клиентов.
    """

    def __init__(self, session: AsyncSession, cache: CacheBackend):
        super().__init__(session)
        self.cache = cache
        self.repository = ClientRepository(session)
        self.client_type_repository = ClientTypeRepository(session)
        self.seller_repository = SellerRepository(session)

    async def list_clients(self, pagination: PaginationParamsSchema) -> dict:
        """
        Страница клиентов со связями.

        Параметры пагинации учитываются только при промахе кеша:
        закешированная страница отдаётся на любой запрос до инвалидации.

        Returns:
            dict: JSON-совместимые данные PaginatedDataSchema[ClientSchema].
        """

        async def build_page() -> dict:
            self.logger.debug("Список клиентов не найден в кеше, загрузка из БД")
            clients, total = await self.repository.get_paginated_items(pagination)
            page = PaginatedDataSchema[ClientSchema](
                items=[ClientSchema.model_validate(client) for client in clients],
                pagination=PaginationMetaSchema.build(total, pagination),
            )
            return page.model_dump(mode="json")

        return await self.cache.remember_forever(CLIENTS_CACHE_KEY, build_page)

    async def get_client_or_404(self, client_id: UUID) -> ClientModel:
        """
        Клиент со связями по ID.

        Raises:
            ClientNotFoundError: Если клиента нет.
        """
        client = await self.repository.get_item_by_id(client_id)
        if client is None:
            raise ClientNotFoundError(client_id)
        return client

    async def create_client(self, data: ClientCreateSchema) -> ClientModel:
        """
        Создаёт клиента вместе с телефонами и продавцами в одной транзакции.

        Raises:
            ValidationError: Несуществующий тип клиента или продавец.
            ClientPersistenceError: Ошибка записи, ничего не сохранено.
        """
        await self._ensure_client_type_exists(data.client_type_id)
        sellers = await self._get_sellers(data.seller_ids)

        client_data = data.model_dump(exclude={"phones", "seller_ids"})
        client_data["phones"] = self._build_phones(data.phones)
        client_data["sellers"] = sellers

        try:
            client = await self.repository.create_item(client_data, commit=False)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            self.logger.error("Ошибка создания клиента: %s", e)
            raise ClientPersistenceError("create") from e

        await self.cache.forget(CLIENTS_CACHE_KEY)
        self.logger.info("Клиент создан", extra={"client_id": str(client.id)})

        return await self.repository.get_item_by_id(client.id, refresh=True)

    async def update_client(self, client: ClientModel, data: ClientUpdateSchema) -> ClientModel:
        """
        Обновляет переданные поля клиента.

        Переданные phones и seller_ids заменяют текущие списки.

        Raises:
            ValidationError: Несуществующий тип клиента или продавец.
            ClientPersistenceError: Ошибка записи, изменения откатываются.
        """
        fields = data.model_dump(exclude_unset=True)

        if "client_type_id" in fields:
            await self._ensure_client_type_exists(fields["client_type_id"])
        if "phones" in fields:
            fields["phones"] = self._build_phones(fields["phones"])
        if "seller_ids" in fields:
            fields["sellers"] = await self._get_sellers(fields.pop("seller_ids"))

        client_id = client.id
        try:
            await self.repository.update_item(client, fields, commit=False)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            self.logger.error("Ошибка обновления клиента %s: %s", client_id, e)
            raise ClientPersistenceError("update") from e

        await self.cache.forget(CLIENTS_CACHE_KEY)
        self.logger.info("Клиент обновлён", extra={"client_id": str(client_id)})

        return await self.repository.get_item_by_id(client_id, refresh=True)

    async def delete_client(self, client: ClientModel) -> None:
        """
        Удаляет клиента (телефоны и связи с продавцами удаляются каскадно).

        Raises:
            ClientPersistenceError: Ошибка удаления.
        """
        client_id = client.id
        try:
            await self.repository.delete_item(client)
        except SQLAlchemyError as e:
            raise ClientPersistenceError("delete") from e

        await self.cache.forget(CLIENTS_CACHE_KEY)
        self.logger.info("Клиент удалён", extra={"client_id": str(client_id)})

    async def _ensure_client_type_exists(self, client_type_id: UUID | None) -> None:
        if client_type_id is None:
            return
        if await self.client_type_repository.get_item_by_id(client_type_id) is None:
            raise ValidationError.for_field("client_type_id", "The selected client type is invalid.")

    async def _get_sellers(self, seller_ids: list[UUID]) -> list[SellerModel]:
        unique_ids = list(dict.fromkeys(seller_ids))
        sellers = await self.seller_repository.get_items_by_ids(unique_ids)

        found = {seller.id for seller in sellers}
        missing = [str(seller_id) for seller_id in unique_ids if seller_id not in found]
        if missing:
            raise ValidationError.for_field("seller_ids", f"The selected sellers are invalid: {', '.join(missing)}.")
        return sellers

    @staticmethod
    def _build_phones(numbers: list[str]) -> list[PhoneModel]:
        return [PhoneModel(number=number, position=position) for position, number in enumerate(numbers)]
