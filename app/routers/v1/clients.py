"""
Роутер для работы с клиентами.

Предоставляет HTTP API для CRUD операций с клиентами. Все эндпоинты
требуют токен. Клиент по {client_id} ищется в начале каждого обработчика,
отсутствующий клиент даёт 404.
"""

from uuid import UUID

from fastapi import Response, status

from app.core.dependencies import ClientServiceDep, PaginationDep
from app.routers.base import ProtectedRouter
from app.schemas import (
    ClientCollectionResponseSchema,
    ClientCreateSchema,
    ClientResponseSchema,
    ClientSchema,
    ClientUpdateSchema,
    ErrorResponseSchema,
    ValidationErrorResponseSchema,
)

NOT_FOUND_RESPONSE = {404: {"model": ErrorResponseSchema, "description": "Client not found."}}
VALIDATION_RESPONSE = {422: {"model": ValidationErrorResponseSchema, "description": "Ошибка валидации"}}


class ClientRouter(ProtectedRouter):
    """
    Роутер для API клиентов.

    Endpoints:
        GET /clients - Страница клиентов (кешируется)
        POST /clients - Создать клиента
        GET /clients/{id} - Получить клиента
        PUT/PATCH /clients/{id} - Обновить клиента
        DELETE /clients/{id} - Удалить клиента
    """

    def __init__(self):
        super().__init__(prefix="clients", tags=["Clients"])

    def configure(self):
        """Настройка endpoint'ов для клиентов."""

        @self.router.get(
            path="",
            response_model=ClientCollectionResponseSchema,
            description="""\
## 📋 Список клиентов

Клиенты с типом, телефонами и продавцами.

Результат кешируется целиком и сбрасывается при любом изменении клиента.
Пока кеш не сброшен, возвращается одна и та же страница независимо от **page**.

### Query:
- **page** - номер страницы (начиная с 1)
- **page_size** - размер страницы (по умолчанию 15)
- **sort_by** (created_at, updated_at, name) / **sort_desc** - сортировка
""",
        )
        async def index(
            service: ClientServiceDep,
            pagination: PaginationDep,
        ) -> ClientCollectionResponseSchema:
            page = await service.list_clients(pagination)
            return ClientCollectionResponseSchema(data=page)

        @self.router.post(
            path="",
            response_model=ClientResponseSchema,
            status_code=status.HTTP_201_CREATED,
            description="""\
## ➕ Создать клиента

Клиент, телефоны и связи с продавцами сохраняются в одной транзакции.
""",
            responses=VALIDATION_RESPONSE,
        )
        async def store(
            data: ClientCreateSchema,
            service: ClientServiceDep,
        ) -> ClientResponseSchema:
            client = await service.create_client(data)
            return ClientResponseSchema(message="Client created.", data=ClientSchema.model_validate(client))

        @self.router.get(
            path="/{client_id}",
            response_model=ClientResponseSchema,
            description="## 🔎 Получить клиента со связями",
            responses=NOT_FOUND_RESPONSE,
        )
        async def show(
            client_id: UUID,
            service: ClientServiceDep,
        ) -> ClientResponseSchema:
            client = await service.get_client_or_404(client_id)
            return ClientResponseSchema(data=ClientSchema.model_validate(client))

        @self.router.put(
            path="/{client_id}",
            response_model=ClientResponseSchema,
            description="""\
## ✏️ Обновить клиента

Обновляются только переданные поля. Переданные **phones** и **seller_ids**
заменяют текущие списки целиком. PUT и PATCH работают одинаково.
""",
            responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
        )
        @self.router.patch(
            path="/{client_id}",
            response_model=ClientResponseSchema,
            description="## ✏️ Частично обновить клиента",
            responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
        )
        async def update(
            client_id: UUID,
            data: ClientUpdateSchema,
            service: ClientServiceDep,
        ) -> ClientResponseSchema:
            client = await service.get_client_or_404(client_id)
            client = await service.update_client(client, data)
            return ClientResponseSchema(message="Client updated.", data=ClientSchema.model_validate(client))

        @self.router.delete(
            path="/{client_id}",
            status_code=status.HTTP_204_NO_CONTENT,
            response_class=Response,
            description="## 🗑️ Удалить клиента",
            responses=NOT_FOUND_RESPONSE,
        )
        async def destroy(
            client_id: UUID,
            service: ClientServiceDep,
        ) -> Response:
            client = await service.get_client_or_404(client_id)
            await service.delete_client(client)
            return Response(status_code=status.HTTP_204_NO_CONTENT)
