"""
Базовый репозиторий.
"""

# pylint: disable=not-callable  # func.count() is callable in SQLAlchemy
import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import asc, desc, exists, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import BaseModel

if TYPE_CHECKING:
    from app.schemas.pagination import PaginationParamsSchema

M = TypeVar("M", bound=BaseModel)


class SessionMixin:
    """
    Миксин для предоставления экземпляра сессии базы данных.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Args:
            session (AsyncSession): Асинхронная сессия базы данных.
        """
        self.session = session


class BaseRepository(SessionMixin, Generic[M]):
    """
    Базовый класс для репозиториев.

    **CRUD операции:**
    - `create_item()` - создание записи
    - `get_item_by_id()` - получение по ID
    - `get_item_by_field()` - получение по полю
    - `get_items_by_ids()` - получение списка по ID
    - `update_item()` - обновление полей записи
    - `delete_item()` - удаление записи

    **Поиск:**
    - `exists_by_field()` - проверка существования
    - `get_paginated_items()` - пагинация с сортировкой

    Методы принимают флаг commit: при commit=False выполняется только flush,
    и вызывающий код сам фиксирует транзакцию (несколько изменений атомарно).

    Attributes:
        session (AsyncSession): Асинхронная сессия базы данных.
        model (Type[M]): Тип SQLAlchemy модели.

    Class Attributes:
        default_options (List[Any]): Опции загрузки связей для всех SELECT-запросов.

    Example:
        >>> class ClientRepository(BaseRepository[ClientModel]):
        ...     default_options = [selectinload(ClientModel.sellers)]
    """

    default_options: list[Any] = []

    def __init__(self, session: AsyncSession, model: type[M]):
        super().__init__(session)
        self.model = model
        self.logger = logging.getLogger(self.__class__.__name__)

    async def create_item(self, data: dict[str, Any], commit: bool = True) -> M:
        """
        Создает новую запись.

        Args:
            data (Dict[str, Any]): Значения колонок.
            commit (bool): commit после создания или только flush.

        Returns:
            M: Созданная модель (с id после flush).

        Raises:
            SQLAlchemyError: Если произошла ошибка при создании (транзакция откатывается).
        """
        try:
            instance = self.model(**data)
            self.session.add(instance)
            await self.session.flush()

            if commit:
                await self.session.commit()

            self.logger.info(
                "Создана запись %s",
                self.model.__name__,
                extra={"model": self.model.__name__, "id": str(instance.id)},
            )
            return instance
        except SQLAlchemyError as e:
            await self.session.rollback()
            self.logger.error("Ошибка при создании %s: %s", self.model.__name__, e)
            raise

    async def get_item_by_id(
        self,
        item_id: UUID,
        options: list[Any] | None = None,
        refresh: bool = False,
    ) -> M | None:
        """
        Получает запись по ID с default_options.

        Args:
            item_id (UUID): ID записи.
            options (Optional[List[Any]]): Дополнительные опции загрузки связей.
            refresh (bool): Перечитать запись из БД, даже если она уже в identity map.

        Returns:
            Optional[M]: Модель или None, если не найдена.
        """
        statement = self._apply_default_options(select(self.model).where(self.model.id == item_id), options)
        if refresh:
            statement = statement.execution_options(populate_existing=True)

        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_item_by_field(self, field_name: str, field_value: Any) -> M | None:
        """
        Получает запись по значению поля.

        Raises:
            ValueError: Если поля нет в модели.
        """
        if not hasattr(self.model, field_name):
            raise ValueError(f"Поле '{field_name}' не существует в модели {self.model.__name__}")

        field = getattr(self.model, field_name)
        statement = self._apply_default_options(select(self.model).where(field == field_value))
        result = await self.session.execute(statement)
        return result.scalars().first()

    async def get_items_by_ids(self, ids: list[UUID]) -> list[M]:
        """Получает записи по списку ID (порядок не гарантируется)."""
        if not ids:
            return []

        statement = select(self.model).where(self.model.id.in_(ids))
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def exists_by_field(self, field_name: str, field_value: Any) -> bool:
        """
        Проверяет существование записи по полю.

        Example:
            exists = await repo.exists_by_field("email", email)
        """
        if not hasattr(self.model, field_name):
            return False

        field = getattr(self.model, field_name)
        result = await self.session.execute(select(exists().where(field == field_value)))
        return bool(result.scalar())

    async def update_item(self, instance: M, data: dict[str, Any], commit: bool = True) -> M:
        """
        Обновляет поля загруженной записи.

        Args:
            instance (M): Модель, полученная из этой же сессии.
            data (Dict[str, Any]): Новые значения (id не обновляется).
            commit (bool): commit после обновления или только flush.

        Returns:
            M: Обновленная модель.
        """
        item_id = instance.id
        try:
            for key, value in data.items():
                if key != "id" and hasattr(instance, key):
                    setattr(instance, key, value)

            await self.session.flush()
            if commit:
                await self.session.commit()

            self.logger.info(
                "Обновлена запись %s",
                self.model.__name__,
                extra={"model": self.model.__name__, "id": str(item_id)},
            )
            return instance
        except SQLAlchemyError as e:
            await self.session.rollback()
            self.logger.error("Ошибка при обновлении %s с ID %s: %s", self.model.__name__, item_id, e)
            raise

    async def delete_item(self, instance: M) -> None:
        """
        Удаляет загруженную запись и фиксирует транзакцию.

        Raises:
            SQLAlchemyError: Если произошла ошибка при удалении.
        """
        item_id = instance.id
        try:
            await self.session.delete(instance)
            await self.session.commit()

            self.logger.info(
                "Удалена запись %s",
                self.model.__name__,
                extra={"model": self.model.__name__, "id": str(item_id)},
            )
        except SQLAlchemyError as e:
            await self.session.rollback()
            self.logger.error("Ошибка при удалении %s с ID %s: %s", self.model.__name__, item_id, e)
            raise

    async def get_paginated_items(
        self,
        pagination: "PaginationParamsSchema",
        statement: Any | None = None,
        options: list[Any] | None = None,
    ) -> tuple[list[M], int]:
        """
        Получает страницу записей и общее количество.

        Args:
            pagination (PaginationParamsSchema): Параметры пагинации и сортировки.
            statement (Optional[Select]): Базовый SQL-запрос. Если None, выбирает все записи.
            options (Optional[List[Any]]): Дополнительные опции загрузки связей.

        Returns:
            Tuple[List[M], int]: Список записей и общее количество.
        """
        if statement is None:
            statement = select(self.model)

        count_stmt = select(func.count()).select_from(statement.subquery())
        total = (await self.session.execute(count_stmt)).scalar() or 0

        statement = self._apply_default_options(statement, options)

        if pagination.sort_by in self.model.__table__.columns:
            sort_column = getattr(self.model, pagination.sort_by)
        else:
            self.logger.warning(
                "Колонка сортировки '%s' не найдена в таблице %s, сортировка по created_at",
                pagination.sort_by,
                self.model.__name__,
            )
            sort_column = self.model.created_at

        # id вторым ключом, чтобы порядок был стабильным при равных значениях
        order = desc if pagination.sort_desc else asc
        statement = statement.order_by(order(sort_column), order(self.model.id))

        offset = (pagination.page - 1) * pagination.page_size
        statement = statement.offset(offset).limit(pagination.page_size)

        result = await self.session.execute(statement)
        return list(result.scalars().all()), total

    def _apply_default_options(self, stmt, options: list[Any] | None = None):
        """
        Применить default_options и переданные options к statement.
        """
        for option in [*self.default_options, *(options or [])]:
            stmt = stmt.options(option)
        return stmt
