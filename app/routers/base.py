"""Базовый класс для всех роутеров."""

from collections.abc import Sequence

from fastapi import APIRouter, Depends


class BaseRouter:
    """
    Базовый класс для всех роутеров.

    Предоставляет общий функционал для создания маршрутов.

    Attributes:
        router (APIRouter): Базовый FastAPI роутер
        _dependencies (List[Depends]): Список глобальных зависимостей для роутера
    """

    def __init__(
        self,
        prefix: str = "",
        tags: Sequence[str] | None = None,
        dependencies: list[Depends] | None = None,
    ):
        """
        Инициализирует базовый роутер.

        Args:
            prefix: Префикс URL для всех маршрутов
            tags: Список тегов для документации Swagger
            dependencies: Список глобальных зависимостей
        """
        self._dependencies = dependencies or []
        self.router = APIRouter(
            prefix=f"/{prefix}" if prefix else "",
            tags=tags or [],
            dependencies=self._dependencies,
        )
        self.configure()

    def configure(self):
        """Переопределяется в дочерних классах для настройки роутов"""

    def get_router(self) -> APIRouter:
        """
        Возвращает настроенный FastAPI роутер.

        Returns:
            APIRouter: Настроенный FastAPI роутер
        """
        return self.router


class ProtectedRouter(BaseRouter):
    """
    Защищенный роутер с автоматической аутентификацией.

    Токен проверяется зависимостью get_current_user до выполнения обработчика:
    запрос без действующего токена получает 401 и не доходит до сервисов.
    Пользователь доступен в эндпоинте через параметр типа CurrentUserDep
    (зависимость кешируется в рамках запроса и не выполняется повторно).
    """

    def __init__(
        self,
        prefix: str = "",
        tags: Sequence[str] | None = None,
        additional_dependencies: list[Depends] | None = None,
    ):
        """
        Инициализирует защищенный роутер.

        Args:
            prefix: Префикс URL для всех маршрутов
            tags: Список тегов для документации Swagger
            additional_dependencies: Дополнительные зависимости (кроме аутентификации)
        """
        from app.core.security.auth import get_current_user

        dependencies = [Depends(get_current_user)]
        if additional_dependencies:
            dependencies.extend(additional_dependencies)

        super().__init__(prefix=prefix, tags=tags, dependencies=dependencies)
