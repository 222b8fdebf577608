"""
Модуль управления жизненным циклом FastAPI приложения.

Обработчики запуска и остановки регистрируются декораторами в модулях
этого пакета и выполняются в порядке регистрации:

- database: подключение к PostgreSQL и создание таблиц (CREATE_TABLES)
- cache: подключение к Redis
- fixtures: справочники типов клиентов и продавцов (LOAD_FIXTURES)

Ошибка в одном обработчике логируется и не останавливает остальные.

Usage:
    ```python
    @register_startup_handler
    async def my_startup_handler(app: FastAPI):
        ...

    app = FastAPI(lifespan=lifespan)
    ```
"""

import logging
from collections.abc import Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI

logger = logging.getLogger("app.core.lifespan.base")

# Типы
StartupHandler = Callable[[FastAPI], Awaitable[None]]
ShutdownHandler = Callable[[FastAPI], Awaitable[None]]

# Глобальные списки
startup_handlers: list[StartupHandler] = []
shutdown_handlers: list[ShutdownHandler] = []


def register_startup_handler(handler: StartupHandler):
    """
    Декоратор для регистрации обработчика события запуска приложения.

    Args:
        handler: Асинхронная функция-обработчик, принимающая экземпляр FastAPI

    Returns:
        StartupHandler: Исходная функция-обработчик
    """
    startup_handlers.append(handler)
    return handler


def register_shutdown_handler(handler: ShutdownHandler):
    """
    Декоратор для регистрации обработчика события остановки приложения.

    Args:
        handler: Асинхронная функция-обработчик, принимающая экземпляр FastAPI

    Returns:
        ShutdownHandler: Исходная функция-обработчик
    """
    shutdown_handlers.append(handler)
    return handler


async def run_startup_handlers(app: FastAPI):
    """
    Выполняет все зарегистрированные обработчики запуска приложения.

    Args:
        app: Экземпляр FastAPI приложения
    """
    logger.info("Зарегистрированных обработчиков запуска: %d", len(startup_handlers))

    for handler in startup_handlers:
        try:
            logger.info("Запуск обработчика: %s", handler.__name__)
            await handler(app)
            logger.debug("Обработчик %s выполнен успешно", handler.__name__)
        except Exception as e:  # noqa: BLE001
            logger.error("Ошибка в обработчике %s: %s", handler.__name__, str(e), exc_info=True)


async def run_shutdown_handlers(app: FastAPI):
    """
    Выполняет все зарегистрированные обработчики остановки приложения.

    Args:
        app: Экземпляр FastAPI приложения
    """
    for handler in shutdown_handlers:
        try:
            logger.info("Запуск обработчика остановки: %s", handler.__name__)
            await handler(app)
            logger.debug("Обработчик остановки %s выполнен успешно", handler.__name__)
        except Exception as e:  # noqa: BLE001
            logger.error("Ошибка в обработчике остановки %s: %s", handler.__name__, str(e))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Контекстный менеджер жизненного цикла FastAPI приложения.

    Args:
        app: Экземпляр FastAPI приложения

    Yields:
        None: Контроль передается приложению для обработки запросов
    """
    logger.info("Начало инициализации приложения")
    await run_startup_handlers(app)
    logger.info("Инициализация приложения завершена")

    yield

    logger.info("Начало завершения работы приложения")
    await run_shutdown_handlers(app)
    logger.info("Завершение работы приложения выполнено")


# Импортируем handlers после определения lifespan для регистрации.
# Порядок импорта определяет порядок выполнения.
from app.core.lifespan.database import (  # noqa: E402, F401
    close_database_connection,
    initialize_database,
)
from app.core.lifespan.cache import (  # noqa: E402, F401
    close_cache_connection,
    initialize_cache,
)
from app.core.lifespan.fixtures import load_fixtures_on_startup  # noqa: E402, F401
