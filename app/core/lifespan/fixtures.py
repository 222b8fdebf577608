"""
Загрузка справочников при старте приложения (LOAD_FIXTURES=true).

Файлы:
- data/fixtures/client_types.json: [{"name": ...}]
- data/fixtures/sellers.json: [{"name": ..., "email": ...}]

Существующие записи (по name для типов и email для продавцов) не
перезаписываются, поэтому загрузка безопасна при каждом запуске.
"""

import json
import logging
from pathlib import Path

from fastapi import FastAPI

from app.core.connections.database import DatabaseClient
from app.core.lifespan.base import register_startup_handler
from app.core.settings import settings
from app.core.settings.paths import PathSettings
from app.repository.base import BaseRepository
from app.repository.v1.clients import ClientTypeRepository, SellerRepository

logger = logging.getLogger("app.core.lifespan.fixtures")

CLIENT_TYPES_FILE = PathSettings.FIXTURES_DIR / "client_types.json"
SELLERS_FILE = PathSettings.FIXTURES_DIR / "sellers.json"


@register_startup_handler
async def load_fixtures_on_startup(_app: FastAPI) -> None:
    """
    Загрузка фикстур при старте приложения.

    Args:
        _app: Экземпляр FastAPI приложения (не используется).
    """
    if not settings.LOAD_FIXTURES:
        logger.debug("Загрузка фикстур отключена в настройках (LOAD_FIXTURES=false)")
        return

    logger.info("Начало загрузки фикстур при запуске приложения")

    session_factory = await DatabaseClient().connect()
    async with session_factory() as session:
        created_types = await load_fixture_file(ClientTypeRepository(session), CLIENT_TYPES_FILE, "name")
        created_sellers = await load_fixture_file(SellerRepository(session), SELLERS_FILE, "email")
        await session.commit()

    logger.info(
        "✅ Загрузка фикстур завершена: типов клиентов=%d, продавцов=%d",
        created_types,
        created_sellers,
    )


async def load_fixture_file(repository: BaseRepository, path: Path, unique_field: str) -> int:
    """
    Создаёт записи из JSON-файла, пропуская уже существующие.

    Args:
        repository: Репозиторий модели справочника.
        path: Путь к JSON-файлу со списком объектов.
        unique_field: Поле, по которому запись считается существующей.

    Returns:
        int: Количество созданных записей.
    """
    if not path.exists():
        logger.warning("Файл фикстур не найден: %s", path)
        return 0

    with open(path, encoding="utf-8") as f:
        items = json.load(f)

    created = 0
    for item in items:
        if await repository.exists_by_field(unique_field, item[unique_field]):
            continue
        await repository.create_item(item, commit=False)
        created += 1

    logger.debug("%s: создано %d из %d", path.name, created, len(items))
    return created
