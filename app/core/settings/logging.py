"""
Настройки логирования приложения.

Экспортируемые объекты:
- LoggingSettings: параметры уровней, форматов и файлового вывода логов.
"""

import os
from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """
    Конфигурация логирования.

    Атрибуты:
        LOG_LEVEL (str): Уровень логирования (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        LOG_FORMAT (str): Формат консольного вывода (pretty, json).
        LOG_FILE (str): Путь к файлу логов. Пустая строка отключает файловый вывод.
        MAX_BYTES (int): Размер файла, после которого выполняется ротация.
        BACKUP_COUNT (int): Количество резервных копий логов.
    """

    LOG_LEVEL: str = "DEBUG"
    LOG_FORMAT: str = "pretty"  # pretty, json
    LOG_FILE: str = "./logs/app.log"
    MAX_BYTES: int = 10485760  # 10MB
    BACKUP_COUNT: int = 5
    ENCODING: str = "utf-8"
    FILE_MODE: str = "a"

    PRETTY_FORMAT: str = (
        "\033[1;36m%(asctime)s\033[0m - \033[1;32m%(name)s\033[0m - \033[1;33m%(levelname)s\033[0m - %(message)s"
    )

    JSON_FORMAT: dict = {
        "timestamp": "%(asctime)s",
        "level": "%(levelname)s",
        "logger": "%(name)s",
        "func": "%(funcName)s",
        "message": "%(message)s",
    }

    # Сторонние логгеры, которые приглушаются до WARNING
    QUIET_LOGGERS: list[str] = [
        "python_multipart",
        "sqlalchemy.engine",
        "aiosqlite",
        "passlib",
        "httpx",
        "httpcore",
        "asyncio",
    ]

    @property
    def is_json_format(self) -> bool:
        """Проверяет, используется ли JSON формат"""
        return self.LOG_FORMAT.lower() == "json"

    @property
    def log_dir(self) -> str:
        """Возвращает директорию для логов"""
        return os.path.dirname(self.LOG_FILE)

    @property
    def file_handler_config(self) -> dict[str, Any]:
        """Параметры RotatingFileHandler"""
        return {
            "filename": self.LOG_FILE,
            "maxBytes": self.MAX_BYTES,
            "backupCount": self.BACKUP_COUNT,
            "encoding": self.ENCODING,
            "mode": self.FILE_MODE,
        }

    model_config = SettingsConfigDict(extra="ignore")
