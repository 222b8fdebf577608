"""
Модуль настройки логирования.

Содержит функцию setup_logging для централизованной настройки логирования приложения.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from app.core.settings import settings

from .formatters import CustomJsonFormatter, PrettyFormatter


def setup_logging():
    """
    Настраивает систему логирования в приложении.

    - Очищает старые обработчики root-логгера
    - Добавляет консольный обработчик (pretty или json)
    - Добавляет файловый обработчик с ротацией и JSON-форматтером, если задан LOG_FILE
    - Приглушает шумные сторонние логгеры
    """
    root = logging.getLogger()

    for handler in list(root.handlers):
        root.removeHandler(handler)

    console_formatter = CustomJsonFormatter() if settings.logging.is_json_format else PrettyFormatter()
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(console_formatter)
    root.addHandler(console_handler)

    if settings.logging.LOG_FILE:
        try:
            Path(settings.logging.log_dir or ".").mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(**settings.logging.file_handler_config)
            file_handler.setFormatter(CustomJsonFormatter())
            root.addHandler(file_handler)
        except OSError as e:
            # Консольный вывод остаётся, приложение стартует без файла логов
            root.warning("Не удалось открыть файл логов %s: %s", settings.logging.LOG_FILE, e)

    root.setLevel(settings.logging.LOG_LEVEL)

    for logger_name in settings.logging.QUIET_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
