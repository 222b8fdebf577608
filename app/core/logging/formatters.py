"""
Форматтеры логов.

PrettyFormatter: цветной вывод с эмодзи для консоли разработчика
CustomJsonFormatter: JSON-строки для сборщиков логов
"""

import json
import logging
from datetime import datetime

from app.core.settings import settings

# Атрибуты LogRecord, которые не считаются пользовательским extra
STANDARD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "message",
        "asctime",
        "taskName",
    }
)


def get_extra(record: logging.LogRecord) -> dict:
    """Возвращает поля, переданные в лог через extra=..."""
    return {k: v for k, v in vars(record).items() if k not in STANDARD_ATTRS}


class PrettyFormatter(logging.Formatter):
    """
    Цветное оформление по уровню логирования и эмодзи.

    Attributes:
        COLORS: ANSI-коды цветов для уровней
        EMOJIS: Эмодзи для уровней
    """

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[41m",  # Red background
    }
    EMOJIS = {
        "DEBUG": "🔍",
        "INFO": "✨",
        "WARNING": "⚠️",
        "ERROR": "❌",
        "CRITICAL": "💥",
    }

    RESET = "\033[0m"

    def format(self, record):
        extra = get_extra(record)
        emoji = self.EMOJIS.get(record.levelname, "")

        base_msg = settings.logging.PRETTY_FORMAT % {
            "asctime": self.formatTime(record),
            "name": record.name,
            "levelname": f"{self.COLORS.get(record.levelname, '')}{record.levelname} {self.RESET}",
            "message": f"{emoji} {record.getMessage()}",
        }

        if extra:
            base_msg = f"{base_msg} \033[33m[extra: {extra}]{self.RESET}"

        if record.exc_info:
            base_msg = f"{base_msg}\n{self.formatException(record.exc_info)}"

        return base_msg


class CustomJsonFormatter(logging.Formatter):
    """
    Форматтер логов в JSON по шаблону из настроек.

    Поля из extra добавляются в объект верхнего уровня.
    """

    def format(self, record):
        values = {
            "levelname": record.levelname,
            "name": record.name,
            "funcName": record.funcName,
            "message": record.getMessage(),
        }

        log_data = {}
        for key, template in settings.logging.JSON_FORMAT.items():
            if key == "timestamp":
                dt = datetime.fromtimestamp(record.created)
                log_data[key] = dt.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
            else:
                log_data[key] = template % values

        log_data.update(get_extra(record))

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if record.stack_info:
            log_data["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)
