"""
Базовый класс исключений API.

Включает в себя:
- Логирование ошибки с контекстом в момент создания исключения.
- Тип ошибки (error_type) для идентификации на клиенте.
- Дополнительные данные (extra), которые попадают в тело ответа.
"""

import logging
import uuid
from datetime import datetime
from typing import Any

import pytz
from fastapi import HTTPException

logger = logging.getLogger(__name__)
moscow_tz = pytz.timezone("Europe/Moscow")


class BaseAPIException(HTTPException):
    """
    Базовый класс для обработки исключений app.

    Attributes:
        status_code: Код статуса HTTP.
        detail: Сообщение об ошибке (попадает в поле message ответа).
        error_type: Тип ошибки.
        extra: Дополнительные данные для контекста и тела ответа.
        headers: Дополнительные HTTP-заголовки ответа.
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_type: str,
        extra: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.error_type = error_type
        self.extra = extra or {}
        self.request_id = str(uuid.uuid4())

        context = {
            "timestamp": datetime.now(moscow_tz).isoformat(),
            "request_id": self.request_id,
            "status_code": status_code,
            "error_type": error_type,
        }

        # 4xx - ожидаемые ошибки клиента, 5xx - ошибки сервера
        log = logger.error if status_code >= 500 else logger.info
        log(detail, extra=context)
        super().__init__(status_code=status_code, detail=detail, headers=headers)
