"""
Модуль обработчиков исключений для FastAPI.

Обработчики приводят все ошибки к одному плоскому формату ответа:

    {
        "message": "...",
        "error_type": "...",
        "status_code": 401,
        "timestamp": "...",
        "request_id": "...",
        ...extra
    }

Ошибки валидации дополнительно содержат словарь errors: {поле: [сообщения]}.
"""

import logging
import uuid
from datetime import datetime
from typing import Any

import pytz
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from starlette.status import (
    HTTP_401_UNAUTHORIZED,
    HTTP_422_UNPROCESSABLE_CONTENT,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from .base import BaseAPIException
from .common import VALIDATION_MESSAGE

logger = logging.getLogger(__name__)

moscow_tz = pytz.timezone("Europe/Moscow")

# Префиксы loc, которые не несут информации о поле
LOCATION_PREFIXES = ("body", "query", "path", "header", "cookie")


def create_error_response(
    status_code: int,
    detail: str,
    error_type: str,
    request_id: str | None = None,
    extra: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """
    Создает JSON-ответ с информацией об ошибке.

    Args:
        status_code: HTTP код состояния
        detail: Сообщение об ошибке (поле message)
        error_type: Тип ошибки для идентификации на клиенте
        request_id: Идентификатор запроса (генерируется, если не указан)
        extra: Дополнительные поля, добавляются в корень ответа
        headers: Дополнительные заголовки ответа

    Returns:
        JSONResponse: HTTP-ответ с ошибкой
    """
    headers = dict(headers or {})

    if status_code == HTTP_401_UNAUTHORIZED:
        headers.setdefault("WWW-Authenticate", "Bearer")

    content = {
        "message": detail,
        "error_type": error_type,
        "status_code": status_code,
        "timestamp": datetime.now(moscow_tz).isoformat(),
        "request_id": request_id or str(uuid.uuid4()),
    }
    if extra:
        content.update(extra)

    return JSONResponse(status_code=status_code, content=content, headers=headers)


def format_validation_errors(errors: list[dict[str, Any]]) -> dict[str, list[str]]:
    """
    Преобразует список ошибок pydantic в словарь {поле: [сообщения]}.

    Вложенные поля записываются через точку: phones.0.number.
    """
    result: dict[str, list[str]] = {}
    for error in errors:
        loc = list(error.get("loc", ()))
        if len(loc) > 1 and loc[0] in LOCATION_PREFIXES:
            loc = loc[1:]
        field = ".".join(str(part) for part in loc) or "body"
        result.setdefault(field, []).append(error["msg"])
    return result


async def api_exception_handler(request: Request, exc: BaseAPIException):
    """
    Обработчик исключений, наследующихся от BaseAPIException.

    Args:
        request (Request): Объект HTTP-запроса
        exc (BaseAPIException): Исключение приложения

    Returns:
        JSONResponse: Ответ с кодом состояния и данными из исключения
    """
    logger.warning(
        "API исключение: %s - %s",
        exc.error_type,
        exc.detail,
        extra={
            "status_code": exc.status_code,
            "request_method": request.method,
            "request_url": str(request.url),
        },
    )

    return create_error_response(
        status_code=exc.status_code,
        detail=exc.detail,
        error_type=exc.error_type,
        request_id=exc.request_id,
        extra=exc.extra,
        headers=exc.headers,
    )


async def http_exception_handler(request: Request, exc: HTTPException):
    """
    Обработчик стандартных HTTP-исключений Starlette (404 маршрута, 405 и т.д.).
    """
    logger.warning(
        "HTTP исключение %d: %s",
        exc.status_code,
        str(exc.detail),
        extra={
            "request_method": request.method,
            "request_url": str(request.url),
        },
    )

    return create_error_response(
        status_code=exc.status_code,
        detail=str(exc.detail),
        error_type="http_error",
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Обработчик ошибок валидации данных запроса.

    Ошибки pydantic приводятся к словарю {поле: [сообщения]}, как и у ValidationError.

    Returns:
        JSONResponse: Ответ с кодом 422 и полем errors
    """
    errors = format_validation_errors(exc.errors())

    logger.warning(
        "Ошибка валидации данных: %d полей",
        len(errors),
        extra={
            "request_method": request.method,
            "request_url": str(request.url),
            "validation_errors": errors,
        },
    )

    return create_error_response(
        status_code=HTTP_422_UNPROCESSABLE_CONTENT,
        detail=VALIDATION_MESSAGE,
        error_type="validation_error",
        extra={"errors": errors},
    )


async def internal_exception_handler(request: Request, exc: Exception):
    """
    Обработчик непредвиденных ошибок.

    Полный traceback пишется в лог, клиент получает только общее сообщение.
    """
    logger.error(
        "Необработанное исключение: %s",
        str(exc),
        exc_info=True,
        extra={
            "exception_type": type(exc).__name__,
            "request_method": request.method,
            "request_url": str(request.url),
        },
    )

    return create_error_response(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Server Error",
        error_type="internal_error",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Регистрация обработчиков исключений в FastAPI-приложении.

    Args:
        app (FastAPI): Экземпляр приложения.
    """
    app.add_exception_handler(BaseAPIException, api_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, internal_exception_handler)
