"""
Middleware для измерения времени выполнения HTTP запросов.

- Добавляет заголовок X-Process-Time (мс) в ответ
- Логирует запросы дольше SLOW_THRESHOLD_MS как WARNING, остальные как DEBUG
"""

import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger(__name__)

PROCESS_TIME_HEADER = "X-Process-Time"


class TimingMiddleware(BaseHTTPMiddleware):
    """
    Middleware для измерения и логирования времени выполнения запросов.

    Attributes:
        slow_threshold_ms: Порог медленного запроса в миллисекундах.

    Example:
        >>> app.add_middleware(TimingMiddleware, slow_threshold_ms=500.0)
        >>> # DEBUG: GET /clients 200 12.40ms
        >>> # WARNING: GET /clients 200 650.45ms (slow, threshold=500ms)
    """

    def __init__(self, app, slow_threshold_ms: float = 500.0):
        super().__init__(app)
        self.slow_threshold_ms = slow_threshold_ms

    async def dispatch(self, request: Request, call_next) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000

        response.headers[PROCESS_TIME_HEADER] = f"{duration_ms:.2f}"

        extra = {
            "request_method": request.method,
            "request_path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": round(duration_ms, 2),
        }
        if duration_ms > self.slow_threshold_ms:
            logger.warning(
                "%s %s %d %.2fms (slow, threshold=%.0fms)",
                request.method,
                request.url.path,
                response.status_code,
                duration_ms,
                self.slow_threshold_ms,
                extra=extra,
            )
        else:
            logger.debug(
                "%s %s %d %.2fms",
                request.method,
                request.url.path,
                response.status_code,
                duration_ms,
                extra=extra,
            )

        return response
