"""
Схемы ответов для health check endpoints.
"""

from pydantic import Field

from app.schemas.base import BaseResponseSchema

from .base import HealthCheckDataSchema


class HealthCheckResponseSchema(BaseResponseSchema):
    """
    Ответ health check.

    Attributes:
        data (HealthCheckDataSchema): Статусы проверяемых сервисов
    """

    data: HealthCheckDataSchema = Field(..., description="Статусы проверяемых сервисов")
