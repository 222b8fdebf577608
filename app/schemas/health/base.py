"""
Базовые схемы для health check.
"""

from pydantic import Field

from app.schemas.base import CommonBaseSchema


class HealthCheckDataSchema(CommonBaseSchema):
    """
    Статусы сервисов.

    Attributes:
        app (str): Статус приложения
        db (str): Статус базы данных
        redis (str): Статус Redis
    """

    app: str = Field(default="ok", description="Статус приложения", examples=["ok"])
    db: str = Field(default="ok", description="Статус базы данных", examples=["ok", "fail", "unknown"])
    redis: str = Field(default="ok", description="Статус Redis", examples=["ok", "fail", "unknown"])
