from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

from .base import BaseAPIException


class ServiceUnavailableException(BaseAPIException):
    """
    Внешний сервис (PostgreSQL, Redis) недоступен при разрешении зависимости.

    Args:
        service_name (str): Имя недоступного сервиса, попадает в сообщение об ошибке.
    """

    def __init__(self, service_name: str):
        super().__init__(
            status_code=HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"{service_name} service is unavailable.",
            error_type="dependencies_error",
            extra={"service": service_name},
        )
