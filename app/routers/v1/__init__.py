"""API v1 роутеры."""

from app.routers.base import BaseRouter
from app.routers.v1.auth import AuthRouter, AuthSessionRouter
from app.routers.v1.clients import ClientRouter


class APIv1(BaseRouter):
    """
    Агрегатор роутеров для API v1.
    """

    def configure_routes(self):
        """
        Настройка маршрутов для API v1.
        """
        self.router.include_router(AuthRouter().get_router())
        self.router.include_router(AuthSessionRouter().get_router())
        self.router.include_router(ClientRouter().get_router())


__all__ = ["APIv1"]
