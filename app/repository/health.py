"""
Репозиторий для проверки состояния системы.
"""

import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.repository.base import SessionMixin

logger = logging.getLogger(__name__)


class HealthRepository(SessionMixin):
    """
    Репозиторий для проверки состояния системы.

    Methods:
        check_database_connection: Проверяет соединение с базой данных
    """

    async def check_database_connection(self) -> bool:
        """
        Проверяет соединение с базой данных.

        Returns:
            bool: True если БД доступна, False если нет
        """
        try:
            result = await self.session.execute(text("SELECT 1"))
            is_connected = result.fetchone() is not None
        except (SQLAlchemyError, OSError) as exc:
            logger.error("Database connection check failed: %s", exc)
            return False

        if is_connected:
            logger.debug("Database connection check: OK")
        else:
            logger.warning("Database connection check: FAIL (no rows returned)")
        return is_connected
