"""
Модуль инициализации настроек приложения.

Предоставляет глобальный объект настроек (`settings`). Объект создаётся один раз
за время жизни процесса благодаря `lru_cache`, поэтому повторные импорты не
перечитывают окружение и .env файлы.

Экспортируемые объекты:
- settings: Глобальный экземпляр настроек приложения.
- Settings: Класс настроек приложения.
"""

from functools import lru_cache

from .base import Settings
from .logging import LoggingSettings
from .paths import PathSettings


class CompositeSettings(Settings):
    """Композитный класс настроек."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.paths = PathSettings()
        self.logging = LoggingSettings()


@lru_cache
def get_settings() -> CompositeSettings:
    """Получение настроек приложения из кэша."""
    return CompositeSettings()


settings = get_settings()

__all__ = ["settings", "Settings"]
