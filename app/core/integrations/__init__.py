"""Интеграции с внешними хранилищами."""

from .cache import AuthCacheManager

__all__ = [
    "AuthCacheManager",
]
