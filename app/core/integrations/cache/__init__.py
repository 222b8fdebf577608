"""
Интеграции с кешем.

- AuthCacheManager: хранилище активных access-токенов
"""

from .auth import AuthCacheManager

__all__ = [
    "AuthCacheManager",
]
