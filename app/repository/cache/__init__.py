"""
Кеш-бэкенды.

- CacheBackend: Абстрактный интерфейс с remember_forever/forget
- RedisCacheBackend: Production кеш через Redis
- InMemoryCacheBackend: Кеш в памяти процесса (разработка, тесты)
- NoCacheBackend: Заглушка для отключенного кеша
"""

from .backend import CacheBackend
from .memory import InMemoryCacheBackend
from .none import NoCacheBackend
from .redis import RedisCacheBackend

__all__ = [
    "CacheBackend",
    "RedisCacheBackend",
    "InMemoryCacheBackend",
    "NoCacheBackend",
]
