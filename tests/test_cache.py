"""Кеш-бэкенды: remember_forever, forget, TTL и хранилище токенов."""

import uuid

import pytest

from app.core.integrations.cache import AuthCacheManager
from app.repository.cache import InMemoryCacheBackend, NoCacheBackend
from app.repository.cache import memory as memory_module


class CountingCallback:
    def __init__(self, value):
        self.value = value
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        return self.value


class BrokenDeleteBackend(InMemoryCacheBackend):
    async def delete(self, key):
        raise ConnectionError("cache is down")


async def test_remember_forever_computes_once():
    cache = InMemoryCacheBackend()
    callback = CountingCallback({"items": [1, 2, 3]})

    first = await cache.remember_forever("clients", callback)
    second = await cache.remember_forever("clients", callback)

    assert first == second == {"items": [1, 2, 3]}
    assert callback.calls == 1


async def test_forget_forces_recompute():
    cache = InMemoryCacheBackend()
    callback = CountingCallback(["a"])
    await cache.remember_forever("clients", callback)

    assert await cache.forget("clients") is True
    assert "clients" not in cache

    await cache.remember_forever("clients", callback)
    assert callback.calls == 2


async def test_forget_missing_key_returns_false():
    assert await InMemoryCacheBackend().forget("clients") is False


async def test_forget_does_not_raise_when_backend_fails():
    cache = BrokenDeleteBackend()
    await cache.set("clients", ["a"])

    assert await cache.forget("clients") is False


async def test_remembered_value_has_no_ttl(monkeypatch):
    cache = InMemoryCacheBackend()
    await cache.remember_forever("clients", CountingCallback(["a"]))

    now = memory_module.time.time()
    monkeypatch.setattr(memory_module.time, "time", lambda: now + 10 * 365 * 24 * 3600)

    assert await cache.get("clients") == ["a"]


async def test_ttl_entry_expires(monkeypatch):
    cache = InMemoryCacheBackend()
    await cache.set("token:abc", "value", ttl=60)

    now = memory_module.time.time()
    monkeypatch.setattr(memory_module.time, "time", lambda: now + 61)

    assert await cache.get("token:abc") is None
    assert "token:abc" not in cache


async def test_no_cache_backend_recomputes_every_time():
    cache = NoCacheBackend()
    callback = CountingCallback({"items": []})

    await cache.remember_forever("clients", callback)
    await cache.remember_forever("clients", callback)

    assert callback.calls == 2
    assert await cache.forget("clients") is False


@pytest.fixture
def token_store():
    return AuthCacheManager(InMemoryCacheBackend())


async def test_token_store_roundtrip(token_store):
    user_id = uuid.uuid4()

    assert await token_store.save_token("jti-1", user_id) is True
    assert await token_store.get_user_id("jti-1") == user_id

    assert await token_store.remove_token("jti-1") is True
    assert await token_store.get_user_id("jti-1") is None
    assert await token_store.remove_token("jti-1") is False


async def test_token_store_uses_prefixed_key_with_ttl(token_store):
    await token_store.save_token("jti-2", uuid.uuid4())

    assert "token:jti-2" in token_store.cache
    assert "token:jti-2" in token_store.cache._expiry
