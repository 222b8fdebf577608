"""
Общие фикстуры тестов.

Приложение работает на SQLite в памяти (aiosqlite) и in-memory кеше:
зависимости get_async_session, get_cache_backend и get_token_store
подменяются через app.dependency_overrides. Lifespan не запускается,
поэтому PostgreSQL и Redis не нужны.
"""

import os

os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault("POSTGRES_PASSWORD", "test")
os.environ.setdefault("REDIS_PASSWORD", "test")
os.environ.setdefault("TOKEN_SECRET_KEY", "test-secret-key-for-jwt-signing")
os.environ["CACHE_BACKEND"] = "memory"
os.environ["LOG_FILE"] = ""
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.core.dependencies import get_async_session, get_cache_backend, get_token_store  # noqa: E402
from app.core.security import PasswordManager  # noqa: E402
from app.main import app  # noqa: E402
from app.models import BaseModel  # noqa: E402
from app.models.v1.clients import ClientTypeModel, SellerModel  # noqa: E402
from app.models.v1.users import UserModel  # noqa: E402
from app.repository.cache import InMemoryCacheBackend  # noqa: E402

USER_EMAIL = "manager@example.com"
USER_PASSWORD = "secret123"


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)


@pytest.fixture
def cache():
    """Один in-memory бэкенд и для списка клиентов, и для токенов."""
    return InMemoryCacheBackend()


@pytest.fixture
async def client(session_factory, cache):
    async def override_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_session
    app.dependency_overrides[get_cache_backend] = lambda: cache
    app.dependency_overrides[get_token_store] = lambda: cache

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client

    app.dependency_overrides.clear()


@pytest.fixture
async def user(session_factory):
    async with session_factory() as session:
        user = UserModel(
            name="Manager",
            email=USER_EMAIL,
            password_hash=PasswordManager.hash_password(USER_PASSWORD),
        )
        session.add(user)
        await session.commit()
        return user


@pytest.fixture
async def token(client, user):
    response = await client.post("/login", json={"email": USER_EMAIL, "password": USER_PASSWORD})
    assert response.status_code == 200
    return response.json()["access_token"]


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def sellers(session_factory):
    async with session_factory() as session:
        items = [
            SellerModel(name="Anna", email="anna@shop.test"),
            SellerModel(name="Igor", email="igor@shop.test"),
            SellerModel(name="Olga", email="olga@shop.test"),
        ]
        session.add_all(items)
        await session.commit()
        return items


@pytest.fixture
async def client_type(session_factory):
    async with session_factory() as session:
        item = ClientTypeModel(name="Компания")
        session.add(item)
        await session.commit()
        return item
