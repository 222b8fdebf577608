"""CRUD клиентов и инвалидация кеша списка."""

import uuid

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.v1.clients import ClientModel
from app.services.v1.clients import CLIENTS_CACHE_KEY


async def create_client(client, headers, **fields):
    payload = {"name": "ACME Ltd", **fields}
    response = await client.post("/clients", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def test_store_returns_created_resource(client, auth_headers, sellers, client_type):
    payload = {
        "name": "ACME Ltd",
        "email": "office@acme.test",
        "document": "7707083893",
        "client_type_id": str(client_type.id),
        "phones": ["+7 999 111-22-33", "+7 999 444-55-66"],
        "seller_ids": [str(sellers[0].id), str(sellers[1].id)],
    }

    response = await client.post("/clients", json=payload, headers=auth_headers)

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["name"] == "ACME Ltd"
    assert data["client_type"]["name"] == "Компания"
    assert [phone["number"] for phone in data["phones"]] == payload["phones"]
    assert [phone["position"] for phone in data["phones"]] == [0, 1]
    assert {seller["email"] for seller in data["sellers"]} == {"anna@shop.test", "igor@shop.test"}


async def test_store_invalidates_cached_index(client, auth_headers, cache):
    for name in ("First", "Second"):
        await create_client(client, auth_headers, name=name)

    warm = await client.get("/clients", headers=auth_headers)
    assert warm.json()["data"]["pagination"]["total"] == 2
    assert CLIENTS_CACHE_KEY in cache

    await create_client(client, auth_headers, name="Third")
    assert CLIENTS_CACHE_KEY not in cache

    response = await client.get("/clients", headers=auth_headers)
    data = response.json()["data"]
    assert data["pagination"]["total"] == 3
    assert len(data["items"]) == 3


async def test_index_is_served_from_cache(client, auth_headers, cache):
    await create_client(client, auth_headers)

    first = await client.get("/clients", headers=auth_headers)
    second = await client.get("/clients", headers=auth_headers)

    assert first.status_code == second.status_code == 200
    assert first.json() == second.json()
    assert await cache.get(CLIENTS_CACHE_KEY) == first.json()["data"]


async def test_index_ignores_pagination_once_cached(client, auth_headers):
    for index in range(3):
        await create_client(client, auth_headers, name=f"Client {index}")

    first_page = await client.get("/clients", params={"page_size": 2}, headers=auth_headers)
    second_page = await client.get("/clients", params={"page": 2, "page_size": 2}, headers=auth_headers)

    assert first_page.json()["data"]["pagination"]["page"] == 1
    assert second_page.json() == first_page.json()


async def test_show_returns_client_with_sellers(client, auth_headers, sellers):
    created = await create_client(client, auth_headers, seller_ids=[str(sellers[2].id)])

    response = await client.get(f"/clients/{created['id']}", headers=auth_headers)

    assert response.status_code == 200
    assert [seller["name"] for seller in response.json()["data"]["sellers"]] == ["Olga"]


async def test_show_unknown_client_returns_404(client, auth_headers):
    missing_id = uuid.uuid4()

    response = await client.get(f"/clients/{missing_id}", headers=auth_headers)

    assert response.status_code == 404
    body = response.json()
    assert body["error_type"] == "client_not_found"
    assert body["value"] == str(missing_id)


async def test_destroy_then_show_returns_404(client, auth_headers, sellers, cache):
    created = await create_client(
        client,
        auth_headers,
        phones=["+7 999 000-00-00"],
        seller_ids=[str(sellers[0].id)],
    )
    await client.get("/clients", headers=auth_headers)

    response = await client.delete(f"/clients/{created['id']}", headers=auth_headers)

    assert response.status_code == 204
    assert response.content == b""
    assert CLIENTS_CACHE_KEY not in cache

    show = await client.get(f"/clients/{created['id']}", headers=auth_headers)
    assert show.status_code == 404

    index = await client.get("/clients", headers=auth_headers)
    assert index.json()["data"]["items"] == []


async def test_patch_replaces_phones_and_sellers(client, auth_headers, sellers, cache):
    created = await create_client(
        client,
        auth_headers,
        notes="VIP",
        phones=["+7 111", "+7 222"],
        seller_ids=[str(sellers[0].id), str(sellers[1].id)],
    )
    await client.get("/clients", headers=auth_headers)

    response = await client.patch(
        f"/clients/{created['id']}",
        json={"phones": ["+7 333"], "seller_ids": [str(sellers[2].id)]},
        headers=auth_headers,
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["name"] == "ACME Ltd"
    assert data["notes"] == "VIP"
    assert [phone["number"] for phone in data["phones"]] == ["+7 333"]
    assert [seller["email"] for seller in data["sellers"]] == ["olga@shop.test"]
    assert CLIENTS_CACHE_KEY not in cache


async def test_put_updates_only_given_fields(client, auth_headers):
    created = await create_client(client, auth_headers, email="old@acme.test", phones=["+7 111"])

    response = await client.put(f"/clients/{created['id']}", json={"name": "ACME Group"}, headers=auth_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["name"] == "ACME Group"
    assert data["email"] == "old@acme.test"
    assert [phone["number"] for phone in data["phones"]] == ["+7 111"]


async def test_update_unknown_client_returns_404(client, auth_headers):
    response = await client.put(f"/clients/{uuid.uuid4()}", json={"name": "Ghost"}, headers=auth_headers)

    assert response.status_code == 404


async def test_update_rejects_null_name(client, auth_headers):
    created = await create_client(client, auth_headers)

    response = await client.patch(f"/clients/{created['id']}", json={"name": None}, headers=auth_headers)

    assert response.status_code == 422
    assert "name" in response.json()["errors"]


async def test_store_requires_name(client, auth_headers, cache):
    response = await client.post("/clients", json={"email": "office@acme.test"}, headers=auth_headers)

    assert response.status_code == 422
    body = response.json()
    assert body["message"] == "The given data was invalid."
    assert "name" in body["errors"]


async def test_store_with_unknown_seller_persists_nothing(client, auth_headers, cache):
    await client.get("/clients", headers=auth_headers)
    cached = await cache.get(CLIENTS_CACHE_KEY)

    response = await client.post(
        "/clients",
        json={"name": "ACME Ltd", "seller_ids": [str(uuid.uuid4())]},
        headers=auth_headers,
    )

    assert response.status_code == 422
    assert "seller_ids" in response.json()["errors"]
    assert await cache.get(CLIENTS_CACHE_KEY) == cached

    assert await cache.forget(CLIENTS_CACHE_KEY) is True
    index = await client.get("/clients", headers=auth_headers)
    assert index.json()["data"]["pagination"]["total"] == 0


async def test_store_with_unknown_client_type_fails_validation(client, auth_headers):
    response = await client.post(
        "/clients",
        json={"name": "ACME Ltd", "client_type_id": str(uuid.uuid4())},
        headers=auth_headers,
    )

    assert response.status_code == 422
    assert "client_type_id" in response.json()["errors"]


@pytest.mark.parametrize(
    "method, path",
    [
        ("GET", "/clients"),
        ("POST", "/clients"),
        ("GET", "/clients/{id}"),
        ("PUT", "/clients/{id}"),
        ("PATCH", "/clients/{id}"),
        ("DELETE", "/clients/{id}"),
        ("POST", "/logout"),
        ("POST", "/refresh"),
    ],
)
async def test_unauthenticated_requests_are_rejected_without_side_effects(client, cache, method, path):
    response = await client.request(method, path.format(id=uuid.uuid4()), json={"name": "ACME Ltd"})

    assert response.status_code == 401
    assert response.json()["message"] == "Unauthenticated."
    assert CLIENTS_CACHE_KEY not in cache


@pytest.mark.parametrize("sort_by", ["sellers", "client_type", "metadata", "__init__", "password"])
async def test_index_rejects_unknown_sort_field(client, auth_headers, cache, sort_by):
    response = await client.get("/clients", params={"sort_by": sort_by}, headers=auth_headers)

    assert response.status_code == 422
    assert "sort_by" in response.json()["errors"]
    assert CLIENTS_CACHE_KEY not in cache


@pytest.mark.parametrize("sort_by", ["created_at", "updated_at", "name"])
async def test_index_sorts_by_column(client, auth_headers, sort_by):
    await create_client(client, auth_headers)

    response = await client.get("/clients", params={"sort_by": sort_by, "sort_desc": True}, headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["data"]["pagination"]["total"] == 1


@pytest.fixture
def failing_commit(monkeypatch):
    async def commit(self):
        raise SQLAlchemyError("connection lost")

    def apply():
        monkeypatch.setattr(AsyncSession, "commit", commit)

    return apply


async def count_clients(session_factory):
    async with session_factory() as session:
        return (await session.execute(select(func.count()).select_from(ClientModel))).scalar()


async def test_store_commit_failure_rolls_back_and_keeps_cache(
    client, auth_headers, cache, sellers, session_factory, failing_commit
):
    await client.get("/clients", headers=auth_headers)
    cached = await cache.get(CLIENTS_CACHE_KEY)
    failing_commit()

    response = await client.post(
        "/clients",
        json={"name": "ACME Ltd", "phones": ["+7 111"], "seller_ids": [str(sellers[0].id)]},
        headers=auth_headers,
    )

    assert response.status_code == 500
    assert response.json()["error_type"] == "client_persistence_error"
    assert await cache.get(CLIENTS_CACHE_KEY) == cached
    assert await count_clients(session_factory) == 0


async def test_update_commit_failure_rolls_back_and_keeps_cache(
    client, auth_headers, cache, monkeypatch, failing_commit
):
    created = await create_client(client, auth_headers, phones=["+7 111"])
    await client.get("/clients", headers=auth_headers)
    cached = await cache.get(CLIENTS_CACHE_KEY)
    failing_commit()

    response = await client.patch(
        f"/clients/{created['id']}",
        json={"name": "ACME Group", "phones": ["+7 222"]},
        headers=auth_headers,
    )

    assert response.status_code == 500
    assert response.json()["error_type"] == "client_persistence_error"
    assert await cache.get(CLIENTS_CACHE_KEY) == cached

    monkeypatch.undo()
    show = await client.get(f"/clients/{created['id']}", headers=auth_headers)
    data = show.json()["data"]
    assert data["name"] == "ACME Ltd"
    assert [phone["number"] for phone in data["phones"]] == ["+7 111"]
