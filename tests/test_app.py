"""Служебные эндпоинты и middleware."""


async def test_health_reports_database_and_skips_redis(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["data"] == {"app": "ok", "db": "ok", "redis": "unknown"}


async def test_liveness(client):
    response = await client.get("/health/live")

    assert response.status_code == 200
    assert response.json()["data"]["app"] == "ok"


async def test_root_redirects_to_docs(client):
    response = await client.get("/")

    assert response.status_code == 307
    assert response.headers["location"] == "/docs"


async def test_responses_carry_process_time(client):
    response = await client.get("/health/live")

    assert float(response.headers["X-Process-Time"]) >= 0
