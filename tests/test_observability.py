from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from app.dependencies import get_order_repository
from app.main import app
from app.middleware.metrics import normalise_path


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/orders/12", "/orders/{order_id}"),
        ("/orders/12/dishes/3", "/orders/{order_id}/dishes/{dish_id}"),
        ("/dishes/7", "/dishes/{dish_id}"),
        ("/1/dishes/2", "/{order_id}/dishes/{dish_id}"),
        ("/discountPrice", "/discountPrice"),
        ("/orders", "/orders"),
    ],
)
def test_normalise_path(path, expected):
    assert normalise_path(path) == expected


async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_request_id_is_echoed(client):
    response = await client.get("/health", headers={"X-Request-ID": "abc-123"})

    assert response.headers["X-Request-ID"] == "abc-123"


async def test_request_id_is_generated(client):
    response = await client.get("/orders")

    assert response.headers["X-Request-ID"]


@pytest.fixture
def failing_orders():
    orders = AsyncMock()
    orders.get.side_effect = RuntimeError("boom")
    app.dependency_overrides[get_order_repository] = lambda: orders
    yield orders
    app.dependency_overrides.pop(get_order_repository, None)


async def test_unhandled_error_keeps_request_id(failing_orders):
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/orders/1", headers={"X-Request-ID": "req-500"})

    assert response.status_code == 500
    assert response.json() == {"Error": "Unknown error"}
    assert response.headers["X-Request-ID"] == "req-500"
