from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from app.exceptions import (
    EntityNotFoundError,
    InternalError,
    InvalidDataError,
    NotFoundError,
    RecordNotFoundError,
    RepositoryError,
    UnprocessableEntityError,
)
from app.schemas.dish import DishCreate, DishUpdate
from app.schemas.order import OrderCreate, OrderUpdate
from app.services import dish_service, order_service


async def test_order_not_found_maps_to_404():
    orders = AsyncMock()
    orders.get.side_effect = RecordNotFoundError("Order", 5)

    with pytest.raises(NotFoundError, match="Order with id 5 not found") as exc_info:
        await order_service.get_order(orders, 5)

    assert exc_info.value.status_code == 404


async def test_order_storage_failure_maps_to_500():
    orders = AsyncMock()
    orders.delete.side_effect = RepositoryError("database is locked")

    with pytest.raises(InternalError) as exc_info:
        await order_service.delete_order(orders, 5)

    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "Unknown error"


async def test_order_create_failure_maps_to_422():
    orders = AsyncMock()
    orders.create.side_effect = InvalidDataError()

    with pytest.raises(UnprocessableEntityError, match="unsupported data") as exc_info:
        await order_service.create_order(orders, OrderCreate(table_number=1))

    assert exc_info.value.status_code == 422


async def test_order_list_failure_maps_to_422():
    orders = AsyncMock()
    orders.list_all.side_effect = EntityNotFoundError()

    with pytest.raises(UnprocessableEntityError, match="entity not found"):
        await order_service.list_orders(orders)


async def test_order_update_passes_only_given_fields():
    orders = AsyncMock()

    await order_service.update_order(orders, 3, OrderUpdate(final_price=Decimal("16")))

    orders.update.assert_awaited_once_with(3, {"final_price": Decimal("16")})


async def test_dish_update_not_found_maps_to_404():
    dishes = AsyncMock()
    dishes.update.side_effect = RecordNotFoundError("Dish", 4)

    with pytest.raises(NotFoundError, match="Dish with id 4 not found"):
        await dish_service.update_dish(dishes, 4, DishUpdate(name="Pho"))


async def test_dish_create_failure_maps_to_422():
    dishes = AsyncMock()
    dishes.create.side_effect = InvalidDataError()

    with pytest.raises(UnprocessableEntityError):
        await dish_service.create_dish(dishes, DishCreate(name="Pho", price=Decimal("9")))
