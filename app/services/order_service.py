import logging

from app.exceptions import (
    InternalError,
    NotFoundError,
    RepositoryError,
    UnprocessableEntityError,
    is_not_found,
)
from app.models.order import Order
from app.repositories.base import OrderRepository
from app.schemas.order import (
    DiscountDetailSummary,
    OrderCreate,
    OrderDetailResponse,
    OrderResponse,
    OrderUpdate,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def build_order_response(order: Order) -> OrderResponse:
    return OrderResponse(
        id=order.id,
        table_number=order.table_number,
        final_price=order.final_price,
        created_at=order.created_at,
        updated_at=order.updated_at,
    )


def _build_detail_response(order: Order) -> OrderDetailResponse:
    return OrderDetailResponse(
        id=order.id,
        table_number=order.table_number,
        final_price=order.final_price,
        created_at=order.created_at,
        updated_at=order.updated_at,
        discount_details=[
            DiscountDetailSummary(
                order_id=detail.order_id,
                dish_id=detail.dish_id,
                discount=detail.discount,
            )
            for detail in order.discount_details
        ],
    )


def _direct_lookup_error(exc: RepositoryError, order_id: int) -> Exception:
    if is_not_found(exc):
        logger.warning("Order not found", extra={"order_id": order_id})
        return NotFoundError(str(exc))
    logger.error("Order storage failure: %s", exc, extra={"order_id": order_id})
    return InternalError()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


async def create_order(orders: OrderRepository, order_data: OrderCreate) -> OrderDetailResponse:
    order = Order(
        table_number=order_data.table_number,
        final_price=order_data.final_price,
        discount_details=[],
    )
    try:
        order = await orders.create(order)
    except RepositoryError as exc:
        logger.warning("Can not create order: %s", exc)
        raise UnprocessableEntityError(str(exc)) from exc

    logger.info("Order created", extra={"order_id": order.id, "table_number": order.table_number})
    return _build_detail_response(order)


async def list_orders(orders: OrderRepository) -> list[OrderDetailResponse]:
    try:
        found = await orders.list_all()
    except RepositoryError as exc:
        raise UnprocessableEntityError(str(exc)) from exc
    return [_build_detail_response(order) for order in found]


async def get_order(orders: OrderRepository, order_id: int) -> OrderDetailResponse:
    try:
        order = await orders.get(order_id)
    except RepositoryError as exc:
        raise _direct_lookup_error(exc, order_id) from exc
    return _build_detail_response(order)


async def update_order(orders: OrderRepository, order_id: int, order_data: OrderUpdate) -> None:
    fields = order_data.model_dump(exclude_unset=True, exclude_none=True)
    try:
        await orders.update(order_id, fields)
    except RepositoryError as exc:
        raise _direct_lookup_error(exc, order_id) from exc
    logger.info("Order updated", extra={"order_id": order_id, "fields": sorted(fields)})


async def delete_order(orders: OrderRepository, order_id: int) -> None:
    try:
        await orders.delete(order_id)
    except RepositoryError as exc:
        raise _direct_lookup_error(exc, order_id) from exc
    logger.info("Order deleted", extra={"order_id": order_id})
