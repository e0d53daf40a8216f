"""
Discount orchestration: cross-entity existence checks, the discount policy
and persistence for order/dish discount details.

The existence checks and the write are separate round trips. Two concurrent
creates for the same pair can both pass the checks; the composite primary key
on discount_details decides which insert wins.
"""

import logging

from app.exceptions import (
    InternalError,
    NotFoundError,
    RepositoryError,
    UnprocessableEntityError,
    is_not_found,
)
from app.models.discount import DiscountDetail
from app.models.dish import Dish
from app.models.order import Order
from app.repositories.base import DiscountRepository, DishRepository, OrderRepository
from app.schemas.discount import (
    DiscountCreate,
    DiscountDetailResponse,
    DiscountUpdate,
    PriceAfterDiscountResponse,
)
from app.services import discount_policy
from app.services.dish_service import build_dish_response
from app.services.order_service import build_order_response

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


async def _require_order(orders: OrderRepository, order_id: int) -> Order:
    try:
        return await orders.get(order_id)
    except RepositoryError as exc:
        logger.warning("Referenced order does not exist", extra={"order_id": order_id})
        raise UnprocessableEntityError(str(exc)) from exc


async def _require_dish(dishes: DishRepository, dish_id: int) -> Dish:
    try:
        return await dishes.get(dish_id)
    except RepositoryError as exc:
        logger.warning("Referenced dish does not exist", extra={"dish_id": dish_id})
        raise UnprocessableEntityError(str(exc)) from exc


def _build_response(detail: DiscountDetail) -> DiscountDetailResponse:
    return DiscountDetailResponse(
        order_id=detail.order_id,
        dish_id=detail.dish_id,
        discount=detail.discount,
        order=build_order_response(detail.order),
        dish=build_dish_response(detail.dish),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


async def create_discount(
    orders: OrderRepository,
    dishes: DishRepository,
    discounts: DiscountRepository,
    discount_data: DiscountCreate,
) -> DiscountDetailResponse:
    order_id = discount_data.order_id
    dish_id = discount_data.dish_id
    log_extra = {"order_id": order_id, "dish_id": dish_id, "discount": str(discount_data.discount)}

    # 1. Both parents must exist
    order = await _require_order(orders, order_id)
    dish = await _require_dish(dishes, dish_id)

    # 2. Discount must keep the price at or above the floor
    try:
        discount_policy.validate(discount_data.discount, dish.price)
    except discount_policy.PolicyError as exc:
        logger.warning("Discount rejected: %s", exc, extra=log_extra)
        raise UnprocessableEntityError(str(exc)) from exc

    # 3. Persist with the resolved parents attached for the response
    detail = DiscountDetail(order_id=order_id, dish_id=dish_id, discount=discount_data.discount)
    detail.order = order
    detail.dish = dish
    try:
        detail = await discounts.create(detail)
    except RepositoryError as exc:
        # A failed commit expires the session's objects; log from the request data only
        logger.warning("Can not add discount: %s", exc, extra=log_extra)
        raise UnprocessableEntityError(str(exc)) from exc

    logger.info("Discount added", extra=log_extra)
    return _build_response(detail)


async def update_discount(
    orders: OrderRepository,
    dishes: DishRepository,
    discounts: DiscountRepository,
    order_id: int,
    dish_id: int,
    discount_data: DiscountUpdate,
) -> None:
    """Change the discount of an existing (order, dish) pair.

    Only the [0, 100] bounds are checked here; unlike create_discount, the
    minimum price ratio is not enforced on update.
    """
    await _require_order(orders, order_id)
    await _require_dish(dishes, dish_id)

    try:
        discount_policy.check_bounds(discount_data.discount)
    except discount_policy.PolicyError as exc:
        raise UnprocessableEntityError(str(exc)) from exc

    detail = DiscountDetail(order_id=order_id, dish_id=dish_id, discount=discount_data.discount)
    try:
        await discounts.update(detail)
    except RepositoryError as exc:
        if is_not_found(exc):
            raise NotFoundError(str(exc)) from exc
        logger.error(
            "Discount storage failure: %s", exc, extra={"order_id": order_id, "dish_id": dish_id}
        )
        raise InternalError() from exc

    logger.info(
        "Discount updated",
        extra={"order_id": order_id, "dish_id": dish_id, "discount": str(detail.discount)},
    )


async def get_price_after_discount(
    discounts: DiscountRepository, order_id: int, dish_id: int
) -> PriceAfterDiscountResponse:
    try:
        detail = await discounts.get_with_parents(order_id, dish_id)
    except RepositoryError as exc:
        raise UnprocessableEntityError(str(exc)) from exc

    original_price = detail.dish.price
    return PriceAfterDiscountResponse(
        order_id=detail.order_id,
        dish_id=detail.dish_id,
        original_price=original_price,
        discount_price=discount_policy.compute_price(detail.discount, original_price),
    )
