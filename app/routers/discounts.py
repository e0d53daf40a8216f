import logging

from fastapi import APIRouter, Depends, Request, status

from app.dependencies import get_discount_repository, get_dish_repository, get_order_repository
from app.repositories.base import DiscountRepository, DishRepository, OrderRepository
from app.schemas.common import ErrorResponse
from app.schemas.discount import (
    DiscountCreate,
    DiscountDetailResponse,
    PriceAfterDiscountResponse,
)
from app.services import discount_service

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "/discountPrice",
    response_model=DiscountDetailResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": ErrorResponse}},
)
async def create_discount(
    body: DiscountCreate,
    request: Request,
    orders: OrderRepository = Depends(get_order_repository),
    dishes: DishRepository = Depends(get_dish_repository),
    discounts: DiscountRepository = Depends(get_discount_repository),
) -> DiscountDetailResponse:
    logger.info(
        "Received create_discount request",
        extra={
            "request_id": getattr(request.state, "request_id", "unknown"),
            "order_id": body.order_id,
            "dish_id": body.dish_id,
        },
    )
    return await discount_service.create_discount(orders, dishes, discounts, body)


@router.get(
    "/{order_id}/dishes/{dish_id}",
    response_model=PriceAfterDiscountResponse,
    responses={status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": ErrorResponse}},
)
async def get_price_after_discount(
    order_id: int,
    dish_id: int,
    discounts: DiscountRepository = Depends(get_discount_repository),
) -> PriceAfterDiscountResponse:
    return await discount_service.get_price_after_discount(discounts, order_id, dish_id)
