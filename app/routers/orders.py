import logging

from fastapi import APIRouter, Depends, Request, status

from app.dependencies import get_discount_repository, get_dish_repository, get_order_repository
from app.repositories.base import DiscountRepository, DishRepository, OrderRepository
from app.schemas.common import ErrorResponse
from app.schemas.discount import DiscountUpdate
from app.schemas.order import OrderCreate, OrderDetailResponse, OrderUpdate
from app.services import discount_service, order_service

router = APIRouter()
logger = logging.getLogger(__name__)

_ERRORS = {
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")


@router.post(
    "",
    response_model=OrderDetailResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_ERRORS,
)
async def create_order(
    body: OrderCreate,
    request: Request,
    orders: OrderRepository = Depends(get_order_repository),
) -> OrderDetailResponse:
    logger.info(
        "Received create_order request",
        extra={"request_id": _request_id(request), "table_number": body.table_number},
    )
    return await order_service.create_order(orders, body)


@router.get("", response_model=list[OrderDetailResponse], responses=_ERRORS)
async def list_orders(
    orders: OrderRepository = Depends(get_order_repository),
) -> list[OrderDetailResponse]:
    return await order_service.list_orders(orders)


@router.get("/{order_id}", response_model=OrderDetailResponse, responses=_ERRORS)
async def get_order(
    order_id: int,
    request: Request,
    orders: OrderRepository = Depends(get_order_repository),
) -> OrderDetailResponse:
    logger.info(
        "Received get_order request",
        extra={"request_id": _request_id(request), "order_id": order_id},
    )
    return await order_service.get_order(orders, order_id)


@router.put("/{order_id}", status_code=status.HTTP_204_NO_CONTENT, responses=_ERRORS)
async def update_order(
    order_id: int,
    body: OrderUpdate,
    request: Request,
    orders: OrderRepository = Depends(get_order_repository),
) -> None:
    logger.info(
        "Received update_order request",
        extra={"request_id": _request_id(request), "order_id": order_id},
    )
    await order_service.update_order(orders, order_id, body)


@router.put(
    "/{order_id}/dishes/{dish_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_ERRORS,
)
async def update_discount(
    order_id: int,
    dish_id: int,
    body: DiscountUpdate,
    request: Request,
    orders: OrderRepository = Depends(get_order_repository),
    dishes: DishRepository = Depends(get_dish_repository),
    discounts: DiscountRepository = Depends(get_discount_repository),
) -> None:
    logger.info(
        "Received update_discount request",
        extra={"request_id": _request_id(request), "order_id": order_id, "dish_id": dish_id},
    )
    await discount_service.update_discount(orders, dishes, discounts, order_id, dish_id, body)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT, responses=_ERRORS)
async def delete_order(
    order_id: int,
    request: Request,
    orders: OrderRepository = Depends(get_order_repository),
) -> None:
    logger.info(
        "Received delete_order request",
        extra={"request_id": _request_id(request), "order_id": order_id},
    )
    await order_service.delete_order(orders, order_id)
