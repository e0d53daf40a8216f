import logging

from fastapi import APIRouter, Depends, Request, status

from app.dependencies import get_dish_repository
from app.repositories.base import DishRepository
from app.schemas.common import ErrorResponse
from app.schemas.dish import DishCreate, DishResponse, DishUpdate
from app.services import dish_service

router = APIRouter()
logger = logging.getLogger(__name__)

_ERRORS = {
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


@router.post(
    "",
    response_model=DishResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_ERRORS,
)
async def create_dish(
    body: DishCreate,
    dishes: DishRepository = Depends(get_dish_repository),
) -> DishResponse:
    return await dish_service.create_dish(dishes, body)


@router.get("", response_model=list[DishResponse], responses=_ERRORS)
async def list_dishes(dishes: DishRepository = Depends(get_dish_repository)) -> list[DishResponse]:
    return await dish_service.list_dishes(dishes)


@router.get("/{dish_id}", response_model=DishResponse, responses=_ERRORS)
async def get_dish(
    dish_id: int,
    request: Request,
    dishes: DishRepository = Depends(get_dish_repository),
) -> DishResponse:
    logger.info(
        "Received get_dish request",
        extra={"request_id": getattr(request.state, "request_id", "unknown"), "dish_id": dish_id},
    )
    return await dish_service.get_dish(dishes, dish_id)


@router.put("/{dish_id}", status_code=status.HTTP_204_NO_CONTENT, responses=_ERRORS)
async def update_dish(
    dish_id: int,
    body: DishUpdate,
    dishes: DishRepository = Depends(get_dish_repository),
) -> None:
    await dish_service.update_dish(dishes, dish_id, body)


@router.delete("/{dish_id}", status_code=status.HTTP_204_NO_CONTENT, responses=_ERRORS)
async def delete_dish(dish_id: int, dishes: DishRepository = Depends(get_dish_repository)) -> None:
    await dish_service.delete_dish(dishes, dish_id)
