import logging

from app.exceptions import (
    InternalError,
    NotFoundError,
    RepositoryError,
    UnprocessableEntityError,
    is_not_found,
)
from app.models.dish import Dish
from app.repositories.base import DishRepository
from app.schemas.dish import DishCreate, DishResponse, DishUpdate

logger = logging.getLogger(__name__)


def build_dish_response(dish: Dish) -> DishResponse:
    return DishResponse(
        id=dish.id,
        name=dish.name,
        price=dish.price,
        created_at=dish.created_at,
        updated_at=dish.updated_at,
    )


def _direct_lookup_error(exc: RepositoryError, dish_id: int) -> Exception:
    if is_not_found(exc):
        logger.warning("Dish not found", extra={"dish_id": dish_id})
        return NotFoundError(str(exc))
    logger.error("Dish storage failure: %s", exc, extra={"dish_id": dish_id})
    return InternalError()


async def create_dish(dishes: DishRepository, dish_data: DishCreate) -> DishResponse:
    try:
        dish = await dishes.create(Dish(name=dish_data.name, price=dish_data.price))
    except RepositoryError as exc:
        logger.warning("Can not create dish: %s", exc)
        raise UnprocessableEntityError(str(exc)) from exc

    logger.info("Dish created", extra={"dish_id": dish.id, "price": str(dish.price)})
    return build_dish_response(dish)


async def list_dishes(dishes: DishRepository) -> list[DishResponse]:
    try:
        found = await dishes.list_all()
    except RepositoryError as exc:
        raise UnprocessableEntityError(str(exc)) from exc
    return [build_dish_response(dish) for dish in found]


async def get_dish(dishes: DishRepository, dish_id: int) -> DishResponse:
    try:
        dish = await dishes.get(dish_id)
    except RepositoryError as exc:
        raise _direct_lookup_error(exc, dish_id) from exc
    return build_dish_response(dish)


async def update_dish(dishes: DishRepository, dish_id: int, dish_data: DishUpdate) -> None:
    fields = dish_data.model_dump(exclude_unset=True, exclude_none=True)
    try:
        await dishes.update(dish_id, fields)
    except RepositoryError as exc:
        raise _direct_lookup_error(exc, dish_id) from exc
    logger.info("Dish updated", extra={"dish_id": dish_id, "fields": sorted(fields)})


async def delete_dish(dishes: DishRepository, dish_id: int) -> None:
    try:
        await dishes.delete(dish_id)
    except RepositoryError as exc:
        raise _direct_lookup_error(exc, dish_id) from exc
    logger.info("Dish deleted", extra={"dish_id": dish_id})
