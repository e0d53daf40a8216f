"""SQLAlchemy implementations of the repository interfaces."""

import logging
from collections.abc import Callable
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload, selectinload
from sqlalchemy.orm.exc import FlushError

from app.database import BIGINT_MAX, BIGINT_MIN
from app.exceptions import (
    DuplicateRecordError,
    EntityNotFoundError,
    InvalidDataError,
    RecordNotFoundError,
    RepositoryError,
)
from app.models import DiscountDetail, Dish, Order
from app.repositories.base import DiscountRepository, DishRepository, OrderRepository

logger = logging.getLogger(__name__)


def _discount_key(order_id: int, dish_id: int) -> str:
    return f"{order_id}/{dish_id}"


def _storable_keys(*keys: int) -> bool:
    # The driver cannot bind integers wider than the key column, and no row can have one
    return all(BIGINT_MIN <= key <= BIGINT_MAX for key in keys)


async def _commit(
    session: AsyncSession,
    on_conflict: Callable[[SQLAlchemyError], RepositoryError] | None = None,
) -> None:
    try:
        await session.commit()
    except SQLAlchemyError as exc:
        await session.rollback()
        # FlushError covers a pending row whose key clashes with one already in the session
        if on_conflict is not None and isinstance(exc, (IntegrityError, FlushError)):
            raise on_conflict(exc) from exc
        raise RepositoryError(str(exc)) from exc


def _invalid_data(exc: SQLAlchemyError) -> RepositoryError:
    return InvalidDataError(f"unsupported data: {getattr(exc, 'orig', exc)}")


class _SqlEntityRepository:
    """Shared CRUD for single-key aggregates."""

    model: type
    kind: str

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _create(self, entity):
        self._session.add(entity)
        await _commit(self._session, _invalid_data)
        logger.debug("Created %s", self.kind, extra={"id": entity.id})
        return entity

    async def _update(self, entity_id: int, fields: dict[str, Any]) -> None:
        entity = await self._get(entity_id)
        for name, value in fields.items():
            setattr(entity, name, value)
        await _commit(self._session, _invalid_data)

    async def _delete(self, entity_id: int) -> None:
        if not _storable_keys(entity_id):
            raise RecordNotFoundError(self.kind, entity_id)
        try:
            result = await self._session.execute(
                delete(self.model).where(self.model.id == entity_id)
            )
        except SQLAlchemyError as exc:
            await self._session.rollback()
            raise RepositoryError(str(exc)) from exc
        if result.rowcount == 0:
            await self._session.rollback()
            raise RecordNotFoundError(self.kind, entity_id)
        await _commit(self._session)

    async def _get(self, entity_id: int, *options):
        if not _storable_keys(entity_id):
            raise RecordNotFoundError(self.kind, entity_id)
        try:
            result = await self._session.execute(
                select(self.model).where(self.model.id == entity_id).options(*options)
            )
        except SQLAlchemyError as exc:
            raise RepositoryError(str(exc)) from exc
        entity = result.scalars().first()
        if entity is None:
            raise RecordNotFoundError(self.kind, entity_id)
        return entity

    async def _list(self, *options) -> list:
        try:
            result = await self._session.execute(
                select(self.model).options(*options).order_by(self.model.id)
            )
        except SQLAlchemyError as exc:
            raise EntityNotFoundError(f"{self.kind.lower()}s not found: {exc}") from exc
        return list(result.scalars().all())


class SqlOrderRepository(_SqlEntityRepository, OrderRepository):
    model = Order
    kind = "Order"

    async def create(self, order: Order) -> Order:
        return await self._create(order)

    async def list_all(self) -> list[Order]:
        return await self._list(selectinload(Order.discount_details))

    async def get(self, order_id: int) -> Order:
        return await self._get(order_id, selectinload(Order.discount_details))

    async def update(self, order_id: int, fields: dict[str, Any]) -> None:
        await self._update(order_id, fields)

    async def delete(self, order_id: int) -> None:
        await self._delete(order_id)


class SqlDishRepository(_SqlEntityRepository, DishRepository):
    model = Dish
    kind = "Dish"

    async def create(self, dish: Dish) -> Dish:
        return await self._create(dish)

    async def list_all(self) -> list[Dish]:
        return await self._list()

    async def get(self, dish_id: int) -> Dish:
        return await self._get(dish_id)

    async def update(self, dish_id: int, fields: dict[str, Any]) -> None:
        await self._update(dish_id, fields)

    async def delete(self, dish_id: int) -> None:
        await self._delete(dish_id)


class SqlDiscountRepository(DiscountRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, detail: DiscountDetail) -> DiscountDetail:
        self._session.add(detail)
        await _commit(
            self._session,
            lambda exc: DuplicateRecordError(
                "the discount with the same order id and dish id already exists"
            ),
        )
        return detail

    async def update(self, detail: DiscountDetail) -> None:
        if not _storable_keys(detail.order_id, detail.dish_id):
            raise RecordNotFoundError(
                "DiscountDetail", _discount_key(detail.order_id, detail.dish_id)
            )
        try:
            result = await self._session.execute(
                update(DiscountDetail)
                .where(
                    DiscountDetail.order_id == detail.order_id,
                    DiscountDetail.dish_id == detail.dish_id,
                )
                .values(discount=detail.discount)
            )
        except SQLAlchemyError as exc:
            await self._session.rollback()
            raise RepositoryError(str(exc)) from exc
        if result.rowcount == 0:
            await self._session.rollback()
            raise RecordNotFoundError(
                "DiscountDetail", _discount_key(detail.order_id, detail.dish_id)
            )
        await _commit(self._session)

    async def get_with_parents(self, order_id: int, dish_id: int) -> DiscountDetail:
        if not _storable_keys(order_id, dish_id):
            raise RecordNotFoundError("DiscountDetail", _discount_key(order_id, dish_id))
        try:
            result = await self._session.execute(
                select(DiscountDetail)
                .options(joinedload(DiscountDetail.dish), joinedload(DiscountDetail.order))
                .where(
                    DiscountDetail.order_id == order_id,
                    DiscountDetail.dish_id == dish_id,
                )
            )
        except SQLAlchemyError as exc:
            raise RepositoryError(str(exc)) from exc
        detail = result.scalars().first()
        if detail is None:
            raise RecordNotFoundError("DiscountDetail", _discount_key(order_id, dish_id))
        return detail
