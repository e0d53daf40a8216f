from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.repositories.base import DiscountRepository, DishRepository, OrderRepository
from app.repositories.sql import SqlDiscountRepository, SqlDishRepository, SqlOrderRepository


def get_order_repository(db: AsyncSession = Depends(get_db)) -> OrderRepository:
    return SqlOrderRepository(db)


def get_dish_repository(db: AsyncSession = Depends(get_db)) -> DishRepository:
    return SqlDishRepository(db)


def get_discount_repository(db: AsyncSession = Depends(get_db)) -> DiscountRepository:
    return SqlDiscountRepository(db)
