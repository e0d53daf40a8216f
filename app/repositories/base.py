"""Repository interfaces, one per aggregate."""

from abc import ABC, abstractmethod
from typing import Any

from app.models import DiscountDetail, Dish, Order


class OrderRepository(ABC):
    @abstractmethod
    async def create(self, order: Order) -> Order: ...

    @abstractmethod
    async def list_all(self) -> list[Order]: ...

    @abstractmethod
    async def get(self, order_id: int) -> Order:
        """Return the order or raise RecordNotFoundError."""

    @abstractmethod
    async def update(self, order_id: int, fields: dict[str, Any]) -> None: ...

    @abstractmethod
    async def delete(self, order_id: int) -> None: ...


class DishRepository(ABC):
    @abstractmethod
    async def create(self, dish: Dish) -> Dish: ...

    @abstractmethod
    async def list_all(self) -> list[Dish]: ...

    @abstractmethod
    async def get(self, dish_id: int) -> Dish:
        """Return the dish or raise RecordNotFoundError."""

    @abstractmethod
    async def update(self, dish_id: int, fields: dict[str, Any]) -> None: ...

    @abstractmethod
    async def delete(self, dish_id: int) -> None: ...


class DiscountRepository(ABC):
    @abstractmethod
    async def create(self, detail: DiscountDetail) -> DiscountDetail:
        """Insert a discount; raise DuplicateRecordError if the pair already has one."""

    @abstractmethod
    async def update(self, detail: DiscountDetail) -> None: ...

    @abstractmethod
    async def get_with_parents(self, order_id: int, dish_id: int) -> DiscountDetail:
        """Return the discount with its Order and Dish loaded."""
