# Import all models here so SQLAlchemy registers them with Base.metadata
from app.models.discount import DiscountDetail
from app.models.dish import Dish
from app.models.order import Order

__all__ = [
    "DiscountDetail",
    "Dish",
    "Order",
]
