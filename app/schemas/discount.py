from decimal import Decimal

from pydantic import BaseModel, Field

from app.database import BIGINT_MAX, BIGINT_MIN
from app.schemas.common import JsonDecimal
from app.schemas.dish import DishResponse
from app.schemas.order import OrderResponse


class DiscountCreate(BaseModel):
    order_id: int = Field(alias="OrderID", ge=BIGINT_MIN, le=BIGINT_MAX)
    dish_id: int = Field(alias="DishID", ge=BIGINT_MIN, le=BIGINT_MAX)
    # Percent precision of the Numeric(5, 2) column; [0, 100] is the policy's call
    discount: Decimal = Field(alias="Discount", max_digits=5, decimal_places=2)

    model_config = {"populate_by_name": True}


class DiscountUpdate(BaseModel):
    discount: Decimal = Field(alias="Discount", max_digits=5, decimal_places=2)

    model_config = {"populate_by_name": True}


class DiscountDetailResponse(BaseModel):
    order_id: int = Field(alias="OrderID")
    dish_id: int = Field(alias="DishID")
    discount: JsonDecimal = Field(alias="Discount")
    order: OrderResponse = Field(alias="Order")
    dish: DishResponse = Field(alias="Dish")

    model_config = {"populate_by_name": True}


class PriceAfterDiscountResponse(BaseModel):
    order_id: int = Field(alias="OrderID")
    # Key spelling is part of the published response shape
    dish_id: int = Field(alias="DischID")
    original_price: JsonDecimal = Field(alias="OriginalPrice")
    discount_price: JsonDecimal = Field(alias="DiscountPrice")

    model_config = {"populate_by_name": True}
