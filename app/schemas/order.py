from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from app.database import BIGINT_MAX, BIGINT_MIN
from app.schemas.common import JsonDecimal


class OrderCreate(BaseModel):
    table_number: int = Field(alias="TableNumber", ge=BIGINT_MIN, le=BIGINT_MAX)
    final_price: Decimal = Field(
        default=Decimal("0"), alias="FinalPrice", ge=0, max_digits=10, decimal_places=2
    )

    model_config = {"populate_by_name": True}


class OrderUpdate(BaseModel):
    table_number: int | None = Field(
        default=None, alias="TableNumber", ge=BIGINT_MIN, le=BIGINT_MAX
    )
    final_price: Decimal | None = Field(
        default=None, alias="FinalPrice", ge=0, max_digits=10, decimal_places=2
    )

    model_config = {"populate_by_name": True}


class DiscountDetailSummary(BaseModel):
    order_id: int = Field(alias="OrderID")
    dish_id: int = Field(alias="DishID")
    discount: JsonDecimal = Field(alias="Discount")

    model_config = {"populate_by_name": True}


class OrderResponse(BaseModel):
    id: int = Field(alias="ID")
    table_number: int = Field(alias="TableNumber")
    final_price: JsonDecimal = Field(alias="FinalPrice")
    created_at: datetime = Field(alias="CreatedAt")
    updated_at: datetime = Field(alias="UpdatedAt")

    model_config = {"populate_by_name": True}


class OrderDetailResponse(OrderResponse):
    discount_details: list[DiscountDetailSummary] = Field(alias="DiscountDetail")
