from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from app.schemas.common import JsonDecimal


class DishCreate(BaseModel):
    name: str = Field(alias="Name", min_length=1, max_length=100)
    # Matches the Numeric(10, 2) column so the stored price is the validated one
    price: Decimal = Field(alias="Price", gt=0, max_digits=10, decimal_places=2)

    model_config = {"populate_by_name": True}


class DishUpdate(BaseModel):
    name: str | None = Field(default=None, alias="Name", min_length=1, max_length=100)
    price: Decimal | None = Field(
        default=None, alias="Price", gt=0, max_digits=10, decimal_places=2
    )

    model_config = {"populate_by_name": True}


class DishResponse(BaseModel):
    id: int = Field(alias="ID")
    name: str = Field(alias="Name")
    price: JsonDecimal = Field(alias="Price")
    created_at: datetime = Field(alias="CreatedAt")
    updated_at: datetime = Field(alias="UpdatedAt")

    model_config = {"populate_by_name": True}
