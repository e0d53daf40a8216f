from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, Field, PlainSerializer

# Decimal in Python, plain JSON number on the wire
JsonDecimal = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class ErrorResponse(BaseModel):
    error: str = Field(alias="Error")

    model_config = {"populate_by_name": True}
