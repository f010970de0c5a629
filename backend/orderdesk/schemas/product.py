from decimal import Decimal
from uuid import UUID

from pydantic import Field

from orderdesk.schemas.base import CamelModel, Money


class CreateProductRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    price: Decimal = Field(..., ge=0, max_digits=18, decimal_places=2)
    stock_quantity: int = Field(..., ge=0)


class ProductDto(CamelModel):
    id: UUID
    name: str
    price: Money
    stock_quantity: int
