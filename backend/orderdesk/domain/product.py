"""
Product Domain Model

Represents a product entity in the OrderDesk catalog.
This is the single source of truth for product data structure.
"""
from decimal import Decimal
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """
    Product domain model - represents a product in our catalog

    Fields:
        id: Product ID (primary key)
        name: Product name
        price: Current selling price, two decimal places
        stock_quantity: Units available for new orders
    """

    id: UUID = Field(default_factory=uuid4, description="Product ID")
    name: str = Field(..., description="Product name", min_length=1, max_length=200)
    price: Decimal = Field(..., description="Unit price", ge=0, max_digits=18, decimal_places=2)
    stock_quantity: int = Field(0, description="Units in stock", ge=0)

    model_config = ConfigDict(from_attributes=True)

    def has_stock_for(self, quantity: int) -> bool:
        """Check if `quantity` units can be taken from current stock"""
        return quantity <= self.stock_quantity
