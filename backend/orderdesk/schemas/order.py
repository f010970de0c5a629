from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from orderdesk.domain.order import OrderStatus
from orderdesk.schemas.base import CamelModel, Money
from orderdesk.schemas.product import ProductDto


class OrderItemRequest(CamelModel):
    product_id: UUID
    quantity: int = Field(..., gt=0, description="Quantity must be greater than zero")


class CreateOrderRequest(CamelModel):
    """
    Sample request:

        POST /api/orders
        {
            "customerId": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
            "items": [
                {"productId": "7c9e6679-7425-40de-944b-e07fc1f90ae7", "quantity": 2}
            ]
        }
    """
    customer_id: UUID
    # Emptiness is a business rule checked by the order service
    items: List[OrderItemRequest]


class UpdateOrderStatusRequest(CamelModel):
    order_id: UUID
    status: OrderStatus


class OrderItemDto(CamelModel):
    id: UUID
    order_id: UUID
    product_id: UUID
    quantity: int
    unit_price: Money
    product: Optional[ProductDto] = None


class OrderDto(CamelModel):
    id: UUID
    customer_id: UUID
    total_amount: Money
    created_at: datetime
    status: OrderStatus
    order_items: List[OrderItemDto] = Field(default_factory=list)
