"""
Order Domain Models

Represents order-related entities and the order status lifecycle.
These are the single source of truth for order data structure.
"""
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Dict, FrozenSet, List, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from orderdesk.domain.product import Product


class OrderStatus(str, Enum):
    """Closed set of order states. Values are the wire strings."""

    PENDING = "Pending"
    PAID = "Paid"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"

    def can_transition_to(self, new_status: "OrderStatus") -> bool:
        """True only for the edges in ALLOWED_TRANSITIONS. Self-transitions are illegal."""
        return new_status in ALLOWED_TRANSITIONS[self]


# Directed graph of legal status changes
ALLOWED_TRANSITIONS: Dict[OrderStatus, FrozenSet[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.PAID, OrderStatus.CANCELLED}),
    OrderStatus.PAID: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


class OrderItem(BaseModel):
    """
    Order Item domain model - represents a line item in an order

    Fields:
        id: Order item ID
        order_id: Parent order ID
        product_id: Reference to product catalog
        quantity: Number of units ordered
        unit_price: Product price at the time the order was placed

        # From product catalog (optional, from JOIN)
        product: Current catalog product, for display only
    """

    id: UUID = Field(default_factory=uuid4, description="Order item ID")
    order_id: Optional[UUID] = Field(None, description="Parent order ID")
    product_id: UUID = Field(..., description="Product catalog ID")
    quantity: int = Field(..., description="Quantity ordered", ge=1)
    unit_price: Decimal = Field(..., description="Price per unit at order time", ge=0)

    product: Optional[Product] = Field(None, description="Catalog product (from JOIN)")

    model_config = ConfigDict(from_attributes=True)

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


class Order(BaseModel):
    """
    Order domain model - represents a customer order

    Fields:
        id: Order ID (primary key)
        customer_id: Owning customer, never changes
        total_amount: Sum of line totals, computed once at creation
        created_at: UTC creation timestamp
        status: Current lifecycle state (see OrderStatus)

        # Order items (one-to-many relationship)
        items: List of order items
    """

    id: UUID = Field(default_factory=uuid4, description="Order ID")
    customer_id: UUID = Field(..., description="Customer ID")
    total_amount: Decimal = Field(..., description="Total order amount", ge=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    status: OrderStatus = Field(OrderStatus.PENDING, description="Order status")

    items: List[OrderItem] = Field(default_factory=list, description="Order items")

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def place(cls, customer_id: UUID, items: List[OrderItem], now: Optional[datetime] = None) -> "Order":
        """
        Build a new Pending order from snapshotted line items.

        The total is derived from the items here and nowhere else.
        """
        order = cls(
            customer_id=customer_id,
            total_amount=sum((item.line_total for item in items), Decimal("0")),
            created_at=now or datetime.now(timezone.utc),
            status=OrderStatus.PENDING,
            items=items,
        )
        for item in order.items:
            item.order_id = order.id
        return order

    @property
    def item_count(self) -> int:
        """Total number of items in order"""
        return len(self.items)

    @property
    def total_quantity(self) -> int:
        """Total quantity of all items"""
        return sum(item.quantity for item in self.items)

    def can_transition_to(self, new_status: OrderStatus) -> bool:
        return self.status.can_transition_to(new_status)
