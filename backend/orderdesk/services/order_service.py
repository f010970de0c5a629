"""
Order Service
Order placement workflow and order status lifecycle

Placement runs as one transaction: every line is validated and its stock
taken with a conditional update, then the order and its items are inserted.
Any failure rolls the whole unit back, so a rejected order never leaves
partial stock decrements behind.
"""
import logging
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from orderdesk.core.cache import MemoryCache, cache as default_cache
from orderdesk.core.database import transaction
from orderdesk.core.errors import BusinessRuleError, NotFoundError
from orderdesk.domain.order import Order, OrderItem, OrderStatus
from orderdesk.mappings import order_to_dto
from orderdesk.repositories.customer_repository import CustomerRepository
from orderdesk.repositories.order_repository import OrderRepository
from orderdesk.repositories.product_repository import ProductRepository
from orderdesk.schemas.order import OrderDto
from orderdesk.services.product_service import PRODUCTS_CACHE_PATTERN

logger = logging.getLogger(__name__)


class OrderLine(BaseModel):
    product_id: UUID
    quantity: int = Field(..., gt=0)


class CreateOrderCommand(BaseModel):
    customer_id: UUID
    items: Optional[List[OrderLine]] = None


class OrderService:
    """
    Service for placing orders and moving them through their lifecycle

    Handles:
    - Customer and product existence checks
    - Stock validation and atomic stock decrement
    - Unit price snapshot and total computation
    - Status transitions (Pending -> Paid -> Shipped -> Delivered, Cancelled)
    """

    def __init__(
        self,
        order_repository: Optional[OrderRepository] = None,
        customer_repository: Optional[CustomerRepository] = None,
        product_repository: Optional[ProductRepository] = None,
        cache: Optional[MemoryCache] = None,
    ):
        self.orders = order_repository or OrderRepository()
        self.customers = customer_repository or CustomerRepository()
        self.products = product_repository or ProductRepository()
        self.cache = cache if cache is not None else default_cache

    def create_order(self, command: CreateOrderCommand) -> OrderDto:
        """
        Place an order

        Steps:
        1. Customer must exist
        2. At least one line
        3. For each line, in order: product must exist, stock must cover the
           quantity, snapshot the price, take the stock
        4. Insert the Pending order with its computed total

        Raises:
            ServiceError(NOT_FOUND): customer or product missing
            ServiceError(BUSINESS_RULE): no items, or insufficient stock
        """
        with transaction() as conn:
            customer = self.customers.find_by_id(command.customer_id, conn=conn)
            if customer is None:
                raise NotFoundError("Customer", command.customer_id)

            if not command.items:
                raise BusinessRuleError("Order must contain at least one item.")

            items: List[OrderItem] = []
            for line in command.items:
                items.append(self._reserve_line(line, conn))

            order = Order.place(customer.id, items)
            self.orders.insert(order, conn=conn)

        # Stock changed, cached catalog is stale
        self.cache.remove_by_pattern(PRODUCTS_CACHE_PATTERN)

        logger.info(
            f"Order {order.id} created for customer {order.customer_id}: "
            f"{order.item_count} items ({order.total_quantity} units), total {order.total_amount}"
        )
        return order_to_dto(order)

    def _reserve_line(self, line: OrderLine, conn) -> OrderItem:
        """Validate one requested line, take its stock and return the snapshotted item"""
        product = self.products.find_by_id(line.product_id, conn=conn)
        if product is None:
            raise NotFoundError("Product", line.product_id)

        if not product.has_stock_for(line.quantity):
            raise self._insufficient_stock(product.name, product.stock_quantity, line.quantity)

        remaining = self.products.decrement_stock(product.id, line.quantity, conn=conn)
        if remaining is None:
            # Another order took the stock between our read and the update
            current = self.products.find_by_id(product.id, conn=conn)
            available = current.stock_quantity if current else 0
            raise self._insufficient_stock(product.name, available, line.quantity)

        return OrderItem(
            product_id=product.id,
            quantity=line.quantity,
            unit_price=product.price,
        )

    @staticmethod
    def _insufficient_stock(name: str, available: int, requested: int):
        logger.warning(f"Rejected order line for '{name}': available {available}, requested {requested}")
        return BusinessRuleError(
            f"Insufficient stock for product '{name}'. Available: {available}, Requested: {requested}"
        )

    def update_status(self, order_id: UUID, new_status: OrderStatus) -> OrderDto:
        """
        Move an order to `new_status` if the lifecycle allows it

        Only the status column changes. Totals, items and stock are untouched;
        cancelling does not restock.
        """
        with transaction() as conn:
            order = self.orders.find_by_id(order_id, conn=conn)
            if order is None:
                raise NotFoundError("Order", order_id)

            current_status = order.status
            if not order.can_transition_to(new_status):
                raise BusinessRuleError(
                    f"Invalid status transition from '{current_status.value}' to '{new_status.value}'."
                )

            if not self.orders.update_status(order.id, current_status, new_status, conn=conn):
                # Another request changed the status after we read it
                raise BusinessRuleError(
                    f"Invalid status transition from '{current_status.value}' to '{new_status.value}'."
                )

            order.status = new_status

        logger.info(f"Order {order.id} status changed: {current_status.value} -> {new_status.value}")
        return order_to_dto(order)

    def get_by_id(self, order_id: UUID) -> Optional[OrderDto]:
        order = self.orders.find_by_id(order_id)
        return order_to_dto(order) if order else None

    def get_customer_orders(self, customer_id: UUID) -> List[OrderDto]:
        """Orders of a customer, most recent first"""
        return [order_to_dto(order) for order in self.orders.find_by_customer(customer_id)]
