"""
Entity -> DTO mapping

Pure functions, no I/O. Customers do not hold their orders, so the caller
passes them in explicitly.
"""
from typing import Iterable, Optional

from orderdesk.domain.customer import Customer
from orderdesk.domain.order import Order, OrderItem
from orderdesk.domain.product import Product
from orderdesk.schemas.customer import CustomerDto
from orderdesk.schemas.order import OrderDto, OrderItemDto
from orderdesk.schemas.product import ProductDto


def product_to_dto(product: Product) -> ProductDto:
    return ProductDto(
        id=product.id,
        name=product.name,
        price=product.price,
        stock_quantity=product.stock_quantity,
    )


def order_item_to_dto(item: OrderItem) -> OrderItemDto:
    return OrderItemDto(
        id=item.id,
        order_id=item.order_id,
        product_id=item.product_id,
        quantity=item.quantity,
        unit_price=item.unit_price,
        product=product_to_dto(item.product) if item.product else None,
    )


def order_to_dto(order: Order) -> OrderDto:
    return OrderDto(
        id=order.id,
        customer_id=order.customer_id,
        total_amount=order.total_amount,
        created_at=order.created_at,
        status=order.status,
        order_items=[order_item_to_dto(item) for item in order.items],
    )


def customer_to_dto(customer: Customer, orders: Optional[Iterable[Order]] = None) -> CustomerDto:
    return CustomerDto(
        id=customer.id,
        name=customer.name,
        email=str(customer.email),
        phone_number=customer.phone_number,
        orders=[order_to_dto(order) for order in orders or []],
    )
