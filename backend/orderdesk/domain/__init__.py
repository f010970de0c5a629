"""
Domain Layer - Business Entities

This layer contains Pydantic models representing business entities.
These models enforce type safety and validation across the application.
"""
from orderdesk.domain.customer import Customer
from orderdesk.domain.email import Email
from orderdesk.domain.order import ALLOWED_TRANSITIONS, Order, OrderItem, OrderStatus
from orderdesk.domain.product import Product

__all__ = ['Customer', 'Email', 'Order', 'OrderItem', 'OrderStatus', 'ALLOWED_TRANSITIONS', 'Product']
