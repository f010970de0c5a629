"""
Repository Layer - Data Access

This layer handles all database queries and returns domain models.
Repositories abstract away SQL details from business logic.
"""
from orderdesk.repositories.customer_repository import CustomerRepository
from orderdesk.repositories.order_repository import OrderRepository
from orderdesk.repositories.product_repository import ProductRepository

__all__ = [
    'CustomerRepository',
    'OrderRepository',
    'ProductRepository'
]
