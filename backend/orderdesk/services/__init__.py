"""
Service Layer - Business Workflows

Services own transactions and business rules; they talk to repositories
and hand DTOs back to the API layer.
"""
from orderdesk.services.customer_service import CreateCustomerCommand, CustomerService
from orderdesk.services.order_service import CreateOrderCommand, OrderLine, OrderService
from orderdesk.services.product_service import CreateProductCommand, ProductService

__all__ = [
    'CreateCustomerCommand',
    'CreateOrderCommand',
    'CreateProductCommand',
    'CustomerService',
    'OrderLine',
    'OrderService',
    'ProductService',
]
