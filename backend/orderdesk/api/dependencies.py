"""
FastAPI dependency providers

Routers ask for services through these functions so tests can swap them
with app.dependency_overrides.
"""
from orderdesk.services.customer_service import CustomerService
from orderdesk.services.order_service import OrderService
from orderdesk.services.product_service import ProductService


def get_customer_service() -> CustomerService:
    return CustomerService()


def get_order_service() -> OrderService:
    return OrderService()


def get_product_service() -> ProductService:
    return ProductService()
