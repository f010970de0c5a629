"""
Transport schemas

Request bodies and response DTOs for the HTTP API. Field names are
snake_case in Python and camelCase on the wire.
"""
from orderdesk.schemas.auth import LoginRequest, LoginResponse
from orderdesk.schemas.customer import CreateCustomerRequest, CustomerDto
from orderdesk.schemas.order import (
    CreateOrderRequest,
    OrderDto,
    OrderItemDto,
    OrderItemRequest,
    UpdateOrderStatusRequest,
)
from orderdesk.schemas.product import CreateProductRequest, ProductDto

__all__ = [
    'CreateCustomerRequest',
    'CreateOrderRequest',
    'CreateProductRequest',
    'CustomerDto',
    'LoginRequest',
    'LoginResponse',
    'OrderDto',
    'OrderItemDto',
    'OrderItemRequest',
    'ProductDto',
    'UpdateOrderStatusRequest',
]
