"""
Customers API Endpoints
Customer registration and customer queries
"""
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from orderdesk.api.dependencies import get_customer_service, get_order_service
from orderdesk.core.auth import TokenUser, require_auth
from orderdesk.schemas.customer import CreateCustomerRequest, CustomerDto
from orderdesk.schemas.order import OrderDto
from orderdesk.services.customer_service import CreateCustomerCommand, CustomerService
from orderdesk.services.order_service import OrderService

router = APIRouter()


@router.get("", response_model=List[CustomerDto])
def get_customers(service: CustomerService = Depends(get_customer_service)):
    """Get all customers with their orders"""
    return service.get_all()


@router.post("", response_model=CustomerDto, status_code=status.HTTP_201_CREATED)
def create_customer(
    body: CreateCustomerRequest,
    service: CustomerService = Depends(get_customer_service),
    user: Optional[TokenUser] = Depends(require_auth),
):
    """
    Create a new customer

    Returns 400 when the email is malformed or already registered.
    """
    command = CreateCustomerCommand(
        name=body.name,
        email=body.email,
        phone_number=body.phone_number,
    )
    return service.create_customer(command)


@router.get("/{customer_id}", response_model=CustomerDto)
def get_customer(customer_id: UUID, service: CustomerService = Depends(get_customer_service)):
    """Get a customer by ID including their orders"""
    customer = service.get_by_id(customer_id)
    if customer is None:
        raise HTTPException(status_code=404, detail=f"Customer with ID '{customer_id}' not found.")
    return customer


@router.get("/{customer_id}/orders", response_model=List[OrderDto])
def get_customer_orders(customer_id: UUID, service: OrderService = Depends(get_order_service)):
    """Get all orders of a customer, most recent first"""
    return service.get_customer_orders(customer_id)
