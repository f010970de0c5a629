"""
Orders API Endpoints
Order placement, lookup and status updates
"""
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from orderdesk.api.dependencies import get_order_service
from orderdesk.core.auth import TokenUser, require_auth
from orderdesk.schemas.order import CreateOrderRequest, OrderDto, UpdateOrderStatusRequest
from orderdesk.services.order_service import CreateOrderCommand, OrderLine, OrderService

router = APIRouter()


@router.post("", response_model=OrderDto, status_code=status.HTTP_201_CREATED)
def create_order(
    body: CreateOrderRequest,
    service: OrderService = Depends(get_order_service),
    user: Optional[TokenUser] = Depends(require_auth),
):
    """
    Create a new order for a customer

    Returns:
    - 201 with the order and its computed total
    - 400 when there are no items or stock is insufficient
    - 404 when the customer or a product does not exist
    """
    command = CreateOrderCommand(
        customer_id=body.customer_id,
        items=[OrderLine(product_id=i.product_id, quantity=i.quantity) for i in body.items],
    )
    return service.create_order(command)


@router.get("/{order_id}", response_model=OrderDto)
def get_order(order_id: UUID, service: OrderService = Depends(get_order_service)):
    order = service.get_by_id(order_id)
    if order is None:
        raise HTTPException(status_code=404, detail=f"Order with ID '{order_id}' not found.")
    return order


@router.put("/{order_id}/status", response_model=OrderDto)
def update_order_status(
    order_id: UUID,
    body: UpdateOrderStatusRequest,
    service: OrderService = Depends(get_order_service),
    user: Optional[TokenUser] = Depends(require_auth),
):
    """
    Update the status of an order

    Valid status transitions:
    - Pending -> Paid or Cancelled
    - Paid -> Shipped or Cancelled
    - Shipped -> Delivered
    - Delivered, Cancelled -> (no transitions allowed)
    """
    if order_id != body.order_id:
        raise HTTPException(
            status_code=400,
            detail="Order ID in URL does not match the ID in the request body",
        )

    return service.update_status(body.order_id, body.status)
