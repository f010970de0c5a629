"""
Products API Endpoints
Product catalog listing and product creation
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, status

from orderdesk.api.dependencies import get_product_service
from orderdesk.core.auth import TokenUser, require_auth
from orderdesk.schemas.product import CreateProductRequest, ProductDto
from orderdesk.services.product_service import CreateProductCommand, ProductService

router = APIRouter()


@router.get("", response_model=List[ProductDto])
def get_products(service: ProductService = Depends(get_product_service)):
    """Get all products, sorted by name"""
    return service.get_all()


@router.post("", response_model=ProductDto, status_code=status.HTTP_201_CREATED)
def create_product(
    body: CreateProductRequest,
    service: ProductService = Depends(get_product_service),
    user: Optional[TokenUser] = Depends(require_auth),
):
    command = CreateProductCommand(
        name=body.name,
        price=body.price,
        stock_quantity=body.stock_quantity,
    )
    return service.create_product(command)
