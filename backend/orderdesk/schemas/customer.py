from typing import List, Optional
from uuid import UUID

from pydantic import Field

from orderdesk.domain.customer import CustomerName
from orderdesk.schemas.base import CamelModel
from orderdesk.schemas.order import OrderDto


class CreateCustomerRequest(CamelModel):
    """
    Sample request:

        POST /api/customers
        {
            "name": "John Doe",
            "email": "john.doe@example.com",
            "phoneNumber": "+1234567890"
        }
    """
    name: CustomerName
    # Format is checked by the Email value object inside the service
    email: str = Field(..., max_length=320)
    phone_number: Optional[str] = Field(None, max_length=20)


class CustomerDto(CamelModel):
    id: UUID
    name: str
    email: str
    phone_number: Optional[str] = None
    orders: List[OrderDto] = Field(default_factory=list)
