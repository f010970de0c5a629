"""
Customer Domain Model

A customer owns orders, but the entity only carries its own columns.
Orders point back through `Order.customer_id`; the read side joins them.
"""
from typing import Annotated, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

from orderdesk.domain.email import Email

# Surrounding whitespace is dropped first, so a blank name fails min_length
CustomerName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)]


class Customer(BaseModel):
    """
    Customer domain model

    Fields:
        id: Customer ID (primary key)
        name: Full name
        email: Validated, unique email address
        phone_number: Optional contact phone
    """

    id: UUID = Field(default_factory=uuid4, description="Customer ID")
    name: CustomerName = Field(..., description="Customer name")
    email: str = Field(..., description="Customer email", max_length=320)
    phone_number: Optional[str] = Field(None, description="Customer phone", max_length=20)

    model_config = ConfigDict(from_attributes=True)

    @field_validator("email")
    @classmethod
    def _email_must_be_valid(cls, value: str) -> str:
        return Email(value)
