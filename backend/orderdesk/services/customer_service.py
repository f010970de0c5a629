"""
Customer Service
Customer registration and customer read queries
"""
import logging
from typing import List, Optional
from uuid import UUID

import psycopg2.errors
from pydantic import BaseModel

from orderdesk.core.database import transaction
from orderdesk.core.errors import BusinessRuleError
from orderdesk.domain.customer import Customer, CustomerName
from orderdesk.domain.email import Email
from orderdesk.mappings import customer_to_dto
from orderdesk.repositories.customer_repository import CustomerRepository
from orderdesk.repositories.order_repository import OrderRepository
from orderdesk.schemas.customer import CustomerDto

logger = logging.getLogger(__name__)


class CreateCustomerCommand(BaseModel):
    name: CustomerName
    email: str
    phone_number: Optional[str] = None


class CustomerService:
    """
    Service for customers

    Handles:
    - Email format validation (Email value object) before any lookup
    - Duplicate email rejection
    - Customer reads with their orders attached
    """

    def __init__(
        self,
        customer_repository: Optional[CustomerRepository] = None,
        order_repository: Optional[OrderRepository] = None,
    ):
        self.customers = customer_repository or CustomerRepository()
        self.orders = order_repository or OrderRepository()

    def create_customer(self, command: CreateCustomerCommand) -> CustomerDto:
        """
        Register a customer

        Raises:
            ServiceError(VALIDATION): malformed email
            ServiceError(BUSINESS_RULE): email already registered
        """
        email = Email(command.email)

        try:
            with transaction() as conn:
                if self.customers.find_by_email(str(email), conn=conn) is not None:
                    raise self._duplicate_email(email)

                customer = Customer(
                    name=command.name,
                    email=email,
                    phone_number=command.phone_number,
                )
                created = self.customers.insert(customer, conn=conn)
        except psycopg2.errors.UniqueViolation:
            # Concurrent registration with the same email won the insert
            raise self._duplicate_email(email) from None

        logger.info(f"Customer {created.id} created")
        return customer_to_dto(created, orders=[])

    @staticmethod
    def _duplicate_email(email: str):
        logger.warning(f"Rejected customer registration: email '{email}' already exists")
        return BusinessRuleError(f"Customer with email '{email}' already exists.")

    def get_all(self) -> List[CustomerDto]:
        customers = self.customers.find_all()
        orders_by_customer = self.orders.find_by_customers([c.id for c in customers])
        return [customer_to_dto(c, orders_by_customer.get(c.id, [])) for c in customers]

    def get_by_id(self, customer_id: UUID) -> Optional[CustomerDto]:
        """Customer with orders, or None. The API decides what a miss means."""
        customer = self.customers.find_by_id(customer_id)
        if customer is None:
            return None
        return customer_to_dto(customer, self.orders.find_by_customer(customer.id))
