"""
Unit tests for CustomerService
"""
from unittest.mock import Mock, patch
from uuid import uuid4

import psycopg2.errors
import pytest

from orderdesk.core.errors import ErrorKind, ServiceError
from orderdesk.domain.customer import Customer
from orderdesk.services.customer_service import CreateCustomerCommand, CustomerService


@pytest.fixture
def customer_repo():
    repo = Mock()
    repo.find_by_email.return_value = None
    repo.insert.side_effect = lambda customer, conn=None: customer
    return repo


@pytest.fixture
def order_repo():
    return Mock()


@pytest.fixture
def service(customer_repo, order_repo, fake_transaction):
    with patch('orderdesk.services.customer_service.transaction', fake_transaction):
        yield CustomerService(customer_repository=customer_repo, order_repository=order_repo)


class TestCreateCustomer:
    """Test customer registration"""

    def test_creates_customer(self, service, customer_repo, fake_transaction):
        # Act
        result = service.create_customer(CreateCustomerCommand(
            name="John Doe",
            email="john.doe@mail.com",
            phone_number="+1234567890",
        ))

        # Assert
        assert result.name == "John Doe"
        assert result.email == "john.doe@mail.com"
        assert result.phone_number == "+1234567890"
        assert result.orders == []
        customer_repo.find_by_email.assert_called_once_with("john.doe@mail.com", conn=fake_transaction.conn)
        customer_repo.insert.assert_called_once()
        assert fake_transaction.committed

    def test_invalid_email_fails_before_any_lookup(self, service, customer_repo, fake_transaction):
        with pytest.raises(ServiceError) as exc_info:
            service.create_customer(CreateCustomerCommand(name="John", email="not-an-email"))

        assert exc_info.value.kind == ErrorKind.VALIDATION
        assert exc_info.value.errors == {"email": ["Invalid email format."]}
        customer_repo.find_by_email.assert_not_called()
        customer_repo.insert.assert_not_called()
        assert not fake_transaction.committed
        assert not fake_transaction.rolled_back

    def test_empty_email(self, service, customer_repo):
        with pytest.raises(ServiceError) as exc_info:
            service.create_customer(CreateCustomerCommand(name="John", email=""))

        assert exc_info.value.message == "Email cannot be null or empty."
        customer_repo.find_by_email.assert_not_called()

    def test_duplicate_email_rejected(self, service, customer_repo, sample_customer, fake_transaction):
        # Arrange
        customer_repo.find_by_email.return_value = sample_customer

        # Act
        with pytest.raises(ServiceError) as exc_info:
            service.create_customer(CreateCustomerCommand(name="Other", email="john.doe@mail.com"))

        # Assert
        assert exc_info.value.kind == ErrorKind.BUSINESS_RULE
        assert exc_info.value.message == "Customer with email 'john.doe@mail.com' already exists."
        customer_repo.insert.assert_not_called()
        assert fake_transaction.rolled_back

    def test_unique_violation_maps_to_duplicate(self, service, customer_repo):
        """A concurrent registration that slips past the lookup hits the unique index"""
        customer_repo.insert.side_effect = psycopg2.errors.UniqueViolation("duplicate key")

        with pytest.raises(ServiceError) as exc_info:
            service.create_customer(CreateCustomerCommand(name="John", email="john.doe@mail.com"))

        assert exc_info.value.kind == ErrorKind.BUSINESS_RULE
        assert exc_info.value.message == "Customer with email 'john.doe@mail.com' already exists."

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected(self, name):
        with pytest.raises(ValueError):
            CreateCustomerCommand(name=name, email="john.doe@mail.com")

    def test_email_lookup_is_case_sensitive(self, service, customer_repo):
        service.create_customer(CreateCustomerCommand(name="John", email="John.Doe@mail.com"))

        customer_repo.find_by_email.assert_called_once()
        assert customer_repo.find_by_email.call_args[0][0] == "John.Doe@mail.com"


class TestCustomerQueries:

    def test_get_all_batches_order_loading(self, service, customer_repo, order_repo, sample_order):
        # Arrange
        alice = Customer(id=sample_order.customer_id, name="Alice", email="alice@mail.com")
        bob = Customer(name="Bob", email="bob@mail.com")
        customer_repo.find_all.return_value = [alice, bob]
        order_repo.find_by_customers.return_value = {alice.id: [sample_order]}

        # Act
        result = service.get_all()

        # Assert
        assert [c.name for c in result] == ["Alice", "Bob"]
        assert [o.id for o in result[0].orders] == [sample_order.id]
        assert result[1].orders == []
        order_repo.find_by_customers.assert_called_once_with([alice.id, bob.id])
        order_repo.find_by_customer.assert_not_called()

    def test_get_by_id_includes_orders(self, service, customer_repo, order_repo, sample_customer, sample_order):
        customer_repo.find_by_id.return_value = sample_customer
        order_repo.find_by_customer.return_value = [sample_order]

        result = service.get_by_id(sample_customer.id)

        assert result.id == sample_customer.id
        assert result.orders[0].total_amount == sample_order.total_amount

    def test_get_by_id_missing(self, service, customer_repo, order_repo):
        customer_repo.find_by_id.return_value = None

        assert service.get_by_id(uuid4()) is None
        order_repo.find_by_customer.assert_not_called()
