"""
Unit tests for CustomerRepository
"""
from unittest.mock import patch
from uuid import uuid4

from orderdesk.domain.customer import Customer
from orderdesk.repositories.customer_repository import CustomerRepository


def _row(name="John Doe", email="john.doe@mail.com"):
    return {'id': uuid4(), 'name': name, 'email': email, 'phone_number': None}


class TestCustomerRepository:

    def test_find_by_email_matches_exactly(self, mock_conn):
        # Arrange
        cursor = mock_conn.cursor.return_value
        cursor.fetchone.return_value = _row()

        # Act
        customer = CustomerRepository().find_by_email('john.doe@mail.com', conn=mock_conn)

        # Assert
        assert isinstance(customer, Customer)
        query, params = cursor.execute.call_args[0]
        assert 'WHERE email = %s' in query
        assert params == ('john.doe@mail.com',)

    def test_find_by_email_returns_none(self, mock_conn):
        mock_conn.cursor.return_value.fetchone.return_value = None

        assert CustomerRepository().find_by_email('nobody@mail.com', conn=mock_conn) is None

    @patch('orderdesk.repositories.base.get_db_connection_dict_with_retry')
    def test_find_all(self, mock_get_conn, mock_conn):
        mock_get_conn.return_value = mock_conn
        mock_conn.cursor.return_value.fetchall.return_value = [
            _row('Alice', 'alice@mail.com'),
            _row('Bob', 'bob@mail.com'),
        ]

        customers = CustomerRepository().find_all()

        assert [c.name for c in customers] == ['Alice', 'Bob']
        mock_conn.close.assert_called_once()

    def test_insert_stores_email_as_text(self, mock_conn):
        # Arrange
        customer = Customer(name='John Doe', email='john.doe@mail.com')
        cursor = mock_conn.cursor.return_value
        cursor.fetchone.return_value = {
            'id': customer.id,
            'name': customer.name,
            'email': 'john.doe@mail.com',
            'phone_number': None,
        }

        # Act
        created = CustomerRepository().insert(customer, conn=mock_conn)

        # Assert
        assert created.id == customer.id
        params = cursor.execute.call_args[0][1]
        assert params[2] == 'john.doe@mail.com'
        assert type(params[2]) is str

    def test_stored_rows_are_not_revalidated(self, mock_conn):
        """An address accepted by an older rule still loads"""
        mock_conn.cursor.return_value.fetchone.return_value = _row(email='user@localhost')

        customer = CustomerRepository().find_by_id(uuid4(), conn=mock_conn)

        assert customer.email == 'user@localhost'
