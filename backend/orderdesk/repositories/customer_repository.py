"""
Customer Repository - Data Access Layer for Customers
"""
from typing import List, Optional
from uuid import UUID

from orderdesk.domain.customer import Customer
from orderdesk.repositories.base import cursor_scope

CUSTOMER_COLUMNS = "id, name, email, phone_number"


class CustomerRepository:
    """Repository for Customer data access"""

    def find_by_id(self, customer_id: UUID, conn=None) -> Optional[Customer]:
        with cursor_scope(conn) as cursor:
            cursor.execute(f"""
                SELECT {CUSTOMER_COLUMNS}
                FROM customers
                WHERE id = %s
            """, (customer_id,))

            row = cursor.fetchone()
            return self._map_row(row) if row else None

    def find_by_email(self, email: str, conn=None) -> Optional[Customer]:
        """Exact, case-sensitive email match"""
        with cursor_scope(conn) as cursor:
            cursor.execute(f"""
                SELECT {CUSTOMER_COLUMNS}
                FROM customers
                WHERE email = %s
            """, (email,))

            row = cursor.fetchone()
            return self._map_row(row) if row else None

    def find_all(self, conn=None) -> List[Customer]:
        with cursor_scope(conn) as cursor:
            cursor.execute(f"""
                SELECT {CUSTOMER_COLUMNS}
                FROM customers
                ORDER BY name ASC, id ASC
            """)

            return [self._map_row(row) for row in cursor.fetchall()]

    def insert(self, customer: Customer, conn=None) -> Customer:
        """
        Insert a customer

        Raises:
            psycopg2.errors.UniqueViolation: email already registered
        """
        with cursor_scope(conn) as cursor:
            cursor.execute(f"""
                INSERT INTO customers (id, name, email, phone_number)
                VALUES (%s, %s, %s, %s)
                RETURNING {CUSTOMER_COLUMNS}
            """, (customer.id, customer.name, str(customer.email), customer.phone_number))

            return self._map_row(cursor.fetchone())

    @staticmethod
    def _map_row(row) -> Customer:
        """Build from a stored row without re-running field validation"""
        return Customer.model_construct(**row)
