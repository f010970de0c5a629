"""
Product Repository - Data Access Layer for Products

Handles all database queries for products and returns Product domain models.
"""
from typing import List, Optional
from uuid import UUID

from orderdesk.domain.product import Product
from orderdesk.repositories.base import cursor_scope

PRODUCT_COLUMNS = "id, name, price, stock_quantity"


class ProductRepository:
    """
    Repository for Product data access

    All SQL queries for products are centralized here.
    """

    def find_by_id(self, product_id: UUID, conn=None) -> Optional[Product]:
        """
        Find product by ID

        Args:
            product_id: Product ID
            conn: Open connection to run inside (optional)

        Returns:
            Product or None if not found
        """
        with cursor_scope(conn) as cursor:
            cursor.execute(f"""
                SELECT {PRODUCT_COLUMNS}
                FROM products
                WHERE id = %s
            """, (product_id,))

            row = cursor.fetchone()
            return Product(**row) if row else None

    def find_all(self, conn=None) -> List[Product]:
        """All products, ordered by name ascending"""
        with cursor_scope(conn) as cursor:
            cursor.execute(f"""
                SELECT {PRODUCT_COLUMNS}
                FROM products
                ORDER BY name ASC, id ASC
            """)

            return [Product(**row) for row in cursor.fetchall()]

    def insert(self, product: Product, conn=None) -> Product:
        with cursor_scope(conn) as cursor:
            cursor.execute(f"""
                INSERT INTO products (id, name, price, stock_quantity)
                VALUES (%s, %s, %s, %s)
                RETURNING {PRODUCT_COLUMNS}
            """, (product.id, product.name, product.price, product.stock_quantity))

            return Product(**cursor.fetchone())

    def decrement_stock(self, product_id: UUID, quantity: int, conn=None) -> Optional[int]:
        """
        Atomically take `quantity` units from stock

        The WHERE clause only matches while enough stock remains, so two
        concurrent orders can never both take the last units.

        Returns:
            Remaining stock, or None if the product is missing or short
        """
        with cursor_scope(conn) as cursor:
            cursor.execute("""
                UPDATE products
                SET stock_quantity = stock_quantity - %s
                WHERE id = %s AND stock_quantity >= %s
                RETURNING stock_quantity
            """, (quantity, product_id, quantity))

            row = cursor.fetchone()
            return row['stock_quantity'] if row else None
