"""
Order Repository - Data Access Layer for Orders

Handles all database queries for orders and returns Order domain models
with their items (and the current catalog product of each item).
"""
from collections import defaultdict
from typing import Dict, List, Optional, Sequence
from uuid import UUID

from psycopg2.extras import execute_batch

from orderdesk.domain.order import Order, OrderItem, OrderStatus
from orderdesk.domain.product import Product
from orderdesk.repositories.base import cursor_scope

ORDER_COLUMNS = "o.id, o.customer_id, o.total_amount, o.created_at, o.status"

ITEMS_QUERY = """
    SELECT
        oi.id, oi.order_id, oi.product_id, oi.quantity, oi.unit_price,
        p.name AS product_name,
        p.price AS product_price,
        p.stock_quantity AS product_stock_quantity
    FROM order_items oi
    LEFT JOIN products p ON oi.product_id = p.id
    WHERE oi.order_id = ANY(%s)
    ORDER BY oi.order_id, oi.line_number
"""


class OrderRepository:
    """
    Repository for Order data access

    All SQL queries for orders are centralized here.
    """

    def find_by_id(self, order_id: UUID, conn=None) -> Optional[Order]:
        """
        Find order by ID with its items

        Returns:
            Order with items or None if not found
        """
        with cursor_scope(conn) as cursor:
            cursor.execute(f"""
                SELECT {ORDER_COLUMNS}
                FROM orders o
                WHERE o.id = %s
            """, (order_id,))

            row = cursor.fetchone()
            if not row:
                return None

            return self._attach_items(cursor, [row])[0]

    def find_by_customer(self, customer_id: UUID, conn=None) -> List[Order]:
        """Orders of one customer, most recent first"""
        return self.find_by_customers([customer_id], conn=conn).get(customer_id, [])

    def find_by_customers(self, customer_ids: Sequence[UUID], conn=None) -> Dict[UUID, List[Order]]:
        """
        Orders for many customers in two queries (orders, then all their items)

        Returns:
            customer_id -> orders, each list most recent first
        """
        if not customer_ids:
            return {}

        with cursor_scope(conn) as cursor:
            cursor.execute(f"""
                SELECT {ORDER_COLUMNS}
                FROM orders o
                WHERE o.customer_id = ANY(%s)
                ORDER BY o.created_at DESC, o.id
            """, (list(customer_ids),))

            orders = self._attach_items(cursor, cursor.fetchall())

        by_customer: Dict[UUID, List[Order]] = defaultdict(list)
        for order in orders:
            by_customer[order.customer_id].append(order)
        return dict(by_customer)

    def insert(self, order: Order, conn=None) -> Order:
        """Insert the order row and all of its item rows"""
        with cursor_scope(conn) as cursor:
            cursor.execute("""
                INSERT INTO orders (id, customer_id, total_amount, created_at, status)
                VALUES (%s, %s, %s, %s, %s)
            """, (order.id, order.customer_id, order.total_amount, order.created_at, order.status.value))

            execute_batch(cursor, """
                INSERT INTO order_items (id, order_id, line_number, product_id, quantity, unit_price)
                VALUES (%s, %s, %s, %s, %s, %s)
            """, [
                (item.id, order.id, line_number, item.product_id, item.quantity, item.unit_price)
                for line_number, item in enumerate(order.items, start=1)
            ])

        return order

    def update_status(
        self,
        order_id: UUID,
        current_status: OrderStatus,
        new_status: OrderStatus,
        conn=None
    ) -> bool:
        """
        Compare-and-set the status column

        Returns:
            False if the order no longer has `current_status`
        """
        with cursor_scope(conn) as cursor:
            cursor.execute("""
                UPDATE orders
                SET status = %s
                WHERE id = %s AND status = %s
            """, (new_status.value, order_id, current_status.value))

            return cursor.rowcount == 1

    def _attach_items(self, cursor, order_rows) -> List[Order]:
        """Load items for all given order rows in ONE query"""
        if not order_rows:
            return []

        cursor.execute(ITEMS_QUERY, ([row['id'] for row in order_rows],))

        items_by_order: Dict[UUID, List[OrderItem]] = defaultdict(list)
        for item_row in cursor.fetchall():
            items_by_order[item_row['order_id']].append(self._map_item_row(item_row))

        orders = []
        for row in order_rows:
            order_dict = dict(row)
            order_dict['items'] = items_by_order.get(row['id'], [])
            orders.append(Order(**order_dict))
        return orders

    @staticmethod
    def _map_item_row(row) -> OrderItem:
        product = None
        if row.get('product_name') is not None:
            product = Product(
                id=row['product_id'],
                name=row['product_name'],
                price=row['product_price'],
                stock_quantity=row['product_stock_quantity'],
            )

        return OrderItem(
            id=row['id'],
            order_id=row['order_id'],
            product_id=row['product_id'],
            quantity=row['quantity'],
            unit_price=row['unit_price'],
            product=product,
        )
