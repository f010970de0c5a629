"""
Database schema and initial data

init_database() is idempotent: tables and indexes are created only when
missing, and the starter catalog is inserted only into an empty products
table.
"""
import logging
import uuid
from decimal import Decimal

from orderdesk.core.database import transaction

logger = logging.getLogger(__name__)


SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS customers (
    id UUID PRIMARY KEY,
    name VARCHAR(200) NOT NULL,
    email VARCHAR(320) NOT NULL,
    phone_number VARCHAR(20),
    CONSTRAINT uq_customers_email UNIQUE (email)
);

CREATE TABLE IF NOT EXISTS products (
    id UUID PRIMARY KEY,
    name VARCHAR(200) NOT NULL,
    price NUMERIC(18, 2) NOT NULL CHECK (price >= 0),
    stock_quantity INTEGER NOT NULL CHECK (stock_quantity >= 0)
);

CREATE TABLE IF NOT EXISTS orders (
    id UUID PRIMARY KEY,
    customer_id UUID NOT NULL REFERENCES customers (id) ON DELETE CASCADE,
    total_amount NUMERIC(18, 2) NOT NULL,
    created_at TIMESTAMPTZ NOT NULL,
    status VARCHAR(20) NOT NULL
        CHECK (status IN ('Pending', 'Paid', 'Shipped', 'Delivered', 'Cancelled'))
);

CREATE TABLE IF NOT EXISTS order_items (
    id UUID PRIMARY KEY,
    order_id UUID NOT NULL REFERENCES orders (id) ON DELETE CASCADE,
    product_id UUID NOT NULL REFERENCES products (id) ON DELETE RESTRICT,
    line_number INTEGER NOT NULL,
    quantity INTEGER NOT NULL CHECK (quantity > 0),
    unit_price NUMERIC(18, 2) NOT NULL
);

CREATE INDEX IF NOT EXISTS ix_orders_customer_id ON orders (customer_id);
CREATE INDEX IF NOT EXISTS ix_orders_created_at ON orders (created_at);
CREATE INDEX IF NOT EXISTS ix_order_items_order_id ON order_items (order_id);
CREATE INDEX IF NOT EXISTS ix_order_items_product_id ON order_items (product_id);
CREATE INDEX IF NOT EXISTS ix_products_name ON products (name);
"""

SEED_PRODUCTS = [
    ("Margherita Pizza", Decimal("12.99"), 50),
    ("Pepperoni Pizza", Decimal("14.99"), 45),
    ("Caesar Salad", Decimal("8.99"), 30),
    ("Grilled Chicken", Decimal("16.99"), 25),
    ("Pasta Carbonara", Decimal("13.99"), 40),
    ("Tiramisu", Decimal("6.99"), 20),
    ("Coca Cola", Decimal("2.99"), 100),
    ("Orange Juice", Decimal("3.49"), 60),
]


def create_schema(conn) -> None:
    cursor = conn.cursor()
    try:
        cursor.execute(SCHEMA_SQL)
    finally:
        cursor.close()


def seed_products(conn) -> int:
    """Insert the starter catalog if there are no products yet. Returns rows inserted."""
    cursor = conn.cursor()
    try:
        cursor.execute("SELECT COUNT(*) AS total FROM products")
        if cursor.fetchone()['total'] > 0:
            return 0

        for name, price, stock in SEED_PRODUCTS:
            cursor.execute("""
                INSERT INTO products (id, name, price, stock_quantity)
                VALUES (%s, %s, %s, %s)
            """, (uuid.uuid4(), name, price, stock))
        return len(SEED_PRODUCTS)
    finally:
        cursor.close()


def init_database() -> None:
    with transaction() as conn:
        create_schema(conn)
        seeded = seed_products(conn)

    logger.info("Database schema verified")
    if seeded:
        logger.info(f"Seeded {seeded} products")
