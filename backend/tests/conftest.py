"""
Pytest fixtures and configuration for OrderDesk backend tests

Nothing here needs a running database: repositories get MagicMock
connections and services get Mock repositories plus a fake transaction.
"""
from contextlib import contextmanager
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock, Mock
from uuid import UUID

import pytest
from fastapi.testclient import TestClient

from orderdesk.core.cache import MemoryCache
from orderdesk.domain.customer import Customer
from orderdesk.domain.order import Order, OrderItem, OrderStatus
from orderdesk.domain.product import Product
from orderdesk.main import create_app

CUSTOMER_ID = UUID("3fa85f64-5717-4562-b3fc-2c963f66afa6")
PRODUCT_A_ID = UUID("7c9e6679-7425-40de-944b-e07fc1f90ae7")
PRODUCT_B_ID = UUID("16fd2706-8baf-433b-82eb-8c7fada847da")
ORDER_ID = UUID("a8098c1a-f86e-11da-bd1a-00112444be1e")


class FakeTransaction:
    """
    Stand-in for orderdesk.core.database.transaction

    Yields a MagicMock connection and records whether the unit of work
    finished normally (committed) or raised (rolled back).
    """

    def __init__(self):
        self.conn = MagicMock()
        self.committed = False
        self.rolled_back = False

    @contextmanager
    def __call__(self):
        try:
            yield self.conn
        except Exception:
            self.rolled_back = True
            raise
        self.committed = True


@pytest.fixture
def fake_transaction():
    return FakeTransaction()


@pytest.fixture
def mock_conn():
    """Connection whose cursor() always hands back the same MagicMock cursor"""
    conn = MagicMock()
    conn.cursor.return_value = MagicMock()
    return conn


@pytest.fixture
def memory_cache():
    return MemoryCache(default_ttl=60)


@pytest.fixture
def sample_customer():
    return Customer(
        id=CUSTOMER_ID,
        name="John Doe",
        email="john.doe@mail.com",
        phone_number="+1234567890",
    )


@pytest.fixture
def product_a():
    return Product(id=PRODUCT_A_ID, name="Keyboard", price=Decimal("10.00"), stock_quantity=20)


@pytest.fixture
def product_b():
    return Product(id=PRODUCT_B_ID, name="Mouse", price=Decimal("15.00"), stock_quantity=10)


@pytest.fixture
def sample_order(product_a, product_b):
    """Pending order: 2 x 10.00 + 3 x 15.00 = 65.00"""
    return Order(
        id=ORDER_ID,
        customer_id=CUSTOMER_ID,
        total_amount=Decimal("65.00"),
        created_at=datetime(2026, 1, 15, 10, 30, tzinfo=timezone.utc),
        status=OrderStatus.PENDING,
        items=[
            OrderItem(order_id=ORDER_ID, product_id=product_a.id, quantity=2,
                      unit_price=Decimal("10.00"), product=product_a),
            OrderItem(order_id=ORDER_ID, product_id=product_b.id, quantity=3,
                      unit_price=Decimal("15.00"), product=product_b),
        ],
    )


@pytest.fixture
def mock_customer_service():
    return Mock()


@pytest.fixture
def mock_order_service():
    return Mock()


@pytest.fixture
def mock_product_service():
    return Mock()


@pytest.fixture
def app(mock_customer_service, mock_order_service, mock_product_service):
    """Create FastAPI app with the services swapped for mocks"""
    from orderdesk.api.dependencies import (
        get_customer_service,
        get_order_service,
        get_product_service,
    )

    application = create_app()
    application.dependency_overrides[get_customer_service] = lambda: mock_customer_service
    application.dependency_overrides[get_order_service] = lambda: mock_order_service
    application.dependency_overrides[get_product_service] = lambda: mock_product_service
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app, raise_server_exceptions=False)
