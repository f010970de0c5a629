"""
Unit tests for ProductService (catalog cache behaviour)
"""
from decimal import Decimal
from unittest.mock import Mock

import pytest

from orderdesk.domain.product import Product
from orderdesk.services.product_service import (
    PRODUCTS_CACHE_KEY,
    CreateProductCommand,
    ProductService,
)


@pytest.fixture
def product_repo(product_a, product_b):
    repo = Mock()
    repo.find_all.return_value = [product_a, product_b]
    repo.insert.side_effect = lambda product, conn=None: product
    return repo


@pytest.fixture
def service(product_repo, memory_cache):
    return ProductService(product_repository=product_repo, cache=memory_cache)


class TestProductService:

    def test_get_all_maps_products(self, service):
        result = service.get_all()

        assert [p.name for p in result] == ["Keyboard", "Mouse"]
        assert result[0].price == Decimal("10.00")

    def test_get_all_served_from_cache(self, service, product_repo):
        """Second call within the TTL does not hit the repository"""
        first = service.get_all()
        second = service.get_all()

        assert first == second
        product_repo.find_all.assert_called_once()

    def test_get_all_returns_a_copy(self, service):
        first = service.get_all()
        first.clear()

        assert len(service.get_all()) == 2

    def test_expired_cache_reloads(self, product_repo):
        service = ProductService(product_repository=product_repo, cache=Mock(get=Mock(return_value=None)))

        service.get_all()
        service.get_all()

        assert product_repo.find_all.call_count == 2

    def test_create_product_invalidates_cache(self, service, product_repo, memory_cache):
        # Arrange
        service.get_all()
        assert memory_cache.get(PRODUCTS_CACHE_KEY) is not None

        # Act
        created = service.create_product(CreateProductCommand(
            name="Monitor",
            price=Decimal("199.99"),
            stock_quantity=4,
        ))

        # Assert
        assert created.name == "Monitor"
        assert memory_cache.get(PRODUCTS_CACHE_KEY) is None
        product_repo.insert.assert_called_once()
        inserted = product_repo.insert.call_args[0][0]
        assert isinstance(inserted, Product)
        assert inserted.stock_quantity == 4

    def test_command_rejects_negative_stock(self):
        with pytest.raises(ValueError):
            CreateProductCommand(name="Bad", price=Decimal("1.00"), stock_quantity=-1)

    def test_list_loaded_during_invalidation_is_not_cached(self, product_repo, memory_cache, product_a):
        """An order committing mid-read must not leave the old stock cached"""
        # Arrange: the cache is invalidated while the repository is reading
        def read_then_invalidate(conn=None):
            memory_cache.remove_by_pattern("products:")
            return [product_a]

        product_repo.find_all.side_effect = read_then_invalidate
        service = ProductService(product_repository=product_repo, cache=memory_cache)

        # Act
        result = service.get_all()

        # Assert
        assert [p.name for p in result] == ["Keyboard"]
        assert memory_cache.get(PRODUCTS_CACHE_KEY) is None
