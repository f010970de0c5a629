"""
Product Service
Catalog listing (cached) and product creation
"""
import logging
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from orderdesk.core.cache import MemoryCache, cache as default_cache
from orderdesk.domain.product import Product
from orderdesk.mappings import product_to_dto
from orderdesk.repositories.product_repository import ProductRepository
from orderdesk.schemas.product import ProductDto

logger = logging.getLogger(__name__)

PRODUCTS_CACHE_KEY = "products:all"
PRODUCTS_CACHE_PATTERN = "products:"


class CreateProductCommand(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    price: Decimal = Field(..., ge=0)
    stock_quantity: int = Field(..., ge=0)


class ProductService:

    def __init__(
        self,
        product_repository: Optional[ProductRepository] = None,
        cache: Optional[MemoryCache] = None,
    ):
        self.products = product_repository or ProductRepository()
        self.cache = cache if cache is not None else default_cache

    def get_all(self) -> List[ProductDto]:
        """All products sorted by name, served from cache while fresh"""
        cached = self.cache.get(PRODUCTS_CACHE_KEY)
        if cached is not None:
            return list(cached)

        generation = self.cache.generation
        products = [product_to_dto(p) for p in self.products.find_all()]
        # An order committed during the read leaves this snapshot stale
        if not self.cache.set(PRODUCTS_CACHE_KEY, products, generation=generation):
            logger.debug("Product list changed while loading, not cached")
        return list(products)

    def create_product(self, command: CreateProductCommand) -> ProductDto:
        product = Product(
            name=command.name,
            price=command.price,
            stock_quantity=command.stock_quantity,
        )
        created = self.products.insert(product)

        removed = self.cache.remove_by_pattern(PRODUCTS_CACHE_PATTERN)
        logger.debug(f"Invalidated {removed} product cache entries")

        logger.info(f"Product {created.id} created: '{created.name}' at {created.price}, stock {created.stock_quantity}")
        return product_to_dto(created)
