from __future__ import annotations

from typing import Any, List, Optional, Tuple

from apps.api.exceptions import ApplicationError
from apps.common import get_logger
from .models import Product
from .protocols import ProductRepositoryProtocol

logger = get_logger(__name__).bind(component="catalog", layer="service")


class ProductService:
    def __init__(self, products: ProductRepositoryProtocol):
        self.products = products
        self.logger = logger.bind(service="ProductService")

    def list_products(self) -> List[Product]:
        items = self.products.list()
        self.logger.debug("Listing products", count=len(items))
        return items

    def get_product(
        self, product_id: Any
    ) -> Tuple[Optional[Product], Optional[ApplicationError]]:
        self.logger.debug("Fetching product", product_id=product_id)
        product = self.products.get_by_raw_id(product_id)
        if product is None:
            self.logger.info("Product not found", product_id=product_id)
            return None, ApplicationError("NOT_FOUND", "Product not found.")
        return product, None
