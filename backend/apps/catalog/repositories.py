from typing import Any, Optional

from apps.common.equality import loose_equals
from apps.common.repository import GenericRepository
from apps.common.store import InMemoryStore
from .models import Product


class ProductRepository(GenericRepository[Product]):
    def __init__(self, store: InMemoryStore):
        super().__init__(store.products)

    def get_by_raw_id(self, raw_id: Any) -> Optional[Product]:
        """Find a product whose id loosely equals a path parameter."""
        return self.find(lambda product: loose_equals(product.id, raw_id))
