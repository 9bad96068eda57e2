from dataclasses import dataclass, field
from typing import List

from apps.catalog.models import Product


@dataclass
class Cart:
    """A user's cart. Created on first add, emptied by checkout, never deleted."""

    id: str
    user_id: str
    products: List[Product] = field(default_factory=list)


@dataclass
class Order:
    """Immutable snapshot of a cart taken at checkout."""

    id: str
    user_id: str
    products: List[Product]
    total_price: float
