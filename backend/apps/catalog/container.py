from __future__ import annotations

from typing import Optional

from apps.common.store import InMemoryStore, get_store

from .repositories import ProductRepository
from .services import ProductService


def build_product_service(store: Optional[InMemoryStore] = None) -> ProductService:
    return ProductService(products=ProductRepository(store or get_store()))
