from __future__ import annotations

from typing import Optional

from apps.catalog.repositories import ProductRepository
from apps.common.store import InMemoryStore, get_store

from .repositories import CartRepository, OrderRepository
from .services import CartService


def build_cart_service(store: Optional[InMemoryStore] = None) -> CartService:
    store = store or get_store()
    return CartService(
        carts=CartRepository(store),
        orders=OrderRepository(store),
        products=ProductRepository(store),
        user_lock=store.user_lock,
    )
