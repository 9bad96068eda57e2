from __future__ import annotations

from typing import Any, ContextManager, List, Optional, Protocol

from apps.catalog.models import Product
from .models import Cart, Order


class CartRepositoryProtocol(Protocol):
    def get_for_user(self, user_id: str) -> Optional[Cart]:
        ...

    def create_for_user(self, user_id: str) -> Cart:
        ...


class OrderRepositoryProtocol(Protocol):
    def create(self, *, user_id: str, products: List[Product], total_price: float) -> Order:
        ...

    def list(self, **filters) -> List[Order]:
        ...


class ProductRepositoryProtocol(Protocol):
    def get_by_raw_id(self, raw_id: Any) -> Optional[Product]:
        ...


class UserLockProvider(Protocol):
    def __call__(self, user_id: str) -> ContextManager[Any]:
        ...
