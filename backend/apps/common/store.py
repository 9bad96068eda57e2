from __future__ import annotations

import threading
from typing import Any, Dict, Iterable, List, Optional

from .logger import get_logger

logger = get_logger(__name__).bind(component="common", layer="store")


class InMemoryStore:
    """
    Process-local state for the whole API.

    Holds the four ordered collections (products, users, carts, orders) that
    repositories scan and append to, plus a registry of per-user locks used to
    serialise cart mutations. Nothing is persisted; a new instance starts empty
    apart from the optional product seed.
    """

    def __init__(self, products: Optional[Iterable[Any]] = None):
        self.products: List[Any] = []
        self.users: List[Any] = []
        self.carts: List[Any] = []
        self.orders: List[Any] = []
        self._locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()
        if products:
            self.products.extend(products)

    def reset(self, products: Optional[Iterable[Any]] = None) -> None:
        self.products.clear()
        self.users.clear()
        self.carts.clear()
        self.orders.clear()
        with self._locks_guard:
            self._locks.clear()
        if products:
            self.products.extend(products)
        logger.debug("Store reset", products=len(self.products))

    def user_lock(self, user_id: str) -> threading.Lock:
        """Return the lock guarding cart state for ``user_id``."""
        with self._locks_guard:
            lock = self._locks.get(user_id)
            if lock is None:
                lock = self._locks[user_id] = threading.Lock()
            return lock

    def stats(self) -> Dict[str, int]:
        return {
            "products": len(self.products),
            "users": len(self.users),
            "carts": len(self.carts),
            "orders": len(self.orders),
        }


_default_store: Optional[InMemoryStore] = None
_default_store_guard = threading.Lock()


def get_store() -> InMemoryStore:
    """Return the process-wide store, creating it on first use."""
    global _default_store
    with _default_store_guard:
        if _default_store is None:
            _default_store = InMemoryStore()
            logger.debug("Default store created")
        return _default_store


__all__ = ["InMemoryStore", "get_store"]
