import uuid
from typing import List, Optional

from apps.catalog.models import Product
from apps.common.repository import GenericRepository
from apps.common.store import InMemoryStore
from .models import Cart, Order


class CartRepository(GenericRepository[Cart]):
    def __init__(self, store: InMemoryStore):
        super().__init__(store.carts)

    def get_for_user(self, user_id: str) -> Optional[Cart]:
        return self.find(lambda cart: cart.user_id == user_id)

    def create_for_user(self, user_id: str) -> Cart:
        return self.add(Cart(id=str(uuid.uuid4()), user_id=user_id))


class OrderRepository(GenericRepository[Order]):
    def __init__(self, store: InMemoryStore):
        super().__init__(store.orders)

    def create(self, *, user_id: str, products: List[Product], total_price: float) -> Order:
        return self.add(
            Order(
                id=str(uuid.uuid4()),
                user_id=user_id,
                products=list(products),
                total_price=total_price,
            )
        )
