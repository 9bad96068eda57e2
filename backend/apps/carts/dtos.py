from dataclasses import dataclass
from typing import List

from apps.catalog.models import Product
from .models import Cart, Order


@dataclass
class CartDTO:
    id: str
    user_id: str
    products: List[Product]


@dataclass
class OrderDTO:
    id: str
    user_id: str
    products: List[Product]
    total_price: float


def cart_to_dto(c: Cart) -> CartDTO:
    return CartDTO(id=c.id, user_id=c.user_id, products=list(c.products))


def order_to_dto(o: Order) -> OrderDTO:
    return OrderDTO(
        id=o.id,
        user_id=o.user_id,
        products=list(o.products),
        total_price=o.total_price,
    )
