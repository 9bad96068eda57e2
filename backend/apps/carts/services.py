from __future__ import annotations

from typing import Any, Optional, Tuple

from apps.api.exceptions import ApplicationError
from apps.common import get_logger
from apps.common.equality import loose_equals
from .dtos import CartDTO, OrderDTO, cart_to_dto, order_to_dto
from .protocols import (
    CartRepositoryProtocol,
    OrderRepositoryProtocol,
    ProductRepositoryProtocol,
    UserLockProvider,
)

logger = get_logger(__name__).bind(component="carts", layer="service")


class CartService:
    """
    Cart operations for an already identified user.

    Every mutation of a user's cart (lazy creation, appends, removals and the
    checkout that empties it) runs under that user's lock, so concurrent
    requests for one user cannot create two carts or lose appends. Returned
    DTOs are copies taken while the lock is held.
    """

    def __init__(
        self,
        carts: CartRepositoryProtocol,
        orders: OrderRepositoryProtocol,
        products: ProductRepositoryProtocol,
        user_lock: UserLockProvider,
    ):
        self.carts = carts
        self.orders = orders
        self.products = products
        self.user_lock = user_lock
        self.logger = logger.bind(service="CartService")

    def add_product(
        self, user_id: str, product_id: Any
    ) -> Tuple[Optional[CartDTO], Optional[ApplicationError]]:
        self.logger.debug("Adding product to cart", user_id=user_id, product_id=product_id)
        product = self.products.get_by_raw_id(product_id)
        if product is None:
            self.logger.info("Add to cart failed: product not found", product_id=product_id)
            return None, ApplicationError("NOT_FOUND", "Product not found.")
        with self.user_lock(user_id):
            cart = self.carts.get_for_user(user_id)
            if cart is None:
                cart = self.carts.create_for_user(user_id)
                self.logger.info("Cart created", user_id=user_id, cart_id=cart.id)
            cart.products.append(product)
            dto = cart_to_dto(cart)
        self.logger.info(
            "Product added to cart",
            cart_id=dto.id,
            product_id=product.id,
            items=len(dto.products),
        )
        return dto, None

    def remove_product(
        self, user_id: str, product_id: Any
    ) -> Tuple[Optional[CartDTO], Optional[ApplicationError]]:
        self.logger.debug("Removing product from cart", user_id=user_id, product_id=product_id)
        with self.user_lock(user_id):
            cart = self.carts.get_for_user(user_id)
            if cart is None:
                self.logger.info("Remove from cart failed: cart not found", user_id=user_id)
                return None, ApplicationError("NOT_FOUND", "Cart not found.")
            before = len(cart.products)
            # Drops every matching entry, not just the first.
            cart.products = [p for p in cart.products if not loose_equals(p.id, product_id)]
            dto = cart_to_dto(cart)
        self.logger.info(
            "Product removed from cart",
            cart_id=dto.id,
            product_id=product_id,
            removed=before - len(dto.products),
        )
        return dto, None

    def checkout(
        self, user_id: str
    ) -> Tuple[Optional[OrderDTO], Optional[ApplicationError]]:
        self.logger.debug("Checking out cart", user_id=user_id)
        with self.user_lock(user_id):
            cart = self.carts.get_for_user(user_id)
            if cart is None or not cart.products:
                self.logger.info("Checkout rejected: cart empty or missing", user_id=user_id)
                return None, ApplicationError(
                    "VALIDATION_ERROR", "Cart is empty or not found."
                )
            total = sum(p.price for p in cart.products)
            order = self.orders.create(
                user_id=user_id, products=cart.products, total_price=total
            )
            cart.products = []
        self.logger.info(
            "Order placed",
            order_id=order.id,
            user_id=user_id,
            items=len(order.products),
            total_price=total,
        )
        return order_to_dto(order), None
