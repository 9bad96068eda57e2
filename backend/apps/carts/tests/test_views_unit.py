import unittest
from unittest.mock import Mock, patch

from rest_framework.test import APIRequestFactory

from apps.api.exceptions import ApplicationError
from apps.api.validation import validate_request_context
from apps.carts.container import build_cart_service
from apps.carts.dtos import CartDTO
from apps.carts.views import CartCheckoutView, CartItemView
from apps.catalog.models import Product
from apps.common.store import InMemoryStore
from apps.users.container import build_user_service


class CartViewsUnitTests(unittest.TestCase):
    def setUp(self):
        self.factory = APIRequestFactory()
        self.p1 = Product(id=1, name="Pen", price=10)
        self.p2 = Product(id=2, name="Pad", price=5)
        self.store = InMemoryStore(products=[self.p1, self.p2])
        self.users = build_user_service(self.store)
        self.carts = build_cart_service(self.store)
        self.user, _ = self.users.register(
            {"email": "ada@example.com", "password": "Valid1Pass!"}
        )
        self.patches = [
            patch.object(CartItemView, "user_service", self.users),
            patch.object(CartItemView, "service", self.carts),
            patch.object(CartCheckoutView, "user_service", self.users),
            patch.object(CartCheckoutView, "service", self.carts),
        ]
        for p in self.patches:
            p.start()

    def tearDown(self):
        for p in reversed(self.patches):
            p.stop()

    def dispatch(self, request, view_cls, **kwargs):
        pre_response = validate_request_context(request, view_cls, kwargs)
        if pre_response is not None:
            return pre_response
        view = view_cls.as_view()
        return view(request, **kwargs)

    def put(self, product_id, user_id=None):
        extra = {"HTTP_X_USER_ID": user_id} if user_id is not None else {}
        request = self.factory.put(f"/api/cart/{product_id}", **extra)
        return self.dispatch(request, CartItemView, product_id=str(product_id))

    def delete(self, product_id, user_id=None):
        extra = {"HTTP_X_USER_ID": user_id} if user_id is not None else {}
        request = self.factory.delete(f"/api/cart/{product_id}", **extra)
        return self.dispatch(request, CartItemView, product_id=str(product_id))

    def checkout(self, user_id=None):
        extra = {"HTTP_X_USER_ID": user_id} if user_id is not None else {}
        request = self.factory.post("/api/cart/checkout", **extra)
        return self.dispatch(request, CartCheckoutView)

    def test_put_returns_cart_payload(self):
        response = self.put(1, self.user.id)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(set(response.data), {"id", "userId", "products"})
        self.assertEqual(response.data["userId"], self.user.id)
        self.assertEqual(response.data["products"][0]["id"], 1)
        self.assertEqual(response.data["products"][0]["price"], 10)

    def test_put_unknown_product_is_404(self):
        response = self.put(99, self.user.id)
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data, {"status": "error", "message": "Product not found."})

    def test_put_without_header_is_401(self):
        response = self.put(1)
        self.assertEqual(response.status_code, 401)

    def test_identity_is_checked_before_product(self):
        response = self.put(99, "ghost")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["message"], "User not found.")

    def test_delete_without_cart_is_404(self):
        response = self.delete(1, self.user.id)
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["message"], "Cart not found.")

    def test_delete_returns_updated_cart(self):
        self.put(1, self.user.id)
        self.put(2, self.user.id)
        response = self.delete(1, self.user.id)
        self.assertEqual(response.status_code, 200)
        self.assertEqual([p["id"] for p in response.data["products"]], [2])

    def test_checkout_returns_order_payload(self):
        self.put(1, self.user.id)
        self.put(2, self.user.id)
        response = self.checkout(self.user.id)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(set(response.data), {"id", "userId", "products", "totalPrice"})
        self.assertEqual(response.data["totalPrice"], 15)
        self.assertEqual(len(response.data["products"]), 2)

    def test_checkout_empty_is_400(self):
        response = self.checkout(self.user.id)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.data, {"status": "error", "message": "Cart is empty or not found."}
        )

    def test_view_resolves_identity_when_middleware_did_not_run(self):
        request = self.factory.put("/api/cart/1", HTTP_X_USER_ID=self.user.id)
        response = CartItemView.as_view()(request, product_id="1")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["userId"], self.user.id)

    def test_view_rejects_unknown_user_when_middleware_did_not_run(self):
        request = self.factory.post("/api/cart/checkout", HTTP_X_USER_ID="ghost")
        response = CartCheckoutView.as_view()(request)
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data, {"status": "error", "message": "User not found."})

    def test_service_receives_validated_user_and_path_param(self):
        service_mock = Mock()
        service_mock.add_product.return_value = (
            CartDTO(id="c-1", user_id=self.user.id, products=[self.p2]),
            None,
        )
        with patch.object(CartItemView, "service", service_mock):
            response = self.put("02", self.user.id)
        self.assertEqual(response.status_code, 200)
        service_mock.add_product.assert_called_once_with(self.user.id, "02")

    def test_service_error_is_written_as_envelope(self):
        service_mock = Mock()
        service_mock.remove_product.return_value = (
            None,
            ApplicationError("NOT_FOUND", "Cart not found."),
        )
        with patch.object(CartItemView, "service", service_mock):
            response = self.delete(1, self.user.id)
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["status"], "error")
