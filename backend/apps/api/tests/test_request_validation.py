import json
from unittest.mock import patch

import pytest
from rest_framework.test import APIRequestFactory

from apps.api.middleware import RequestValidationMiddleware
from apps.api.validation import (
    ImproperlyConfiguredView,
    resolve_request_user,
    validate_request_context,
)
from apps.carts.views import CartCheckoutView, CartItemView
from apps.catalog.views import ProductListView
from apps.users.container import build_user_service


factory = APIRequestFactory()


@pytest.fixture
def registered(store):
    users = build_user_service(store)
    dto, _ = users.register({"email": "ada@example.com", "password": "Valid1Pass!"})
    with patch.object(CartItemView, "user_service", users), patch.object(
        CartCheckoutView, "user_service", users
    ):
        yield dto


def test_views_without_identity_pass_through():
    request = factory.get("/api/products")
    assert validate_request_context(request, ProductListView, {}) is None
    assert getattr(request, "validated_user_id", None) is None


def test_missing_header_is_unauthorized(registered):
    request = factory.put("/api/cart/1")
    response = validate_request_context(request, CartItemView, {"product_id": "1"})
    assert response.status_code == 401
    assert response.data == {"status": "error", "message": "Unauthorized. Invalid x-user-id."}


def test_empty_header_is_unauthorized(registered):
    request = factory.post("/api/cart/checkout", HTTP_X_USER_ID="")
    response = validate_request_context(request, CartCheckoutView, {})
    assert response.status_code == 401


def test_unknown_user_is_not_found(registered):
    request = factory.put("/api/cart/1", HTTP_X_USER_ID="not-a-user")
    response = validate_request_context(request, CartItemView, {"product_id": "1"})
    assert response.status_code == 404
    assert response.data["message"] == "User not found."


def test_user_id_match_is_exact(registered):
    request = factory.put("/api/cart/1", HTTP_X_USER_ID=registered.id.upper())
    response = validate_request_context(request, CartItemView, {"product_id": "1"})
    assert response.status_code == 404


def test_known_user_is_attached_to_request(registered):
    request = factory.put("/api/cart/1", HTTP_X_USER_ID=registered.id)
    response = validate_request_context(request, CartItemView, {"product_id": "1"})
    assert response is None
    assert request.validated_user_id == registered.id


def test_resolve_requires_user_service():
    class Bare:
        requires_user = True

    request = factory.get("/api/cart/1")
    with pytest.raises(ImproperlyConfiguredView):
        resolve_request_user(request, Bare)


def test_middleware_no_view_class_returns_none():
    middleware = RequestValidationMiddleware(lambda req: None)
    request = factory.get("/health/live")
    response = middleware.process_view(request, lambda req: req, [], {})
    assert response is None


def test_middleware_returns_renderable_response(registered):
    middleware = RequestValidationMiddleware(lambda req: None)
    request = factory.delete("/api/cart/1")
    view = CartItemView.as_view()
    response = middleware.process_view(request, view, [], {"product_id": "1"})
    assert response.status_code == 401
    response.render()
    assert json.loads(response.content) == {
        "status": "error",
        "message": "Unauthorized. Invalid x-user-id.",
    }
