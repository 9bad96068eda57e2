from django.urls import re_path
from .views import CartItemView, CartCheckoutView

# A trailing slash is optional on every route.
urlpatterns = [
    # PUT/DELETE on this path still act on a product with id "checkout".
    re_path(
        r'^cart/checkout/?$',
        CartCheckoutView.as_view(),
        {'product_id': 'checkout'},
        name='api-cart-checkout',
    ),
    re_path(r'^cart/(?P<product_id>[^/]+)/?$', CartItemView.as_view(), name='api-cart-item'),
]
