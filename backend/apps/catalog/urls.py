from django.urls import re_path
from .views import ProductListView, ProductDetailView

# A trailing slash is optional on every route.
urlpatterns = [
    re_path(r'^products/?$', ProductListView.as_view(), name='api-products-list'),
    re_path(
        r'^products/(?P<product_id>[^/]+)/?$',
        ProductDetailView.as_view(),
        name='api-products-detail',
    ),
]
