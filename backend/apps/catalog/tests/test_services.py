import unittest

from apps.api.exceptions import ApplicationError
from apps.catalog.models import Product
from apps.catalog.repositories import ProductRepository
from apps.catalog.services import ProductService
from apps.common.store import InMemoryStore


def make_products():
    return [
        Product(id=1, name="Backpack", price=109.95, category="bags"),
        Product(id=2, name="T-Shirt", price=22.3, category="clothing"),
        Product(id="sku-3", name="Mug", price=8, category="kitchen"),
    ]


class ProductServiceTests(unittest.TestCase):
    def setUp(self):
        self.store = InMemoryStore(products=make_products())
        self.service = ProductService(products=ProductRepository(self.store))

    def test_list_products_returns_catalogue_in_order(self):
        products = self.service.list_products()
        self.assertEqual([p.id for p in products], [1, 2, "sku-3"])

    def test_get_product_matches_numeric_id_from_path_string(self):
        product, error = self.service.get_product("2")
        self.assertIsNone(error)
        self.assertEqual(product.name, "T-Shirt")

    def test_get_product_uses_coercing_comparison(self):
        product, error = self.service.get_product("02")
        self.assertIsNone(error)
        self.assertEqual(product.id, 2)

    def test_get_product_matches_string_id(self):
        product, _ = self.service.get_product("sku-3")
        self.assertEqual(product.name, "Mug")

    def test_get_product_missing_returns_not_found(self):
        product, error = self.service.get_product("999")
        self.assertIsNone(product)
        self.assertEqual(error, ApplicationError("NOT_FOUND", "Product not found."))
        self.assertEqual(error.status_code, 404)

    def test_catalogue_is_not_modified_by_reads(self):
        before = list(self.store.products)
        self.service.list_products()
        self.service.get_product("1")
        self.assertEqual(self.store.products, before)
