from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from apps.common import get_logger
from apps.common.store import InMemoryStore
from .models import Product

logger = get_logger(__name__).bind(component="catalog", layer="seed")

# (id, name, price, category, image)
PRODUCTS = [
    (
        1,
        "Fjallraven - Foldsack No. 1 Backpack, Fits 15 Laptops",
        109.95,
        "men's clothing",
        "https://fakestoreapi.com/img/81fPKd-2AYL._AC_SL1500_t.png",
    ),
    (
        2,
        "Mens Casual Premium Slim Fit T-Shirts",
        22.3,
        "men's clothing",
        "https://fakestoreapi.com/img/71-3HjGNDUL._AC_SY879._SX._UX._SY._UY_t.png",
    ),
    (
        3,
        "Mens Cotton Jacket",
        55.99,
        "men's clothing",
        "https://fakestoreapi.com/img/71li-ujtlUL._AC_UX679_t.png",
    ),
    (
        4,
        "John Hardy Women's Legends Naga Gold & Silver Dragon Station Chain Bracelet",
        695.0,
        "jewelery",
        "https://fakestoreapi.com/img/71pWzhdJNwL._AC_UL640_QL65_ML3_t.png",
    ),
    (
        5,
        "Solid Gold Petite Micropave",
        168.0,
        "jewelery",
        "https://fakestoreapi.com/img/61sbMiUnoGL._AC_UL640_QL65_ML3_t.png",
    ),
    (
        6,
        "WD 2TB Elements Portable External Hard Drive - USB 3.0",
        64.0,
        "electronics",
        "https://fakestoreapi.com/img/61IBBVJvSDL._AC_SY879_t.png",
    ),
    (
        7,
        "SanDisk SSD PLUS 1TB Internal SSD - SATA III 6 Gb/s",
        109.0,
        "electronics",
        "https://fakestoreapi.com/img/61U7T1koQqL._AC_SX679_t.png",
    ),
    (
        8,
        "Acer SB220Q bi 21.5 inches Full HD (1920 x 1080) IPS Ultra-Thin",
        599.0,
        "electronics",
        "https://fakestoreapi.com/img/81QpkIctqPL._AC_SX679_t.png",
    ),
    (
        9,
        "Rain Jacket Women Windbreaker Striped Climbing Raincoats",
        39.99,
        "women's clothing",
        "https://fakestoreapi.com/img/71HblAHs5xL._AC_UY879_-2t.png",
    ),
    (
        10,
        "DANVOUY Womens T Shirt Casual Cotton Short",
        12.99,
        "women's clothing",
        "https://fakestoreapi.com/img/61pHAEJ4NML._AC_UX679_t.png",
    ),
]

_KNOWN_FIELDS = ("id", "name", "price", "description", "category", "image")


def default_products() -> List[Product]:
    return [
        Product(id=pid, name=name, price=price, category=category, image=image)
        for pid, name, price, category, image in PRODUCTS
    ]


def product_from_raw(raw: Dict[str, Any]) -> Product:
    if not isinstance(raw, dict):
        raise ValueError("Product entry must be an object")
    missing = [key for key in ("id", "price") if raw.get(key) is None]
    name = raw.get("name", raw.get("title"))
    if name is None:
        missing.append("name")
    if missing:
        raise ValueError(f"Product entry is missing: {', '.join(missing)}")
    price = raw["price"]
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        raise ValueError(f"Product {raw['id']!r} price must be a number")
    extra = {
        k: v for k, v in raw.items() if k not in _KNOWN_FIELDS and k != "title"
    }
    return Product(
        id=raw["id"],
        name=str(name),
        price=price,
        description=str(raw.get("description", "")),
        category=str(raw.get("category", "")),
        image=str(raw.get("image", "")),
        extra=extra,
    )


def load_products(path: Optional[Union[str, Path]] = None) -> List[Product]:
    """Read products from a JSON array file, or return the built-in catalogue."""
    if not path:
        return default_products()
    seed_path = Path(path)
    try:
        raw = json.loads(seed_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ImproperlyConfigured(f"Cannot read catalogue seed {seed_path}: {exc}")
    if not isinstance(raw, list):
        raise ImproperlyConfigured(f"Catalogue seed {seed_path} must hold a JSON array")
    try:
        return [product_from_raw(item) for item in raw]
    except ValueError as exc:
        raise ImproperlyConfigured(f"Invalid catalogue seed {seed_path}: {exc}")


def seed_catalog(
    store: InMemoryStore, products: Optional[Iterable[Product]] = None
) -> List[Product]:
    """Replace the store's products with ``products`` or the configured seed."""
    if products is None:
        products = load_products(getattr(settings, "CATALOG_SEED_FILE", None))
    store.products[:] = list(products)
    logger.info("Catalogue seeded", products=len(store.products))
    return store.products


__all__ = ["PRODUCTS", "default_products", "load_products", "product_from_raw", "seed_catalog"]
