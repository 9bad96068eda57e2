import os
import sys

import pytest

# Ensure backend package is importable when running `pytest` from repo root
BASE_DIR = os.path.dirname(__file__)
BACKEND_DIR = os.path.join(BASE_DIR, 'backend')
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)


@pytest.fixture
def store():
    """A fresh store seeded with the built-in catalogue."""
    from apps.catalog.seed import default_products
    from apps.common.store import InMemoryStore

    return InMemoryStore(products=default_products())


@pytest.fixture
def default_store():
    """The process-wide store used by the URL-routed views, reset around the test."""
    from apps.catalog.seed import default_products
    from apps.common.store import get_store

    shared = get_store()
    shared.reset(products=default_products())
    yield shared
    shared.reset(products=default_products())
