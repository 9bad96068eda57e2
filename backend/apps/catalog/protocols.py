from __future__ import annotations

from typing import Any, List, Optional, Protocol

from .models import Product


class ProductRepositoryProtocol(Protocol):
    def list(self, **filters) -> List[Product]:
        ...

    def get_by_raw_id(self, raw_id: Any) -> Optional[Product]:
        ...
