from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class Product:
    """Catalogue entry. Seeded at startup and never modified by requests."""

    id: Any
    name: str
    price: float
    description: str = ""
    category: str = ""
    image: str = ""
    extra: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)
