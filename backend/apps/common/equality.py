"""
Coercing comparison used when matching URL path parameters against stored ids.

Path parameters always arrive as strings while catalogue ids may be numbers,
so ``/api/products/1`` and ``/api/products/01`` must both match product ``1``.
The rules follow abstract (``==``) equality between a stored scalar and a
string: numbers compare numerically, booleans count as 0/1, strings compare
exactly and ``None`` only equals ``None``.
"""
from __future__ import annotations

import math
import re
from typing import Any, Optional

_DECIMAL_LITERAL = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_PREFIXED_LITERAL = re.compile(r"^0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")
_INFINITY_LITERAL = re.compile(r"^([+-]?)Infinity$")


def to_number(value: str) -> Optional[float]:
    """Convert a string to a number the way a numeric coercion would; None means NaN."""
    text = value.strip()
    if not text:
        return 0.0
    if _PREFIXED_LITERAL.match(text):
        return float(int(text, 0))
    infinity = _INFINITY_LITERAL.match(text)
    if infinity:
        return -math.inf if infinity.group(1) == "-" else math.inf
    if _DECIMAL_LITERAL.match(text):
        return float(text)
    return None


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        return None if isinstance(value, float) and math.isnan(value) else float(value)
    if isinstance(value, str):
        return to_number(value)
    return None


def loose_equals(left: Any, right: Any) -> bool:
    if left is None or right is None:
        return left is right
    if isinstance(left, str) and isinstance(right, str):
        return left == right
    numeric_types = (bool, int, float)
    if isinstance(left, numeric_types) or isinstance(right, numeric_types):
        if not isinstance(left, (str,) + numeric_types):
            return False
        if not isinstance(right, (str,) + numeric_types):
            return False
        a, b = _as_number(left), _as_number(right)
        return a is not None and b is not None and a == b
    return left == right


__all__ = ["loose_equals", "to_number"]
