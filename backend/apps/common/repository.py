from typing import Any, Callable, Generic, List, Optional, TypeVar

T = TypeVar('T')


class GenericRepository(Generic[T]):
    """Linear-scan repository over one of the store's ordered collections."""

    def __init__(self, items: List[T]):
        self.items = items

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        return next((item for item in self.items if predicate(item)), None)

    def get(self, **filters: Any) -> Optional[T]:
        return self.find(
            lambda item: all(getattr(item, k) == v for k, v in filters.items())
        )

    def list(self, **filters: Any) -> List[T]:
        return [
            item for item in self.items
            if all(getattr(item, k) == v for k, v in filters.items())
        ]

    def add(self, obj: T) -> T:
        self.items.append(obj)
        return obj

    def count(self) -> int:
        return len(self.items)
