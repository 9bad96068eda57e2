from __future__ import annotations

from typing import List, Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.users.models import User


class UserRepositoryProtocol(Protocol):
    def list(self, **filters) -> List["User"]: ...

    def get(self, **filters) -> Optional["User"]: ...

    def create_user(self, *, email: str, password: str) -> "User": ...
