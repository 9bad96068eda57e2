from __future__ import annotations

from typing import Optional

from apps.common.store import InMemoryStore, get_store

from .repositories import UserRepository
from .services import UserService


def build_user_service(store: Optional[InMemoryStore] = None) -> UserService:
    return UserService(users=UserRepository(store or get_store()))
