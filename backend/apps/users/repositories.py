import uuid

from apps.common.repository import GenericRepository
from apps.common.store import InMemoryStore
from .models import User


class UserRepository(GenericRepository[User]):
    def __init__(self, store: InMemoryStore):
        super().__init__(store.users)

    def create_user(self, *, email: str, password: str) -> User:
        return self.add(User(id=str(uuid.uuid4()), email=email, password=password))
