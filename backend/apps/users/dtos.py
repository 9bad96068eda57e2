from dataclasses import dataclass

from .models import User


@dataclass
class UserDTO:
    id: str
    email: str


def user_to_dto(u: User) -> UserDTO:
    return UserDTO(id=u.id, email=u.email)
