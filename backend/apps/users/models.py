from dataclasses import dataclass


@dataclass
class User:
    """Registered account. The password is kept exactly as submitted."""

    id: str
    email: str
    password: str
