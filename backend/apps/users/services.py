from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

from apps.api.exceptions import ApplicationError
from apps.common import get_logger
from .dtos import UserDTO, user_to_dto
from .protocols import UserRepositoryProtocol
from .validators import is_valid_email, is_valid_password

logger = get_logger(__name__).bind(component="users", layer="service")


class UserService:
    def __init__(self, users: UserRepositoryProtocol):
        self.users = users
        self.logger = logger.bind(service="UserService")

    def register(
        self, data: Mapping[str, Any]
    ) -> Tuple[Optional[UserDTO], Optional[ApplicationError]]:
        email = data.get("email")
        password = data.get("password")
        if not email or not password:
            self.logger.info("Registration rejected: missing credentials")
            return None, ApplicationError(
                "VALIDATION_ERROR", "Email and password are required."
            )
        if not is_valid_email(email):
            self.logger.info("Registration rejected: invalid email", email=email)
            return None, ApplicationError("VALIDATION_ERROR", "Invalid email format.")
        if not is_valid_password(password):
            self.logger.info("Registration rejected: weak password", email=email)
            return None, ApplicationError(
                "VALIDATION_ERROR", "Password does not meet complexity requirements."
            )
        user = self.users.create_user(email=email, password=password)
        self.logger.info("User registered", user_id=user.id, email=email)
        return user_to_dto(user), None

    def resolve_identity(
        self, raw_user_id: Optional[str]
    ) -> Tuple[Optional[str], Optional[ApplicationError]]:
        """
        Map a caller-supplied ``x-user-id`` to a known user id.

        The identifier is trusted as-is; the only checks are presence and an
        exact match against a registered user.
        """
        if not raw_user_id:
            self.logger.warning("Request without user identifier")
            return None, ApplicationError(
                "UNAUTHORIZED", "Unauthorized. Invalid x-user-id."
            )
        if self.users.get(id=raw_user_id) is None:
            self.logger.info("Unknown user identifier", user_id=raw_user_id)
            return None, ApplicationError("NOT_FOUND", "User not found.")
        return raw_user_id, None
