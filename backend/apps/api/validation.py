from typing import Any, Optional

from django.http import HttpRequest

from apps.api.exceptions import ApplicationError
from apps.common import get_logger

logger = get_logger(__name__).bind(component="api", layer="validation")

USER_ID_HEADER = "x-user-id"


def _read_user_header(request: HttpRequest) -> Optional[str]:
    headers = getattr(request, "headers", None)
    if headers is not None:
        return headers.get(USER_ID_HEADER)
    meta = getattr(request, "META", {}) or {}
    return meta.get("HTTP_X_USER_ID")


def resolve_request_user(request: HttpRequest, view_class) -> Optional[ApplicationError]:
    """
    Resolve the caller of a user-scoped view from the ``x-user-id`` header.

    On success the user id is attached as ``request.validated_user_id`` and
    None is returned; otherwise the 401/404 error to report.
    """
    service = getattr(view_class, "user_service", None)
    if service is None:
        raise ImproperlyConfiguredView(
            f"{getattr(view_class, '__name__', view_class)} requires a user_service"
        )
    user_id, error = service.resolve_identity(_read_user_header(request))
    if error:
        return error
    request.validated_user_id = user_id
    logger.debug("Resolved request user", user_id=user_id)
    return None


def validate_request_context(request: HttpRequest, view_class, view_kwargs) -> Any:
    """
    Performs request level validation for specific API views.
    Returns a DRF Response when validation fails; otherwise None and
    attaches validated data to the request instance.
    """
    view_name = getattr(view_class, "__name__", "")

    logger.debug(
        "Running request context validation",
        view=view_name,
        method=getattr(request, "method", None),
    )

    if not getattr(view_class, "requires_user", False):
        return None
    if getattr(request, "validated_user_id", None) is not None:
        return None

    error = resolve_request_user(request, view_class)
    if error:
        logger.info(
            "Request identity rejected",
            view=view_name,
            status=error.status_code,
            reason=error.message,
        )
        return error.to_response()
    return None


class ImproperlyConfiguredView(Exception):
    """Raised when a user-scoped view has no user service to resolve identities."""


__all__ = [
    "ImproperlyConfiguredView",
    "USER_ID_HEADER",
    "resolve_request_user",
    "validate_request_context",
]
