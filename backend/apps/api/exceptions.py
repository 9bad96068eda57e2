from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from django.http import Http404, JsonResponse
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from apps.api.utils import error_payload, error_response, resolve_status
from apps.common import get_logger

logger = get_logger(__name__).bind(component="api", layer="exception")

API_EXCEPTION_CODES: Dict[int, str] = {
    status.HTTP_400_BAD_REQUEST: "VALIDATION_ERROR",
    status.HTTP_401_UNAUTHORIZED: "UNAUTHORIZED",
    status.HTTP_404_NOT_FOUND: "NOT_FOUND",
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
    status.HTTP_415_UNSUPPORTED_MEDIA_TYPE: "UNSUPPORTED_MEDIA_TYPE",
}


class ApplicationError(Exception):
    """
    The single error kind of the API: a message plus the HTTP status to report.

    Services hand instances back as the error half of a ``(result, error)``
    pair; views turn them into responses with ``to_response``. Raising one
    also works, the global exception handler writes the same envelope.

    Args:
        code: Machine readable error code (``VALIDATION_ERROR``, ``NOT_FOUND``...).
        message: Human readable explanation of the error.
        status_code: Optional explicit HTTP status. If omitted, code mapping is used.
        headers: Optional mapping of headers to include in the response.
    """

    def __init__(
        self,
        code: str,
        message: str,
        *,
        status_code: Optional[int] = None,
        headers: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = resolve_status(code, status_code)
        self.headers = headers

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApplicationError):
            return NotImplemented
        return (self.code, self.message, self.status_code) == (
            other.code,
            other.message,
            other.status_code,
        )

    def __hash__(self) -> int:
        return hash((self.code, self.message, self.status_code))

    def __repr__(self) -> str:
        return f"ApplicationError({self.code!r}, {self.message!r}, status_code={self.status_code})"

    def to_response(self) -> Response:
        return error_response(
            self.code,
            self.message,
            http_status=self.status_code,
            headers=self.headers,
        )


def global_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """
    Central exception handler for DRF views returning the error envelope.
    """

    bound_logger = _bind_logger(context)

    if isinstance(exc, ApplicationError):
        bound_logger.info(
            "Handled application error",
            code=exc.code,
            status=exc.status_code,
        )
        return exc.to_response()

    response = drf_exception_handler(exc, context)
    if response is not None:
        return _from_drf_exception(exc, response, bound_logger)

    bound_logger.exception("Unhandled exception bubbled to global handler")
    return error_response(
        "SERVER_ERROR",
        "Internal Server Error",
        http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _bind_logger(context: Dict[str, Any]):
    log = logger
    view = context.get("view")
    request = context.get("request")
    if view:
        view_name = getattr(view, "__class__", type(view)).__name__
        log = log.bind(view=view_name)
    if request is not None:
        log = log.bind(
            method=getattr(request, "method", None),
            path=getattr(request, "path", None),
        )
    return log


def _from_drf_exception(
    exc: Exception, response: Response, bound_logger
) -> Response:
    status_code = response.status_code
    code = API_EXCEPTION_CODES.get(
        status_code, "SERVER_ERROR" if status_code >= 500 else "VALIDATION_ERROR"
    )
    message = _extract_message(exc, response.data, status_code)
    allow = response.headers.get("Allow") if getattr(response, "headers", None) else None

    if status_code >= 500:
        bound_logger.error("Converted server error", code=code, status=status_code)
    else:
        bound_logger.info("Converted API exception", code=code, status=status_code)

    return error_response(
        code,
        message,
        http_status=status_code,
        headers={"Allow": allow} if allow else None,
    )


def _extract_message(exc: Exception, payload: Any, status_code: int) -> str:
    if status_code >= 500:
        return "Internal Server Error"
    if isinstance(exc, Http404):
        return "Not found."
    if isinstance(payload, dict):
        detail = payload.get("detail")
        if detail:
            return str(detail)
    if isinstance(payload, list) and payload:
        return str(payload[0])
    if isinstance(exc, APIException):
        return str(exc.detail)
    return "Request failed"


def not_found_view(request, exception=None):
    """Django ``handler404`` for URLs that match no route."""
    logger.info("No route matched", path=getattr(request, "path", None))
    return JsonResponse(error_payload("Not found."), status=status.HTTP_404_NOT_FOUND)


def server_error_view(request):
    """Django ``handler500`` for failures raised outside DRF views."""
    logger.error("Server error outside API views", path=getattr(request, "path", None))
    return JsonResponse(
        error_payload("Internal Server Error"),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


__all__ = [
    "ApplicationError",
    "global_exception_handler",
    "not_found_view",
    "server_error_view",
]
