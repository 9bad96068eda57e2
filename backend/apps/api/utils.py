from typing import Any, Dict, Mapping, Optional

from rest_framework import status
from rest_framework.response import Response

DEFAULT_ERROR_STATUS = status.HTTP_500_INTERNAL_SERVER_ERROR
DEFAULT_ERROR_MESSAGE = "Internal Server Error"

ERROR_STATUS_MAP = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "METHOD_NOT_ALLOWED": status.HTTP_405_METHOD_NOT_ALLOWED,
    "UNSUPPORTED_MEDIA_TYPE": status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
    "SERVER_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def resolve_status(code: str, http_status: Optional[int] = None) -> int:
    if http_status is not None:
        return int(http_status)
    return ERROR_STATUS_MAP.get(code.strip().upper(), DEFAULT_ERROR_STATUS)


def error_payload(message: Optional[str]) -> Dict[str, Any]:
    text = message.strip() if isinstance(message, str) else ""
    return {"status": "error", "message": text or DEFAULT_ERROR_MESSAGE}


def error_response(
    code: str,
    message: str,
    http_status: Optional[int] = None,
    *,
    headers: Optional[Mapping[str, str]] = None,
) -> Response:
    """
    Return the standard error envelope ``{"status": "error", "message": ...}``.

    Args:
        code: Machine-readable error identifier, used to pick the HTTP status.
        message: Human-readable explanation of the error.
        http_status: Explicit HTTP status code to override the code mapping.
        headers: Optional response headers to include alongside the payload.
    """

    if not isinstance(code, str):
        raise TypeError("error_response requires code to be a string")
    if not isinstance(message, str):
        raise TypeError("error_response requires message to be a string")

    status_code = resolve_status(code, http_status)
    if not 100 <= status_code <= 599:
        raise ValueError("error_response status must be a valid HTTP status code")
    if headers is not None and not isinstance(headers, Mapping):
        raise TypeError("error_response headers must be a mapping if provided")

    headers_dict = (
        {str(key): str(value) for key, value in headers.items()} if headers else None
    )
    return Response(error_payload(message), status=status_code, headers=headers_dict)
