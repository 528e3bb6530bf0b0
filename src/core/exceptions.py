"""Custom exception handling to enforce the API error body.

Every error leaves the API as ``{"type": ..., "message": ...}``; validation
failures additionally carry the field details under ``"errors"``.
"""

import logging
from typing import Any

from django.db import DatabaseError, IntegrityError
from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed, NotAuthenticated, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from .resources import NotFound

logger = logging.getLogger(__name__)

ACCESS_DENIED_MESSAGE = "Access is denied"


def error_body(type_name: str, message: str, errors: Any = None) -> dict[str, Any]:
    body: dict[str, Any] = {"type": type_name, "message": message}
    if errors is not None:
        body["errors"] = errors
    return body


def error_response(type_name: str, message: str, status_code: int, errors: Any = None) -> Response:
    return Response(error_body(type_name, message, errors), status=status_code)


def not_found_response(outcome: NotFound) -> Response:
    """Translate a lookup miss into the 404 body."""
    return error_response("EntityNotFoundException", outcome.message, status.HTTP_404_NOT_FOUND)


def _flatten_message(payload: Any) -> str:
    """Render DRF's response.data as a single human-readable line."""

    if isinstance(payload, dict):
        if "detail" in payload:
            return str(payload["detail"])
        return "; ".join(f"{field}: {_flatten_message(value)}" for field, value in payload.items())
    if isinstance(payload, list):
        return " ".join(_flatten_message(item) for item in payload)
    return str(payload)


def custom_exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    """Wrap DRF errors in the `{ "type": ..., "message": ... }` shape.

    - Store failures are logged and surfaced as 500 (constraint) or 503.
    - Missing or rejected credentials become 403, like an insufficient role.
    - Anything DRF does not recognise is left to Django (500).
    """

    if isinstance(exc, IntegrityError):
        logger.exception("Store constraint violation while handling request")
        return error_response(
            "IntegrityError",
            "The store rejected the change.",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, DatabaseError):
        logger.exception("Store failure while handling request")
        return error_response(
            "DatabaseError",
            "Service temporarily unavailable.",
            status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    response = drf_exception_handler(exc, context)

    if response is None:
        return response

    if isinstance(exc, (AuthenticationFailed, NotAuthenticated)):
        response.status_code = status.HTTP_403_FORBIDDEN
        if "WWW-Authenticate" in response:
            del response["WWW-Authenticate"]

    if response.status_code == status.HTTP_403_FORBIDDEN:
        response.data = error_body(type(exc).__name__, ACCESS_DENIED_MESSAGE)
    elif isinstance(exc, ValidationError):
        response.data = error_body(type(exc).__name__, _flatten_message(response.data), response.data)
    else:
        response.data = error_body(type(exc).__name__, _flatten_message(response.data))

    return response


__all__ = [
    "ACCESS_DENIED_MESSAGE",
    "custom_exception_handler",
    "error_body",
    "error_response",
    "not_found_response",
]
