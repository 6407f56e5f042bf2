"""Catalog domain exception taxonomy and the DRF exception handler.

Services raise subclasses of ``CatalogError``; views translate them into
``{<key>: <message>}`` responses carrying the exception's ``status_code``.
Anything else that escapes a view ends up in ``catalog_exception_handler``,
which logs it and answers with a generic 500 body.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = structlog.get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


class CatalogError(Exception):
    """Base class for errors that map onto a client-facing response."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class ValidationFailed(CatalogError):
    """Required input is missing or malformed."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class NotFound(CatalogError):
    """A referenced record does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class Conflict(CatalogError):
    """Uniqueness or referential-integrity rule violated."""

    status_code = status.HTTP_409_CONFLICT


def error_response(exc: CatalogError, key: str = "error") -> Response:
    """Render a domain error as ``{key: message}`` with its status code."""
    return Response({key: str(exc)}, status=exc.status_code)


def first_error_message(exc: PydanticValidationError) -> str:
    """Return the message of the first failing field of a DTO."""
    errors = exc.errors()
    if not errors:
        return str(exc)
    return errors[0]["msg"]


def invalid_input_response(exc: PydanticValidationError, key: str = "error") -> Response:
    return Response(
        {key: first_error_message(exc)},
        status=status.HTTP_422_UNPROCESSABLE_ENTITY,
    )


def _error_key(view: Optional[Any]) -> str:
    if view is None:
        return "error"
    if getattr(view, "action", None) in getattr(view, "message_key_actions", ()):
        return "message"
    return "error"


def catalog_exception_handler(
    exc: Exception, context: Dict[str, Any]
) -> Optional[Response]:
    """DRF ``EXCEPTION_HANDLER``.

    - DRF ``APIException``: keep the status, normalise the body to
      ``{"error": <detail>}``.
    - ``CatalogError`` not handled by the view: ``{key: message}``.
    - Anything else: log with traceback, answer a generic 500.
    """
    view = context.get("view")
    key = _error_key(view)

    response = exception_handler(exc, context)
    if response is not None:
        detail = response.data.get("detail") if isinstance(response.data, dict) else None
        response.data = {key: str(detail) if detail is not None else response.data}
        return response

    if isinstance(exc, CatalogError):
        return error_response(exc, key=key)

    set_rollback()
    request = context.get("request")
    logger.exception(
        "request.unhandled_error",
        error_type=type(exc).__name__,
        method=getattr(request, "method", None),
        path=request.get_full_path() if request is not None else None,
        action=getattr(view, "action", None),
    )
    return Response(
        {key: INTERNAL_ERROR_MESSAGE},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
