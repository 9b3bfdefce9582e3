"""Domain validation errors and the global DRF exception handler.

Services raise subclasses of ``DomainValidationError`` and let them
propagate; views never catch them.  ``exception_handler`` is wired as
``REST_FRAMEWORK["EXCEPTION_HANDLER"]`` and renders every handled
failure with the same body shape::

    {"error": "<message>"}

Unknown exceptions are left unhandled so Django answers with a 500.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = structlog.get_logger(__name__)


class DomainValidationError(Exception):
    """Candidate data violated a rule checked before persistence.

    Subclasses set ``code`` (stable, machine-readable) and
    ``default_message`` (the text returned to the client).
    """

    code = "invalid"
    default_message = "Invalid data."

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


def _describe_payload_error(exc: PydanticValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request payload."
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


def _describe_api_error(data: Any) -> str:
    if isinstance(data, dict) and "detail" in data:
        return str(data["detail"])
    if isinstance(data, list) and data:
        return str(data[0])
    return str(data)


def exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    """Translate request failures into ``{"error": ...}`` responses."""
    view = context.get("view")
    view_name = type(view).__name__ if view is not None else None

    if isinstance(exc, DomainValidationError):
        logger.warning(
            "request.validation_failed",
            code=exc.code,
            error=exc.message,
            view=view_name,
        )
        return Response({"error": exc.message}, status=status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, PydanticValidationError):
        message = _describe_payload_error(exc)
        logger.warning("request.payload_invalid", error=message, view=view_name)
        return Response({"error": message}, status=status.HTTP_400_BAD_REQUEST)

    response = drf_exception_handler(exc, context)
    if response is not None:
        response.data = {"error": _describe_api_error(response.data)}
    return response
