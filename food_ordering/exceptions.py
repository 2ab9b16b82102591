"""
food_ordering.exceptions
DRF EXCEPTION_HANDLER: every error leaves the API as {"error": "..."}.
"""
from __future__ import annotations

import logging
from typing import Any

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

from food_ordering.errors import DomainError, InternalError, MissingToken

logger = logging.getLogger(__name__)


def _first_message(data: Any) -> str:
    """Dig the first human-readable message out of a serializer error payload."""
    if isinstance(data, dict):
        for value in data.values():
            return _first_message(value)
    if isinstance(data, (list, tuple)) and data:
        return _first_message(data[0])
    return str(data) if data else "Invalid input"


def api_exception_handler(exc, context):
    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else "?"

    if isinstance(exc, DomainError):
        set_rollback()
        if exc.status_code >= 500:
            logger.error("Domain failure in %s: %s", view_name, exc.message)
            exc = InternalError()
        return Response({"error": exc.message}, status=exc.status_code)

    response = exception_handler(exc, context)
    if response is not None:
        if isinstance(exc, exceptions.ValidationError):
            response.data = {"error": _first_message(response.data), "details": response.data}
        elif isinstance(exc, exceptions.NotAuthenticated):
            response.data = {"error": MissingToken.default_message}
        elif isinstance(response.data, dict) and "detail" in response.data:
            response.data = {"error": str(response.data["detail"])}
        return response

    # Anything else is an unexpected failure (usually the database): log it, stay vague.
    set_rollback()
    logger.exception("Unhandled error in %s", view_name)
    return Response(
        {"error": InternalError.default_message},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
