"""
REST framework exception handling.

Every error body produced by the API carries a human readable ``message``
key; field level validation errors are kept under ``errors``.
"""

import logging

from rest_framework import exceptions
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def _first_message(detail):
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
        return ""
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ""
    return str(detail)


def api_exception_handler(exc, context):
    """
    Wrap DRF's default handler so clients can always read ``message``.
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, exceptions.ValidationError):
        response.data = {
            "message": _first_message(exc.detail) or "Invalid data",
            "errors": response.data,
        }
    elif isinstance(response.data, dict) and "detail" in response.data:
        response.data = {"message": str(response.data["detail"])}
    else:
        response.data = {"message": _first_message(response.data)}

    if response.status_code >= 500:
        logger.error(f"API error in {context.get('view')}: {response.data['message']}")

    return response
