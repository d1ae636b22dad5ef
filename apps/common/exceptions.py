"""
Custom exception handler for consistent API error responses.

Every error leaves the API as ``{"error": <message>, "code": <status>}``;
serializer validation errors additionally carry ``details``.
"""
import logging

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

DEFAULT_MESSAGES = {
    status.HTTP_400_BAD_REQUEST: 'Invalid input',
    status.HTTP_401_UNAUTHORIZED: 'Unauthorized',
    status.HTTP_403_FORBIDDEN: 'Permission denied',
    status.HTTP_404_NOT_FOUND: 'Not found',
    status.HTTP_405_METHOD_NOT_ALLOWED: 'Method not allowed',
}


def _first_message(detail):
    """Pull the first human readable string out of a DRF error detail."""
    if isinstance(detail, dict):
        if 'detail' in detail:
            return _first_message(detail['detail'])
        for value in detail.values():
            return _first_message(value)
        return None
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else None
    return str(detail)


def custom_exception_handler(exc, context):
    """
    Custom exception handler that returns consistent error responses
    """
    response = exception_handler(exc, context)

    if response is None:
        # Not an API exception: log it and hide the internals from the caller
        view = context.get('view')
        logger.error(
            f"Unhandled exception in {view.__class__.__name__ if view else 'unknown view'}: {exc}",
            exc_info=exc,
        )
        return Response(
            {'error': 'Internal server error', 'code': status.HTTP_500_INTERNAL_SERVER_ERROR},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if response.status_code >= 500:
        logger.error(f"API Exception: {exc}", exc_info=exc)
        response.data = {'error': 'Internal server error', 'code': response.status_code}
        return response

    logger.warning(f"API Exception: {exc}")

    data = {
        'error': DEFAULT_MESSAGES.get(response.status_code, 'An error occurred'),
        'code': response.status_code,
    }
    if isinstance(exc, ValidationError):
        data['details'] = response.data
    else:
        data['error'] = _first_message(response.data) or data['error']

    response.data = data
    return response
