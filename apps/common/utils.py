"""
Common utility functions for API responses
"""
from rest_framework import status
from rest_framework.response import Response


def error_response(message, status_code=status.HTTP_400_BAD_REQUEST, details=None):
    """
    Standard error response format: ``{"error": ..., "code": ...}``
    """
    response_data = {
        'error': message,
        'code': status_code,
    }
    if details:
        response_data['details'] = details
    return Response(response_data, status=status_code)
