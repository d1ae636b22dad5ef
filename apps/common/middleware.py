"""
Middleware that keeps unexpected failures from leaking internals.
"""
import logging

from django.http import JsonResponse
from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware(MiddlewareMixin):
    """
    Secure error handling middleware that prevents information leakage
    """

    def process_exception(self, request, exception):
        """Handle exceptions securely"""
        logger.error(f"Exception in {request.path}: {exception}", exc_info=True)

        if request.path.startswith('/api/'):
            return JsonResponse({'error': 'Internal server error', 'code': 500}, status=500)

        return None  # Let Django handle non-API errors normally
