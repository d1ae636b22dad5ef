"""
Health check view for monitoring tools.
"""
import logging

from django.db import connection, DatabaseError
from django.utils import timezone
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

logger = logging.getLogger(__name__)


def _check_database_health():
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
            row = cursor.fetchone()
    except DatabaseError as e:
        logger.error(f"Database health check failed: {e}")
        return 'unhealthy'

    return 'healthy' if row and row[0] == 1 else 'unhealthy'


@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def health_check(request):
    """Report service and database status; no authentication required"""
    database = _check_database_health()
    healthy = database == 'healthy'

    return Response({
        'status': 'healthy' if healthy else 'unhealthy',
        'timestamp': timezone.now().isoformat(),
        'database': database,
    }, status=200 if healthy else 503)
