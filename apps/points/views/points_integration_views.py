"""
Points integration views (internal API endpoints for other services).
"""
import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response

from apps.common.utils import error_response
from ..exceptions import InvalidPointsAmountError, UserNotFoundError
from ..serializers import AwardPointsSerializer
from ..services import PointsService

logger = logging.getLogger(__name__)


@api_view(['POST'])
@permission_classes([IsAdminUser])
def internal_award_points(request):
    """Award points for a qualifying event, e.g. a completed pickup order (staff only)"""
    serializer = AwardPointsSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('userId and reason are required', details=serializer.errors)

    user_id = serializer.validated_data['userId']
    reason = serializer.validated_data['reason']
    service = PointsService()

    try:
        awarded = service.award_points(user_id, reason)
    except UserNotFoundError as e:
        return error_response(str(e), status.HTTP_404_NOT_FOUND)
    except InvalidPointsAmountError as e:
        return error_response(str(e))

    logger.info(f"Staff {request.user.pk} awarded {awarded} points to user {user_id} for {reason}")
    return Response({
        'success': True,
        'awarded': awarded,
        'newBalance': service.get_balance(user_id),
    })
