"""
Points redemption views.
"""
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from apps.common.utils import error_response
from ..exceptions import InsufficientPointsError, NotFoundError
from ..serializers import RedemptionSerializer, ThresholdRedemptionSerializer
from ..services import PointsService, REDEEM_REWARD_MESSAGE


@api_view(['POST'])
def redeem_points(request):
    """Redeem the fixed threshold of points for a service voucher"""
    serializer = ThresholdRedemptionSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid input', details=serializer.errors)

    try:
        result = PointsService().redeem_fixed_threshold(
            request.user.pk,
            reward_id=serializer.validated_data.get('rewardId'),
            service_label=serializer.validated_data.get('service'),
        )
    except InsufficientPointsError as e:
        return error_response(str(e))
    except NotFoundError as e:
        return error_response(str(e), status.HTTP_404_NOT_FOUND)

    data = {
        'success': True,
        'message': result['message'],
        'remainingPoints': result['remaining_points'],
        'userDetails': result['user'],
    }
    if result['redemption'] is not None:
        data['redemptionId'] = str(result['redemption'].pk)
    return Response(data)


@api_view(['POST'])
def redeem_reward(request, reward_id):
    """Redeem a catalog reward at its listed cost"""
    service = PointsService()
    try:
        redemption = service.redeem_reward(request.user.pk, reward_id)
    except InsufficientPointsError as e:
        return error_response(str(e))
    except NotFoundError as e:
        return error_response(str(e), status.HTTP_404_NOT_FOUND)

    return Response({
        'success': True,
        'message': REDEEM_REWARD_MESSAGE,
        'redemptionId': str(redemption.pk),
        'remainingPoints': service.get_balance(request.user.pk),
    }, status=status.HTTP_201_CREATED)


@api_view(['GET'])
def get_redemptions(request):
    """List the signed-in user's redemptions, newest first"""
    redemptions = PointsService().get_redemptions(request.user.pk)
    return Response({'redemptions': RedemptionSerializer(redemptions, many=True).data})
