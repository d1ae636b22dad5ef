"""
Referral views.
"""
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from apps.common.utils import error_response
from ..exceptions import InvalidPointsAmountError, InvalidReferralError, UserNotFoundError
from ..serializers import ApplyReferralSerializer
from ..services import ReferralService


@api_view(['GET', 'POST'])
def referral(request):
    """GET the user's referral code and stats; POST applies someone else's code"""
    service = ReferralService()

    if request.method == 'GET':
        return Response(service.get_referral_info(request.user))

    serializer = ApplyReferralSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('referralCode is required', details=serializer.errors)

    try:
        result = service.apply_referral(request.user.pk, serializer.validated_data['referralCode'])
    except (InvalidReferralError, InvalidPointsAmountError) as e:
        return error_response(str(e))
    except UserNotFoundError as e:
        return error_response(str(e), status.HTTP_404_NOT_FOUND)

    return Response({
        'success': True,
        'message': 'Referral applied! Both users received bonus points.',
        'referrerBonus': result['referrer_bonus'],
        'newUserBonus': result['new_user_bonus'],
        'newBalance': result['new_balance'],
    })
