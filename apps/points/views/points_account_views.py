"""
Points balance and history views.
"""
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response

from apps.common.utils import error_response
from ..exceptions import InvalidPointsAmountError, UserNotFoundError
from ..serializers import AddPointsSerializer, PointsTransactionSerializer
from ..services import PointsService, REDEEM_THRESHOLD, REDEEM_VALUE


@api_view(['GET', 'POST'])
def points_balance(request):
    """GET the signed-in user's balance; POST credits points to it"""
    service = PointsService()

    if request.method == 'POST':
        return _add_points(request, service)

    points = service.get_balance(request.user.pk)
    return Response({
        'points': points,
        'name': request.user.name,
        'canRedeem': points >= REDEEM_THRESHOLD,
        'redeemValue': REDEEM_VALUE,
    })


def _add_points(request, service):
    serializer = AddPointsSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid amount', details=serializer.errors)

    reason = serializer.validated_data.get('reason')
    try:
        result = service.add_points(request.user.pk, serializer.validated_data['amount'], reason)
    except InvalidPointsAmountError as e:
        return error_response(f'Invalid amount: {e}')
    except UserNotFoundError as e:
        return error_response(str(e), status.HTTP_404_NOT_FOUND)

    return Response({
        'success': True,
        'newBalance': result['new_balance'],
        'added': result['added'],
        'reason': reason,
    })


@api_view(['GET'])
def get_points_transactions(request):
    """Get user's points transaction history, newest first"""
    transactions = PointsService().get_transactions(request.user.pk)

    transaction_type = request.query_params.get('type')
    if transaction_type:
        transactions = transactions.filter(transaction_type=transaction_type)

    paginator = PageNumberPagination()
    page = paginator.paginate_queryset(transactions, request)
    serializer = PointsTransactionSerializer(page, many=True)
    return paginator.get_paginated_response(serializer.data)
