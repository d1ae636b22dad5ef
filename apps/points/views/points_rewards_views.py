"""
Reward catalog view.
"""
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ..serializers import RewardSerializer
from ..services import PointsService


@api_view(['GET'])
@permission_classes([AllowAny])
def get_rewards(request):
    """Active rewards ordered by cost; visible without signing in"""
    rewards = PointsService().get_rewards()
    return Response({'rewards': RewardSerializer(rewards, many=True).data})
