"""
Redemption serializers for request validation and history.
"""
from rest_framework import serializers

from ..models import Redemption
from .reward_serializers import RewardSerializer


class ThresholdRedemptionSerializer(serializers.Serializer):
    """
    Serializer for fixed-threshold redemption requests.
    Used for: POST /api/points/redeem/
    """
    rewardId = serializers.IntegerField(required=False, allow_null=True, min_value=1)
    service = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=100)


class RedemptionSerializer(serializers.ModelSerializer):
    """
    Serializer for a user's redemptions.
    Used for: GET /api/points/redemptions/
    """
    reward = RewardSerializer(read_only=True)
    pointsSpent = serializers.IntegerField(source='points_spent', read_only=True)
    service = serializers.CharField(source='service_label', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Redemption
        fields = ['id', 'reward', 'status', 'pointsSpent', 'service', 'createdAt']
        read_only_fields = fields
