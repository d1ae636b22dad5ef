"""
Reward catalog serializers.
"""
from rest_framework import serializers
from ..models import Reward


class RewardSerializer(serializers.ModelSerializer):
    """
    Serializer for the reward catalog.
    Used for: GET /api/points/rewards/
    """
    isActive = serializers.BooleanField(source='is_active', read_only=True)

    class Meta:
        model = Reward
        fields = ['id', 'title', 'description', 'cost', 'isActive']
        read_only_fields = fields
