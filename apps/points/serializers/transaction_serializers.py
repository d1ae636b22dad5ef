"""
Points transaction serializers and credit request validation.
"""
from rest_framework import serializers

from apps.common.validators import parse_points_amount
from ..models import PointsTransaction


class PointsAmountField(serializers.Field):
    """A JSON number holding a positive whole number of points; strings are rejected"""

    def to_internal_value(self, data):
        try:
            return parse_points_amount(data)
        except ValueError as e:
            raise serializers.ValidationError(str(e))

    def to_representation(self, value):
        return value


class AddPointsSerializer(serializers.Serializer):
    """
    Serializer for crediting points.
    Used for: POST /api/points/
    """
    amount = PointsAmountField()
    reason = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=200)


class AwardPointsSerializer(serializers.Serializer):
    """
    Serializer for the internal award hook.
    Used for: POST /api/points/internal/award/
    """
    userId = serializers.IntegerField(min_value=1)
    reason = serializers.CharField(max_length=50)


class PointsTransactionSerializer(serializers.ModelSerializer):
    """
    Serializer for the points history list.
    Used for: GET /api/points/transactions/
    """
    type = serializers.CharField(source='transaction_type', read_only=True)
    balanceAfter = serializers.IntegerField(source='balance_after', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = PointsTransaction
        fields = ['id', 'type', 'amount', 'balanceAfter', 'reason', 'createdAt']
        read_only_fields = fields
