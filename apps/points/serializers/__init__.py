"""
Points serializers module.
"""
from .reward_serializers import RewardSerializer
from .transaction_serializers import PointsTransactionSerializer, AddPointsSerializer, AwardPointsSerializer
from .redemption_serializers import RedemptionSerializer, ThresholdRedemptionSerializer
from .referral_serializers import ApplyReferralSerializer

__all__ = [
    'RewardSerializer',
    'PointsTransactionSerializer',
    'AddPointsSerializer',
    'AwardPointsSerializer',
    'RedemptionSerializer',
    'ThresholdRedemptionSerializer',
    'ApplyReferralSerializer',
]
