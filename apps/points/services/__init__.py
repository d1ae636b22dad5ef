"""
Points services module.
"""
from .points_service import (
    PointsService, AwardReason, AWARD_AMOUNTS, REDEEM_THRESHOLD, REDEEM_VALUE,
    REDEEM_REWARD_MESSAGE,
)
from .referral_service import ReferralService

__all__ = [
    'PointsService',
    'AwardReason',
    'AWARD_AMOUNTS',
    'REDEEM_THRESHOLD',
    'REDEEM_VALUE',
    'REDEEM_REWARD_MESSAGE',
    'ReferralService',
]
