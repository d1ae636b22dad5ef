"""
Points views module.
"""
from .points_account_views import points_balance, get_points_transactions
from .points_redemption_views import redeem_points, redeem_reward, get_redemptions
from .points_rewards_views import get_rewards
from .points_integration_views import internal_award_points
from .referral_views import referral

__all__ = [
    'points_balance',
    'get_points_transactions',
    'redeem_points',
    'redeem_reward',
    'get_redemptions',
    'get_rewards',
    'internal_award_points',
    'referral',
]
