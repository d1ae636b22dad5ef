"""
Points models module.
"""
from .reward import Reward
from .redemption import Redemption, RedemptionStatus
from .transaction import PointsTransaction, TransactionType

__all__ = [
    'Reward',
    'Redemption',
    'RedemptionStatus',
    'PointsTransaction',
    'TransactionType',
]
