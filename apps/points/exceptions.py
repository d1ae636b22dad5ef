"""
Points ledger errors.

Views translate these into HTTP responses: NotFoundError -> 404,
InsufficientPointsError / InvalidPointsAmountError / InvalidReferralError -> 400.
"""


class PointsError(Exception):
    """Base class for points ledger failures"""


class NotFoundError(PointsError):
    pass


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id):
        self.user_id = user_id
        super().__init__(f"User {user_id} not found")


class RewardNotFoundError(NotFoundError):
    def __init__(self, reward_id):
        self.reward_id = reward_id
        super().__init__(f"Reward {reward_id} not found")


class InsufficientPointsError(PointsError):
    """Balance is below what the redemption costs"""

    def __init__(self, required, available):
        self.required = required
        self.available = available
        super().__init__(f"Need {required:,} points to redeem. You have {available:,}.")


class InvalidPointsAmountError(PointsError):
    pass


class InvalidReferralError(PointsError):
    pass
