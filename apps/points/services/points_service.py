"""
Points ledger service.

Every balance change runs in a single transaction on the service's database
alias and writes a PointsTransaction audit row in the same transaction.
Debits lock the user row and re-check the balance in the UPDATE itself, so a
balance can never go below zero even when two redemptions race.
"""
import logging
from enum import Enum

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import F

from apps.common.validators import MAX_POINTS, parse_points_amount
from ..exceptions import (
    InsufficientPointsError, InvalidPointsAmountError, RewardNotFoundError, UserNotFoundError
)
from ..models import PointsTransaction, Redemption, RedemptionStatus, Reward, TransactionType

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger('points.audit')

REDEEM_THRESHOLD = 100000  # 1 lakh points
REDEEM_VALUE = 2000  # Rupee value of a threshold redemption
REDEEM_REWARD_MESSAGE = "Reward Redeemed! Admin will contact you."


class AwardReason(str, Enum):
    ORDER_COMPLETED = 'ORDER_COMPLETED'
    REFERRAL = 'REFERRAL'
    SIGNUP = 'SIGNUP'

    @classmethod
    def parse(cls, value):
        """Case-insensitive lookup; None for anything unrecognized"""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


AWARD_AMOUNTS = {
    AwardReason.ORDER_COMPLETED: 100,
    AwardReason.REFERRAL: 50,
    AwardReason.SIGNUP: 0,
}


class PointsService:
    """
    Award and redeem points for a user.

    ``using`` names the database alias every query and transaction runs on;
    it defaults to ``settings.POINTS_DATABASE``. Callers pass the
    authenticated user's id explicitly.
    """

    def __init__(self, using=None):
        self.using = using or settings.POINTS_DATABASE

    def _users(self):
        return get_user_model().objects.using(self.using)

    # Reads

    def get_balance(self, user_id):
        """Current balance, 0 when the user does not exist"""
        points = self._users().filter(pk=user_id).values_list('points', flat=True).first()
        return points or 0

    def get_rewards(self):
        """Active rewards, cheapest first"""
        return Reward.objects.using(self.using).filter(is_active=True).order_by('cost', 'id')

    def get_transactions(self, user_id):
        return PointsTransaction.objects.using(self.using).filter(user_id=user_id)

    def get_redemptions(self, user_id):
        return Redemption.objects.using(self.using).filter(user_id=user_id).select_related('reward')

    # Credits

    def award_points(self, user_id, reason):
        """
        Award the fixed amount for a qualifying event.

        Unknown reasons, and reasons worth nothing, change nothing and
        return 0. Returns the number of points awarded.
        """
        award_reason = AwardReason.parse(reason)
        amount = AWARD_AMOUNTS.get(award_reason, 0)
        if amount == 0:
            logger.debug(f"No points for reason {reason!r}, user {user_id}")
            return 0

        with transaction.atomic(using=self.using):
            self._credit(user_id, amount, TransactionType.EARNING, reason=award_reason.value)

        return amount

    def add_points(self, user_id, amount, reason=None,
                   transaction_type=TransactionType.EARNING, reference_id=None):
        """
        Credit an arbitrary positive amount.

        Raises:
            InvalidPointsAmountError: amount is not a positive whole number, or the
                balance would exceed MAX_POINTS
            UserNotFoundError: no such user

        Returns:
            dict: new_balance, added and the echoed reason
        """
        try:
            points = parse_points_amount(amount)
        except ValueError as e:
            raise InvalidPointsAmountError(str(e)) from e

        with transaction.atomic(using=self.using):
            new_balance = self._credit(
                user_id, points, transaction_type, reason=reason, reference_id=reference_id
            )

        return {'new_balance': new_balance, 'added': points, 'reason': reason}

    # Redemptions

    def redeem_reward(self, user_id, reward_id):
        """
        Spend a catalog reward's cost and open a PENDING redemption.

        The debit and the redemption row commit together or not at all.

        Raises:
            UserNotFoundError, RewardNotFoundError, InsufficientPointsError
        """
        with transaction.atomic(using=self.using):
            user = self._lock_user(user_id)
            reward = self._get_reward(reward_id)

            balance = self._debit(user, reward.cost)
            redemption = Redemption.objects.using(self.using).create(
                user_id=user.pk,
                reward=reward,
                status=RedemptionStatus.PENDING,
                points_spent=reward.cost,
            )
            self._record(
                user.pk, -reward.cost, balance, TransactionType.REDEMPTION,
                reason=f"Redeemed {reward.title}",
                reference_id=f"redemption_{redemption.pk}",
            )

        logger.info(f"User {user_id} redeemed reward {reward.pk} for {reward.cost} points")
        return redemption

    def redeem_fixed_threshold(self, user_id, reward_id=None, service_label=None):
        """
        Spend REDEEM_THRESHOLD points for REDEEM_VALUE rupees of service.

        A redemption row is only created when a reward id is given; an unknown
        reward id rolls the debit back.

        Raises:
            UserNotFoundError, RewardNotFoundError, InsufficientPointsError

        Returns:
            dict: remaining_points, redeem_value, message, redemption (or None)
            and user contact details
        """
        service = service_label or "local service"

        with transaction.atomic(using=self.using):
            user = self._lock_user(user_id)
            if user.points < REDEEM_THRESHOLD:
                raise InsufficientPointsError(required=REDEEM_THRESHOLD, available=user.points)

            reward = self._get_reward(reward_id) if reward_id is not None else None

            balance = self._debit(user, REDEEM_THRESHOLD)
            redemption = None
            if reward is not None:
                redemption = Redemption.objects.using(self.using).create(
                    user_id=user.pk,
                    reward=reward,
                    status=RedemptionStatus.PENDING,
                    points_spent=REDEEM_THRESHOLD,
                    service_label=service_label or '',
                )
            self._record(
                user.pk, -REDEEM_THRESHOLD, balance, TransactionType.REDEMPTION,
                reason=f"Redeemed ₹{REDEEM_VALUE} of {service}",
                reference_id=f"redemption_{redemption.pk}" if redemption else None,
            )

        logger.info(f"User {user_id} redeemed {REDEEM_THRESHOLD} points for ₹{REDEEM_VALUE} of {service}")
        return {
            'remaining_points': balance,
            'redeem_value': REDEEM_VALUE,
            'message': f"Congratulations! You've redeemed ₹{REDEEM_VALUE} worth of {service}!",
            'redemption': redemption,
            'user': {'name': user.name, 'phone': user.phone},
        }

    # Internals; callers hold a transaction

    def _lock_user(self, user_id):
        User = get_user_model()
        try:
            return self._users().select_for_update().get(pk=user_id)
        except User.DoesNotExist:
            raise UserNotFoundError(user_id)

    def _get_reward(self, reward_id):
        try:
            return Reward.objects.using(self.using).get(pk=reward_id)
        except Reward.DoesNotExist:
            raise RewardNotFoundError(reward_id)

    def _current_points(self, user_id):
        return self._users().filter(pk=user_id).values_list('points', flat=True).get()

    def _credit(self, user_id, amount, transaction_type, reason=None, reference_id=None):
        # Guarded like a debit: the balance column tops out at MAX_POINTS
        updated = self._users().filter(pk=user_id, points__lte=MAX_POINTS - amount).update(
            points=F('points') + amount
        )
        if not updated:
            if not self._users().filter(pk=user_id).exists():
                raise UserNotFoundError(user_id)
            raise InvalidPointsAmountError(f"Balance cannot exceed {MAX_POINTS:,} points")

        balance = self._current_points(user_id)
        self._record(user_id, amount, balance, transaction_type, reason=reason, reference_id=reference_id)
        return balance

    def _debit(self, user, amount):
        """Take ``amount`` from a locked user; returns the new balance"""
        if user.points < amount:
            raise InsufficientPointsError(required=amount, available=user.points)

        # Guarded update: a concurrent debit that got in first leaves no row to match
        updated = self._users().filter(pk=user.pk, points__gte=amount).update(points=F('points') - amount)
        if not updated:
            raise InsufficientPointsError(required=amount, available=self._current_points(user.pk))

        return self._current_points(user.pk)

    def _record(self, user_id, amount, balance_after, transaction_type, reason=None, reference_id=None):
        PointsTransaction.objects.using(self.using).create(
            user_id=user_id,
            transaction_type=transaction_type,
            amount=amount,
            balance_after=balance_after,
            reason=reason or '',
            reference_id=reference_id,
        )
        message = (
            f"user={user_id} type={transaction_type} amount={amount} "
            f"balance_after={balance_after} reason={reason!r} ref={reference_id}"
        )
        transaction.on_commit(lambda: audit_logger.info(message), using=self.using)
