"""
Referral codes and referral bonuses.

A code is ``KBD`` followed by the referrer's zero-padded user id. Applying a
code credits both users through the points ledger and can happen once per
referred user.
"""
import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import Sum

from ..exceptions import InvalidReferralError, UserNotFoundError
from ..models import TransactionType
from .points_service import PointsService, REDEEM_THRESHOLD, REDEEM_VALUE

logger = logging.getLogger(__name__)

REFERRAL_CODE_PREFIX = 'KBD'
REFERRER_BONUS = 2000
NEW_USER_BONUS = 500
SHARE_BASE_URL = 'https://kabadiyo.com'


class ReferralService:
    """Service for referral codes and applying them"""

    def __init__(self, points_service=None):
        self.points = points_service or PointsService()

    @staticmethod
    def get_referral_code(user):
        return f"{REFERRAL_CODE_PREFIX}{user.pk:06d}"

    @staticmethod
    def parse_referral_code(code):
        """Return the referrer id encoded in ``code``, or None if malformed"""
        if not isinstance(code, str):
            return None
        code = code.strip().upper()
        digits = code[len(REFERRAL_CODE_PREFIX):]
        if not code.startswith(REFERRAL_CODE_PREFIX) or not digits.isdigit():
            return None
        return int(digits)

    def get_referral_info(self, user):
        """Code, share links, stats and the reward constants for the referral screen"""
        code = self.get_referral_code(user)
        User = get_user_model()

        referred_count = User.objects.using(self.points.using).filter(referred_by=user.pk).count()
        points_earned = self.points.get_transactions(user.pk).filter(
            reference_id__startswith='referral_'
        ).aggregate(total=Sum('amount'))['total'] or 0

        return {
            'referralCode': code,
            'shareUrl': f"{SHARE_BASE_URL}/register?ref={code}",
            'shareText': (
                f"Join Kabadiyo and sell scrap easily! Use my code {code} to get "
                f"{NEW_USER_BONUS} bonus points. Download: {SHARE_BASE_URL}"
            ),
            'stats': {
                'totalReferrals': referred_count,
                'pointsEarned': points_earned,
            },
            'rewards': {
                'perReferral': REFERRER_BONUS,
                'minThreshold': REDEEM_THRESHOLD,
                'redeemValue': REDEEM_VALUE,
            },
        }

    def apply_referral(self, user_id, code):
        """
        Apply ``code`` on behalf of the newly registered ``user_id``.

        Raises:
            InvalidReferralError: malformed or unknown code, self referral,
                or a referral was already applied
            UserNotFoundError: no such user

        Returns:
            dict: bonuses credited and the new user's balance
        """
        referrer_id = self.parse_referral_code(code)
        if referrer_id is None:
            raise InvalidReferralError("Invalid referral code")
        if referrer_id == user_id:
            raise InvalidReferralError("You cannot use your own referral code")

        users = get_user_model().objects.using(self.points.using)

        with transaction.atomic(using=self.points.using):
            user = users.select_for_update().filter(pk=user_id).first()
            if user is None:
                raise UserNotFoundError(user_id)
            if user.referred_by_id is not None:
                raise InvalidReferralError("A referral code has already been applied")
            if not users.filter(pk=referrer_id, is_active=True).exists():
                raise InvalidReferralError("Invalid referral code")

            users.filter(pk=user_id).update(referred_by=referrer_id)
            self.points.add_points(
                referrer_id, REFERRER_BONUS, reason="Referral bonus",
                transaction_type=TransactionType.EARNING, reference_id=f"referral_{user_id}",
            )
            result = self.points.add_points(
                user_id, NEW_USER_BONUS, reason="Joined with a referral code",
                transaction_type=TransactionType.EARNING, reference_id=f"referred_by_{referrer_id}",
            )

        logger.info(f"Referral applied: user {user_id} referred by {referrer_id}")
        return {
            'referrer_bonus': REFERRER_BONUS,
            'new_user_bonus': NEW_USER_BONUS,
            'new_balance': result['new_balance'],
        }
