"""
Tests for referral codes and the referral endpoint.
"""
import pytest
from rest_framework.test import APIClient

from apps.points.exceptions import InvalidReferralError
from apps.points.models import PointsTransaction
from apps.points.services import ReferralService
from apps.points.services.referral_service import NEW_USER_BONUS, REFERRER_BONUS
from tests.factories import UserFactory

pytestmark = pytest.mark.django_db


class TestReferralCodes:

    def test_code_is_prefixed_zero_padded_id(self):
        user = UserFactory.build(pk=42)
        assert ReferralService.get_referral_code(user) == 'KBD000042'

    @pytest.mark.parametrize('code, expected', [
        ('KBD000042', 42),
        (' kbd000042 ', 42),
        ('KBD', None),
        ('KBDabc', None),
        ('XYZ000042', None),
        (None, None),
    ])
    def test_parse_referral_code(self, code, expected):
        assert ReferralService.parse_referral_code(code) == expected


class TestApplyReferral:

    def test_both_users_credited(self):
        referrer = UserFactory(points=100)
        new_user = UserFactory()

        result = ReferralService().apply_referral(new_user.pk, ReferralService.get_referral_code(referrer))

        referrer.refresh_from_db()
        new_user.refresh_from_db()
        assert result == {
            'referrer_bonus': REFERRER_BONUS,
            'new_user_bonus': NEW_USER_BONUS,
            'new_balance': NEW_USER_BONUS,
        }
        assert referrer.points == 100 + REFERRER_BONUS
        assert new_user.points == NEW_USER_BONUS
        assert new_user.referred_by == referrer
        assert PointsTransaction.objects.get(user=referrer).reference_id == f"referral_{new_user.pk}"

    def test_cannot_apply_twice(self):
        referrer = UserFactory()
        other_referrer = UserFactory()
        new_user = UserFactory()
        service = ReferralService()
        service.apply_referral(new_user.pk, service.get_referral_code(referrer))

        with pytest.raises(InvalidReferralError):
            service.apply_referral(new_user.pk, service.get_referral_code(other_referrer))

        other_referrer.refresh_from_db()
        assert other_referrer.points == 0

    def test_self_referral_rejected(self):
        user = UserFactory()
        with pytest.raises(InvalidReferralError):
            ReferralService().apply_referral(user.pk, ReferralService.get_referral_code(user))

    def test_unknown_referrer_rejected(self):
        user = UserFactory()

        with pytest.raises(InvalidReferralError):
            ReferralService().apply_referral(user.pk, 'KBD999999')

        user.refresh_from_db()
        assert user.points == 0
        assert user.referred_by is None

    def test_inactive_referrer_rejected(self):
        referrer = UserFactory(is_active=False)
        user = UserFactory()

        with pytest.raises(InvalidReferralError):
            ReferralService().apply_referral(user.pk, ReferralService.get_referral_code(referrer))

    def test_referral_info_stats(self):
        referrer = UserFactory()
        service = ReferralService()
        for _ in range(2):
            service.apply_referral(UserFactory().pk, service.get_referral_code(referrer))

        info = service.get_referral_info(referrer)

        code = service.get_referral_code(referrer)
        assert info['referralCode'] == code
        assert info['shareUrl'] == f"https://kabadiyo.com/register?ref={code}"
        assert code in info['shareText']
        assert info['stats'] == {'totalReferrals': 2, 'pointsEarned': 2 * REFERRER_BONUS}
        assert info['rewards'] == {'perReferral': 2000, 'minThreshold': 100000, 'redeemValue': 2000}


class TestReferralAPI:

    def test_requires_session(self, api_client):
        response = api_client.get('/api/referral/')
        assert response.status_code == 401

    def test_get_referral_info(self, auth_client, test_user):
        response = auth_client.get('/api/referral/')

        assert response.status_code == 200
        assert response.data['referralCode'] == ReferralService.get_referral_code(test_user)
        assert response.data['stats']['totalReferrals'] == 0

    def test_apply_code(self, auth_client, test_user):
        referrer = UserFactory()

        response = auth_client.post(
            '/api/referral/', {'referralCode': ReferralService.get_referral_code(referrer)}, format='json'
        )

        assert response.status_code == 200
        assert response.data['success'] is True
        assert response.data['referrerBonus'] == REFERRER_BONUS
        assert response.data['newUserBonus'] == NEW_USER_BONUS
        assert response.data['newBalance'] == NEW_USER_BONUS

    def test_apply_invalid_code(self, auth_client):
        response = auth_client.post('/api/referral/', {'referralCode': 'NOPE'}, format='json')

        assert response.status_code == 400
        assert response.data['error'] == 'Invalid referral code'

    def test_apply_missing_code(self, auth_client):
        response = auth_client.post('/api/referral/', {}, format='json')

        assert response.status_code == 400
        assert 'referralCode' in response.data['details']

    def test_other_client_sees_no_session(self, test_user):
        client = APIClient()
        response = client.post('/api/referral/', {'referralCode': 'KBD000001'}, format='json')
        assert response.status_code == 401
