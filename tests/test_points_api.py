"""
Endpoint tests for the points API.
"""
import pytest
from django.urls import reverse

from apps.common.validators import MAX_POINTS
from apps.points.models import Redemption, RedemptionStatus
from apps.points.services import REDEEM_REWARD_MESSAGE, REDEEM_THRESHOLD
from tests.factories import RedemptionFactory, RewardFactory, UserFactory

pytestmark = pytest.mark.django_db


def set_points(user, points):
    type(user).objects.filter(pk=user.pk).update(points=points)


class TestAuthentication:

    @pytest.mark.parametrize('method, url', [
        ('get', '/api/points/'),
        ('post', '/api/points/'),
        ('post', '/api/points/redeem/'),
        ('post', '/api/points/rewards/1/redeem/'),
        ('get', '/api/points/transactions/'),
        ('get', '/api/points/redemptions/'),
    ])
    def test_missing_session_is_401(self, api_client, method, url):
        response = getattr(api_client, method)(url)

        assert response.status_code == 401
        assert 'error' in response.data

    def test_no_mutation_without_session(self, api_client, test_user):
        api_client.post('/api/points/', {'amount': 10}, format='json')

        test_user.refresh_from_db()
        assert test_user.points == 0

    def test_inactive_user_session_is_401(self, auth_client, test_user):
        type(test_user).objects.filter(pk=test_user.pk).update(is_active=False)

        response = auth_client.get('/api/points/')

        assert response.status_code == 401


class TestBalanceEndpoint:

    def test_get_balance(self, auth_client, test_user):
        set_points(test_user, 1500)

        response = auth_client.get(reverse('points:balance'))

        assert response.status_code == 200
        assert response.data == {
            'points': 1500,
            'name': test_user.name,
            'canRedeem': False,
            'redeemValue': 2000,
        }

    def test_can_redeem_at_threshold(self, auth_client, test_user):
        set_points(test_user, REDEEM_THRESHOLD)

        response = auth_client.get(reverse('points:balance'))

        assert response.data['canRedeem'] is True

    def test_add_points(self, auth_client, test_user):
        response = auth_client.post(reverse('points:balance'), {'amount': 50, 'reason': 'Pickup'}, format='json')

        assert response.status_code == 200
        assert response.data == {'success': True, 'newBalance': 50, 'added': 50, 'reason': 'Pickup'}
        test_user.refresh_from_db()
        assert test_user.points == 50

    @pytest.mark.parametrize('payload', [
        {},
        {'amount': '50'},
        {'amount': -5},
        {'amount': 0},
        {'amount': 1.5},
        {'amount': True},
        {'amount': None},
        {'amount': 10**20},
        {'amount': 1e20},
    ])
    def test_invalid_amount(self, auth_client, test_user, payload):
        response = auth_client.post(reverse('points:balance'), payload, format='json')

        assert response.status_code == 400
        assert response.data['error'] == 'Invalid amount'
        assert 'amount' in response.data['details']
        test_user.refresh_from_db()
        assert test_user.points == 0


class TestThresholdRedemption:

    def test_below_threshold(self, auth_client, test_user):
        set_points(test_user, REDEEM_THRESHOLD - 1)

        response = auth_client.post(reverse('points:redeem'), {}, format='json')

        assert response.status_code == 400
        assert response.data['error'] == 'Need 100,000 points to redeem. You have 99,999.'
        test_user.refresh_from_db()
        assert test_user.points == REDEEM_THRESHOLD - 1

    def test_at_threshold(self, auth_client, test_user):
        set_points(test_user, REDEEM_THRESHOLD)

        response = auth_client.post(reverse('points:redeem'), {'service': 'Cleaning'}, format='json')

        assert response.status_code == 200
        assert response.data['success'] is True
        assert response.data['remainingPoints'] == 0
        assert response.data['message'] == "Congratulations! You've redeemed ₹2000 worth of Cleaning!"
        assert response.data['userDetails'] == {'name': test_user.name, 'phone': test_user.phone}
        assert 'redemptionId' not in response.data

    def test_with_reward_creates_redemption(self, auth_client, test_user, home_service_reward):
        set_points(test_user, REDEEM_THRESHOLD + 10)

        response = auth_client.post(
            reverse('points:redeem'), {'rewardId': home_service_reward.pk}, format='json'
        )

        assert response.status_code == 200
        redemption = Redemption.objects.get(user=test_user)
        assert response.data['redemptionId'] == str(redemption.pk)
        assert response.data['remainingPoints'] == 10

    def test_unknown_reward(self, auth_client, test_user):
        set_points(test_user, REDEEM_THRESHOLD)

        response = auth_client.post(reverse('points:redeem'), {'rewardId': 424242}, format='json')

        assert response.status_code == 404
        test_user.refresh_from_db()
        assert test_user.points == REDEEM_THRESHOLD


class TestCatalogRedemption:

    def test_redeem_reward(self, auth_client, test_user, home_service_reward):
        set_points(test_user, 25000)

        response = auth_client.post(reverse('points:redeem_reward', args=[home_service_reward.pk]))

        assert response.status_code == 201
        assert response.data['message'] == REDEEM_REWARD_MESSAGE
        assert response.data['remainingPoints'] == 5000
        redemption = Redemption.objects.get(pk=response.data['redemptionId'])
        assert redemption.status == RedemptionStatus.PENDING

    def test_insufficient_points(self, auth_client, test_user, home_service_reward):
        set_points(test_user, 19999)

        response = auth_client.post(reverse('points:redeem_reward', args=[home_service_reward.pk]))

        assert response.status_code == 400
        assert response.data['error'] == 'Need 20,000 points to redeem. You have 19,999.'
        assert not Redemption.objects.exists()

    def test_unknown_reward(self, auth_client):
        response = auth_client.post(reverse('points:redeem_reward', args=[424242]))
        assert response.status_code == 404


class TestRewardsEndpoint:

    def test_rewards_public_active_and_sorted(self, api_client):
        RewardFactory(title='Big', cost=30000)
        RewardFactory(title='Small', cost=500)
        RewardFactory(title='Retired', cost=10, is_active=False)

        response = api_client.get(reverse('points:rewards'))

        assert response.status_code == 200
        assert [r['title'] for r in response.data['rewards']] == ['Small', 'Big']
        assert response.data['rewards'][0]['isActive'] is True


class TestHistoryEndpoints:

    def test_transactions_paginated(self, auth_client, test_user):
        auth_client.post(reverse('points:balance'), {'amount': 10}, format='json')
        auth_client.post(reverse('points:balance'), {'amount': 20}, format='json')

        response = auth_client.get(reverse('points:transactions'))

        assert response.status_code == 200
        assert response.data['count'] == 2
        assert [t['amount'] for t in response.data['results']] == [20, 10]
        assert response.data['results'][0]['balanceAfter'] == 30

    def test_transactions_filtered_by_type(self, auth_client, test_user, home_service_reward):
        set_points(test_user, 20000)
        auth_client.post(reverse('points:redeem_reward', args=[home_service_reward.pk]))
        auth_client.post(reverse('points:balance'), {'amount': 10}, format='json')

        response = auth_client.get(reverse('points:transactions'), {'type': 'redemption'})

        assert response.data['count'] == 1
        assert response.data['results'][0]['amount'] == -20000

    def test_redemptions_list_only_own(self, auth_client, test_user):
        RedemptionFactory(user=test_user)
        RedemptionFactory()

        response = auth_client.get(reverse('points:redemptions'))

        assert response.status_code == 200
        assert len(response.data['redemptions']) == 1
        assert response.data['redemptions'][0]['status'] == 'PENDING'


class TestInternalAward:

    def test_staff_awards_order_points(self, staff_client):
        user = UserFactory(points=5)

        response = staff_client.post(
            reverse('points:internal_award'), {'userId': user.pk, 'reason': 'order_completed'}, format='json'
        )

        assert response.status_code == 200
        assert response.data == {'success': True, 'awarded': 100, 'newBalance': 105}

    def test_unknown_reason_awards_nothing(self, staff_client):
        user = UserFactory(points=5)

        response = staff_client.post(
            reverse('points:internal_award'), {'userId': user.pk, 'reason': 'BIRTHDAY'}, format='json'
        )

        assert response.data['awarded'] == 0
        assert response.data['newBalance'] == 5

    def test_missing_user(self, staff_client):
        response = staff_client.post(
            reverse('points:internal_award'), {'userId': 999999, 'reason': 'ORDER_COMPLETED'}, format='json'
        )
        assert response.status_code == 404

    def test_award_past_balance_limit_is_400(self, staff_client):
        user = UserFactory(points=MAX_POINTS - 1)

        response = staff_client.post(
            reverse('points:internal_award'), {'userId': user.pk, 'reason': 'ORDER_COMPLETED'}, format='json'
        )

        assert response.status_code == 400
        user.refresh_from_db()
        assert user.points == MAX_POINTS - 1

    def test_regular_user_forbidden(self, auth_client, test_user):
        response = auth_client.post(
            reverse('points:internal_award'), {'userId': test_user.pk, 'reason': 'ORDER_COMPLETED'}, format='json'
        )

        assert response.status_code == 403
        test_user.refresh_from_db()
        assert test_user.points == 0
