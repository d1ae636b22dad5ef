"""
Test configuration for the Kabadiyo server.
"""
import os

import pytest
from rest_framework.test import APIClient


def pytest_configure():
    """Configure Django settings for testing."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'kabadiyo_server.settings.test')


@pytest.fixture
def api_client():
    """Anonymous API client."""
    return APIClient()


@pytest.fixture
def test_user(db):
    """A household user with an empty balance."""
    from tests.factories import UserFactory
    return UserFactory()


@pytest.fixture
def auth_client(test_user):
    """API client carrying a session cookie for ``test_user``."""
    client = APIClient()
    client.force_login(test_user)
    return client


@pytest.fixture
def staff_client(db):
    """API client signed in as a staff member."""
    from tests.factories import UserFactory
    client = APIClient()
    client.force_login(UserFactory(is_staff=True, role='ADMIN'))
    return client


@pytest.fixture
def home_service_reward(db):
    """The default catalog reward."""
    from tests.factories import RewardFactory
    return RewardFactory(title='₹5,000 Home Service', cost=20000)
