"""
User serializers module.
"""
from .user_serializers import (
    UserProfileSerializer, UserRegistrationSerializer, LoginSerializer
)

__all__ = [
    'UserProfileSerializer',
    'UserRegistrationSerializer',
    'LoginSerializer',
]
