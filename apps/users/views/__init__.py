"""
User views module.
"""
from .auth_views import RegisterView, LoginView, LogoutView
from .profile_views import UserProfileView

__all__ = [
    'RegisterView',
    'LoginView',
    'LogoutView',
    'UserProfileView',
]
