"""
User models module.
"""
from .user import User, UserRole, UserManager

__all__ = [
    'User',
    'UserRole',
    'UserManager',
]
