"""
Common validators module.
"""
from .user_validators import (
    normalize_phone, validate_phone, validate_phone_unique, validate_password_strength
)
from .points_validators import MAX_POINTS, parse_points_amount

__all__ = [
    'normalize_phone',
    'validate_phone',
    'validate_phone_unique',
    'validate_password_strength',
    'parse_points_amount',
    'MAX_POINTS',
]
