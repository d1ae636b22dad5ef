"""
User-related validators for phone and password validation.
"""
import re

from django.contrib.auth import get_user_model
from rest_framework import serializers

PHONE_PATTERN = re.compile(r'^[6-9]\d{9}$')


def normalize_phone(value):
    """
    Strip spaces, dashes and an optional +91 / 91 / 0 prefix from a phone number.

    Returns the bare 10-digit number (not yet validated).
    """
    digits = re.sub(r'[\s-]', '', value or '')
    if digits.startswith('+91'):
        digits = digits[3:]
    elif len(digits) == 12 and digits.startswith('91'):
        digits = digits[2:]
    elif len(digits) == 11 and digits.startswith('0'):
        digits = digits[1:]
    return digits


def validate_phone(value):
    """
    Validate an Indian mobile number.

    Args:
        value: Phone number string

    Raises:
        serializers.ValidationError: If phone format is invalid

    Returns:
        str: Normalized 10-digit phone number
    """
    phone = normalize_phone(value)
    if not PHONE_PATTERN.match(phone):
        raise serializers.ValidationError("Invalid phone number. Expected a 10-digit mobile number.")
    return phone


def validate_phone_unique(value, exclude_user=None):
    """
    Validate phone number uniqueness.

    Args:
        value: Normalized phone number
        exclude_user: User instance to exclude from uniqueness check (for updates)

    Raises:
        serializers.ValidationError: If phone number already exists
    """
    queryset = get_user_model().objects.filter(phone=value)
    if exclude_user:
        queryset = queryset.exclude(pk=exclude_user.pk)

    if queryset.exists():
        raise serializers.ValidationError("Phone number already registered.")

    return value


def validate_password_strength(value):
    """
    Validate password strength: at least 8 characters with a letter and a digit.
    """
    if not value:
        raise serializers.ValidationError("Password cannot be empty.")

    if len(value) < 8:
        raise serializers.ValidationError("Password must be at least 8 characters long.")

    if not re.search(r'[a-zA-Z]', value) or not re.search(r'\d', value):
        raise serializers.ValidationError("Password must contain at least one letter and one number.")

    return value
