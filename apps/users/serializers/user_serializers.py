"""
User serializers for profile, registration and login.
"""
from rest_framework import serializers

from apps.common.validators import (
    validate_phone, validate_phone_unique, validate_password_strength
)
from ..models import User, UserRole

SELF_REGISTRATION_ROLES = [UserRole.USER, UserRole.KABADIWALA]


class UserProfileSerializer(serializers.ModelSerializer):
    """
    Serializer for the signed-in user's profile.
    Used for: GET /api/users/me/
    """
    referralCode = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ['id', 'phone', 'name', 'role', 'points', 'referralCode']
        read_only_fields = fields

    def get_referralCode(self, obj):
        from apps.points.services import ReferralService
        return ReferralService.get_referral_code(obj)


class UserRegistrationSerializer(serializers.ModelSerializer):
    """
    Serializer for user registration (create operation).
    Used for: POST /api/users/register/
    """
    phone = serializers.CharField(max_length=20, help_text="10-digit mobile number, optionally +91 prefixed")
    password = serializers.CharField(
        write_only=True,
        validators=[validate_password_strength],
        help_text="At least 8 characters with a letter and a number"
    )
    role = serializers.ChoiceField(choices=SELF_REGISTRATION_ROLES, default=UserRole.USER)

    class Meta:
        model = User
        fields = ['phone', 'name', 'password', 'role']

    def validate_phone(self, value):
        """Normalize the phone number and check it is not taken"""
        return validate_phone_unique(validate_phone(value))

    def create(self, validated_data):
        password = validated_data.pop('password')
        return User.objects.create_user(password=password, **validated_data)


class LoginSerializer(serializers.Serializer):
    """
    Serializer for phone/password login.
    Used for: POST /api/users/login/
    """
    phone = serializers.CharField(max_length=20)
    password = serializers.CharField(write_only=True)

    def validate_phone(self, value):
        return validate_phone(value)
