from rest_framework import serializers


class ApplyReferralSerializer(serializers.Serializer):
    """
    Serializer for applying a referral code.
    Used for: POST /api/referral/
    """
    referralCode = serializers.CharField(max_length=20)
