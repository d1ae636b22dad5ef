"""
User profile views.
"""
from rest_framework.response import Response
from rest_framework.views import APIView

from ..serializers import UserProfileSerializer


class UserProfileView(APIView):
    """Get the signed-in user's profile"""

    def get(self, request):
        return Response(UserProfileSerializer(request.user).data)
