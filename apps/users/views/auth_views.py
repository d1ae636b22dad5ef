"""
User authentication views.

Login establishes a Django session; the session cookie is the credential every
other endpoint checks.
"""
import logging

from django.contrib.auth import authenticate, login, logout
from django.db import IntegrityError, transaction
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.utils import error_response
from apps.points.services import PointsService, AwardReason
from ..serializers import UserProfileSerializer, UserRegistrationSerializer, LoginSerializer

logger = logging.getLogger(__name__)


class RegisterView(APIView):
    """User registration endpoint"""
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = UserRegistrationSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Registration failed', details=serializer.errors)

        try:
            with transaction.atomic():
                user = serializer.save()
                PointsService().award_points(user.pk, AwardReason.SIGNUP)
        except IntegrityError:
            # Lost a race with another registration for the same phone
            return error_response(
                'Registration failed',
                details={'phone': ['Phone number already registered.']},
            )

        login(request, user, backend='django.contrib.auth.backends.ModelBackend')
        logger.info(f"Registered user {user.pk} as {user.role}")

        user.refresh_from_db()
        return Response(
            {'success': True, 'user': UserProfileSerializer(user).data},
            status=status.HTTP_201_CREATED,
        )


class LoginView(APIView):
    """Phone/password login endpoint"""
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Phone and password are required', details=serializer.errors)

        user = authenticate(
            request,
            phone=serializer.validated_data['phone'],
            password=serializer.validated_data['password'],
        )
        if user is None:
            logger.warning(f"Failed login for phone ending {serializer.validated_data['phone'][-4:]}")
            return error_response('Invalid credentials')

        login(request, user)
        return Response({'success': True, 'user': UserProfileSerializer(user).data})


class LogoutView(APIView):
    """Ends the current session"""

    def post(self, request):
        logout(request)
        return Response({'success': True})
