"""
Authentication and profile endpoints.
"""

import logging

from django.contrib.auth import authenticate, get_user_model, login, logout, update_session_auth_hash

from rest_framework import generics, permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response

from .serializers import LoginSerializer, UserRegistrationSerializer, UserSerializer

logger = logging.getLogger(__name__)

User = get_user_model()


@api_view(["POST"])
@permission_classes([permissions.AllowAny])
def register(request):
    """
    Create an account and start a session for it.
    """
    serializer = UserRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    user = serializer.save()

    login(request, user, backend="django.contrib.auth.backends.ModelBackend")
    logger.info(f"Registered new user {user.username}")

    return Response(UserSerializer(user, context={"request": request}).data, status=status.HTTP_201_CREATED)


@api_view(["POST"])
@permission_classes([permissions.AllowAny])
def login_view(request):
    """
    Log in with a username or an email address.
    """
    serializer = LoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    identifier = serializer.validated_data["username"]
    password = serializer.validated_data["password"]

    username = identifier
    if "@" in identifier:
        match = User.objects.filter(email__iexact=identifier).first()
        if match is not None:
            username = match.username

    user = authenticate(request, username=username, password=password)
    if user is None:
        logger.warning(f"Failed login attempt for {identifier}")
        return Response(
            {"message": "Invalid username or password"},
            status=status.HTTP_401_UNAUTHORIZED,
        )

    login(request, user)
    return Response(UserSerializer(user, context={"request": request}).data)


@api_view(["POST"])
@permission_classes([permissions.AllowAny])
def logout_view(request):
    logout(request)
    return Response(status=status.HTTP_200_OK)


class UserProfileView(generics.RetrieveUpdateAPIView):
    """
    API endpoint for viewing and updating the logged-in user's profile.

    PUT and PATCH both apply only the fields sent.
    """

    serializer_class = UserSerializer
    permission_classes = [permissions.IsAuthenticated]
    parser_classes = [JSONParser, MultiPartParser, FormParser]

    def get_object(self):
        return self.request.user

    def update(self, request, *args, **kwargs):
        kwargs["partial"] = True
        return super().update(request, *args, **kwargs)

    def perform_update(self, serializer):
        user = serializer.save()
        if "password" in serializer.validated_data:
            # Keep the current session valid after a password change
            update_session_auth_hash(self.request, user)
