"""
User Views

Account (signup/login) and profile endpoints.
"""

from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated, AllowAny

from core.auth import OptionalBearerTokenAuthentication
from core.views import json_body

from .serializers import (
    LoginSerializer,
    PrivateUserSerializer,
    ProfileUpdateSerializer,
    PublicUserSerializer,
    RegisterSerializer,
)
from .services import AccountService, ProfileService


class RegisterView(APIView):
    """
    User registration endpoint.

    POST /api/auth/register
    """
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        user, token = AccountService.register(
            first_name=data["firstName"],
            last_name=data["lastName"],
            username=data["username"],
            email=data["email"],
            password=data["password"],
        )

        return Response({
            "token": token,
            "user": PrivateUserSerializer(user).data,
        }, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    """
    User login endpoint.

    POST /api/auth/login
    """
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user, token = AccountService.login(
            email=serializer.validated_data["email"],
            password=serializer.validated_data["password"],
        )

        return Response({
            "token": token,
            "user": PrivateUserSerializer(user).data,
        })


class AvatarView(APIView):
    """PUT /api/user/avatar → replace the signed-in user's avatar."""
    permission_classes = [IsAuthenticated]

    def put(self, request):
        user = ProfileService.update_avatar(request.user.id, json_body(request).get("avatar"))
        return Response({
            "message": "Avatar updated successfully",
            "user": PrivateUserSerializer(user).data,
        })


class CoverPhotoView(APIView):
    """PUT /api/user/cover-photo → replace the signed-in user's cover photo."""
    permission_classes = [IsAuthenticated]

    def put(self, request):
        user = ProfileService.update_cover_photo(request.user.id, json_body(request).get("coverPhoto"))
        return Response({
            "message": "Cover photo updated successfully",
            "user": PrivateUserSerializer(user).data,
        })


class ProfileView(APIView):
    """
    PUT /api/user/profile → update bio / education / location / relationship.

    Keys missing from the body are left untouched.
    """
    permission_classes = [IsAuthenticated]

    def put(self, request):
        serializer = ProfileUpdateSerializer(data=json_body(request), partial=True)
        serializer.is_valid(raise_exception=True)

        user = ProfileService.update_profile(request.user.id, serializer.validated_data)
        return Response({
            "message": "Profile updated successfully",
            "user": PrivateUserSerializer(user).data,
        })


class UserDetailView(APIView):
    """GET /api/users/<id> → public profile fields."""
    authentication_classes = [OptionalBearerTokenAuthentication]
    permission_classes = [AllowAny]

    def get(self, request, user_id):
        user = ProfileService.get_public_profile(user_id)
        return Response({"user": PublicUserSerializer(user).data})
