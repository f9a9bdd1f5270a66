"""
User Serializers

Field names are camelCase on the wire to match the web client.
"""

from rest_framework import serializers
from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password

from .repositories import UserRepository

User = get_user_model()


class UserDisplaySerializer(serializers.ModelSerializer):
    """Lightweight user info embedded in posts and comments."""

    firstName = serializers.CharField(source="first_name", read_only=True)
    lastName = serializers.CharField(source="last_name", read_only=True)

    class Meta:
        model = User
        fields = ["id", "firstName", "lastName", "username", "avatar"]
        read_only_fields = fields


class PublicUserSerializer(serializers.ModelSerializer):
    """Profile page fields visible to anyone."""

    firstName = serializers.CharField(source="first_name", read_only=True)
    lastName = serializers.CharField(source="last_name", read_only=True)
    coverPhoto = serializers.CharField(source="cover_photo", read_only=True)
    joinDate = serializers.DateTimeField(source="date_joined", read_only=True)
    followers = serializers.IntegerField(source="followers_count", read_only=True)
    following = serializers.IntegerField(source="following_count", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = User
        fields = [
            "id", "firstName", "lastName", "username", "avatar", "coverPhoto",
            "bio", "education", "location", "relationship",
            "joinDate", "followers", "following", "createdAt",
        ]
        read_only_fields = fields


class PrivateUserSerializer(PublicUserSerializer):
    """The signed-in user's own record. Never includes the password hash."""

    class Meta(PublicUserSerializer.Meta):
        fields = PublicUserSerializer.Meta.fields + ["email"]
        read_only_fields = fields


class RegisterSerializer(serializers.Serializer):
    """Serializer for signup."""

    firstName = serializers.CharField(max_length=150)
    lastName = serializers.CharField(max_length=150, required=False, allow_blank=True, default="")
    username = serializers.RegexField(r"^[\w.@+-]+\Z", max_length=150)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, validators=[validate_password])

    def validate_email(self, value):
        if UserRepository.email_taken(value):
            raise serializers.ValidationError("Email already registered")
        return value

    def validate_username(self, value):
        if UserRepository.username_taken(value):
            raise serializers.ValidationError("Username already taken")
        return value


class LoginSerializer(serializers.Serializer):
    """Serializer for login."""

    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class ProfileUpdateSerializer(serializers.Serializer):
    """Optional profile fields; only keys present in the body are applied."""

    bio = serializers.CharField(max_length=500, required=False, allow_blank=True, allow_null=True)
    education = serializers.CharField(max_length=200, required=False, allow_blank=True, allow_null=True)
    location = serializers.CharField(max_length=200, required=False, allow_blank=True, allow_null=True)
    relationship = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
