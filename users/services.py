"""
User Services
=============

Business logic for accounts and profile editing, extracted from views.
"""

from django.db import IntegrityError

from core.auth import get_token_verifier
from core.exceptions import AuthenticationError, NotFoundError, ValidationError
from core.services import BaseService

from .repositories import UserRepository

PROFILE_FIELDS = ("bio", "education", "location", "relationship")


class AccountService(BaseService):
    """Signup and login; both hand back a bearer token."""

    @classmethod
    def issue_token(cls, user) -> str:
        return get_token_verifier().issue(user.pk)

    @classmethod
    def register(cls, first_name: str, last_name: str, username: str, email: str, password: str) -> tuple:
        """
        Create an account and sign the first token.

        Returns:
            (user, token) tuple
        """
        try:
            with cls.atomic():
                user = UserRepository.create_user(
                    email=email,
                    password=password,
                    first_name=first_name,
                    last_name=last_name,
                    username=username,
                )
        except IntegrityError:
            # Lost a race with a concurrent signup for the same email or username
            if UserRepository.email_taken(email):
                raise ValidationError("Email already registered", field="email")
            raise ValidationError("Username already taken", field="username")
        cls.logger.info("Registered user %s (%s)", user.pk, username)
        return user, cls.issue_token(user)

    @classmethod
    def login(cls, email: str, password: str) -> tuple:
        """
        Check credentials and sign a token.

        Raises:
            AuthenticationError: unknown email, wrong password or disabled account
        """
        user = UserRepository.get_by_email(email)
        if user is None or not user.is_active or not user.check_password(password):
            cls.logger.info("Failed login for %s", email)
            raise AuthenticationError("Invalid email or password")
        return user, cls.issue_token(user)


class ProfileService(BaseService):
    """Field-level edits to the signed-in user's profile."""

    @classmethod
    def _update(cls, user_id, **fields):
        user = UserRepository.update_fields(user_id, **fields)
        if user is None:
            raise NotFoundError("User not found", resource="user")
        cls.logger.info("Updated %s for user %s", ", ".join(fields) or "nothing", user.pk)
        return user

    @classmethod
    def update_avatar(cls, user_id, avatar):
        if not avatar:
            raise ValidationError("Avatar data is required", field="avatar")
        if not isinstance(avatar, str):
            raise ValidationError("Avatar must be a data URI or URL string", field="avatar")
        return cls._update(user_id, avatar=avatar)

    @classmethod
    def update_cover_photo(cls, user_id, cover_photo):
        if not cover_photo:
            raise ValidationError("Cover photo data is required", field="coverPhoto")
        if not isinstance(cover_photo, str):
            raise ValidationError("Cover photo must be a data URI or URL string", field="coverPhoto")
        return cls._update(user_id, cover_photo=cover_photo)

    @classmethod
    def update_profile(cls, user_id, changes: dict):
        """
        Apply only the profile keys present in ``changes``.
        An explicit null clears the field.
        """
        fields = {
            name: (changes[name] or "")
            for name in PROFILE_FIELDS
            if name in changes
        }
        if not fields:
            # Still a valid call: answer with the current record
            user = UserRepository.get_by_id_or_none(user_id)
            if user is None:
                raise NotFoundError("User not found", resource="user")
            return user
        return cls._update(user_id, **fields)

    @classmethod
    def get_public_profile(cls, user_id):
        user = UserRepository.get_by_id_or_none(user_id)
        if user is None:
            raise NotFoundError("User not found", resource="user")
        return user
