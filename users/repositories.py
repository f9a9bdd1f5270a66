"""
Users Repositories
==================

Data-access layer for the User model.
"""

from typing import Iterable, Optional

from django.contrib.auth import get_user_model

from core.repositories import BaseRepository, parse_uuid

User = get_user_model()


class UserRepository(BaseRepository[User]):
    """User data access."""

    model = User

    # Fields the feed expands when a post/comment references a user
    DISPLAY_FIELDS = ("id", "first_name", "last_name", "username", "avatar")

    @classmethod
    def get_by_email(cls, email: str):
        """Get user by email (case-insensitive), or None."""
        return cls.model.objects.filter(email__iexact=email).first()

    @classmethod
    def email_taken(cls, email: str) -> bool:
        return cls.model.objects.filter(email__iexact=email).exists()

    @classmethod
    def username_taken(cls, username: str) -> bool:
        return cls.model.objects.filter(username__iexact=username).exists()

    @classmethod
    def create_user(cls, email: str, password=None, **extra_fields):
        """Create a new user through the custom UserManager."""
        return cls.model.objects.create_user(email, password, **extra_fields)

    @classmethod
    def get_display_map(cls, user_ids: Iterable) -> dict:
        """
        Fetch display fields for many users in one query.

        Returns ``{str(user_id): user}``; unknown or malformed ids are absent.
        """
        ids = {uid for uid in (parse_uuid(u) for u in user_ids) if uid is not None}
        if not ids:
            return {}
        users = cls.model.objects.filter(pk__in=ids).only(*cls.DISPLAY_FIELDS)
        return {str(user.pk): user for user in users}

    @classmethod
    def update_fields(cls, user_id, **fields) -> Optional[User]:
        """Partial update of one user; returns the fresh row or None if absent."""
        user = cls.get_by_id_or_none(user_id)
        if user is None:
            return None
        return cls.update(user, **fields)

