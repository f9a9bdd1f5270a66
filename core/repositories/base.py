"""
Generic Base Repository
=======================

Type-safe, generic repository providing the single-row operations the
stores need. App repositories (users, feed) inherit from this.

Usage:
    from core.repositories import BaseRepository
    from myapp.models import MyModel

    class MyRepository(BaseRepository[MyModel]):
        model = MyModel
"""

import uuid
from typing import TypeVar, Generic, Type, Optional, Any
from django.db import models

T = TypeVar("T", bound=models.Model)


def parse_uuid(value: Any) -> Optional[uuid.UUID]:
    """Coerce a path/body identifier into a UUID, or None if malformed."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        return None


class BaseRepository(Generic[T]):
    """
    Generic repository with standard CRUD operations.

    Subclasses MUST set the `model` class attribute:

        class UserRepository(BaseRepository[User]):
            model = User
    """

    model: Type[T]

    # ── Read ──────────────────────────────────────────────────────────

    @classmethod
    def get_by_id_or_none(cls, pk: Any) -> Optional[T]:
        """Get a single instance by UUID primary key, or None (also for malformed ids)."""
        pk = parse_uuid(pk)
        if pk is None:
            return None
        return cls.model.objects.filter(pk=pk).first()

    @classmethod
    def get_for_update_or_none(cls, pk: Any) -> Optional[T]:
        """
        Get and row-lock a single instance for a read-modify-write.
        Must be called inside ``transaction.atomic()``.
        """
        pk = parse_uuid(pk)
        if pk is None:
            return None
        return cls.model.objects.select_for_update().filter(pk=pk).first()

    # ── Write ─────────────────────────────────────────────────────────

    @classmethod
    def create(cls, **kwargs) -> T:
        """Create and return a new instance."""
        return cls.model.objects.create(**kwargs)

    @classmethod
    def update(cls, instance: T, **kwargs) -> T:
        """Update fields on an existing instance and save only those fields."""
        for field, value in kwargs.items():
            setattr(instance, field, value)
        update_fields = list(kwargs.keys())
        # auto_now fields are only written when listed in update_fields
        if hasattr(instance, "updated_at") and "updated_at" not in update_fields:
            update_fields.append("updated_at")
        instance.save(update_fields=update_fields)
        return instance
