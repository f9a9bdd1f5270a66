"""
Feed Repositories
=================

Data-access layer for Post documents.
"""

from typing import Optional

from django.db.models import QuerySet

from core.repositories import BaseRepository, parse_uuid
from .models import Post


class PostRepository(BaseRepository[Post]):
    """Post data access."""

    model = Post

    @classmethod
    def list_posts(cls, user_id=None) -> QuerySet:
        """
        Posts newest first with their author joined, optionally limited to
        one author. A malformed author id matches nothing.
        """
        qs = cls.model.objects.select_related("user").order_by("-created_at")
        if user_id:
            author = parse_uuid(user_id)
            if author is None:
                return qs.none()
            qs = qs.filter(user_id=author)
        return qs

    @classmethod
    def get_with_author(cls, post_id) -> Optional[Post]:
        """Single post with its author joined, or None."""
        pk = parse_uuid(post_id)
        if pk is None:
            return None
        return cls.model.objects.select_related("user").filter(pk=pk).first()

    @classmethod
    def create_post(cls, user, content: str, images: list) -> Post:
        return cls.create(user=user, content=content, images=images, reactions=[], comments=[])

    @classmethod
    def save_reactions(cls, post: Post, reactions: list) -> Post:
        return cls.update(post, reactions=reactions)

    @classmethod
    def save_comments(cls, post: Post, comments: list) -> Post:
        return cls.update(post, comments=comments)

