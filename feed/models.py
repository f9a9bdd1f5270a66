import uuid
from django.db import models
from django.conf import settings


class ReactionType(models.TextChoices):
    """The six reactions a user can place on a post."""

    LIKE = "like", "Like"
    LOVE = "love", "Love"
    HAHA = "haha", "Haha"
    WOW = "wow", "Wow"
    SAD = "sad", "Sad"
    ANGRY = "angry", "Angry"


class Post(models.Model):
    """
    A wall post. Reactions and comments are embedded in the row as JSON
    lists and have no life of their own outside the post.

    reactions: [{"user": "<uuid>", "type": "<ReactionType>"}]
    comments:  [{"id": "<uuid>", "user": "<uuid>", "content": str,
                 "parent": "<uuid>" | None, "createdAt": "<iso-8601>"}]
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="posts",
    )
    content = models.TextField(blank=True, default="", max_length=5000)
    images = models.JSONField(default=list, blank=True)
    reactions = models.JSONField(default=list, blank=True)
    comments = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "posts"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="posts_created_idx"),
            models.Index(fields=["user", "-created_at"], name="posts_user_created_idx"),
        ]

    def __str__(self):
        return f"{self.user_id} — {self.content[:50] or 'No caption'}"
