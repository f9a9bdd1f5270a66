from rest_framework import serializers

from users.repositories import UserRepository
from users.serializers import UserDisplaySerializer

from .documents import summarize_reactions
from .models import Post


def feed_context(posts, viewer_id=None) -> dict:
    """
    Serializer context for one or many posts: the viewer (for userReacted)
    and every comment author, fetched in a single query.
    """
    author_ids = {
        comment.get("user")
        for post in posts
        for comment in post.comments
    }
    return {
        "viewer_id": viewer_id,
        "users": UserRepository.get_display_map(author_ids),
    }


class CommentSerializer(serializers.Serializer):
    """An embedded comment dict with its author expanded."""

    id = serializers.CharField(read_only=True)
    user = serializers.SerializerMethodField()
    content = serializers.CharField(read_only=True)
    parent = serializers.CharField(read_only=True, allow_null=True)
    createdAt = serializers.CharField(read_only=True)

    def get_user(self, comment):
        user = self.context.get("users", {}).get(str(comment.get("user")))
        if user is None:
            return None
        return UserDisplaySerializer(user).data


class PostSerializer(serializers.ModelSerializer):
    """
    The single post shape every endpoint returns, including the derived
    reaction summary (likes, userReacted, userReaction, reactionCounts).
    """

    user = UserDisplaySerializer(read_only=True)
    comments = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Post
        fields = [
            "id", "user", "content", "images", "reactions", "comments",
            "createdAt", "updatedAt",
        ]
        read_only_fields = fields

    def get_comments(self, post):
        return CommentSerializer(post.comments, many=True, context=self.context).data

    def to_representation(self, post):
        data = super().to_representation(post)
        data.update(summarize_reactions(post.reactions, self.context.get("viewer_id")))
        data["commentCount"] = len(post.comments)
        return data


class PostCreateSerializer(serializers.Serializer):
    """Body of POST /api/posts. Emptiness rules live in PostService."""

    content = serializers.CharField(max_length=5000, required=False, allow_blank=True, allow_null=True)
    images = serializers.ListField(
        child=serializers.CharField(allow_blank=False, trim_whitespace=False),
        required=False,
        allow_null=True,
    )


class CommentCreateSerializer(serializers.Serializer):
    """Body of POST /api/posts/<id>/comments. Blank content is rejected by the service."""

    content = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)
    parent = serializers.CharField(required=False, allow_blank=True, allow_null=True)
