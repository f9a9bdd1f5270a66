from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny, IsAuthenticated

from core.auth import BearerTokenAuthentication, OptionalBearerTokenAuthentication
from core.views import json_body

from .documents import summarize_reactions
from .serializers import (
    CommentCreateSerializer,
    CommentSerializer,
    PostCreateSerializer,
    PostSerializer,
    feed_context,
)
from .services import CommentService, PostService, ReactionService


def viewer_id(request):
    """Id of the signed-in caller, or None for anonymous requests."""
    user = request.user
    return str(user.id) if user and user.is_authenticated else None


# ---------------------------------------------------------------------------
# Feed list + create
# ---------------------------------------------------------------------------

class PostListCreateView(APIView):
    """
    GET  /api/posts            → all posts, newest first (public)
    GET  /api/posts?userId=... → one author's posts
    POST /api/posts            → create a post (auth required)
    """

    def get_authenticators(self):
        if self.request.method == "POST":
            return [BearerTokenAuthentication()]
        return [OptionalBearerTokenAuthentication()]

    def get_permissions(self):
        if self.request.method == "POST":
            return [IsAuthenticated()]
        return [AllowAny()]

    def get(self, request):
        posts = PostService.list_posts(user_id=request.query_params.get("userId"))
        context = feed_context(posts, viewer_id(request))
        return Response({"posts": PostSerializer(posts, many=True, context=context).data})

    def post(self, request):
        serializer = PostCreateSerializer(data=json_body(request))
        serializer.is_valid(raise_exception=True)

        post = PostService.create_post(
            request.user.id,
            content=serializer.validated_data.get("content"),
            images=serializer.validated_data.get("images"),
        )
        context = feed_context([post], viewer_id(request))
        return Response({"post": PostSerializer(post, context=context).data}, status=status.HTTP_201_CREATED)


# ---------------------------------------------------------------------------
# Single post detail
# ---------------------------------------------------------------------------

class PostDetailView(APIView):
    """GET /api/posts/<id> → post with author and comment authors expanded."""
    authentication_classes = [OptionalBearerTokenAuthentication]
    permission_classes = [AllowAny]

    def get(self, request, post_id):
        post = PostService.get_post(post_id)
        context = feed_context([post], viewer_id(request))
        return Response({"post": PostSerializer(post, context=context).data})


# ---------------------------------------------------------------------------
# Reactions
# ---------------------------------------------------------------------------

class ReactionView(APIView):
    """
    POST /api/posts/<id>/reactions {type?}

    Adds, switches, or (same type again) removes the caller's reaction.
    """
    permission_classes = [IsAuthenticated]

    def post(self, request, post_id):
        post = ReactionService.react(post_id, request.user.id, json_body(request).get("type"))
        return Response({
            "postId": str(post.pk),
            "reactions": post.reactions,
            **summarize_reactions(post.reactions, viewer_id(request)),
        })


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------

class CommentCreateView(APIView):
    """POST /api/posts/<id>/comments {content, parent?} → full comment list, oldest first."""
    permission_classes = [IsAuthenticated]

    def post(self, request, post_id):
        serializer = CommentCreateSerializer(data=json_body(request))
        serializer.is_valid(raise_exception=True)

        post = CommentService.add_comment(
            post_id,
            request.user.id,
            serializer.validated_data.get("content"),
            parent=serializer.validated_data.get("parent"),
        )
        context = feed_context([post], viewer_id(request))
        return Response({
            "postId": str(post.pk),
            "comments": CommentSerializer(post.comments, many=True, context=context).data,
        })
