"""
Feed Services
=============

Post creation plus the two embedded-list mutations (reactions, comments).

Each mutation is a read-modify-write of a single post row, done under
``select_for_update()`` inside a transaction so concurrent reactions or
comments on the same post serialize instead of overwriting each other.
"""

from core.exceptions import NotFoundError, ValidationError
from core.services import BaseService
from users.repositories import UserRepository

from .documents import append_comment, apply_reaction, build_comment, normalize_reaction_type
from .repositories import PostRepository


def _post_not_found(post_id):
    return NotFoundError("Post not found", resource="post", post_id=str(post_id))


class PostService(BaseService):
    """Reading and creating posts."""

    @classmethod
    def list_posts(cls, user_id=None) -> list:
        return list(PostRepository.list_posts(user_id=user_id))

    @classmethod
    def get_post(cls, post_id):
        post = PostRepository.get_with_author(post_id)
        if post is None:
            raise _post_not_found(post_id)
        return post

    @classmethod
    def create_post(cls, user_id, content=None, images=None):
        """
        Create a post for ``user_id``.

        Raises:
            ValidationError: no text and no images
            NotFoundError: the token's user no longer exists
        """
        content = (content or "").strip()
        images = list(images or [])

        if not content and not images:
            raise ValidationError("Content or images required")

        user = UserRepository.get_by_id_or_none(user_id)
        if user is None:
            raise NotFoundError("User not found", resource="user")

        post = PostRepository.create_post(user=user, content=content, images=images)
        cls.logger.info("User %s created post %s (%d images)", user.pk, post.pk, len(images))
        return post


class ReactionService(BaseService):
    """Toggle / switch a user's single reaction on a post."""

    @classmethod
    def react(cls, post_id, user_id, reaction_type=None):
        reaction_type = normalize_reaction_type(reaction_type)

        with cls.atomic():
            post = PostRepository.get_for_update_or_none(post_id)
            if post is None:
                raise _post_not_found(post_id)

            reactions = apply_reaction(post.reactions, user_id, reaction_type)
            post = PostRepository.save_reactions(post, reactions)

        cls.logger.debug(
            "User %s reacted %s on post %s (%d reactions)",
            user_id, reaction_type, post.pk, len(post.reactions),
        )
        return post


class CommentService(BaseService):
    """Append-only comments."""

    @classmethod
    def add_comment(cls, post_id, user_id, content, parent=None):
        comment = build_comment(user_id, content, parent=parent)

        with cls.atomic():
            post = PostRepository.get_for_update_or_none(post_id)
            if post is None:
                raise _post_not_found(post_id)

            comments = append_comment(post.comments, comment)
            post = PostRepository.save_comments(post, comments)

        cls.logger.debug("User %s commented on post %s (%d comments)", user_id, post.pk, len(post.comments))
        return post
