"""
Embedded document rules
=======================

Pure functions over a post's embedded ``reactions`` and ``comments`` lists.
They never touch the database; ``feed.services`` loads and locks the post,
applies one of these, and saves the result.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from core.exceptions import ValidationError
from .models import ReactionType


# ── Reactions ─────────────────────────────────────────────────────────

def normalize_reaction_type(value) -> str:
    """Omitted / null / empty means "like"; anything outside the six kinds is rejected."""
    if value is None or value == "":
        return ReactionType.LIKE.value
    if value not in ReactionType.values:
        raise ValidationError(
            f"Invalid reaction type. Expected one of: {', '.join(ReactionType.values)}",
            field="type",
        )
    return value


def apply_reaction(reactions: list, user_id, reaction_type: str) -> list:
    """
    Return the reaction list after ``user_id`` reacts with ``reaction_type``.

    - no reaction yet       → append {user, type}
    - same type again       → remove it (toggle off)
    - different type        → switch type in place (length unchanged)

    Keeps the at-most-one-reaction-per-user rule; the input is not mutated.
    """
    user_id = str(user_id)
    updated = [dict(r) for r in reactions]

    for index, reaction in enumerate(updated):
        if str(reaction.get("user")) != user_id:
            continue
        if reaction.get("type") == reaction_type:
            del updated[index]
        else:
            reaction["type"] = reaction_type
        return updated

    updated.append({"user": user_id, "type": reaction_type})
    return updated


def summarize_reactions(reactions: list, user_id=None) -> dict:
    """
    The derived reaction fields every response carries, so clients never
    recompute them from the raw list.
    """
    user_id = str(user_id) if user_id is not None else None
    counts = {kind: 0 for kind in ReactionType.values}
    user_reaction = None

    for reaction in reactions:
        kind = reaction.get("type")
        if kind in counts:
            counts[kind] += 1
        if user_id is not None and str(reaction.get("user")) == user_id:
            user_reaction = kind

    return {
        "likes": len(reactions),
        "userReacted": user_reaction is not None,
        "userReaction": user_reaction,
        "reactionCounts": counts,
    }


# ── Comments ──────────────────────────────────────────────────────────

def find_comment(comments: list, comment_id) -> Optional[dict]:
    comment_id = str(comment_id)
    for comment in comments:
        if str(comment.get("id")) == comment_id:
            return comment
    return None


def build_comment(user_id, content, parent=None, now: Optional[datetime] = None) -> dict:
    """
    Build a comment record ready to append.

    Raises:
        ValidationError: content missing or blank after trimming
    """
    if not isinstance(content, str) or not content.strip():
        raise ValidationError("Content is required", field="content")

    now = now or datetime.now(timezone.utc)
    return {
        "id": str(uuid.uuid4()),
        "user": str(user_id),
        "content": content.strip(),
        "parent": str(parent) if parent else None,
        "createdAt": now.isoformat().replace("+00:00", "Z"),
    }


def append_comment(comments: list, comment: dict) -> list:
    """
    Return ``comments`` with ``comment`` appended (oldest first).

    Raises:
        ValidationError: the comment names a parent that is not on this post
    """
    if comment.get("parent") and find_comment(comments, comment["parent"]) is None:
        raise ValidationError("Parent comment not found", field="parent")
    return [*comments, comment]
