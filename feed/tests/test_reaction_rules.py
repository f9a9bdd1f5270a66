"""
Tests for the embedded reaction / comment list rules.

These are pure functions; no database needed.
Run:  python -m pytest feed/tests/test_reaction_rules.py -v
"""

from datetime import datetime, timezone

import pytest

from core.exceptions import ValidationError
from feed.documents import (
    append_comment,
    apply_reaction,
    build_comment,
    normalize_reaction_type,
    summarize_reactions,
)

U1 = "11111111-1111-1111-1111-111111111111"
U2 = "22222222-2222-2222-2222-222222222222"


# ═══════════════════════════════════════════════════
# Reaction type
# ═══════════════════════════════════════════════════

class TestNormalizeReactionType:
    @pytest.mark.parametrize("value", [None, ""])
    def test_missing_defaults_to_like(self, value):
        assert normalize_reaction_type(value) == "like"

    @pytest.mark.parametrize("value", ["like", "love", "haha", "wow", "sad", "angry"])
    def test_accepts_all_six(self, value):
        assert normalize_reaction_type(value) == value

    def test_rejects_unknown(self):
        with pytest.raises(ValidationError) as exc:
            normalize_reaction_type("meh")
        assert exc.value.status_code == 400
        assert "Invalid reaction type" in exc.value.message


# ═══════════════════════════════════════════════════
# Toggle / switch
# ═══════════════════════════════════════════════════

class TestApplyReaction:
    def test_first_reaction_appends(self):
        assert apply_reaction([], U1, "like") == [{"user": U1, "type": "like"}]

    def test_same_type_removes(self):
        reactions = [{"user": U1, "type": "love"}]
        assert apply_reaction(reactions, U1, "love") == []

    def test_different_type_switches_in_place(self):
        reactions = [{"user": U2, "type": "sad"}, {"user": U1, "type": "like"}]
        updated = apply_reaction(reactions, U1, "wow")
        assert updated == [{"user": U2, "type": "sad"}, {"user": U1, "type": "wow"}]

    def test_does_not_mutate_input(self):
        reactions = [{"user": U1, "type": "like"}]
        apply_reaction(reactions, U1, "haha")
        assert reactions == [{"user": U1, "type": "like"}]

    def test_other_users_untouched(self):
        reactions = [{"user": U2, "type": "angry"}]
        updated = apply_reaction(reactions, U1, "angry")
        assert len(updated) == 2
        assert updated[0] == {"user": U2, "type": "angry"}

    def test_like_like_love_sequence(self):
        """like → like (off) → love leaves exactly one love."""
        reactions = []
        reactions = apply_reaction(reactions, U1, "like")
        assert len(reactions) == 1
        reactions = apply_reaction(reactions, U1, "like")
        assert reactions == []
        reactions = apply_reaction(reactions, U1, "love")
        assert reactions == [{"user": U1, "type": "love"}]

    def test_at_most_one_per_user(self):
        reactions = []
        for kind in ["like", "love", "haha", "haha", "sad", "wow"]:
            reactions = apply_reaction(reactions, U1, kind)
        assert len([r for r in reactions if r["user"] == U1]) <= 1


# ═══════════════════════════════════════════════════
# Summary
# ═══════════════════════════════════════════════════

class TestSummarizeReactions:
    def test_empty(self):
        summary = summarize_reactions([], U1)
        assert summary["likes"] == 0
        assert summary["userReacted"] is False
        assert summary["userReaction"] is None
        assert set(summary["reactionCounts"]) == {"like", "love", "haha", "wow", "sad", "angry"}
        assert sum(summary["reactionCounts"].values()) == 0

    def test_counts_and_viewer(self):
        reactions = [{"user": U1, "type": "love"}, {"user": U2, "type": "love"}]
        summary = summarize_reactions(reactions, U2)
        assert summary["likes"] == 2
        assert summary["reactionCounts"]["love"] == 2
        assert summary["userReacted"] is True
        assert summary["userReaction"] == "love"

    def test_anonymous_viewer(self):
        summary = summarize_reactions([{"user": U1, "type": "wow"}])
        assert summary["userReacted"] is False
        assert summary["userReaction"] is None


# ═══════════════════════════════════════════════════
# Comments
# ═══════════════════════════════════════════════════

class TestComments:
    def test_build_trims_and_stamps(self):
        now = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        comment = build_comment(U1, "  hi there  ", now=now)
        assert comment["content"] == "hi there"
        assert comment["user"] == U1
        assert comment["parent"] is None
        assert comment["createdAt"] == "2024-05-01T12:00:00Z"
        assert comment["id"]

    @pytest.mark.parametrize("content", [None, "", "   ", 42])
    def test_build_rejects_blank(self, content):
        with pytest.raises(ValidationError) as exc:
            build_comment(U1, content)
        assert exc.value.message == "Content is required"

    def test_append_keeps_order(self):
        first = build_comment(U1, "first")
        second = build_comment(U2, "second")
        comments = append_comment(append_comment([], first), second)
        assert [c["content"] for c in comments] == ["first", "second"]

    def test_reply_to_existing_parent(self):
        root = build_comment(U1, "root")
        reply = build_comment(U2, "reply", parent=root["id"])
        comments = append_comment([root], reply)
        assert comments[-1]["parent"] == root["id"]

    def test_reply_to_unknown_parent(self):
        reply = build_comment(U2, "reply", parent="33333333-3333-3333-3333-333333333333")
        with pytest.raises(ValidationError) as exc:
            append_comment([], reply)
        assert exc.value.message == "Parent comment not found"
