"""
Endpoint tests for /api/posts and the reaction / comment sub-resources.

Run:  python -m pytest feed/tests/test_feed_api.py -v
"""

import uuid
from datetime import timedelta

import pytest
from django.utils import timezone

from feed.models import Post

pytestmark = pytest.mark.django_db

MISSING_POST = "00000000-0000-4000-8000-000000000000"


# ═══════════════════════════════════════════════════
# Authentication
# ═══════════════════════════════════════════════════

class TestAuthRequired:
    def test_create_without_token(self, api_client):
        r = api_client.post("/api/posts", {"content": "hi"}, format="json")
        assert r.status_code == 401
        assert r.json() == {"error": "No token provided"}

    def test_react_without_token(self, api_client, user, make_post):
        post = make_post(user)
        r = api_client.post(f"/api/posts/{post.pk}/reactions", {"type": "like"}, format="json")
        assert r.status_code == 401
        assert r.json() == {"error": "No token provided"}

    def test_comment_with_garbage_token(self, api_client, user, make_post):
        post = make_post(user)
        api_client.credentials(HTTP_AUTHORIZATION="Bearer garbage")
        r = api_client.post(f"/api/posts/{post.pk}/comments", {"content": "x"}, format="json")
        assert r.status_code == 401
        assert r.json() == {"error": "Invalid token"}

    def test_public_list_ignores_bad_token(self, api_client, user, make_post):
        make_post(user)
        api_client.credentials(HTTP_AUTHORIZATION="Bearer garbage")
        r = api_client.get("/api/posts")
        assert r.status_code == 200
        assert len(r.json()["posts"]) == 1


# ═══════════════════════════════════════════════════
# Create + read
# ═══════════════════════════════════════════════════

class TestCreatePost:
    def test_create_text_post(self, auth_client, user):
        r = auth_client.post("/api/posts", {"content": "  Hello wall  "}, format="json")
        assert r.status_code == 201
        post = r.json()["post"]
        assert post["content"] == "Hello wall"
        assert post["user"]["id"] == str(user.pk)
        assert post["user"]["firstName"] == "Ana"
        assert post["reactions"] == []
        assert post["comments"] == []
        assert post["likes"] == 0
        assert post["commentCount"] == 0
        assert "password" not in post["user"]

    def test_images_only_post(self, auth_client):
        r = auth_client.post("/api/posts", {"content": "", "images": ["data:image/png;base64,AAA"]}, format="json")
        assert r.status_code == 201
        assert r.json()["post"]["images"] == ["data:image/png;base64,AAA"]

    @pytest.mark.parametrize("body", [{}, {"content": "   "}, {"content": "", "images": []}])
    def test_empty_post_rejected(self, auth_client, body):
        r = auth_client.post("/api/posts", body, format="json")
        assert r.status_code == 400
        assert r.json() == {"error": "Content or images required"}
        assert Post.objects.count() == 0

    def test_deleted_author_gets_404(self, auth_client, user):
        user.delete()
        r = auth_client.post("/api/posts", {"content": "ghost"}, format="json")
        assert r.status_code == 404
        assert r.json() == {"error": "User not found"}


class TestReadPosts:
    def test_newest_first(self, api_client, user, make_post):
        older = make_post(user, content="older")
        newer = make_post(user, content="newer")
        Post.objects.filter(pk=older.pk).update(created_at=timezone.now() - timedelta(hours=1))

        r = api_client.get("/api/posts")
        assert [p["id"] for p in r.json()["posts"]] == [str(newer.pk), str(older.pk)]

    def test_filter_by_author(self, api_client, user, other_user, make_post):
        make_post(user, content="mine")
        theirs = make_post(other_user, content="theirs")

        r = api_client.get(f"/api/posts?userId={other_user.pk}")
        posts = r.json()["posts"]
        assert [p["id"] for p in posts] == [str(theirs.pk)]

    def test_filter_by_malformed_author_is_empty(self, api_client, user, make_post):
        make_post(user)
        r = api_client.get("/api/posts?userId=not-a-uuid")
        assert r.status_code == 200
        assert r.json()["posts"] == []

    def test_detail(self, api_client, user, make_post):
        post = make_post(user, content="detail me")
        r = api_client.get(f"/api/posts/{post.pk}")
        assert r.status_code == 200
        assert r.json()["post"]["content"] == "detail me"

    @pytest.mark.parametrize("post_id", [MISSING_POST, "not-a-uuid"])
    def test_detail_missing(self, api_client, post_id):
        r = api_client.get(f"/api/posts/{post_id}")
        assert r.status_code == 404
        assert r.json() == {"error": "Post not found"}


# ═══════════════════════════════════════════════════
# Reactions
# ═══════════════════════════════════════════════════

class TestReactions:
    def url(self, post):
        return f"/api/posts/{post.pk}/reactions"

    def test_toggle_then_switch(self, auth_client, user, make_post):
        post = make_post(user)

        r = auth_client.post(self.url(post), {"type": "like"}, format="json")
        assert r.status_code == 200
        assert r.json()["reactions"] == [{"user": str(user.pk), "type": "like"}]
        assert r.json()["userReaction"] == "like"

        r = auth_client.post(self.url(post), {"type": "like"}, format="json")
        assert r.json()["reactions"] == []
        assert r.json()["userReacted"] is False

        r = auth_client.post(self.url(post), {"type": "love"}, format="json")
        data = r.json()
        assert data["postId"] == str(post.pk)
        assert data["reactions"] == [{"user": str(user.pk), "type": "love"}]
        assert data["likes"] == 1
        assert data["reactionCounts"]["love"] == 1

        post.refresh_from_db()
        assert post.reactions == [{"user": str(user.pk), "type": "love"}]

    def test_default_type_is_like(self, auth_client, user, make_post):
        post = make_post(user)
        r = auth_client.post(self.url(post), {}, format="json")
        assert r.json()["reactions"][0]["type"] == "like"

    def test_invalid_type(self, auth_client, user, make_post):
        post = make_post(user)
        r = auth_client.post(self.url(post), {"type": "meh"}, format="json")
        assert r.status_code == 400
        assert r.json()["error"].startswith("Invalid reaction type")

    def test_missing_post(self, auth_client):
        r = auth_client.post(f"/api/posts/{MISSING_POST}/reactions", {"type": "like"}, format="json")
        assert r.status_code == 404
        assert r.json() == {"error": "Post not found"}

    def test_viewer_summary_in_feed(self, api_client, user, other_user, make_post, token_for):
        post = make_post(other_user)
        post.reactions = [{"user": str(user.pk), "type": "haha"}]
        post.save()

        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token_for(user)}")
        feed_post = api_client.get("/api/posts").json()["posts"][0]
        assert feed_post["userReacted"] is True
        assert feed_post["userReaction"] == "haha"


# ═══════════════════════════════════════════════════
# Comments
# ═══════════════════════════════════════════════════

class TestComments:
    def url(self, post):
        return f"/api/posts/{post.pk}/comments"

    def test_append_in_order(self, auth_client, user, make_post):
        post = make_post(user)

        auth_client.post(self.url(post), {"content": "first"}, format="json")
        r = auth_client.post(self.url(post), {"content": "  second  "}, format="json")
        assert r.status_code == 200

        data = r.json()
        assert data["postId"] == str(post.pk)
        assert [c["content"] for c in data["comments"]] == ["first", "second"]
        assert data["comments"][1]["user"]["username"] == "ana"
        assert data["comments"][1]["parent"] is None

    def test_reply(self, auth_client, user, make_post):
        post = make_post(user)
        root = auth_client.post(self.url(post), {"content": "root"}, format="json").json()["comments"][0]

        r = auth_client.post(self.url(post), {"content": "reply", "parent": root["id"]}, format="json")
        assert r.status_code == 200
        assert r.json()["comments"][1]["parent"] == root["id"]

    def test_reply_to_unknown_parent(self, auth_client, user, make_post):
        post = make_post(user)
        r = auth_client.post(self.url(post), {"content": "reply", "parent": str(uuid.uuid4())}, format="json")
        assert r.status_code == 400
        assert r.json() == {"error": "Parent comment not found"}

    @pytest.mark.parametrize("body", [{}, {"content": ""}, {"content": "   "}])
    def test_blank_rejected(self, auth_client, user, make_post, body):
        post = make_post(user)
        r = auth_client.post(self.url(post), body, format="json")
        assert r.status_code == 400
        assert r.json() == {"error": "Content is required"}
        post.refresh_from_db()
        assert post.comments == []

    def test_missing_post(self, auth_client):
        r = auth_client.post(f"/api/posts/{MISSING_POST}/comments", {"content": "hi"}, format="json")
        assert r.status_code == 404

    def test_comments_expanded_on_detail(self, api_client, auth_client, user, make_post):
        post = make_post(user)
        auth_client.post(self.url(post), {"content": "hello"}, format="json")

        detail = api_client.get(f"/api/posts/{post.pk}").json()["post"]
        assert detail["commentCount"] == 1
        assert detail["comments"][0]["user"]["id"] == str(user.pk)
