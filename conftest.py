"""
Shared pytest fixtures.

Settings come from ``freedomwall.settings.test`` (see pyproject.toml).
"""

import pytest
from rest_framework.test import APIClient

from core.auth import get_token_verifier
from feed.repositories import PostRepository
from users.repositories import UserRepository

PASSWORD = "wall-Passw0rd!"


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_user(db):
    """Factory: ``make_user("ana")`` → a saved user ana@example.com."""
    def _make(username, **extra):
        extra.setdefault("first_name", username.title())
        extra.setdefault("last_name", "Tester")
        return UserRepository.create_user(
            email=f"{username}@example.com",
            password=PASSWORD,
            username=username,
            **extra,
        )
    return _make


@pytest.fixture
def user(make_user):
    return make_user("ana")


@pytest.fixture
def other_user(make_user):
    return make_user("ben")


@pytest.fixture
def token_for():
    def _token(user):
        return get_token_verifier().issue(user.pk)
    return _token


@pytest.fixture
def auth_client(user, token_for):
    """An APIClient sending ``user``'s bearer token."""
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token_for(user)}")
    return client


@pytest.fixture
def make_post(db):
    def _make(author, content="Hello wall", images=None):
        return PostRepository.create_post(user=author, content=content, images=images or [])
    return _make
