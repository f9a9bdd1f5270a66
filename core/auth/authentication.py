"""
DRF authentication classes for ``Authorization: Bearer <token>``.
"""

import logging

from rest_framework import exceptions
from rest_framework.authentication import BaseAuthentication, get_authorization_header
from rest_framework_simplejwt.models import TokenUser

from core.exceptions.base import AuthenticationError
from .verifier import get_token_verifier

logger = logging.getLogger(__name__)


class BearerTokenAuthentication(BaseAuthentication):
    """
    Authenticates requests carrying a bearer token.

    - No header / not ``Bearer ...`` → anonymous (protected views answer
      401 "No token provided").
    - Token fails verification → 401 "Invalid token".

    ``request.user`` becomes a ``TokenUser`` whose ``id`` is the token's
    user claim; the User row itself is loaded by the views that need it.
    """

    keyword = "Bearer"

    def __init__(self, verifier=None):
        self.verifier = verifier or get_token_verifier()

    def get_raw_token(self, request):
        header = get_authorization_header(request).decode("iso-8859-1")
        prefix = f"{self.keyword} "
        if not header.startswith(prefix):
            return None
        return header[len(prefix):].strip()

    def authenticate(self, request):
        raw_token = self.get_raw_token(request)
        if raw_token is None:
            return None

        try:
            payload = self.verifier.decode(raw_token)
        except AuthenticationError as exc:
            logger.info("Rejected bearer token: %s", exc.details.get("reason", exc.message))
            raise exceptions.AuthenticationFailed(exc.message)

        return TokenUser(payload), raw_token

    def authenticate_header(self, request):
        return f'{self.keyword} realm="api"'


class OptionalBearerTokenAuthentication(BearerTokenAuthentication):
    """For public endpoints: a bad token downgrades to anonymous instead of 401."""

    def authenticate(self, request):
        try:
            return super().authenticate(request)
        except exceptions.AuthenticationFailed:
            return None
