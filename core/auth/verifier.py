"""
Bearer Token Verifier
=====================

Signs and verifies the HS256 bearer tokens handed out at login.

The signing secret is injected at construction time; ``get_token_verifier()``
builds the process-wide instance from ``freedomwall.config``.

Usage::

    from core.auth import get_token_verifier

    verifier = get_token_verifier()
    token = verifier.issue(user.id)
    user_id = verifier.verify(token)
"""

from datetime import datetime, timedelta, timezone
from functools import lru_cache

from rest_framework_simplejwt.backends import TokenBackend
from rest_framework_simplejwt.exceptions import TokenBackendError
from rest_framework_simplejwt.settings import api_settings

from core.exceptions.base import AuthenticationError, ConfigurationError

INVALID_TOKEN_MESSAGE = "Invalid token"


class TokenVerifier:
    """Pure token verification (and issuance) bound to one signing secret."""

    def __init__(self, secret, algorithm="HS256", lifetime=timedelta(days=7), user_id_claim="userId"):
        if not secret:
            raise ConfigurationError("JWT signing secret is not configured", setting="JWT_SECRET")
        self.algorithm = algorithm
        self.lifetime = lifetime
        self.user_id_claim = user_id_claim
        self._backend = TokenBackend(algorithm, signing_key=secret)

    def decode(self, token: str) -> dict:
        """
        Verify signature and expiry and return the claims.

        Raises:
            AuthenticationError: bad signature, expired, malformed, or no user claim
        """
        if not token:
            raise AuthenticationError(INVALID_TOKEN_MESSAGE)
        try:
            payload = self._backend.decode(token, verify=True)
        except TokenBackendError as exc:
            raise AuthenticationError(INVALID_TOKEN_MESSAGE, reason=str(exc)) from exc

        if not payload.get(self.user_id_claim):
            raise AuthenticationError(INVALID_TOKEN_MESSAGE, reason="missing user claim")
        return payload

    def verify(self, token: str) -> str:
        """Return the user identifier embedded in a valid token."""
        return str(self.decode(token)[self.user_id_claim])

    def issue(self, user_id, now=None) -> str:
        """Sign a token for ``user_id`` valid for ``self.lifetime``."""
        now = now or datetime.now(timezone.utc)
        payload = {
            self.user_id_claim: str(user_id),
            "iat": int(now.timestamp()),
            "exp": int((now + self.lifetime).timestamp()),
        }
        return self._backend.encode(payload)


@lru_cache(maxsize=1)
def get_token_verifier() -> TokenVerifier:
    """Process-wide verifier built from the configuration layer."""
    from freedomwall.config import config

    return TokenVerifier(
        config.security.jwt_secret,
        algorithm=config.security.jwt_algorithm,
        lifetime=timedelta(minutes=config.security.jwt_access_token_minutes),
        user_id_claim=api_settings.USER_ID_CLAIM,
    )
