"""
core.auth — bearer token verification and DRF authentication.
"""

from .verifier import TokenVerifier, get_token_verifier
from .authentication import BearerTokenAuthentication, OptionalBearerTokenAuthentication

__all__ = [
    "TokenVerifier",
    "get_token_verifier",
    "BearerTokenAuthentication",
    "OptionalBearerTokenAuthentication",
]
