"""
Per-request authentication context derived from the bearer token.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

import jwt
from starlette.requests import Request

from eventhub.core.logging import get_logger
from eventhub.core.security import decode_access_token

logger = get_logger(__name__)


@dataclass
class AuthContext:
    """Runtime authentication context for a request."""

    user_id: Optional[str] = None
    claims: dict[str, Any] = field(default_factory=dict)

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None


def resolve_auth_context(authorization: Optional[str]) -> AuthContext:
    """
    Decode an ``Authorization: Bearer <token>`` header value.
    Anything missing, malformed, expired or badly signed yields an
    unauthenticated context rather than an error.
    """
    if not authorization:
        return AuthContext()

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return AuthContext()

    try:
        claims = decode_access_token(token.strip())
    except jwt.InvalidTokenError as e:
        logger.info("token_rejected", error=str(e))
        return AuthContext()

    user_id = claims.get("userId")
    if not user_id:
        logger.info("token_rejected", error="missing userId claim")
        return AuthContext()

    return AuthContext(user_id=str(user_id), claims=claims)


def get_auth_context(request: Request) -> AuthContext:
    """Context set by AuthGateMiddleware, decoded on the spot if it is absent."""
    auth = getattr(request.state, "auth", None)
    if auth is None:
        auth = resolve_auth_context(request.headers.get("authorization"))
    return auth
