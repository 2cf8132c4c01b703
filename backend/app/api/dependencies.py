"""
Request dependencies shared by protected routes.
"""
from dataclasses import dataclass
from typing import Optional
from fastapi import Header
from app.core.exceptions import AuthenticationError
from app.core.security import decode_access_token

BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class Identity:
    """Authenticated caller decoded from the bearer token."""
    id: str


def get_current_identity(authorization: Optional[str] = Header(default=None)) -> Identity:
    """Verify the Authorization header and return the caller's identity."""
    if authorization is None or not authorization.strip():
        raise AuthenticationError("No token, authorization denied")

    token = authorization.strip()
    if token.startswith(BEARER_PREFIX):
        token = token[len(BEARER_PREFIX):].strip()
    return Identity(id=decode_access_token(token))
