"""
Security utilities for JWT authentication and password hashing.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
import base64
import hashlib
import bcrypt
from jose import JWTError, jwt
from app.core.config import settings
from app.core.exceptions import InvalidToken


def _pre_hash_password(password: str) -> bytes:
    """
    Pre-hash password with SHA256 to support passwords longer than 72 bytes.
    The digest is base64-encoded (44 bytes) so it never contains NUL bytes.
    """
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a password against its hash.
    Hashes written before pre-hashing was introduced are plain bcrypt
    of the password itself, so those are checked as a fallback.
    """
    stored = hashed_password.encode("utf-8")
    try:
        if bcrypt.checkpw(_pre_hash_password(plain_password), stored):
            return True
        raw = plain_password.encode("utf-8")
        # bcrypt only ever saw the first 72 bytes
        return len(raw) <= 72 and bcrypt.checkpw(raw, stored)
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def get_password_hash(password: str, rounds: Optional[int] = None) -> str:
    """
    Hash a password with a fresh salt.
    Uses bcrypt directly; the work factor comes from settings unless given.
    """
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    hashed = bcrypt.hashpw(_pre_hash_password(password), salt)
    return hashed.decode("utf-8")


def create_access_token(
    user_id: str,
    expires_delta: Optional[timedelta] = None,
    secret_key: Optional[str] = None,
) -> str:
    """Create a signed JWT access token carrying the user id."""
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = {
        "user": {"id": str(user_id)},
        "exp": datetime.now(timezone.utc) + expires_delta,
    }
    return jwt.encode(to_encode, secret_key or settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> str:
    """Decode and verify a JWT token, returning the user id it carries."""
    if not token:
        raise InvalidToken()
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise InvalidToken()

    user = payload.get("user")
    user_id = user.get("id") if isinstance(user, dict) else None
    if not user_id:
        raise InvalidToken()
    return user_id
