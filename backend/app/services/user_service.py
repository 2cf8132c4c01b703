"""
User store: registration, credential checks and profile updates.
"""
import logging
from functools import lru_cache
from typing import Optional
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError
from app.core.exceptions import ValidationError
from app.core.security import get_password_hash, verify_password
from app.core.validators import normalize_email, require_text
from app.db.session import USERS
from app.models.user import new_user_document

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid Credentials"


def _object_id(user_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(user_id)
    except (InvalidId, TypeError):
        return None


def serialize_user(user: dict) -> dict:
    """Public rendering of a user document, without the password hash."""
    data = {k: v for k, v in user.items() if k != "password"}
    data["_id"] = str(user["_id"])
    return data


def get_user_by_email(db: Database, email: str) -> Optional[dict]:
    return db[USERS].find_one({"email": (email or "").strip().lower()})


def get_user_by_id(db: Database, user_id: str) -> Optional[dict]:
    oid = _object_id(user_id)
    if oid is None:
        return None
    return db[USERS].find_one({"_id": oid})


def register_user(db: Database, username: str, email: str, password: str) -> dict:
    """Create a user with a hashed password and return the stored document."""
    username = require_text(username, "username")
    email = normalize_email(email)
    if not password:
        raise ValidationError("password: Field required")

    if get_user_by_email(db, email):
        raise ValidationError("User already exists")

    user = new_user_document(username, email, get_password_hash(password))
    try:
        result = db[USERS].insert_one(user)
    except DuplicateKeyError:
        raise ValidationError("User already exists")
    user["_id"] = result.inserted_id
    logger.info(f"Registered user {user['_id']}")
    return user


@lru_cache
def _dummy_hash() -> str:
    return get_password_hash("not-a-real-password")


def authenticate_user(db: Database, email: str, password: str) -> dict:
    """Return the user for matching credentials; same error for every miss."""
    user = get_user_by_email(db, email)
    # Unknown emails still pay for a bcrypt check so timing matches
    stored_hash = user["password"] if user else _dummy_hash()
    if not verify_password(password or "", stored_hash) or not user:
        logger.warning("Rejected login attempt")
        raise ValidationError(INVALID_CREDENTIALS)
    return user


def set_profile_picture(db: Database, user_id: str, path: str) -> bool:
    """Record a new avatar path; False when the user no longer exists."""
    oid = _object_id(user_id)
    if oid is None:
        return False
    result = db[USERS].update_one({"_id": oid}, {"$set": {"profilePicture": path}})
    return result.matched_count == 1
