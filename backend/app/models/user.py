"""
User document shape stored in the ``users`` collection.
"""
from datetime import datetime, timezone


def new_user_document(username: str, email: str, hashed_password: str) -> dict:
    """Build a user document; the password must already be hashed."""
    return {
        "username": username,
        "email": email,
        "password": hashed_password,
        "profilePicture": "",
        "createdAt": datetime.now(timezone.utc),
    }


def public_summary(user: dict) -> dict:
    """The identity block returned alongside a token."""
    return {
        "id": str(user["_id"]),
        "username": user["username"],
        "email": user["email"],
    }
