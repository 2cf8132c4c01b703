"""
Input validation run before anything is written to the store.
"""
from email_validator import EmailNotValidError, validate_email
from app.core.exceptions import ValidationError


def normalize_email(email: str) -> str:
    """Validate an email address and return its lower-cased form."""
    candidate = (email or "").strip()
    try:
        validate_email(candidate, check_deliverability=False)
    except EmailNotValidError:
        raise ValidationError("Invalid Email Format")
    return candidate.lower()


def require_text(value: str, field: str) -> str:
    """Reject blank strings for required text fields."""
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationError(f"{field}: Field required")
    return cleaned
