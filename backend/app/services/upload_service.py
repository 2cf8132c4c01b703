"""
Avatar upload handling: validation, naming and writing to the static directory.
"""
import logging
import os
import random
import time
from typing import Optional
from fastapi import UploadFile
from app.core.config import settings
from app.core.exceptions import PayloadTooLargeError, UnsupportedMediaTypeError, ValidationError

logger = logging.getLogger(__name__)


def generate_filename(original_filename: Optional[str]) -> str:
    """avatar-<millis>-<random>.<ext>, unique enough for concurrent uploads."""
    file_ext = os.path.splitext(original_filename or "")[1].lower()
    unique_suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10**9 - 1)}"
    return f"avatar-{unique_suffix}{file_ext}"


def get_file_url(filename: str) -> str:
    """Convert a stored filename to its public URL path."""
    return f"{settings.UPLOAD_URL_PREFIX}/{filename}"


def read_avatar(file: Optional[UploadFile]) -> bytes:
    """Check type and size of an uploaded avatar and return its content."""
    if file is None or not file.filename:
        raise ValidationError("No file uploaded")

    content_type = file.content_type or ""
    if not content_type.startswith(settings.ALLOWED_IMAGE_PREFIX):
        raise UnsupportedMediaTypeError("Only images are allowed")

    # One byte past the limit is enough to know it is too large
    content = file.file.read(settings.MAX_UPLOAD_SIZE + 1)
    if len(content) > settings.MAX_UPLOAD_SIZE:
        raise PayloadTooLargeError("File too large")
    return content


def save_avatar(content: bytes, original_filename: Optional[str]) -> str:
    """Write the avatar under the upload directory and return its public path."""
    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)

    unique_filename = generate_filename(original_filename)
    file_path = os.path.join(settings.UPLOAD_DIR, unique_filename)
    with open(file_path, "wb") as buffer:
        buffer.write(content)

    logger.info(f"Stored avatar {unique_filename} ({len(content)} bytes)")
    return get_file_url(unique_filename)
