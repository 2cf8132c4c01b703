"""
Application configuration and environment settings.
"""
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from typing import List, Union

APP_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded once from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        frozen=True,
    )

    # Application
    APP_NAME: str = "Trip Budget"
    DEBUG: bool = False
    PORT: int = 5000

    # Database
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB_NAME: str = "trip_budget"

    # JWT
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Password hashing
    BCRYPT_ROUNDS: int = 10

    # CORS
    CORS_ORIGINS: Union[List[str], str] = ["*"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS_ORIGINS from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    # File Upload
    MAX_UPLOAD_SIZE: int = 5 * 1024 * 1024  # 5MB
    ALLOWED_IMAGE_PREFIX: str = "image/"
    UPLOAD_DIR: str = str(APP_DIR / "static" / "uploads")
    UPLOAD_URL_PREFIX: str = "/uploads"


settings = Settings()
