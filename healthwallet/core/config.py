"""
Core configuration and settings for the FastAPI application.
"""

from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application Info
    app_name: str = "Health Wallet API"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 5000

    # Token signing (no default: must be configured)
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 60 * 24 * 7

    # Database
    database_url: str = "sqlite:///./healthwallet.db"

    # File Upload Configuration
    upload_dir: str = "uploads"
    max_file_size_mb: int = 10
    allowed_extensions: set = {".pdf", ".jpg", ".jpeg", ".png", ".gif"}

    # CORS Settings
    cors_origins: list = ["http://localhost:3000", "http://localhost:3001"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    cors_allow_headers: list = ["Content-Type", "Authorization"]

    # Built single-page frontend, served when set
    frontend_build_dir: Optional[str] = None

    class Config:
        env_file = ".env"
        case_sensitive = False

    @field_validator("jwt_secret_key")
    @classmethod
    def secret_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("JWT_SECRET_KEY must be set to a non-empty value")
        return v

    @property
    def max_file_size_bytes(self) -> int:
        return self.max_file_size_mb * 1024 * 1024


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
