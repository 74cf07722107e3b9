"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

# ===========================================
# Product Branding
# ===========================================
PRODUCT_NAME = "Cryptomania"
PRODUCT_TAGLINE = "Keep count of your coins."
PRODUCT_VERSION = "1.0.0"
PRODUCT_DESCRIPTION = "In-memory cryptocurrency portfolio manager."


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    host: str = "0.0.0.0"
    port: int = Field(8000, ge=1, le=65535)

    # Logging
    log_level: str = "INFO"

    # Rate limiting (slowapi limit string, applied to every route)
    rate_limit: str = "120/minute"

    # Portfolio CSV loaded into the store on startup
    seed_file: Optional[str] = None

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
