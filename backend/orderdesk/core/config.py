"""
Centralized application configuration
"""
import json
from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, loaded from environment variables or .env"""

    # API Settings
    API_TITLE: str = "OrderDesk API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "API for managing online store orders"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = ""
    DB_CONNECT_RETRIES: int = 3
    DB_RETRY_DELAY: float = 1.0
    CONNECTION_TIMEOUT: int = 10
    AUTO_INIT_DB: bool = False

    # CORS - Can be string (comma-separated) or JSON array
    # Example: "http://localhost:5173,https://yourdomain.com" or '["http://localhost:5173"]'
    ALLOWED_ORIGINS: Optional[str] = (
        "http://localhost:5173,http://localhost:3000,http://localhost:8080,http://localhost:5000"
    )

    # Cache
    CACHE_TTL_SECONDS: int = 900

    # Auth
    JWT_SECRET: str = "change-me-in-production-please-32-bytes"
    JWT_ISSUER: str = "orderdesk"
    JWT_AUDIENCE: str = "orderdesk-clients"
    JWT_EXPIRATION_MINUTES: int = 60
    AUTH_USERNAME: str = "admin"
    AUTH_PASSWORD: str = "admin"
    AUTH_REQUIRED: bool = False

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    def get_allowed_origins(self) -> List[str]:
        """Parse ALLOWED_ORIGINS string into list"""
        if not self.ALLOWED_ORIGINS:
            return ["http://localhost:5173"]

        # Try JSON parse first (for array format)
        try:
            origins = json.loads(self.ALLOWED_ORIGINS)
            if isinstance(origins, list):
                return origins
        except (json.JSONDecodeError, ValueError):
            pass

        # Fall back to comma-separated string
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]


@lru_cache
def get_settings() -> Settings:
    return Settings()
