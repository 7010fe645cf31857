"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # MongoDB (optional connection opened at startup)
    mongo_uri: Optional[str] = None
    mongo_db_name: Optional[str] = None
    server_selection_timeout_ms: int = 5000

    # Browsing & queries
    default_page_size: int = 20
    query_result_limit: int = 100

    # CORS
    cors_origins: list[str] = [
        "http://localhost:8501",  # Streamlit default
        "http://streamlit_frontend:8501",  # Docker network
        "http://localhost:3000",  # Development
    ]

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
