"""
Application settings and configuration.
"""

from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Application
    app_name: str = "Garage Portal"
    app_version: str = "1.0.0"
    debug: bool = False

    # Identity service (Supabase-compatible)
    supabase_url: Optional[str] = None
    supabase_anon_key: Optional[str] = None
    identity_timeout: float = 10.0
    oauth_provider: str = "google"
    oauth_redirect_url: str = "http://localhost:5173"

    # Local session persistence
    local_session_db_path: str = "local_session.db"
    local_session_key: str = "mock_user"
    remote_session_key: str = "remote_session"

    # Timezone used for "today" in booking and dashboards
    timezone: str = "America/Sao_Paulo"

    # Logging
    log_level: str = "INFO"

    # CORS
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"]
    )


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()
