"""
Identity service configuration.
"""

from typing import Optional
from urllib.parse import urlencode
from pydantic import BaseModel

from .settings import Settings


PLACEHOLDER_MARKER = "placeholder"


class IdentityServiceConfig(BaseModel):
    """Connection settings for the hosted identity & profile service."""

    base_url: Optional[str] = None
    api_key: Optional[str] = None
    timeout: float = 10.0
    oauth_provider: str = "google"
    oauth_redirect_url: str = "http://localhost:5173"

    @classmethod
    def from_settings(cls, settings: Settings) -> "IdentityServiceConfig":
        return cls(
            base_url=settings.supabase_url,
            api_key=settings.supabase_anon_key,
            timeout=settings.identity_timeout,
            oauth_provider=settings.oauth_provider,
            oauth_redirect_url=settings.oauth_redirect_url,
        )

    def is_configured(self) -> bool:
        """Check if both endpoint and key are present and not placeholders."""
        if not self.base_url or not self.api_key:
            return False
        return (
            PLACEHOLDER_MARKER not in self.base_url.lower()
            and PLACEHOLDER_MARKER not in self.api_key.lower()
        )

    def _root(self) -> str:
        return (self.base_url or "").rstrip("/")

    def get_token_url(self) -> str:
        """Get password grant URL."""
        return f"{self._root()}/auth/v1/token?grant_type=password"

    def get_signup_url(self) -> str:
        return f"{self._root()}/auth/v1/signup"

    def get_logout_url(self) -> str:
        return f"{self._root()}/auth/v1/logout"

    def get_user_url(self) -> str:
        return f"{self._root()}/auth/v1/user"

    def get_authorize_url(self) -> str:
        """Get the OAuth authorization URL the browser is redirected to."""
        query = urlencode(
            {"provider": self.oauth_provider, "redirect_to": self.oauth_redirect_url}
        )
        return f"{self._root()}/auth/v1/authorize?{query}"

    def get_profiles_url(self) -> str:
        return f"{self._root()}/rest/v1/profiles"
