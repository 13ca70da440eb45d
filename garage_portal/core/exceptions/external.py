"""
External API-related exceptions.
"""

from typing import Optional


class ExternalAPIError(Exception):
    """Base exception for external API errors."""
    pass


class IdentityServiceError(ExternalAPIError):
    """Exception raised when the identity service cannot be reached or answers garbage."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
