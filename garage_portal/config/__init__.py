"""
Configuration management for the Garage Portal.
"""

from .settings import Settings, get_settings
from .external_apis import IdentityServiceConfig

__all__ = [
    "Settings",
    "get_settings",
    "IdentityServiceConfig",
]
