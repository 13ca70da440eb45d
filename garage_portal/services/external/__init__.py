"""
External service clients.
"""

from .service import IdentityServiceClient

__all__ = [
    "IdentityServiceClient",
]
