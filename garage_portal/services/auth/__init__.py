"""
Authentication and session services.
"""

from .backend import IdentityBackend, Subscription
from .factory import create_identity_backend, create_session_provider
from .local import LocalBackend
from .provider import SessionProvider
from .remote import RemoteBackend
from .store import LocalSessionStore

__all__ = [
    "IdentityBackend",
    "Subscription",
    "create_identity_backend",
    "create_session_provider",
    "LocalBackend",
    "RemoteBackend",
    "SessionProvider",
    "LocalSessionStore",
]
