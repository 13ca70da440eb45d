"""
Factory selecting the identity backend once per process.
"""

from __future__ import annotations

from typing import Optional

import httpx

from ...config import IdentityServiceConfig, Settings, get_settings
from ...core.logging import get_logger
from ..external import IdentityServiceClient
from ..shop.data import ShopDataProvider
from .backend import IdentityBackend
from .local import LocalBackend
from .provider import SessionProvider
from .remote import RemoteBackend
from .store import LocalSessionStore


logger = get_logger("garage.auth")


def create_identity_backend(
    settings: Optional[Settings] = None,
    *,
    data: Optional[ShopDataProvider] = None,
    store: Optional[LocalSessionStore] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> IdentityBackend:
    """Factory Pattern: remote when the identity service is configured, local otherwise."""
    settings = settings or get_settings()
    config = IdentityServiceConfig.from_settings(settings)
    store = store or LocalSessionStore(settings.local_session_db_path)

    if config.is_configured():
        logger.info(f"identity: remote mode at {config.base_url}")
        client = IdentityServiceClient(config, transport=transport)
        return RemoteBackend(client, store, settings.remote_session_key)

    logger.info("identity: service not configured, using local mode")
    return LocalBackend(data or ShopDataProvider(), store, settings.local_session_key)


def create_session_provider(
    settings: Optional[Settings] = None,
    *,
    data: Optional[ShopDataProvider] = None,
    store: Optional[LocalSessionStore] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> SessionProvider:
    backend = create_identity_backend(settings, data=data, store=store, transport=transport)
    return SessionProvider(backend)
