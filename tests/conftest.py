"""
Pytest configuration and fixtures.
"""

import pytest

from garage_portal.config import IdentityServiceConfig, Settings
from garage_portal.services.auth import LocalBackend, LocalSessionStore, SessionProvider
from garage_portal.services.shop import ShopDataProvider


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep tests away from a developer's .env and real identity service."""
    monkeypatch.chdir(tmp_path)
    for name in ("SUPABASE_URL", "SUPABASE_ANON_KEY", "LOCAL_SESSION_DB_PATH", "TIMEZONE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings(tmp_path):
    return Settings(local_session_db_path=str(tmp_path / "session.db"))


@pytest.fixture
def remote_settings(tmp_path):
    return Settings(
        supabase_url="https://identity.test",
        supabase_anon_key="anon-key",
        local_session_db_path=str(tmp_path / "session.db"),
    )


@pytest.fixture
def identity_config():
    return IdentityServiceConfig(base_url="https://identity.test", api_key="anon-key")


@pytest.fixture
def shop_data():
    """Fresh fixture data per test."""
    return ShopDataProvider()


@pytest.fixture
def session_store(tmp_path):
    return LocalSessionStore(str(tmp_path / "session.db"))


@pytest.fixture
def local_backend(shop_data, session_store):
    return LocalBackend(shop_data, session_store)


@pytest.fixture
def local_provider(local_backend):
    """Local-mode provider; tests call initialize() themselves."""
    return SessionProvider(local_backend)
