"""
Tests for identity backend selection.
"""

import pytest

from garage_portal.config import Settings
from garage_portal.core.enums import AuthMode
from garage_portal.services.auth import (
    LocalBackend,
    RemoteBackend,
    create_identity_backend,
    create_session_provider,
)


def test_missing_configuration_selects_local(settings):
    assert isinstance(create_identity_backend(settings), LocalBackend)


def test_configured_service_selects_remote(remote_settings):
    assert isinstance(create_identity_backend(remote_settings), RemoteBackend)


@pytest.mark.parametrize("url,key", [
    ("https://placeholder.supabase.co", "anon-key"),
    ("https://identity.test", "your-placeholder-key"),
    ("https://identity.test", None),
])
def test_placeholder_or_partial_configuration_selects_local(tmp_path, url, key):
    settings = Settings(
        supabase_url=url,
        supabase_anon_key=key,
        local_session_db_path=str(tmp_path / "session.db"),
    )
    assert create_session_provider(settings).mode == AuthMode.LOCAL


def test_environment_drives_selection(tmp_path, monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://identity.test")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "anon-key")
    monkeypatch.setenv("LOCAL_SESSION_DB_PATH", str(tmp_path / "session.db"))

    assert create_session_provider().mode == AuthMode.REMOTE


def test_local_backend_uses_configured_session_key(tmp_path, shop_data):
    settings = Settings(
        local_session_db_path=str(tmp_path / "session.db"),
        local_session_key="custom_key",
    )
    backend = create_identity_backend(settings, data=shop_data)
    assert backend.session_key == "custom_key"
    assert backend.data is shop_data
