"""Tests for environment-driven settings."""

import pytest

from catalog_viewer.config import DEFAULT_TABLE, Settings, get_settings


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://abc.supabase.co/")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "key")
    monkeypatch.setenv("CATALOG_TABLE", "catalog_items")
    monkeypatch.setenv("CATALOG_REQUEST_TIMEOUT", "2.5")

    settings = get_settings()

    assert settings.store_url == "https://abc.supabase.co"
    assert settings.is_configured
    assert settings.products_endpoint == "https://abc.supabase.co/rest/v1/catalog_items"
    assert settings.request_timeout == 2.5


def test_defaults(monkeypatch):
    for name in ("SUPABASE_URL", "SUPABASE_ANON_KEY", "CATALOG_TABLE",
                 "CATALOG_REQUEST_TIMEOUT", "CATALOG_LANG"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert not settings.is_configured
    assert settings.table == DEFAULT_TABLE
    assert settings.request_timeout is None
    assert settings.lang == "en"


def test_non_numeric_timeout(monkeypatch):
    monkeypatch.setenv("CATALOG_REQUEST_TIMEOUT", "soon")

    with pytest.raises(ValueError, match="CATALOG_REQUEST_TIMEOUT must be a number"):
        get_settings()
