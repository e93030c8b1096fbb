"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from hubsearch.config import HubSearchSettings, get_settings


def test_defaults_target_public_registry(settings):
    assert settings.registry_host == "registry.hub.docker.com"
    assert settings.registry_port == 443
    assert settings.max_results == 100
    assert settings.default_language == "en"
    assert settings.evict_failed_fetches is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("HUBSEARCH_REGISTRY_HOST", "hub.mirror.example")
    monkeypatch.setenv("HUBSEARCH_EVICT_FAILED_FETCHES", "true")
    monkeypatch.setenv("HUBSEARCH_REQUEST_TIMEOUT_SECONDS", "5")

    settings = HubSearchSettings(_env_file=None)

    assert settings.registry_host == "hub.mirror.example"
    assert settings.evict_failed_fetches is True
    assert settings.request_timeout_seconds == 5


@pytest.mark.parametrize("field", ["max_results", "request_timeout_seconds", "registry_port"])
def test_out_of_range_values_are_rejected(field):
    with pytest.raises(ValidationError):
        HubSearchSettings(_env_file=None, **{field: 0})


def test_get_settings_is_cached():
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
