"""
Unit tests for settings and portal configuration loading.
It asserts expected behavior and guards against regressions in the corresponding component.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

import logging

import pytest

from src.common import logging as logging_module
from src.common import settings as settings_module
from src.portal.portal_config import PANEL_PATHS, ROLES, load_portal_config


def test_load_settings_success() -> None:
    settings_module.get_settings.cache_clear()
    settings = settings_module.get_settings()
    assert settings.PROJECT_NAME
    assert settings.PORTAL_API_BASE_URL.startswith("http")


def test_load_settings_missing_required(monkeypatch: pytest.MonkeyPatch) -> None:
    settings_module.get_settings.cache_clear()
    monkeypatch.delenv("PROJECT_NAME", raising=False)
    with pytest.raises(RuntimeError, match="Missing required environment variables"):
        settings_module.load_settings(load_env=False)


def test_portal_config_reads_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORTAL_API_BASE_URL", "http://api.internal:5000/")
    monkeypatch.setenv("PORTAL_QUERY_STALE_SECONDS", "60")
    monkeypatch.setenv("PORTAL_COMMISSION_RATE_PERCENT", "7")

    config = load_portal_config(load_env=False)

    assert config.api_base_url == "http://api.internal:5000"
    assert config.query_stale_seconds == 60
    assert config.commission_rate_percent == 7
    assert config.display_timezone == "Asia/Jakarta"


def test_portal_config_falls_back_to_host_and_port(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PORTAL_API_BASE_URL", raising=False)
    monkeypatch.setenv("API_HOST", "backend")
    monkeypatch.setenv("API_PORT", "5050")

    config = load_portal_config(load_env=False)

    assert config.api_base_url == "http://backend:5050"
    assert config.query_stale_seconds == 300


def test_every_role_has_a_panel_path() -> None:
    assert set(PANEL_PATHS) == set(ROLES)
    assert len(set(PANEL_PATHS.values())) == len(ROLES)


def test_settings_normalize_log_level_and_base_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("PORTAL_API_BASE_URL", "https://api.example.com/")

    settings = settings_module.load_settings(load_env=False)

    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.PORTAL_API_BASE_URL == "https://api.example.com"


def test_settings_reject_non_http_base_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORTAL_API_BASE_URL", "ftp://api.example.com")

    with pytest.raises(RuntimeError, match="Invalid environment configuration"):
        settings_module.load_settings(load_env=False)


def test_unknown_log_level_falls_back_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    settings = settings_module.load_settings(load_env=False)

    assert settings.LOG_LEVEL == "VERBOSE"
    assert logging_module.resolve_level(settings.LOG_LEVEL) == logging.INFO
    assert logging_module.resolve_level("BASIC_FORMAT") == logging.INFO
    assert logging_module.resolve_level("warning") == logging.WARNING


def test_configure_logging_runs_once(monkeypatch: pytest.MonkeyPatch) -> None:
    settings_module.get_settings.cache_clear()
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setattr(logging_module, "_configured", False)

    first = logging_module.configure_logging()
    second = logging_module.configure_logging(level="DEBUG")

    assert first is second
    assert first.name == "portal"
    assert first.level == logging.INFO
    assert logging.getLogger("urllib3").level == logging.WARNING


def test_configure_logging_accepts_unknown_level_override(monkeypatch: pytest.MonkeyPatch) -> None:
    settings_module.get_settings.cache_clear()
    monkeypatch.setattr(logging_module, "_configured", False)

    portal_logger = logging_module.configure_logging(level="bogus")

    assert portal_logger.level == logging.INFO
