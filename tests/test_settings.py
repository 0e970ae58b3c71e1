"""Tests for analytics_core.settings.Settings behavior."""

from typing import Any

import pytest

from analytics_core.settings import Settings, get_settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch):
    """Defaults should be stable even if external env or .env sets values.

    We explicitly delete the variables and bypass .env loading by passing
    `_env_file=None`.
    """
    for var in [
        "ANALYTICS_CORE_LOG_LEVEL",
        "ANALYTICS_CORE_TEST_MODE",
        "ANALYTICS_CORE_OBSERVER_ERROR_POLICY",
        "ANALYTICS_CORE_STRICT_TRANSLATIONS",
        "ANALYTICS_CORE_DEFAULT_MENU_ORDER",
        "analytics_core_test_mode",
    ]:
        monkeypatch.delenv(var, raising=False)
    s = Settings(_env_file=None)  # ignore project .env file if present
    assert s.log_level == "INFO"
    assert s.test_mode is False
    assert s.observer_error_policy == "continue"
    assert s.strict_translations is None
    assert s.translations_are_strict is False
    assert s.default_menu_order == 10


def test_env_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ANALYTICS_CORE_TEST_MODE", "true")
    monkeypatch.setenv("ANALYTICS_CORE_OBSERVER_ERROR_POLICY", "RAISE")
    monkeypatch.setenv("ANALYTICS_CORE_LOG_LEVEL", "debug")
    monkeypatch.setenv("ANALYTICS_CORE_DEFAULT_MENU_ORDER", "50")
    s = Settings(_env_file=None)
    assert s.test_mode is True
    assert s.observer_error_policy == "raise"
    assert s.log_level == "DEBUG"
    assert s.default_menu_order == 50


def test_case_insensitive_env_name(monkeypatch: pytest.MonkeyPatch):
    # lower-case variable name should still be picked up due to case_sensitive=False
    monkeypatch.setenv("analytics_core_test_mode", "1")
    s = Settings(_env_file=None)
    assert s.test_mode is True


def test_invalid_log_level():
    with pytest.raises(ValueError):
        Settings(_env_file=None, log_level="verbose")


def test_invalid_error_policy():
    with pytest.raises(ValueError):
        Settings(_env_file=None, observer_error_policy="ignore")


@pytest.mark.parametrize(
    "test_mode,strict,expected",
    [
        (False, None, False),
        (True, None, True),
        (True, False, False),
        (False, True, True),
    ],
)
def test_translations_are_strict(test_mode: bool, strict: bool | None, expected: bool):
    s = Settings(_env_file=None, test_mode=test_mode, strict_translations=strict)
    assert s.translations_are_strict is expected


def test_get_settings_singleton():
    a = get_settings()
    b = get_settings()
    assert a is b


@pytest.mark.parametrize(
    "override,expected",
    [
        ({"test_mode": True}, True),
        ({"default_menu_order": 99}, 99),
    ],
)
def test_direct_instantiation_with_overrides(override: dict[str, Any], expected: Any):
    s = Settings(_env_file=None, **override)
    key = next(iter(override.keys()))
    assert getattr(s, key) == expected
