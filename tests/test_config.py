"""Tests for printer settings and environment parsing."""

import pytest
from pydantic import ValidationError

from debugprint.config import PrinterSettings, parse_flag


@pytest.mark.parametrize(
    "value", ["1", "true", "True", "TRUE", "yes", "Yes", "YES", "on", " 1 "]
)
def test_parse_flag_truthy(value: str) -> None:
    assert parse_flag(value) is True


@pytest.mark.parametrize(
    "value", ["0", "false", "False", "no", "NO", "off", "", "enabled", None]
)
def test_parse_flag_falsy(value: str | None) -> None:
    assert parse_flag(value) is False


def test_parse_flag_booleans_pass_through() -> None:
    assert parse_flag(True) is True
    assert parse_flag(False) is False


def test_settings_defaults() -> None:
    settings = PrinterSettings()

    assert settings.enabled is False
    assert settings.separator == ": "


def test_settings_accept_string_flag() -> None:
    assert PrinterSettings(enabled="yes").enabled is True
    assert PrinterSettings(enabled="nope").enabled is False


def test_settings_are_frozen() -> None:
    settings = PrinterSettings(enabled=True)

    with pytest.raises(ValidationError):
        settings.enabled = False  # type: ignore[misc]


def test_from_env_mapping() -> None:
    settings = PrinterSettings.from_env(
        {"DEBUGPRINT_ENABLED": "1", "DEBUGPRINT_SEPARATOR": " -> "}
    )

    assert settings.enabled is True
    assert settings.separator == " -> "


def test_from_env_empty_mapping() -> None:
    settings = PrinterSettings.from_env({})

    assert settings.enabled is False
    assert settings.separator == ": "


def test_from_env_reads_os_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEBUGPRINT_ENABLED", "true")
    monkeypatch.delenv("DEBUGPRINT_SEPARATOR", raising=False)

    settings = PrinterSettings.from_env()

    assert settings.enabled is True
    assert settings.separator == ": "
