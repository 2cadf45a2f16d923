"""Tests for application settings and timezone helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from christ_collective.config import Settings, reset_settings_cache
from christ_collective.utils import datetime as datetime_utils


def test_page_size_cannot_exceed_maximum() -> None:
    with pytest.raises(ValidationError):
        Settings(
            database_url="sqlite://",
            secret_key="secret",
            notifications_page_size=200,
            notifications_max_page_size=100,
        )


def test_defaults() -> None:
    settings = Settings(database_url="sqlite://", secret_key="secret")

    assert settings.notifications_page_size == 50
    assert settings.notifications_max_page_size == 100
    assert settings.app_timezone is None


def _reload_timezone() -> None:
    reset_settings_cache()
    datetime_utils.get_app_timezone.cache_clear()


@pytest.mark.parametrize(
    ("configured", "expected"),
    [
        ("Not/AZone", timezone.utc),
        ("UTC-05:00", timezone(-timedelta(hours=5))),
        ("GMT+0530", timezone(timedelta(hours=5, minutes=30))),
    ],
)
def test_timezone_resolution(monkeypatch, configured, expected) -> None:
    monkeypatch.setenv("APP_TIMEZONE", configured)
    _reload_timezone()
    try:
        assert datetime_utils.get_app_timezone() == expected
    finally:
        monkeypatch.delenv("APP_TIMEZONE")
        _reload_timezone()


def test_naive_datetimes_are_read_as_app_time() -> None:
    aware = datetime_utils.ensure_app_timezone(datetime(2030, 1, 1, 12, 0))

    assert aware.tzinfo is not None
    assert datetime_utils.ensure_app_naive_datetime(aware) == datetime(2030, 1, 1, 12, 0)
    assert datetime_utils.ensure_app_timezone(None) is None


@pytest.mark.parametrize("name", [None, "", "   "])
def test_blank_timezone_name_is_utc(name) -> None:
    assert datetime_utils.parse_timezone(name) == timezone.utc


def test_offset_without_minutes() -> None:
    assert datetime_utils.parse_timezone("utc+3") == timezone(timedelta(hours=3))
