"""Timestamps for ledger rows and notifications.

Every ``occurred_at`` and ``created_at`` value is produced in the service
timezone (``APP_TIMEZONE``) and stored naive, since the ``DateTime`` columns
carry no zone.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from christ_collective.config import get_settings

_FIXED_OFFSET = re.compile(r"^(?:UTC|GMT)([+-])(\d{1,2}):?(\d{2})?$", re.IGNORECASE)


def parse_timezone(name: str | None) -> tzinfo:
    """Turn an IANA name or a ``UTC+HH:MM`` offset into a tzinfo.

    Blank and unknown names resolve to UTC.
    """

    name = (name or "").strip()
    if not name:
        return timezone.utc

    offset = _FIXED_OFFSET.match(name)
    if offset:
        sign, hours, minutes = offset.groups()
        delta = timedelta(hours=int(hours), minutes=int(minutes or 0))
        return timezone(-delta if sign == "-" else delta)

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return timezone.utc


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    return parse_timezone(get_settings().app_timezone)


def now_in_app_timezone() -> datetime:
    return datetime.now(tz=get_app_timezone())


def now_in_app_naive_datetime() -> datetime:
    """Current service-local time, ready for a ``DateTime`` column."""

    return datetime.now(tz=get_app_timezone()).replace(tzinfo=None)


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Express ``value`` in the service timezone.

    Naive values are read as already being service-local time.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=get_app_timezone())
    return value.astimezone(get_app_timezone())


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    return ensure_app_timezone(value).replace(tzinfo=None)
