"""Display formatting for floor times — venue-local clock, Japanese style."""

from __future__ import annotations

from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

DEFAULT_TZ = "Asia/Tokyo"
PLACEHOLDER = "-"


def _to_local(value: datetime | str | None, tz: str) -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, str):
        try:
            # Postgres/JS timestamps may end in "Z"
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    try:
        zone = ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return None
    return value.astimezone(zone)


def format_time(value: datetime | str | None, tz: str = DEFAULT_TZ) -> str:
    """Format as "HH:MM" in *tz*. Naive datetimes are taken as UTC.

    Returns "-" for missing or unparseable values.
    """
    local = _to_local(value, tz)
    if local is None:
        return PLACEHOLDER
    return local.strftime("%H:%M")


def format_date(value: datetime | str | None, tz: str = DEFAULT_TZ) -> str:
    """Format as "M月D日" in *tz*."""
    local = _to_local(value, tz)
    if local is None:
        return PLACEHOLDER
    return f"{local.month}月{local.day}日"
