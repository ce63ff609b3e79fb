"""Datetime helpers.

Timestamps are stored as naive UTC. Calendar days are taken in the
configured display timezone.
"""

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from app.core.config import settings


def to_naive_utc(value: datetime) -> datetime:
    """Convert an aware datetime to naive UTC; naive values pass through."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def local_day(value: datetime, tz: str | None = None) -> date:
    """Calendar day of ``value`` in the display timezone."""
    zone = ZoneInfo(tz or settings.DISPLAY_TIMEZONE)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(zone).date()


def utcnow() -> datetime:
    return datetime.utcnow()
