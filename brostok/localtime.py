"""Conversions between stored timestamps (naive UTC) and the display timezone."""
from datetime import date, datetime, time, timezone
from zoneinfo import ZoneInfo

from brostok.config import settings


def display_tz() -> ZoneInfo:
    return ZoneInfo(settings.DISPLAY_TIMEZONE)


def to_local(value: datetime) -> datetime:
    return value.replace(tzinfo=timezone.utc).astimezone(display_tz())


def local_day_start_utc(day: date) -> datetime:
    """Start of ``day`` in the display timezone, as naive UTC for querying."""
    start = datetime.combine(day, time.min, tzinfo=display_tz())
    return start.astimezone(timezone.utc).replace(tzinfo=None)
