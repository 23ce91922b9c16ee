from __future__ import annotations
from datetime import datetime
from typing import Dict, Optional

from models import DayHours, Field

# Sunday first, matching the 0..6 index used for "today"
WEEKDAY_KEYS = ("sun", "mon", "tue", "wed", "thu", "fri", "sat")

DEFAULT_OPEN = "06:00"
DEFAULT_CLOSE = "22:00"
NO_HOURS_TEXT = "No hours listed"


def default_hours() -> Dict[str, DayHours]:
    """Same window every day; sources carry no usable schedule yet."""
    window = DayHours(open=DEFAULT_OPEN, close=DEFAULT_CLOSE)
    return {key: window for key in WEEKDAY_KEYS}


def weekday_key(as_of: datetime) -> str:
    # isoweekday: Mon=1 .. Sun=7
    return WEEKDAY_KEYS[as_of.isoweekday() % 7]


def to_minutes(hhmm: str) -> int:
    hours, minutes = hhmm.split(":")
    return int(hours) * 60 + int(minutes)


def today_hours(field: Field, as_of: datetime) -> Optional[DayHours]:
    return field.opening_hours.get(weekday_key(as_of))


def is_open_now(field: Field, as_of: Optional[datetime] = None) -> bool:
    """True when *as_of* (local wall clock) falls inside today's window.

    Both ends are inclusive. Windows crossing midnight are not supported.
    """
    as_of = as_of or datetime.now()
    hours = today_hours(field, as_of)
    if hours is None:
        return False
    now_minutes = as_of.hour * 60 + as_of.minute
    return to_minutes(hours.open) <= now_minutes <= to_minutes(hours.close)


def format_today_hours(field: Field, as_of: Optional[datetime] = None) -> str:
    hours = today_hours(field, as_of or datetime.now())
    if hours is None:
        return NO_HOURS_TEXT
    return f"{hours.open} – {hours.close}"
