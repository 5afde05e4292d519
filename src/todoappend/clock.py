"""Calendar "today" in the reference time zone.

Every operation that needs the current date takes a clock rather than
reading the system time, so composition, ranking and completion all
agree on the same zone and tests can pin the date.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

DEFAULT_TIMEZONE = "Asia/Tokyo"


class Clock:
    """Resolve the current calendar date in a fixed time zone."""

    def __init__(self, timezone: str = DEFAULT_TIMEZONE) -> None:
        self.zone = ZoneInfo(timezone)

    def today(self) -> date:
        return datetime.now(self.zone).date()


class FixedClock(Clock):
    """A clock that always reports the same date."""

    def __init__(self, fixed: date | str, timezone: str = DEFAULT_TIMEZONE) -> None:
        super().__init__(timezone)
        self.fixed = date.fromisoformat(fixed) if isinstance(fixed, str) else fixed

    def today(self) -> date:
        return self.fixed


def date_window(today: date, days: int) -> str:
    """Return the inclusive upper bound ``today + days`` as ``YYYY-MM-DD``."""
    return (today + timedelta(days=days)).isoformat()
