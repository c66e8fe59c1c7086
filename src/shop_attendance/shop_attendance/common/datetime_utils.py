from __future__ import annotations

from datetime import date, datetime
from typing import Callable
from zoneinfo import ZoneInfo

Clock = Callable[[], datetime]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def make_clock(tz_name: str) -> Clock:
    """Build a clock returning naive civil time in ``tz_name``.

    Timestamps are stored as naive DATETIME values, so the zone is applied
    once here and dropped.
    """
    tz = ZoneInfo(tz_name)

    def now_local() -> datetime:
        return datetime.now(tz).replace(tzinfo=None)

    return now_local
