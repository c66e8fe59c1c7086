from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from ..core.constants import DEFAULT_ENTRY_FLOOR
from ..core.enums import WeekdayClass
from .model import ShiftRule


def weekday_class_of(day: date) -> WeekdayClass:
    """Classify a calendar day (datetimes are classified by their own date)."""
    wd = day.weekday()
    if wd == 5:
        return WeekdayClass.SATURDAY
    if wd == 6:
        return WeekdayClass.SUNDAY
    return WeekdayClass.WEEKDAY


@dataclass(frozen=True)
class SchedulePolicy:
    """Shop schedule rules.

    Mon-Fri: ``weekday_shift_hours`` with ``weekday_lunch_hours`` deducted.
    Saturday: ``saturday_shift_hours``, no lunch.
    Sunday: no scheduled shift, every worked hour is extra.

    ``entry_floor`` clamps earlier check-ins to that time of day;
    ``debit_hours_enabled`` turns undertime reporting on or off.
    """

    weekday_shift_hours: float = 8.5
    weekday_lunch_hours: float = 0.5
    saturday_shift_hours: float = 6.0
    entry_floor: Optional[time] = DEFAULT_ENTRY_FLOOR
    debit_hours_enabled: bool = True

    def rule_for(self, weekday_class: WeekdayClass) -> ShiftRule:
        if weekday_class == WeekdayClass.WEEKDAY:
            return ShiftRule(shift_hours=self.weekday_shift_hours, lunch_hours=self.weekday_lunch_hours)
        if weekday_class == WeekdayClass.SATURDAY:
            return ShiftRule(shift_hours=self.saturday_shift_hours)
        return ShiftRule(shift_hours=0.0)

    def rule_for_day(self, day: date) -> ShiftRule:
        return self.rule_for(weekday_class_of(day))

    def normalize_check_in(self, ts: datetime) -> datetime:
        """Clamp a check-in earlier than the entry floor to the floor (same day)."""
        if self.entry_floor is None or ts.time() >= self.entry_floor:
            return ts
        return datetime.combine(ts.date(), self.entry_floor)


STANDARD_POLICY = SchedulePolicy()

LEGACY_POLICY = SchedulePolicy(
    weekday_shift_hours=8.0,
    weekday_lunch_hours=0.5,
    saturday_shift_hours=6.0,
    entry_floor=None,
    debit_hours_enabled=False,
)

_PRESETS = {
    "standard": STANDARD_POLICY,
    "legacy": LEGACY_POLICY,
}


def policy_by_name(name: str) -> SchedulePolicy:
    try:
        return _PRESETS[(name or "standard").strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown shift policy: {name!r} (expected one of {sorted(_PRESETS)})") from None
