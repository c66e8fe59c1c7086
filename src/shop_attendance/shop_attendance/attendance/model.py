from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceState


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one mechanic's attendance for one civil date.

    Check-out time, check-out photo and the hour fields are written together
    on check-out; until then they are unset (hours read as 0).
    """

    attendance_id: int
    user_id: int
    work_date: date
    check_in_time: datetime
    check_in_photo: str
    check_out_time: Optional[datetime] = None
    check_out_photo: Optional[str] = None
    normal_hours: float = 0.0
    extra_hours: float = 0.0
    debit_hours: float = 0.0

    @property
    def state(self) -> AttendanceState:
        return state_of(self)


def state_of(record: Optional[AttendanceRecord]) -> AttendanceState:
    if record is None:
        return AttendanceState.NO_RECORD
    if record.check_out_time is None:
        return AttendanceState.CHECKED_IN
    return AttendanceState.CHECKED_OUT


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model for the admin report (attendance joined with the user's name)."""

    attendance_id: int
    user_id: int
    full_name: str
    work_date: date
    check_in_time: datetime
    check_in_photo: str
    check_out_time: Optional[datetime]
    check_out_photo: Optional[str]
    normal_hours: Optional[float]
    extra_hours: Optional[float]
    debit_hours: Optional[float]
