from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..hours.model import WorkedHours
from .model import AttendanceRecord, AttendanceReportRow


class AttendanceRepository(Protocol):
    """Storage contract for attendance records.

    Note: ``create_checkin`` must be atomic per (user_id, work_date); the
    MySQL implementation relies on the UNIQUE key for that.
    """

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create_checkin(
        self,
        *,
        user_id: int,
        work_date: date,
        check_in_time: datetime,
        check_in_photo: str,
    ) -> Optional[int]:
        """Insert the day's record; return None if one already exists."""

        raise NotImplementedError

    def update_checkout(
        self,
        *,
        attendance_id: int,
        check_out_time: datetime,
        check_out_photo: str,
        hours: WorkedHours,
    ) -> bool:
        """Write the check-out fields unless already checked out."""

        raise NotImplementedError

    def get_report_rows(self, *, start_date: date, end_date: date) -> Sequence[AttendanceReportRow]:
        raise NotImplementedError
