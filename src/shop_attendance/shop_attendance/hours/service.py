from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Sequence

from ..attendance.model import AttendanceReportRow
from ..attendance.repository import AttendanceRepository
from ..core.constants import DEFAULT_REPORT_DAYS
from ..core.exceptions import ValidationError
from ..jobs.model import JobReportRow
from ..jobs.repository import JobRepository
from .aggregator import aggregate_hours
from .model import HoursTotals

REPORT_CSV_FIELDS = [
    "work_date",
    "user_id",
    "full_name",
    "check_in",
    "check_out",
    "normal_hours",
    "extra_hours",
    "debit_hours",
    "check_in_photo",
    "check_out_photo",
]


@dataclass(frozen=True)
class ReportData:
    start: date
    end: date
    attendance: Sequence[AttendanceReportRow]
    jobs: Sequence[JobReportRow]
    totals: HoursTotals

    def csv_rows(self) -> list[dict]:
        return [
            {
                "work_date": r.work_date.strftime("%Y-%m-%d"),
                "user_id": r.user_id,
                "full_name": r.full_name,
                "check_in": r.check_in_time.strftime("%H:%M"),
                "check_out": r.check_out_time.strftime("%H:%M") if r.check_out_time else "-",
                "normal_hours": f"{float(r.normal_hours or 0):.2f}",
                "extra_hours": f"{float(r.extra_hours or 0):.2f}",
                "debit_hours": f"{float(r.debit_hours or 0):.2f}",
                "check_in_photo": r.check_in_photo,
                "check_out_photo": r.check_out_photo or "",
            }
            for r in self.attendance
        ]


def default_range(today: date, *, days: int = DEFAULT_REPORT_DAYS) -> tuple[date, date]:
    """Last ``days`` calendar days, today included."""
    return today - timedelta(days=days - 1), today


class AttendanceReportService:
    """Admin view: attendance and jobs over an inclusive date range, with hour totals."""

    def __init__(self, attendance: AttendanceRepository, jobs: JobRepository):
        self._attendance = attendance
        self._jobs = jobs

    def build_report(self, *, start: date, end: date) -> ReportData:
        if start > end:
            raise ValidationError("Start date must not be after end date")

        attendance = list(self._attendance.get_report_rows(start_date=start, end_date=end))
        jobs = list(self._jobs.get_report_rows(start_date=start, end_date=end))

        return ReportData(
            start=start,
            end=end,
            attendance=attendance,
            jobs=jobs,
            totals=aggregate_hours(attendance),
        )
