from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import execute, query_all, query_one
from ..hours.model import WorkedHours
from .model import AttendanceRecord, AttendanceReportRow
from .repository import AttendanceRepository

_RECORD_COLUMNS = """
    attendance_id, user_id, work_date, check_in_time, check_in_photo,
    check_out_time, check_out_photo, normal_hours, extra_hours, debit_hours
"""


def _hours(value: Any) -> Optional[float]:
    # DECIMAL columns come back as Decimal
    return float(value) if value is not None else None


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        user_id=int(r["user_id"]),
        work_date=r["work_date"],
        check_in_time=r["check_in_time"],
        check_in_photo=r["check_in_photo"],
        check_out_time=r.get("check_out_time"),
        check_out_photo=r.get("check_out_photo"),
        normal_hours=_hours(r.get("normal_hours")) or 0.0,
        extra_hours=_hours(r.get("extra_hours")) or 0.0,
        debit_hours=_hours(r.get("debit_hours")) or 0.0,
    )


def _to_report_row(r: Dict[str, Any]) -> AttendanceReportRow:
    return AttendanceReportRow(
        attendance_id=int(r["attendance_id"]),
        user_id=int(r["user_id"]),
        full_name=r["full_name"],
        work_date=r["work_date"],
        check_in_time=r["check_in_time"],
        check_in_photo=r["check_in_photo"],
        check_out_time=r.get("check_out_time"),
        check_out_photo=r.get("check_out_photo"),
        normal_hours=_hours(r.get("normal_hours")),
        extra_hours=_hours(r.get("extra_hours")),
        debit_hours=_hours(r.get("debit_hours")),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        row = query_one(
            self._conn_factory,
            f"SELECT {_RECORD_COLUMNS} FROM attendance_records WHERE user_id=%s AND work_date=%s",
            (user_id, work_date),
        )
        return _to_record(row) if row else None

    def create_checkin(
        self,
        *,
        user_id: int,
        work_date: date,
        check_in_time: datetime,
        check_in_photo: str,
    ) -> Optional[int]:
        # the (user_id, work_date) unique key turns a concurrent duplicate into a no-op
        result = execute(
            self._conn_factory,
            """
            INSERT IGNORE INTO attendance_records(user_id, work_date, check_in_time, check_in_photo)
            VALUES(%s,%s,%s,%s)
            """,
            (user_id, work_date, check_in_time, check_in_photo),
        )
        return result.lastrowid if result.rowcount else None

    def update_checkout(
        self,
        *,
        attendance_id: int,
        check_out_time: datetime,
        check_out_photo: str,
        hours: WorkedHours,
    ) -> bool:
        result = execute(
            self._conn_factory,
            """
            UPDATE attendance_records
            SET check_out_time=%s, check_out_photo=%s,
                normal_hours=%s, extra_hours=%s, debit_hours=%s
            WHERE attendance_id=%s AND check_out_time IS NULL
            """,
            (
                check_out_time,
                check_out_photo,
                hours.normal_hours,
                hours.extra_hours,
                hours.debit_hours,
                int(attendance_id),
            ),
        )
        return result.rowcount > 0

    def get_report_rows(self, *, start_date: date, end_date: date) -> Sequence[AttendanceReportRow]:
        rows = query_all(
            self._conn_factory,
            """
            SELECT
                ar.attendance_id, ar.user_id, u.full_name,
                ar.work_date, ar.check_in_time, ar.check_in_photo,
                ar.check_out_time, ar.check_out_photo,
                ar.normal_hours, ar.extra_hours, ar.debit_hours
            FROM attendance_records ar
            JOIN users u ON u.user_id = ar.user_id
            WHERE ar.work_date BETWEEN %s AND %s
            ORDER BY ar.work_date DESC, u.full_name ASC
            """,
            (start_date, end_date),
        )
        return [_to_report_row(r) for r in rows]
