from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import execute, query_all
from .model import JobRecord, JobReportRow
from .repository import JobRepository


def _to_job(r: Dict[str, Any]) -> JobRecord:
    return JobRecord(
        job_id=int(r["job_id"]),
        user_id=int(r["user_id"]),
        attendance_id=r.get("attendance_id"),
        work_date=r["work_date"],
        plate=r["plate"],
        job_type=r["job_type"],
        description=r.get("description") or "",
    )


class MySQLJobRepository(JobRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_job(
        self,
        *,
        user_id: int,
        attendance_id: Optional[int],
        work_date: date,
        plate: str,
        job_type: str,
        description: str,
    ) -> int:
        result = execute(
            self._conn_factory,
            """
            INSERT INTO jobs(user_id, attendance_id, work_date, plate, job_type, description)
            VALUES(%s,%s,%s,%s,%s,%s)
            """,
            (user_id, attendance_id, work_date, plate, job_type, description),
        )
        return int(result.lastrowid or 0)

    def list_for_user_and_date(self, user_id: int, work_date: date) -> Sequence[JobRecord]:
        rows = query_all(
            self._conn_factory,
            """
            SELECT job_id, user_id, attendance_id, work_date, plate, job_type, description
            FROM jobs
            WHERE user_id=%s AND work_date=%s
            ORDER BY job_id DESC
            """,
            (user_id, work_date),
        )
        return [_to_job(r) for r in rows]

    def get_report_rows(self, *, start_date: date, end_date: date) -> Sequence[JobReportRow]:
        rows = query_all(
            self._conn_factory,
            """
            SELECT j.job_id, j.user_id, u.full_name, j.work_date, j.plate, j.job_type, j.description
            FROM jobs j
            JOIN users u ON u.user_id = j.user_id
            WHERE j.work_date BETWEEN %s AND %s
            ORDER BY j.work_date DESC, j.job_id DESC
            """,
            (start_date, end_date),
        )
        return [
            JobReportRow(
                job_id=int(r["job_id"]),
                user_id=int(r["user_id"]),
                full_name=r["full_name"],
                work_date=r["work_date"],
                plate=r["plate"],
                job_type=r["job_type"],
                description=r.get("description") or "",
            )
            for r in rows
        ]
