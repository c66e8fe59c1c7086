from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import JobRecord, JobReportRow


class JobRepository(Protocol):
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
        raise NotImplementedError

    def list_for_user_and_date(self, user_id: int, work_date: date) -> Sequence[JobRecord]:
        """Newest first."""

        raise NotImplementedError

    def get_report_rows(self, *, start_date: date, end_date: date) -> Sequence[JobReportRow]:
        raise NotImplementedError
