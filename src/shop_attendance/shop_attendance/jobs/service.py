from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import Clock
from ..common.validators import require_non_empty
from .model import JobRecord
from .repository import JobRepository


class JobService:
    """Use case: log a job (vehicle plate, job type, description).

    Independent of the attendance state; linked to the day's attendance
    record when one exists.
    """

    def __init__(self, jobs: JobRepository, attendance: AttendanceRepository, *, clock: Clock):
        self._jobs = jobs
        self._attendance = attendance
        self._clock = clock

    def record_job(
        self,
        user_id: int,
        *,
        plate: Optional[str],
        job_type: Optional[str],
        description: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> int:
        plate = require_non_empty(plate, "Plate").upper()
        job_type = require_non_empty(job_type, "Job type")
        description = (description or "").strip()

        today = (now or self._clock()).date()
        record = self._attendance.get_for_user_and_date(user_id, today)

        return self._jobs.create_job(
            user_id=user_id,
            attendance_id=record.attendance_id if record else None,
            work_date=today,
            plate=plate,
            job_type=job_type,
            description=description,
        )

    def list_for_day(self, user_id: int, work_date: date) -> Sequence[JobRecord]:
        return self._jobs.list_for_user_and_date(user_id, work_date)
