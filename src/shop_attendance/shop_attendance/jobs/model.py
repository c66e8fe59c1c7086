from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class JobRecord:
    """Domain entity: one job logged by a mechanic. Immutable once created."""

    job_id: int
    user_id: int
    attendance_id: Optional[int]
    work_date: date
    plate: str
    job_type: str
    description: str = ""


@dataclass(frozen=True)
class JobReportRow:
    job_id: int
    user_id: int
    full_name: str
    work_date: date
    plate: str
    job_type: str
    description: str
