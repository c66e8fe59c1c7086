from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional

import pytest

from src.shop_attendance.shop_attendance.attendance.model import AttendanceRecord, AttendanceReportRow
from src.shop_attendance.shop_attendance.hours.model import WorkedHours
from src.shop_attendance.shop_attendance.jobs.model import JobRecord, JobReportRow


class InMemoryAttendance:
    def __init__(self, names: Optional[dict[int, str]] = None):
        self._by_user_date: dict[tuple[int, date], AttendanceRecord] = {}
        self._id = 0
        self._names = names or {}

    def all(self) -> list[AttendanceRecord]:
        return list(self._by_user_date.values())

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        return self._by_user_date.get((user_id, work_date))

    def create_checkin(self, *, user_id: int, work_date: date, check_in_time: datetime, check_in_photo: str):
        if (user_id, work_date) in self._by_user_date:
            return None
        self._id += 1
        self._by_user_date[(user_id, work_date)] = AttendanceRecord(
            attendance_id=self._id,
            user_id=user_id,
            work_date=work_date,
            check_in_time=check_in_time,
            check_in_photo=check_in_photo,
        )
        return self._id

    def update_checkout(self, *, attendance_id: int, check_out_time: datetime, check_out_photo: str, hours: WorkedHours) -> bool:
        for key, rec in self._by_user_date.items():
            if rec.attendance_id == attendance_id and rec.check_out_time is None:
                self._by_user_date[key] = replace(
                    rec,
                    check_out_time=check_out_time,
                    check_out_photo=check_out_photo,
                    normal_hours=hours.normal_hours,
                    extra_hours=hours.extra_hours,
                    debit_hours=hours.debit_hours,
                )
                return True
        return False

    def get_report_rows(self, *, start_date: date, end_date: date):
        rows = [r for r in self._by_user_date.values() if start_date <= r.work_date <= end_date]
        rows.sort(key=lambda r: r.work_date, reverse=True)
        return [
            AttendanceReportRow(
                attendance_id=r.attendance_id,
                user_id=r.user_id,
                full_name=self._names.get(r.user_id, f"user {r.user_id}"),
                work_date=r.work_date,
                check_in_time=r.check_in_time,
                check_in_photo=r.check_in_photo,
                check_out_time=r.check_out_time,
                check_out_photo=r.check_out_photo,
                normal_hours=r.normal_hours,
                extra_hours=r.extra_hours,
                debit_hours=r.debit_hours,
            )
            for r in rows
        ]


class InMemoryJobs:
    def __init__(self, names: Optional[dict[int, str]] = None):
        self.jobs: list[JobRecord] = []
        self._names = names or {}

    def create_job(self, *, user_id, attendance_id, work_date, plate, job_type, description) -> int:
        job_id = len(self.jobs) + 1
        self.jobs.append(
            JobRecord(
                job_id=job_id,
                user_id=user_id,
                attendance_id=attendance_id,
                work_date=work_date,
                plate=plate,
                job_type=job_type,
                description=description,
            )
        )
        return job_id

    def list_for_user_and_date(self, user_id: int, work_date: date):
        items = [j for j in self.jobs if j.user_id == user_id and j.work_date == work_date]
        return sorted(items, key=lambda j: j.job_id, reverse=True)

    def get_report_rows(self, *, start_date: date, end_date: date):
        return [
            JobReportRow(
                job_id=j.job_id,
                user_id=j.user_id,
                full_name=self._names.get(j.user_id, f"user {j.user_id}"),
                work_date=j.work_date,
                plate=j.plate,
                job_type=j.job_type,
                description=j.description,
            )
            for j in self.jobs
            if start_date <= j.work_date <= end_date
        ]


class FixedClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance(names={1: "Ana Mora", 2: "Luis Vega"})


@pytest.fixture
def jobs_repo():
    return InMemoryJobs(names={1: "Ana Mora", 2: "Luis Vega"})


@pytest.fixture
def clock():
    # Monday
    return FixedClock(datetime(2026, 2, 2, 8, 0))
