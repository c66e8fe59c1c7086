from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import Clock, make_clock
from .core.constants import DEFAULT_REPORT_DAYS, DEFAULT_TIMEZONE
from .database.connection import DatabaseConnection, DBConfig
from .hours.calculator.shift_calculator import ShiftHoursCalculator
from .hours.service import AttendanceReportService
from .jobs.mysql_job_repository import MySQLJobRepository
from .jobs.repository import JobRepository
from .jobs.service import JobService
from .photos.storage import PhotoStorage
from .schedules.policy import SchedulePolicy, policy_by_name
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]
    clock: Clock
    policy: SchedulePolicy
    report_days: int

    users_repo: UserRepository
    attendance_repo: AttendanceRepository
    jobs_repo: JobRepository
    photo_storage: PhotoStorage

    auth_service: AuthService
    attendance_service: AttendanceService
    job_service: JobService
    report_service: AttendanceReportService


def wire_container(
    *,
    users_repo: UserRepository,
    attendance_repo: AttendanceRepository,
    jobs_repo: JobRepository,
    photo_storage: PhotoStorage,
    clock: Clock,
    policy: SchedulePolicy,
    report_days: int = DEFAULT_REPORT_DAYS,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Build services on top of the given repositories (MySQL or in-memory)."""

    return Container(
        conn=conn,
        clock=clock,
        policy=policy,
        report_days=int(report_days),
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        jobs_repo=jobs_repo,
        photo_storage=photo_storage,
        auth_service=AuthService(users_repo),
        attendance_service=AttendanceService(
            attendance_repo,
            clock=clock,
            policy=policy,
            calculator=ShiftHoursCalculator(policy),
        ),
        job_service=JobService(jobs_repo, attendance_repo, clock=clock),
        report_service=AttendanceReportService(attendance_repo, jobs_repo),
    )


def build_container(*, db_config: dict, settings: object) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire_container(
        conn=conn,
        users_repo=MySQLUserRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        jobs_repo=MySQLJobRepository(conn),
        photo_storage=PhotoStorage(Path(getattr(settings, "UPLOAD_DIR", "uploads")).resolve()),
        clock=make_clock(getattr(settings, "TIMEZONE", DEFAULT_TIMEZONE)),
        policy=policy_by_name(getattr(settings, "SHIFT_POLICY", "standard")),
        report_days=int(getattr(settings, "DEFAULT_REPORT_DAYS", DEFAULT_REPORT_DAYS)),
    )
