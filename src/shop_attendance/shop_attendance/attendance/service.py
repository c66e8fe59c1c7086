from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Optional

from ..common.datetime_utils import Clock
from ..common.validators import require_non_empty
from ..core.enums import AttendanceOutcome, AttendanceState
from ..hours.calculator.base import HoursCalculator
from ..hours.calculator.shift_calculator import ShiftHoursCalculator
from ..schedules.policy import STANDARD_POLICY, SchedulePolicy
from .model import AttendanceRecord, state_of
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use cases: daily check-in / check-out for a mechanic.

    At most one check-in and one check-out per (user, civil date). Repeated
    requests are no-ops reported through ``AttendanceOutcome``; a missing
    photo raises ``ValidationError`` before anything is stored.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        clock: Clock,
        policy: SchedulePolicy = STANDARD_POLICY,
        calculator: Optional[HoursCalculator] = None,
    ):
        self._attendance = attendance
        self._clock = clock
        self._policy = policy
        self._calculator = calculator or ShiftHoursCalculator(policy)

    def check_in(self, user_id: int, *, photo_ref: Optional[str], now: Optional[datetime] = None) -> AttendanceOutcome:
        photo_ref = require_non_empty(photo_ref, "Check-in photo")
        now = now or self._clock()
        today = now.date()

        if self._attendance.get_for_user_and_date(user_id, today):
            return AttendanceOutcome.ALREADY_CHECKED_IN

        check_in_time = self._policy.normalize_check_in(now)
        attendance_id = self._attendance.create_checkin(
            user_id=user_id,
            work_date=today,
            check_in_time=check_in_time,
            check_in_photo=photo_ref,
        )
        if attendance_id is None:
            # lost the race against a concurrent check-in for the same day
            return AttendanceOutcome.ALREADY_CHECKED_IN

        logger.info("user %s checked in at %s (attendance %s)", user_id, check_in_time, attendance_id)
        return AttendanceOutcome.CHECKED_IN

    def check_out(
        self,
        user_id: int,
        *,
        photo_ref: Optional[str],
        now: Optional[datetime] = None,
        work_date: Optional[date] = None,
    ) -> AttendanceOutcome:
        photo_ref = require_non_empty(photo_ref, "Check-out photo")
        now = now or self._clock()

        record = self.current_record(user_id, now=now, work_date=work_date)
        state = state_of(record)
        if state == AttendanceState.NO_RECORD:
            return AttendanceOutcome.NOT_CHECKED_IN
        if state == AttendanceState.CHECKED_OUT:
            return AttendanceOutcome.ALREADY_CHECKED_OUT

        # a check-out before the entry floor never precedes the stored check-in
        check_out_time = max(now, record.check_in_time)
        hours = self._calculator.compute(record.check_in_time, check_out_time)
        updated = self._attendance.update_checkout(
            attendance_id=record.attendance_id,
            check_out_time=check_out_time,
            check_out_photo=photo_ref,
            hours=hours,
        )
        if not updated:
            return AttendanceOutcome.ALREADY_CHECKED_OUT

        logger.info(
            "user %s checked out at %s for %s: normal=%.2f extra=%.2f debit=%.2f",
            user_id,
            check_out_time,
            record.work_date,
            hours.normal_hours,
            hours.extra_hours,
            hours.debit_hours,
        )
        return AttendanceOutcome.CHECKED_OUT

    def current_record(
        self,
        user_id: int,
        *,
        now: Optional[datetime] = None,
        work_date: Optional[date] = None,
    ) -> Optional[AttendanceRecord]:
        """Record a check-out applies to.

        With an explicit ``work_date`` that day's record. Otherwise today's,
        or yesterday's when it is still open (a shift running past midnight).
        """
        if work_date is not None:
            return self._attendance.get_for_user_and_date(user_id, work_date)

        today = (now or self._clock()).date()
        record = self._attendance.get_for_user_and_date(user_id, today)
        if record is not None:
            return record

        previous = self._attendance.get_for_user_and_date(user_id, today - timedelta(days=1))
        if state_of(previous) == AttendanceState.CHECKED_IN:
            return previous
        return None

    def get_today_record(self, user_id: int, today: Optional[date] = None) -> Optional[AttendanceRecord]:
        """Get today's attendance record for a user"""
        today = today or self._clock().date()
        return self._attendance.get_for_user_and_date(user_id, today)
