from __future__ import annotations

from datetime import datetime

from ...schedules.policy import STANDARD_POLICY, SchedulePolicy
from ..model import WorkedHours, round_hours
from .base import HoursCalculator


class ShiftHoursCalculator(HoursCalculator):
    """Split a worked span into normal / extra / debit hours.

    The shift is classified by the check-in day, so a shift crossing
    midnight uses its start day's rule. Lunch is deducted before comparing
    against the shift length; a negative span counts as zero.
    """

    def __init__(self, policy: SchedulePolicy = STANDARD_POLICY):
        self._policy = policy

    def compute(self, check_in: datetime, check_out: datetime) -> WorkedHours:
        total_hours = max((check_out - check_in).total_seconds() / 3600.0, 0.0)
        rule = self._policy.rule_for_day(check_in.date())

        net_hours = max(total_hours - rule.lunch_hours, 0.0)
        normal = min(net_hours, rule.shift_hours)
        extra = max(net_hours - rule.shift_hours, 0.0)
        debit = max(rule.shift_hours - net_hours, 0.0) if self._policy.debit_hours_enabled else 0.0

        return WorkedHours(
            normal_hours=round_hours(normal),
            extra_hours=round_hours(extra),
            debit_hours=round_hours(debit),
        )
