from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ShiftRule:
    """Scheduled shift length and lunch deduction for one weekday class (hours)."""

    shift_hours: float
    lunch_hours: float = 0.0
