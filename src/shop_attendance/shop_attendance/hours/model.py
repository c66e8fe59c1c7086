from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from ..core.constants import HOURS_DECIMALS

_QUANT = Decimal(1).scaleb(-HOURS_DECIMALS)


def round_hours(value: float) -> float:
    """Round to 2 decimals, half away from zero (12.345 -> 12.35)."""
    return float(Decimal(repr(value)).quantize(_QUANT, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class WorkedHours:
    normal_hours: float = 0.0
    extra_hours: float = 0.0
    debit_hours: float = 0.0


@dataclass(frozen=True)
class HoursTotals:
    total_normal: float = 0.0
    total_extras: float = 0.0
    total_debits: float = 0.0
