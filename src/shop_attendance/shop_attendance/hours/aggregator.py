from __future__ import annotations

from typing import Iterable, Optional, Protocol

from .model import HoursTotals, round_hours


class HasHours(Protocol):
    normal_hours: Optional[float]
    extra_hours: Optional[float]
    debit_hours: Optional[float]


def aggregate_hours(records: Iterable[HasHours]) -> HoursTotals:
    """Sum the hour fields of attendance rows; unset fields count as 0."""
    normal = extras = debits = 0.0
    for r in records:
        normal += float(r.normal_hours or 0)
        extras += float(r.extra_hours or 0)
        debits += float(r.debit_hours or 0)
    return HoursTotals(
        total_normal=round_hours(normal),
        total_extras=round_hours(extras),
        total_debits=round_hours(debits),
    )
