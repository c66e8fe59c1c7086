from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from ..model import WorkedHours


class HoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked hours)."""

    @abstractmethod
    def compute(self, check_in: datetime, check_out: datetime) -> WorkedHours:
        raise NotImplementedError
