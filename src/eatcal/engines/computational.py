"""
eatcal.engines.computational
----------------------------
The computational calendar: years start on March 1 so that February, the
only month of variable length, is the last month of the year. Months run
3..14 and days are zero-based. Years carry the era bias L so they are
never negative.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core.types import Date, Month
from .rules import JAN_CUTOFF


@dataclass(frozen=True)
class ComputationalDate:
    year: int   # biased, non-negative
    month: int  # 3..14
    day: int    # 0..30

    @staticmethod
    def from_gregorian(date: Date, L: int) -> "ComputationalDate":
        month = int(date.month)
        J = 1 if month <= 2 else 0
        return ComputationalDate(
            year=date.year + L - J,
            month=month + 12 if J else month,
            day=date.day - 1,
        )

    def to_gregorian(self, N_Y: int, L: int) -> Date:
        """`N_Y` is the zero-based day of the computational year."""
        J = 1 if N_Y >= JAN_CUTOFF else 0
        return Date(
            year=self.year + J - L,
            month=Month(self.month - 12 if J else self.month),
            day=self.day + 1,
        )
