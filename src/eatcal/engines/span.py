"""
eatcal.engines.span
-------------------
Exact day distance between two civil dates.

Only used to derive configuration constants (epoch-day bounds, bias K,
weekday anchor), so the per-year loop is acceptable here.
"""

from __future__ import annotations

from ..core.types import CivilDate, Month
from .rules import ERA_DAYS, ERA_YEARS, days_in_year, is_leap

UNIX = CivilDate(1970, 1, 1)
WINDOWS = CivilDate(1601, 1, 1)
# Start of year 0 in the March-based computational calendar.
COMPUTATIONAL = CivilDate(0, 3, 1)


def day_of_year(d: CivilDate) -> int:
    """Zero-based day of the year: Jan 1 -> 0, Dec 31 -> 364 or 365."""
    leap = is_leap(d.year)
    res = d.day - 1
    for m in range(1, d.month):
        res += Month(m).days(leap)
    return res


def days_since(start: CivilDate, end: CivilDate) -> int:
    """Number of days from `start` to `end` (negative if `end` is earlier)."""
    eras = (end.year - start.year) // ERA_YEARS
    res = eras * ERA_DAYS

    y = start.year + eras * ERA_YEARS
    while y < end.year:
        res += days_in_year(y)
        y += 1

    res += day_of_year(end)
    res -= day_of_year(start)
    return res
