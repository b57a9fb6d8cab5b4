"""
eatcal.engines.rules
--------------------
Gregorian leap-year rule, month lengths and the 400-year era.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Union

from ..core.types import Month

# The Gregorian calendar repeats every 400 years:
# 100 multiples of 4, minus 4 multiples of 100, plus 1 multiple of 400.
ERA_YEARS = 400
ERA_DAYS = 146_097

# Mean year length used by the transforms. Error is about .0001 days per year
# against the 365.2424 days between March equinoxes.
DAYS_IN_YEAR = Fraction(1461, 4)

# Zero-based day of the computational (March-based) year on which January starts.
JAN_CUTOFF = 306


def is_leap(year: int) -> bool:
    """
    Gregorian leap-year rule.

    Multiples of 100 are multiples of 25, and the only multiples of 25 that
    are also multiples of 16 are the multiples of 400. Floor-mod keeps this
    valid for proleptic negative years.
    """
    if year % 25 != 0:
        return year % 4 == 0
    return year % 16 == 0


def days_in_month(year: int, month: Union[Month, int]) -> int:
    return Month(month).days(is_leap(year))


def days_in_year(year: int) -> int:
    return 366 if is_leap(year) else 365
