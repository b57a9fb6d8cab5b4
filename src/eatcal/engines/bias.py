"""
eatcal.engines.bias
-------------------
Working-width and bias selection for the affine conversion engine.

For a year type Y and an epoch, the engine works on unsigned integers of a
single power-of-two width U. Two shifts keep every intermediate value inside
U and non-negative:

    K = days(0000-03-01 -> epoch) + ERA_DAYS * shift   (day-count bias)
    L = ERA_YEARS * shift                              (year bias)

Shifting by whole eras leaves the calendar pattern unchanged, so the bias
is invisible to callers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..core.errors import ConfigurationError
from ..core.ints import IntType, ceil_power_of_two, int_fitting_range
from ..core.types import CivilDate
from .rules import DAYS_IN_YEAR, ERA_DAYS, ERA_YEARS
from .span import COMPUTATIONAL, UNIX, days_since

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BiasParams:
    year_type: IntType
    epoch: CivilDate
    shift: int
    K: int
    L: int
    working_type: IntType     # unsigned
    min_epoch_day: int        # inclusive
    max_epoch_day: int        # inclusive
    epoch_days_type: IntType
    weekday_anchor: int       # 0..6, 1970-01-01 -> Thursday

    @property
    def duration_day_type(self) -> IntType:
        return IntType.signed_(self.epoch_days_type.bits)

    @property
    def duration_month_type(self) -> IntType:
        # log2(12) rounded down
        return IntType.signed_(max(1, self.duration_day_type.bits - 3))

    def info(self) -> Dict[str, Any]:
        return {
            "year_type": self.year_type.name,
            "epoch": str(self.epoch),
            "shift": self.shift,
            "K": self.K,
            "L": self.L,
            "working_type": self.working_type.name,
            "epoch_days_type": self.epoch_days_type.name,
            "duration_day_type": self.duration_day_type.name,
            "duration_month_type": self.duration_month_type.name,
            "min_epoch_day": self.min_epoch_day,
            "max_epoch_day": self.max_epoch_day,
        }


def epoch_day_bounds(year_type: IntType, epoch: CivilDate) -> tuple[int, int]:
    """Inclusive epoch-day range reachable by every year of `year_type`."""
    lo = days_since(epoch, CivilDate(year_type.min, 1, 1))
    hi = days_since(epoch, CivilDate(year_type.max, 12, 31))
    return lo, hi


def solve_shift(year_type: IntType, epoch: Optional[CivilDate] = None) -> int:
    """
    Era shift covering [year_type.min, year_type.max].

    Provably safe, not minimal: the epoch is ignored and the bound is simply
    one era past the largest year.
    """
    # TODO: solve the per-(width, epoch) inequalities for the smallest shift.
    return year_type.max // ERA_YEARS + 1


def working_type_for(epoch_days_type: IntType) -> IntType:
    return IntType.unsigned_(ceil_power_of_two(epoch_days_type.bits))


def check_overflow(
    *,
    year_type: IntType,
    working_type: IntType,
    K: int,
    L: int,
    min_epoch_day: int,
    max_epoch_day: int,
) -> None:
    """Raise ConfigurationError unless every intermediate fits `working_type`."""
    umax = working_type.max

    # Year path: Y + L must stay non-negative and 1461 * (Y + L) must fit.
    min_year_no_overflow = -L
    max_year_no_overflow = umax // DAYS_IN_YEAR.numerator - L + 1
    if not min_year_no_overflow < year_type.min:
        raise ConfigurationError(
            f"Year bias L={L} too small for {year_type.name}: "
            f"minimum year {year_type.min} would go negative"
        )
    if not max_year_no_overflow > year_type.max:
        raise ConfigurationError(
            f"{working_type.name} too narrow for {year_type.name} with L={L}: "
            f"years above {max_year_no_overflow} overflow"
        )

    # Day path: N = d + K must stay non-negative and 4 * N + 3 must fit.
    min_epoch_day_no_overflow = -K
    max_epoch_day_no_overflow = (umax - 3) // 4 - K
    if not min_epoch_day_no_overflow < min_epoch_day:
        raise ConfigurationError(
            f"Day bias K={K} too small: min_epoch_day {min_epoch_day} would go negative"
        )
    if not max_epoch_day_no_overflow > max_epoch_day:
        raise ConfigurationError(
            f"{working_type.name} too narrow with K={K}: "
            f"epoch days above {max_epoch_day_no_overflow} overflow"
        )


def solve_bias(
    year_type: IntType,
    epoch: CivilDate,
    *,
    shift: Optional[int] = None,
    working_bits: Optional[int] = None,
) -> BiasParams:
    """Derive K, L and the working width once for (year_type, epoch)."""
    if shift is None:
        shift = solve_shift(year_type, epoch)
    if shift < 0:
        raise ConfigurationError(f"shift must be non-negative, got {shift}")

    min_epoch_day, max_epoch_day = epoch_day_bounds(year_type, epoch)
    epoch_days_type = int_fitting_range(min_epoch_day, max_epoch_day)

    if working_bits is None:
        working_type = working_type_for(epoch_days_type)
    else:
        working_type = IntType.unsigned_(working_bits)

    K = days_since(COMPUTATIONAL, epoch) + ERA_DAYS * shift
    L = ERA_YEARS * shift

    check_overflow(
        year_type=year_type,
        working_type=working_type,
        K=K,
        L=L,
        min_epoch_day=min_epoch_day,
        max_epoch_day=max_epoch_day,
    )

    anchor = (days_since(UNIX, epoch) + 3) % 7

    logger.debug(
        "solved bias for %s @ %s: shift=%d K=%d L=%d working=%s epoch_days=%s",
        year_type.name, epoch, shift, K, L, working_type.name, epoch_days_type.name,
    )

    return BiasParams(
        year_type=year_type,
        epoch=epoch,
        shift=shift,
        K=K,
        L=L,
        working_type=working_type,
        min_epoch_day=min_epoch_day,
        max_epoch_day=max_epoch_day,
        epoch_days_type=epoch_days_type,
        weekday_anchor=anchor,
    )
