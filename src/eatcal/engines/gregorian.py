"""
eatcal.engines.gregorian
------------------------
Proleptic Gregorian calendar over a fixed-width year type and a fixed epoch,
implemented with Euclidean affine transforms (Neri & Schneider, "Euclidean
affine functions and their application to calendar algorithms").

Every configuration is built once; conversions are then loop-free
multiply/add/shift/divide chains with a single branch.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from ..core.errors import DurationRangeError, EpochDayRangeError, InvalidDateError
from ..core.ints import IntType
from ..core.types import CalendarId, CalendarSpec, CivilDate, Date, Duration, Month, Weekday
from .affine import CENTURY_EAF, MONTH_RECIPROCAL, YEAR_RECIPROCAL
from .bias import BiasParams, solve_bias
from .computational import ComputationalDate
from .rules import DAYS_IN_YEAR, is_leap
from .span import UNIX


class GregorianCalendar:
    """
    Date <-> epoch-day conversion for one (year type, epoch) configuration.
    """
    def __init__(self, spec: CalendarSpec):
        self.spec = spec
        self.id = spec.id
        # Raises ConfigurationError for configurations that could overflow.
        self.bias: BiasParams = solve_bias(
            spec.year_type,
            spec.epoch,
            shift=spec.shift,
            working_bits=spec.working_bits,
        )
        self._check_transform_bounds()

    def _check_transform_bounds(self) -> None:
        # Day of century is at most 36524, so the year split sees at most
        # 4*36524 + 3; day of year is at most 365.
        YEAR_RECIPROCAL.check(4 * 36_524 + 3)
        MONTH_RECIPROCAL.check(365)

    # ---------------------------------------------------------
    # Configuration
    # ---------------------------------------------------------

    @property
    def year_type(self) -> IntType:
        return self.spec.year_type

    @property
    def epoch(self) -> CivilDate:
        return self.spec.epoch

    @property
    def min_epoch_day(self) -> int:
        """Inclusive."""
        return self.bias.min_epoch_day

    @property
    def max_epoch_day(self) -> int:
        """Inclusive."""
        return self.bias.max_epoch_day

    def info(self) -> Dict[str, Any]:
        out = {"id": self.id.__dict__}
        out.update(self.bias.info())
        if self.spec.meta:
            out["meta"] = dict(self.spec.meta)
        return out

    # ---------------------------------------------------------
    # Construction / validation
    # ---------------------------------------------------------

    @staticmethod
    def init(year: int, month: Union[Month, int], day: int) -> Date:
        return Date.init(year, month, day)

    def is_valid(self, date: Date) -> bool:
        if not self.year_type.contains(date.year):
            return False
        if not 1 <= int(date.month) <= 12:
            return False
        return 1 <= date.day <= Month(date.month).days(is_leap(date.year))

    def _require_valid(self, date: Date) -> None:
        if not self.is_valid(date):
            raise InvalidDateError(
                f"{date} is not a valid date for year type {self.year_type.name}"
            )

    def _require_duration(self, duration: Duration) -> None:
        b = self.bias
        for field, t in (("day", b.duration_day_type), ("month", b.duration_month_type)):
            value = getattr(duration, field)
            if not t.contains(value):
                raise DurationRangeError(
                    f"duration {field} {value} does not fit {t.name}"
                )

    # ---------------------------------------------------------
    # Forward: epoch day -> date
    # ---------------------------------------------------------

    def from_epoch(self, days: int) -> Date:
        b = self.bias
        if not b.min_epoch_day <= days <= b.max_epoch_day:
            raise EpochDayRangeError(
                f"epoch day {days} outside [{b.min_epoch_day}, {b.max_epoch_day}]"
            )

        N = days + b.K

        # Completed centuries and day of century.
        C, N_C = CENTURY_EAF(N)

        # Year of century (0..99 via the 1461/4 mean year) and day of year.
        Z, N_Y = YEAR_RECIPROCAL(4 * N_C + 3)

        # Month (3..14) and zero-based day of month.
        month, day = MONTH_RECIPROCAL(N_Y)

        c = ComputationalDate(year=100 * C + Z, month=month, day=day)
        return c.to_gregorian(N_Y, b.L)

    # ---------------------------------------------------------
    # Inverse: date -> epoch day
    # ---------------------------------------------------------

    def to_epoch(self, date: Date) -> int:
        self._require_valid(date)
        b = self.bias

        c = ComputationalDate.from_gregorian(date, b.L)
        C = c.year // 100

        y_star = DAYS_IN_YEAR.numerator * c.year // DAYS_IN_YEAR.denominator - C + C // 4
        days_in_5mo = 31 + 30 + 31 + 30 + 31
        m_star = (days_in_5mo * c.month - 457) // 5
        N = y_star + m_star + c.day

        return N - b.K

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def add(self, date: Date, duration: Duration) -> Date:
        """
        Calendar addition with floor carries: months first (borrowing from
        the year when negative), then days from the first of that month.
        Duration day and month must fit bias.duration_day_type and
        bias.duration_month_type.
        """
        self._require_valid(date)
        self._require_duration(duration)

        m = duration.month + int(date.month) - 1
        y = date.year + duration.year + m // 12

        ym = Date(year=y, month=Month(m % 12 + 1), day=1)
        epoch_days = self.to_epoch(ym)
        epoch_days += duration.day + date.day - 1

        return self.from_epoch(epoch_days)

    def weekday(self, date: Date) -> Weekday:
        # 1970-01-01 is a Thursday; the anchor folds in the configured epoch.
        return Weekday((self.to_epoch(date) + self.bias.weekday_anchor) % 7 + 1)

    def __repr__(self) -> str:
        return f"GregorianCalendar({self.id.name!r}, {self.year_type.name}, epoch={self.epoch})"


def gregorian(
    year_type: IntType,
    epoch: CivilDate = UNIX,
    shift: Optional[int] = None,
    *,
    working_bits: Optional[int] = None,
    name: Optional[str] = None,
) -> GregorianCalendar:
    """Convenience constructor for ad-hoc configurations."""
    spec = CalendarSpec(
        id=CalendarId("custom", name or f"{epoch}-{year_type.name}"),
        year_type=year_type,
        epoch=epoch,
        shift=shift,
        working_bits=working_bits,
    )
    return GregorianCalendar(spec)
