from __future__ import annotations
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Literal, Optional, Union

from .ints import IntType


class Month(IntEnum):
    JAN = 1
    FEB = 2
    MAR = 3
    APR = 4
    MAY = 5
    JUN = 6
    JUL = 7
    AUG = 8
    SEP = 9
    OCT = 10
    NOV = 11
    DEC = 12

    def numeric(self) -> int:
        """JAN = 1, DEC = 12"""
        return int(self)

    def days(self, is_leap_year: bool) -> int:
        m = int(self)
        if m != 2:
            return 30 | (m ^ (m >> 3))
        return 29 if is_leap_year else 28


class Weekday(IntEnum):
    MON = 1
    TUE = 2
    WED = 3
    THU = 4
    FRI = 5
    SAT = 6
    SUN = 7

    def numeric(self) -> int:
        """MON = 1, SUN = 7"""
        return int(self)


def _fmt_ymd(year: int, month: int, day: int) -> str:
    y = f"-{-year:04d}" if year < 0 else f"{year:04d}"
    return f"{y}-{month:02d}-{day:02d}"


@dataclass(frozen=True)
class CivilDate:
    """Plain (year, month, day) literal used for epochs and span arithmetic."""
    year: int
    month: int
    day: int

    def __str__(self) -> str:
        return _fmt_ymd(self.year, self.month, self.day)


@dataclass(frozen=True)
class Date:
    year: int
    month: Month
    day: int

    @staticmethod
    def init(year: int, month: Union[Month, int], day: int) -> "Date":
        """May save some typing vs keyword construction. Performs no range checks."""
        return Date(year=year, month=Month(month), day=day)

    def civil(self) -> CivilDate:
        return CivilDate(self.year, int(self.month), self.day)

    def __str__(self) -> str:
        return _fmt_ymd(self.year, int(self.month), self.day)


@dataclass(frozen=True)
class Duration:
    """Calendar offset, not a physical time span: month lengths vary."""
    year: int = 0
    month: int = 0
    day: int = 0

    @staticmethod
    def init(year: int, month: int, day: int) -> "Duration":
        return Duration(year=year, month=month, day=day)


@dataclass(frozen=True)
class CalendarId:
    family: Literal["standard", "custom"]
    name: str
    version: str = "1"


@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a GregorianCalendar."""
    id: CalendarId
    year_type: IntType
    epoch: CivilDate
    shift: Optional[int] = None         # None -> solved
    working_bits: Optional[int] = None  # None -> smallest power of two
    meta: Optional[dict] = None

    def tweak(self, **kwargs) -> "CalendarSpec":
        return replace(self, **kwargs)
