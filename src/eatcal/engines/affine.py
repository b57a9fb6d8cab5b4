"""
eatcal.engines.affine
---------------------
Euclidean affine functions (EAFs) and their multiply-shift realizations.

An EAF maps n to the pair

    q = (a*n + b) // d
    r = ((a*n + b) % d) // a

which is how the engine splits a day count into (eras, day of era),
(years, day of year) and (months, day of month). When d is not a power of
two, the division can be replaced by a multiplication with a precomputed
reciprocal and a right shift; that replacement is exact only below a proven
bound, so every ReciprocalDivision carries its bound and refuses inputs
beyond it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..core.errors import AffineBoundError


@dataclass(frozen=True)
class AffineTransform:
    a: int
    b: int
    d: int

    def __post_init__(self) -> None:
        if self.a <= 0 or self.d <= 0:
            raise ValueError("a and d must be positive")

    def __call__(self, n: int) -> Tuple[int, int]:
        p = self.a * n + self.b
        return p // self.d, (p % self.d) // self.a


@dataclass(frozen=True)
class ReciprocalDivision:
    """
    q = (multiplier*n + offset) >> shift
    r = ((multiplier*n + offset) mod 2^shift) // (multiplier * scale)

    `bound` is exclusive: results are proven equal to the reference
    AffineTransform only for 0 <= n < bound.
    """
    multiplier: int
    offset: int
    shift: int
    bound: int
    scale: int = 1
    name: str = ""

    @property
    def mask(self) -> int:
        return (1 << self.shift) - 1

    @property
    def max_product(self) -> int:
        """Largest intermediate value over the admissible inputs."""
        return self.multiplier * (self.bound - 1) + self.offset

    def check(self, n: int) -> None:
        if not 0 <= n < self.bound:
            raise AffineBoundError(
                f"{self.name or 'reciprocal division'}: input {n} outside proven range [0, {self.bound})"
            )

    def __call__(self, n: int) -> Tuple[int, int]:
        # Unchecked; callers run check() on their largest input once, up front.
        p = self.multiplier * n + self.offset
        return p >> self.shift, (p & self.mask) // (self.multiplier * self.scale)


# (4*n + 3) // 146097: n days since the biased computational epoch
# -> completed centuries (146097/4 days each) and day of century (0..36524).
CENTURY_EAF = AffineTransform(a=4, b=3, d=146_097)

# Reference form of the year split: (4*n + 3) // 1461 over day of century.
YEAR_EAF = AffineTransform(a=4, b=3, d=1_461)

# n // 1461 == 2939745*n >> 32 and n % 1461 == (2939745*n mod 2^32) // 2939745
# for all n in [0, 28825529). Applied to 4*N_C + 3, with the remainder
# further divided by 4 to land on a day of the year.
YEAR_RECIPROCAL = ReciprocalDivision(
    multiplier=2_939_745,
    offset=0,
    shift=32,
    bound=28_825_529,
    scale=4,
    name="year split",
)

# Reference form of the month split over the March-based day of year.
MONTH_EAF = AffineTransform(a=5, b=461, d=153)

# (5*n + 461) // 153 == (2141*n + 197913) >> 16 for all n in [0, 734).
MONTH_RECIPROCAL = ReciprocalDivision(
    multiplier=2_141,
    offset=197_913,
    shift=16,
    bound=734,
    name="month split",
)
