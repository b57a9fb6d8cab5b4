"""
eatcal.core.ints
----------------
Fixed-width integer descriptions.

Python integers never overflow, so the widths the conversion engine relies on
are modelled explicitly: an IntType knows its bounds, and the bias solver
checks every intermediate value against the working width up front.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class IntType:
    signed: bool
    bits: int

    def __post_init__(self) -> None:
        if self.bits < 0:
            raise ValueError("bits must be non-negative")
        if self.signed and self.bits == 0:
            raise ValueError("a signed integer needs at least one bit")

    @staticmethod
    def signed_(bits: int) -> "IntType":
        return IntType(True, bits)

    @staticmethod
    def unsigned_(bits: int) -> "IntType":
        return IntType(False, bits)

    @property
    def name(self) -> str:
        return f"{'i' if self.signed else 'u'}{self.bits}"

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def contains(self, x: int) -> bool:
        return self.min <= x <= self.max

    def __str__(self) -> str:
        return self.name


I16 = IntType.signed_(16)
I32 = IntType.signed_(32)
I64 = IntType.signed_(64)
U16 = IntType.unsigned_(16)
U32 = IntType.unsigned_(32)
U64 = IntType.unsigned_(64)


def int_fitting_range(lo: int, hi: int) -> IntType:
    """Narrowest IntType holding every value in [lo, hi]; signed iff lo < 0."""
    if lo > hi:
        raise ValueError("empty range")
    if lo >= 0:
        return IntType(False, hi.bit_length())
    bits = max((-lo - 1).bit_length(), hi.bit_length() if hi > 0 else 0) + 1
    return IntType(True, bits)


def ceil_power_of_two(n: int) -> int:
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()
