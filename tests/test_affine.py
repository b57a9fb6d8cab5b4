# tests/test_affine.py

import random
from dataclasses import replace

import pytest

from eatcal.core.errors import AffineBoundError, ConfigurationError
from eatcal.core.ints import I16
from eatcal.engines import gregorian as gregorian_engine
from eatcal.engines.affine import (
    CENTURY_EAF,
    MONTH_EAF,
    MONTH_RECIPROCAL,
    YEAR_EAF,
    YEAR_RECIPROCAL,
    AffineTransform,
)


def test_century_split():
    # 0000-03-01 is day 0 of century 0; the first century has 36524 days
    # because year 100 is not a leap year.
    assert CENTURY_EAF(0) == (0, 0)
    assert CENTURY_EAF(36_523) == (0, 36_523)
    assert CENTURY_EAF(36_524) == (1, 0)
    # A full era is four centuries; the last day of an era ends century 3.
    assert CENTURY_EAF(146_096) == (3, 36_524)
    assert CENTURY_EAF(146_097) == (4, 0)


def test_year_reciprocal_matches_reference_over_a_century():
    for n_c in range(36_525):
        assert YEAR_RECIPROCAL(4 * n_c + 3) == YEAR_EAF(n_c), n_c


def test_year_reciprocal_sampled_up_to_bound():
    plain = AffineTransform(1, 0, 1_461)
    rng = random.Random(42)
    samples = [rng.randrange(YEAR_RECIPROCAL.bound) for _ in range(20_000)]
    samples += [YEAR_RECIPROCAL.bound - 1 - i for i in range(2_000)]
    for n in samples:
        q, r = plain(n)
        assert YEAR_RECIPROCAL(n) == (q, r // 4), n


def test_month_reciprocal_matches_reference_over_a_year():
    for n in range(366):
        assert MONTH_RECIPROCAL(n) == MONTH_EAF(n), n


def test_month_quotient_bound_is_tight():
    def recip_q(n):
        return (MONTH_RECIPROCAL.multiplier * n + MONTH_RECIPROCAL.offset) >> MONTH_RECIPROCAL.shift

    for n in range(MONTH_RECIPROCAL.bound):
        assert recip_q(n) == MONTH_EAF(n)[0], n
    n = MONTH_RECIPROCAL.bound
    assert recip_q(n) != MONTH_EAF(n)[0]


def test_month_split_boundaries():
    # March 1, March 31, April 1, last day of January, last day of February
    assert MONTH_RECIPROCAL(0) == (3, 0)
    assert MONTH_RECIPROCAL(30) == (3, 30)
    assert MONTH_RECIPROCAL(31) == (4, 0)
    assert MONTH_RECIPROCAL(305) == (12, 30)
    assert MONTH_RECIPROCAL(306) == (13, 0)
    assert MONTH_RECIPROCAL(365) == (14, 28)


def test_reciprocal_check_rejects_inputs_beyond_bound():
    MONTH_RECIPROCAL.check(MONTH_RECIPROCAL.bound - 1)
    with pytest.raises(AffineBoundError):
        MONTH_RECIPROCAL.check(MONTH_RECIPROCAL.bound)
    with pytest.raises(AffineBoundError):
        YEAR_RECIPROCAL.check(-1)
    assert issubclass(AffineBoundError, ConfigurationError)


def test_bound_violation_surfaces_when_building_a_calendar(monkeypatch):
    short = replace(MONTH_RECIPROCAL, bound=300)
    monkeypatch.setattr(gregorian_engine, "MONTH_RECIPROCAL", short)
    with pytest.raises(AffineBoundError):
        gregorian_engine.gregorian(I16)


def test_max_product_fits_declared_widths():
    assert YEAR_RECIPROCAL.max_product < 1 << 64
    assert MONTH_RECIPROCAL.max_product < 1 << 32


def test_affine_transform_validates():
    with pytest.raises(ValueError):
        AffineTransform(0, 1, 3)
