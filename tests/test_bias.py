# tests/test_bias.py

import pytest

from eatcal.core.errors import ConfigurationError
from eatcal.core.ints import I16, I32, I64, U16, U32, U64, IntType
from eatcal.core.types import CivilDate
from eatcal.engines.bias import check_overflow, epoch_day_bounds, solve_bias, solve_shift
from eatcal.engines.gregorian import gregorian
from eatcal.engines.span import UNIX, WINDOWS


def test_solve_shift_values():
    assert solve_shift(I16, UNIX) == 82
    assert solve_shift(I32, UNIX) == 5_368_710
    assert solve_shift(I64, UNIX) == 23_058_430_092_136_940


@pytest.mark.parametrize("year_type,working", [
    (I16, "u32"),
    (I32, "u64"),
    (I64, "u128"),
    (U16, "u32"),
    (U32, "u64"),
    (U64, "u128"),
])
def test_working_width_is_smallest_power_of_two(year_type, working):
    for epoch in (UNIX, WINDOWS):
        b = solve_bias(year_type, epoch)
        assert b.working_type.name == working
        assert b.epoch_days_type.bits <= b.working_type.bits


def test_bias_constants_unix_i16():
    b = solve_bias(I16, UNIX)
    assert b.L == 400 * 82
    assert b.K == 719_468 + 146_097 * 82
    assert b.min_epoch_day + b.K >= 0
    assert 4 * (b.max_epoch_day + b.K) + 3 <= b.working_type.max


def test_epoch_day_bounds_track_the_epoch():
    lo_unix, hi_unix = epoch_day_bounds(I16, UNIX)
    lo_win, hi_win = epoch_day_bounds(I16, WINDOWS)
    assert lo_win - lo_unix == 134_774
    assert hi_win - hi_unix == 134_774


def test_unsigned_years_have_negative_epoch_days_before_epoch():
    b = solve_bias(U32, UNIX)
    assert b.min_epoch_day == -719_528
    assert b.epoch_days_type.signed


def test_year_type_entirely_before_epoch():
    b = solve_bias(IntType.signed_(8), UNIX)
    assert b.max_epoch_day < 0
    assert b.shift == 1


def test_too_narrow_working_width_is_rejected():
    with pytest.raises(ConfigurationError):
        solve_bias(I16, UNIX, working_bits=16)
    with pytest.raises(ConfigurationError):
        gregorian(I32, working_bits=32)


def test_too_small_shift_is_rejected():
    with pytest.raises(ConfigurationError):
        gregorian(I16, shift=0)
    with pytest.raises(ConfigurationError):
        gregorian(U16, shift=0)
    with pytest.raises(ConfigurationError):
        gregorian(I16, shift=-1)


def test_larger_shift_is_accepted_and_equivalent():
    loose = gregorian(I16, shift=100)
    std = gregorian(I16)
    assert loose.bias.L == 40_000
    for d in (loose.min_epoch_day, -1, 0, 1, 11_016, loose.max_epoch_day):
        assert loose.from_epoch(d) == std.from_epoch(d)


def test_check_overflow_day_path():
    b = solve_bias(I16, UNIX)
    with pytest.raises(ConfigurationError):
        check_overflow(
            year_type=I16,
            working_type=b.working_type,
            K=0,
            L=b.L,
            min_epoch_day=b.min_epoch_day,
            max_epoch_day=b.max_epoch_day,
        )


def test_info_is_plain_data():
    info = solve_bias(I16, CivilDate(2000, 1, 1)).info()
    assert info["epoch"] == "2000-01-01"
    assert info["year_type"] == "i16"
    assert info["working_type"] == "u32"
