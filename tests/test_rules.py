# tests/test_rules.py

import pytest

from eatcal.core.types import CivilDate, Month
from eatcal.engines.rules import ERA_DAYS, ERA_YEARS, days_in_month, is_leap
from eatcal.engines.span import COMPUTATIONAL, UNIX, WINDOWS, day_of_year, days_since


def test_is_leap_known_years():
    assert is_leap(2095) is False
    assert is_leap(2096) is True
    assert is_leap(2100) is False
    assert is_leap(2400) is True
    assert is_leap(2000) is True
    assert is_leap(1900) is False


def test_is_leap_matches_textbook_rule_including_negative_years():
    """Proleptic years use floor-mod: year 0 and -400 are leap, -100 is not."""
    for y in range(-2000, 2401):
        expected = y % 4 == 0 and (y % 100 != 0 or y % 400 == 0)
        assert is_leap(y) == expected, y
    assert is_leap(0)
    assert is_leap(-4)
    assert not is_leap(-100)
    assert is_leap(-400)


def test_month_lengths():
    assert Month.JAN.days(False) == 31
    assert Month.FEB.days(True) == 29
    assert Month.FEB.days(False) == 28
    assert Month.MAR.days(False) == 31
    assert Month.APR.days(False) == 30
    assert Month.MAY.days(False) == 31
    assert Month.JUN.days(False) == 30
    assert Month.JUL.days(False) == 31
    assert Month.AUG.days(False) == 31
    assert Month.SEP.days(False) == 30
    assert Month.OCT.days(False) == 31
    assert Month.NOV.days(False) == 30
    assert Month.DEC.days(False) == 31


def test_month_lengths_sum_to_year_length():
    assert sum(m.days(False) for m in Month) == 365
    assert sum(m.days(True) for m in Month) == 366
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2023, Month.FEB) == 28


def test_era_constants():
    leap_years = sum(1 for y in range(ERA_YEARS) if is_leap(y))
    assert leap_years == 97
    assert ERA_DAYS == 365 * ERA_YEARS + leap_years


def test_day_of_year():
    assert day_of_year(CivilDate(2001, 1, 1)) == 0
    assert day_of_year(CivilDate(2001, 3, 1)) == 59
    assert day_of_year(CivilDate(2000, 3, 1)) == 60
    assert day_of_year(CivilDate(2000, 12, 31)) == 365


def test_days_since_spans():
    assert days_since(CivilDate(2000, 1, 1), CivilDate(2001, 1, 1)) == 366
    assert days_since(CivilDate(0, 1, 1), CivilDate(400, 1, 1)) == 146_097
    assert days_since(CivilDate(0, 1, 1), CivilDate(401, 1, 1)) == 146_097 + 366
    assert days_since(CivilDate(-32768, 1, 1), CivilDate(32768, 1, 1)) == 23_936_532


def test_days_since_is_antisymmetric():
    a = CivilDate(1969, 7, 20)
    b = CivilDate(-1234, 11, 30)
    assert days_since(a, b) == -days_since(b, a)
    assert days_since(a, a) == 0


def test_named_epochs():
    assert days_since(WINDOWS, UNIX) == 134_774
    assert days_since(COMPUTATIONAL, UNIX) == 719_468
    assert days_since(CivilDate(0, 1, 1), UNIX) == 719_528


@pytest.mark.parametrize("start,end", [
    (CivilDate(1970, 1, 1), CivilDate(1970, 3, 15)),
    (CivilDate(1600, 2, 29), CivilDate(2024, 12, 31)),
    (CivilDate(1, 1, 1), CivilDate(9999, 12, 31)),
])
def test_days_since_agrees_with_datetime(start, end):
    from datetime import date
    expected = date(end.year, end.month, end.day).toordinal() - date(start.year, start.month, start.day).toordinal()
    assert days_since(start, end) == expected
