# tests/test_month.py

import pytest

from caljalali import DateTimeRangeError, PersianMonth


def test_positions_are_a_bijection():
    assert [m.value for m in PersianMonth] == list(range(1, 13))
    for pos in range(1, 13):
        assert PersianMonth.of(pos).value == pos
    assert PersianMonth.of(1) is PersianMonth.FARVARDIN
    assert PersianMonth.of(12) is PersianMonth.ESFAND


@pytest.mark.parametrize("bad", [0, 13, -1])
def test_of_out_of_range(bad):
    with pytest.raises(DateTimeRangeError):
        PersianMonth.of(bad)


def test_lengths():
    for pos in range(1, 7):
        assert PersianMonth.of(pos).length(False) == 31
        assert PersianMonth.of(pos).length(True) == 31
    for pos in range(7, 12):
        assert PersianMonth.of(pos).length(False) == 30
        assert PersianMonth.of(pos).length(True) == 30
    assert PersianMonth.ESFAND.length(True) == 30
    assert PersianMonth.ESFAND.length(False) == 29
    assert PersianMonth.ESFAND.max_length() == 30
    assert PersianMonth.ESFAND.min_length() == 29


@pytest.mark.parametrize("leap", [False, True])
def test_length_matches_days_to_first_of_month(leap):
    """
    The day count between consecutive month starts equals the month length;
    the year end stands in for month 13.
    """
    year_length = 366 if leap else 365
    for pos in range(1, 13):
        start = PersianMonth.of(pos).days_to_first_of_month()
        nxt = PersianMonth.of(pos + 1).days_to_first_of_month() if pos < 12 else year_length
        assert nxt - start == PersianMonth.of(pos).length(leap)


def test_days_to_first_of_month_values():
    assert PersianMonth.FARVARDIN.days_to_first_of_month() == 0
    assert PersianMonth.SHAHRIVAR.days_to_first_of_month() == 155
    assert PersianMonth.MEHR.days_to_first_of_month() == 186
    assert PersianMonth.ABAN.days_to_first_of_month() == 216
    assert PersianMonth.ESFAND.days_to_first_of_month() == 336


def test_plus_minus_wrap():
    assert PersianMonth.ESFAND.plus(1) is PersianMonth.FARVARDIN
    assert PersianMonth.FARVARDIN.minus(1) is PersianMonth.ESFAND
    assert PersianMonth.MEHR.plus(24) is PersianMonth.MEHR
    assert PersianMonth.MEHR.plus(-19) is PersianMonth.ESFAND
    assert PersianMonth.ABAN.minus(-5) is PersianMonth.FARVARDIN
    for m in PersianMonth:
        for n in range(-30, 31):
            assert m.plus(n).minus(n) is m


def test_persian_names():
    assert PersianMonth.FARVARDIN.persian_name == "فروردین"
    assert PersianMonth.ABAN.persian_name == "آبان"
    assert PersianMonth.ESFAND.persian_name == "اسفند"


def test_first_month_of_quarter():
    assert PersianMonth.KHORDAD.first_month_of_quarter() is PersianMonth.FARVARDIN
    assert PersianMonth.MEHR.first_month_of_quarter() is PersianMonth.MEHR
    assert PersianMonth.ESFAND.first_month_of_quarter() is PersianMonth.DEY
