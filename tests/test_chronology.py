# tests/test_chronology.py

from datetime import date, datetime

import pytest

from caljalali import (
    CHRONOLOGY,
    ChronoField,
    DateTimeError,
    DateTimeRangeError,
    InvalidEraError,
    PersianDate,
    PersianEra,
    ValueRange,
)


def test_singleton_identity():
    assert PersianDate.of(1396, 8, 6).chronology is CHRONOLOGY
    assert CHRONOLOGY.id == "Persian"
    assert CHRONOLOGY.calendar_type == "persian"


def test_range_table():
    assert CHRONOLOGY.range(ChronoField.YEAR) == ValueRange.of(1, 1999)
    assert CHRONOLOGY.range(ChronoField.YEAR_OF_ERA) == ValueRange.of(1, 1999)
    assert CHRONOLOGY.range(ChronoField.ERA) == ValueRange.of(1, 1)
    assert CHRONOLOGY.range(ChronoField.DAY_OF_MONTH) == ValueRange(1, 1, 29, 31)
    assert CHRONOLOGY.range(ChronoField.DAY_OF_YEAR) == ValueRange(1, 1, 365, 366)
    assert CHRONOLOGY.range(ChronoField.ALIGNED_WEEK_OF_MONTH) == ValueRange.of(1, 5)
    # not in the table: generic default
    assert CHRONOLOGY.range(ChronoField.DAY_OF_WEEK) == ValueRange.of(1, 7)
    assert CHRONOLOGY.range(ChronoField.MONTH_OF_YEAR) == ChronoField.MONTH_OF_YEAR.range()


def test_range_rejects_non_field():
    with pytest.raises(DateTimeError):
        CHRONOLOGY.range("year")


def test_value_range_str():
    assert str(ValueRange.of(1, 29, 31)) == "1 - 29/31"
    assert str(ValueRange.of(1, 1999)) == "1 - 1999"


@pytest.mark.parametrize("year", [0, 2000, -5])
def test_check_valid_value_year(year):
    with pytest.raises(DateTimeRangeError):
        CHRONOLOGY.check_valid_value(year, ChronoField.YEAR)


def test_check_valid_value_passes_through():
    assert CHRONOLOGY.check_valid_value(1396, ChronoField.YEAR) == 1396


def test_leap_years():
    assert CHRONOLOGY.is_leap_year(1395) is True
    assert CHRONOLOGY.is_leap_year(1396) is False
    assert CHRONOLOGY.is_leap_year(1387) is True
    assert CHRONOLOGY.is_leap_year(1388) is False
    # the arithmetic rule puts the leap year after 1399 at 1404, not 1403
    assert CHRONOLOGY.is_leap_year(1399) is True
    assert CHRONOLOGY.is_leap_year(1403) is False
    assert CHRONOLOGY.is_leap_year(1404) is True


def test_leap_year_outside_range():
    with pytest.raises(DateTimeRangeError):
        CHRONOLOGY.is_leap_year(2000)


def test_check_day_of_year():
    CHRONOLOGY.check_day_of_year(1395, 366)
    CHRONOLOGY.check_day_of_year(1396, 365)
    with pytest.raises(DateTimeRangeError):
        CHRONOLOGY.check_day_of_year(1396, 366)
    with pytest.raises(DateTimeRangeError):
        CHRONOLOGY.check_day_of_year(1396, 0)


def test_date_factories():
    assert CHRONOLOGY.date(1396, 8, 6) == PersianDate.of(1396, 8, 6)
    assert CHRONOLOGY.date_year_day(1396, 222) == PersianDate.of(1396, 8, 6)
    assert CHRONOLOGY.date_year_day(1395, 366) == PersianDate.of(1395, 12, 30)
    assert CHRONOLOGY.date_year_day(1396, 1) == PersianDate.of(1396, 1, 1)
    assert CHRONOLOGY.date_epoch_day(17468) == PersianDate.of(1396, 8, 7)


def test_date_from_temporals():
    p = PersianDate.of(1396, 8, 6)
    assert CHRONOLOGY.date_from(p) is p
    assert CHRONOLOGY.date_from(date(2017, 10, 28)) == p
    assert CHRONOLOGY.date_from(datetime(2017, 10, 28, 23, 59)) == p

    class EpochDayed:
        def to_epoch_day(self):
            return 17467

    assert CHRONOLOGY.date_from(EpochDayed()) == p


def test_date_from_unknown():
    with pytest.raises(DateTimeError):
        CHRONOLOGY.date_from(object())


def test_eras():
    assert CHRONOLOGY.eras() == [PersianEra.AHS]
    assert CHRONOLOGY.era_of(1) is PersianEra.AHS
    assert PersianEra.of(1) is PersianEra.AHS
    assert PersianEra.AHS.value == 1
    with pytest.raises(InvalidEraError):
        CHRONOLOGY.era_of(0)
    with pytest.raises(InvalidEraError):
        PersianEra.of(2)


def test_era_range():
    assert PersianEra.AHS.range(ChronoField.ERA) == ValueRange.of(1, 1)
    assert PersianEra.AHS.range(ChronoField.YEAR) == ChronoField.YEAR.range()


def test_proleptic_year():
    assert CHRONOLOGY.proleptic_year(PersianEra.AHS, 1396) == 1396
    with pytest.raises(TypeError):
        CHRONOLOGY.proleptic_year("AHS", 1396)
