"""
caljalali.engines.date
----------------------
PersianDate: an immutable solar Hijri calendar day.

The value holds (year, month, day-of-month) only. Day-of-year, weekday,
proleptic month and the day numbers are derived on demand through the
grand-cycle arithmetic in `caljalali.engines.julian`.
"""

from __future__ import annotations

import re
from datetime import date, timedelta
from typing import Any, Optional, Union, overload

from caljalali.core.errors import (
    DateParseError,
    InvalidDateError,
    UnsupportedFieldError,
    UnsupportedUnitError,
)
from caljalali.core.time import gregorian_epoch_day, gregorian_from_epoch_day
from caljalali.core.types import ChronoField, ChronoUnit, DayOfWeek, Period, ValueRange
from caljalali.digits import to_english
from . import julian
from .chronology import INSTANCE as CHRONOLOGY, PersianChronology
from .era import PersianEra
from .month import PersianMonth

MonthLike = Union[int, PersianMonth]

_DATE_RE = re.compile(r"^\s*(\d{1,4})[/-](\d{1,2})[/-](\d{1,2})\s*$")

_SUPPORTED_FIELDS = frozenset(f for f in ChronoField if f.is_date_based)
_SUPPORTED_UNITS = frozenset({
    ChronoUnit.DAYS,
    ChronoUnit.WEEKS,
    ChronoUnit.MONTHS,
    ChronoUnit.YEARS,
    ChronoUnit.DECADES,
    ChronoUnit.CENTURIES,
    ChronoUnit.MILLENNIA,
    ChronoUnit.ERAS,
})


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


class PersianDate:
    """
    A date in the solar Hijri (Persian, Jalali) calendar, such as 1396/08/06.

    Instances are validated on construction and never change afterwards;
    every arithmetic operation returns a new instance. Supported years are
    1..1999.

    >>> PersianDate.of(1396, 8, 6).to_julian_day()
    2458054
    >>> str(PersianDate.of_epoch_day(17468))
    '1396/08/07'
    """

    __slots__ = ("_year", "_month", "_day")

    MIN: "PersianDate"
    MAX: "PersianDate"

    def __init__(self, year: int, month: MonthLike, day_of_month: int) -> None:
        if isinstance(month, PersianMonth):
            month = month.value
        CHRONOLOGY.check_valid_value(year, ChronoField.YEAR)
        CHRONOLOGY.check_valid_value(month, ChronoField.MONTH_OF_YEAR)
        CHRONOLOGY.check_valid_value(day_of_month, ChronoField.DAY_OF_MONTH)
        leap_year = CHRONOLOGY.is_leap_year(year)
        max_days = PersianMonth.of(month).length(leap_year)
        if day_of_month > max_days:
            if month == 12 and day_of_month == 30 and not leap_year:
                raise InvalidDateError(f"Invalid date ESFAND 30, as {year} is not a leap year")
            raise InvalidDateError(f"Invalid date {PersianMonth.of(month).name} {day_of_month}")
        self._year = year
        self._month = month
        self._day = day_of_month

    # ---------------------------------------------------------
    # Factories
    # ---------------------------------------------------------

    @classmethod
    def of(cls, year: int, month: MonthLike, day_of_month: int) -> "PersianDate":
        """
        Obtain a date from year, month and day-of-month.

        `month` is 1..12 (1 = Farvardin) or a PersianMonth. Raises
        DateTimeRangeError for out-of-range fields and InvalidDateError when
        the day does not exist in that month (e.g. Esfand 30 of a common year).
        """
        return cls(year, month, day_of_month)

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> "PersianDate":
        return CHRONOLOGY.date_year_day(year, day_of_year)

    @classmethod
    def of_julian_day(cls, julian_day: int) -> "PersianDate":
        """
        Obtain the date of a day number (see `caljalali.engines.julian`).

        Raises NonPositiveJulianDayError when `julian_day` <= 0.
        """
        return cls(*julian.ymd_from_julian_day(julian_day))

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> "PersianDate":
        """Obtain the date `epoch_day` days after 1970-01-01 (Gregorian)."""
        return cls.of_julian_day(epoch_day + julian.EPOCH_DAY_OFFSET)

    @classmethod
    def from_gregorian_epoch_day(cls, epoch_day: int) -> "PersianDate":
        return cls.of_epoch_day(epoch_day)

    @classmethod
    def from_gregorian(cls, d: date) -> "PersianDate":
        return cls.of_epoch_day(gregorian_epoch_day(d))

    @classmethod
    def from_temporal(cls, temporal: Any) -> "PersianDate":
        return CHRONOLOGY.date_from(temporal)

    @classmethod
    def now(cls, epoch_day: int) -> "PersianDate":
        """Today's date, given the caller's current epoch day."""
        return CHRONOLOGY.date_now(epoch_day)

    @classmethod
    def parse(cls, text: str) -> "PersianDate":
        """
        Parse `YYYY/MM/DD` (or `YYYY-MM-DD`), with ASCII or Persian digits.

        Raises DateParseError for malformed text; well-formed text naming an
        invalid day raises the usual construction errors.
        """
        m = _DATE_RE.match(to_english(text))
        if m is None:
            raise DateParseError(f"Text {text!r} could not be parsed as YYYY/MM/DD")
        year, month, day = (int(g) for g in m.groups())
        return cls.of(year, month, day)

    # ---------------------------------------------------------
    # Fields
    # ---------------------------------------------------------

    @property
    def year(self) -> int:
        return self._year

    @property
    def month_value(self) -> int:
        return self._month

    @property
    def month(self) -> PersianMonth:
        return PersianMonth.of(self._month)

    @property
    def day_of_month(self) -> int:
        return self._day

    @property
    def day_of_year(self) -> int:
        return PersianMonth.of(self._month).days_to_first_of_month() + self._day

    @property
    def day_of_week(self) -> DayOfWeek:
        return DayOfWeek.of((self.to_julian_day() + 1) % 7 + 1)

    @property
    def proleptic_month(self) -> int:
        return self._year * 12 + self._month - 1

    @property
    def chronology(self) -> PersianChronology:
        return CHRONOLOGY

    @property
    def era(self) -> PersianEra:
        return PersianEra.AHS

    def is_leap_year(self) -> bool:
        return CHRONOLOGY.is_leap_year(self._year)

    def length_of_month(self) -> int:
        return self.month.length(self.is_leap_year())

    def length_of_year(self) -> int:
        return 366 if self.is_leap_year() else 365

    def is_supported(self, field: Union[ChronoField, ChronoUnit]) -> bool:
        if isinstance(field, ChronoField):
            return field in _SUPPORTED_FIELDS
        if isinstance(field, ChronoUnit):
            return field in _SUPPORTED_UNITS
        return False

    def range(self, field: ChronoField) -> ValueRange:
        """Valid values of `field` for this particular date's month and year."""
        if not self.is_supported(field):
            raise UnsupportedFieldError(f"Unsupported field: {field}")
        if field is ChronoField.DAY_OF_MONTH:
            return ValueRange.of(1, self.length_of_month())
        if field is ChronoField.DAY_OF_YEAR:
            return ValueRange.of(1, self.length_of_year())
        if field is ChronoField.ALIGNED_WEEK_OF_MONTH:
            # every month has at least 29 days, so always a fifth week
            return ValueRange.of(1, 5)
        return CHRONOLOGY.range(field)

    def get(self, field: ChronoField) -> int:
        """Value of a date field; UnsupportedFieldError for time-of-day fields."""
        if field is ChronoField.DAY_OF_WEEK:
            return self.day_of_week.value
        if field is ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH:
            return (self._day - 1) % 7 + 1
        if field is ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR:
            return (self.day_of_year - 1) % 7 + 1
        if field is ChronoField.DAY_OF_MONTH:
            return self._day
        if field is ChronoField.DAY_OF_YEAR:
            return self.day_of_year
        if field is ChronoField.EPOCH_DAY:
            return self.to_epoch_day()
        if field is ChronoField.ALIGNED_WEEK_OF_MONTH:
            return (self._day - 1) // 7 + 1
        if field is ChronoField.ALIGNED_WEEK_OF_YEAR:
            return (self.day_of_year - 1) // 7 + 1
        if field is ChronoField.MONTH_OF_YEAR:
            return self._month
        if field is ChronoField.PROLEPTIC_MONTH:
            return self.proleptic_month
        if field is ChronoField.YEAR_OF_ERA:
            return self._year if self._year >= 1 else 1 - self._year
        if field is ChronoField.YEAR:
            return self._year
        if field is ChronoField.ERA:
            return 1 if self._year >= 1 else 0
        raise UnsupportedFieldError(f"Unsupported field: {field}")

    get_long = get

    # ---------------------------------------------------------
    # Conversion
    # ---------------------------------------------------------

    def to_julian_day(self) -> int:
        return julian.to_julian_day(self._year, self._month, self._day)

    def to_epoch_day(self) -> int:
        return self.to_julian_day() - julian.EPOCH_DAY_OFFSET

    def to_gregorian(self) -> date:
        return gregorian_from_epoch_day(self.to_epoch_day())

    # ---------------------------------------------------------
    # Adjusters
    # ---------------------------------------------------------

    def with_day_of_month(self, day_of_month: int) -> "PersianDate":
        if day_of_month == self._day:
            return self
        return PersianDate.of(self._year, self._month, day_of_month)

    def with_day_of_year(self, day_of_year: int) -> "PersianDate":
        if day_of_year == self.day_of_year:
            return self
        return CHRONOLOGY.date_year_day(self._year, day_of_year)

    def with_month(self, month: MonthLike) -> "PersianDate":
        if isinstance(month, PersianMonth):
            month = month.value
        CHRONOLOGY.check_valid_value(month, ChronoField.MONTH_OF_YEAR)
        if month == self._month:
            return self
        return self._resolve_previous_valid(self._year, month, self._day)

    def with_year(self, year: int) -> "PersianDate":
        if year == self._year:
            return self
        return self._resolve_previous_valid(year, self._month, self._day)

    @staticmethod
    def _resolve_previous_valid(year: int, month: int, day: int) -> "PersianDate":
        """Build a date, pulling a day past the end of the month back to its last day."""
        CHRONOLOGY.check_valid_value(year, ChronoField.YEAR)
        max_days = PersianMonth.of(month).length(CHRONOLOGY.is_leap_year(year))
        return PersianDate.of(year, month, min(day, max_days))

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def plus_days(self, days: int) -> "PersianDate":
        """
        Add days, rolling months and years as needed.

        1396/12/29 plus one day is 1397/01/01.
        """
        if days == 0:
            return self
        return PersianDate.of_julian_day(self.to_julian_day() + days)

    def plus_weeks(self, weeks: int) -> "PersianDate":
        return self.plus_days(weeks * 7)

    def plus_months(self, months: int) -> "PersianDate":
        """
        Add months, keeping the day-of-month where possible.

        A day past the end of the target month resolves to its last day:
        1388/11/30 plus one month is 1388/12/29, since 1388 is a common year.
        """
        if months == 0:
            return self
        month_count = self._year * 12 + (self._month - 1) + months
        new_year, new_month = divmod(month_count, 12)
        return self._resolve_previous_valid(new_year, new_month + 1, self._day)

    def plus_years(self, years: int) -> "PersianDate":
        """
        Add years; 1387/12/30 (leap year) plus one year is 1388/12/29.
        """
        return self.plus_months(years * 12)

    def minus_days(self, days: int) -> "PersianDate":
        return self.plus_days(-days)

    def minus_weeks(self, weeks: int) -> "PersianDate":
        return self.plus_weeks(-weeks)

    def minus_months(self, months: int) -> "PersianDate":
        return self.plus_months(-months)

    def minus_years(self, years: int) -> "PersianDate":
        return self.plus_years(-years)

    def plus(self, amount: int, unit: ChronoUnit) -> "PersianDate":
        if unit is ChronoUnit.DAYS:
            return self.plus_days(amount)
        if unit is ChronoUnit.WEEKS:
            return self.plus_weeks(amount)
        if unit is ChronoUnit.MONTHS:
            return self.plus_months(amount)
        if unit is ChronoUnit.YEARS:
            return self.plus_years(amount)
        if unit is ChronoUnit.DECADES:
            return self.plus_years(amount * 10)
        if unit is ChronoUnit.CENTURIES:
            return self.plus_years(amount * 100)
        if unit is ChronoUnit.MILLENNIA:
            return self.plus_years(amount * 1000)
        raise UnsupportedUnitError(f"Unsupported unit: {unit}")

    def minus(self, amount: int, unit: ChronoUnit) -> "PersianDate":
        return self.plus(-amount, unit)

    def plus_period(self, period: Period) -> "PersianDate":
        return self.plus_months(period.to_total_months()).plus_days(period.days)

    # ---------------------------------------------------------
    # Differences
    # ---------------------------------------------------------

    @overload
    def until(self, end: Any) -> Period: ...

    @overload
    def until(self, end: Any, unit: ChronoUnit) -> int: ...

    def until(self, end: Any, unit: Optional[ChronoUnit] = None) -> Union[Period, int]:
        """
        Amount of time from this date (inclusive) to `end` (exclusive).

        Without `unit` the result is a Period of years, months and days whose
        components share one sign: complete months are removed first, then the
        remaining days, and the months are split into years of 12 months.
        From 1389/01/15 to 1390/03/18 is 1 year, 2 months and 3 days.

        With `unit` the result is the number of complete units between the
        two dates; from 1396/06/15 to 1396/08/14 is one month, one day short
        of two. `end` is converted with `PersianChronology.date_from`.
        """
        end_date = CHRONOLOGY.date_from(end)
        if unit is None:
            return self._period_until(end_date)
        if unit is ChronoUnit.DAYS:
            return self._days_until(end_date)
        if unit is ChronoUnit.WEEKS:
            return _trunc_div(self._days_until(end_date), 7)
        if unit is ChronoUnit.MONTHS:
            return self._months_until(end_date)
        if unit is ChronoUnit.YEARS:
            return _trunc_div(self._months_until(end_date), 12)
        if unit is ChronoUnit.DECADES:
            return _trunc_div(self._months_until(end_date), 120)
        if unit is ChronoUnit.CENTURIES:
            return _trunc_div(self._months_until(end_date), 1200)
        if unit is ChronoUnit.MILLENNIA:
            return _trunc_div(self._months_until(end_date), 12000)
        if unit is ChronoUnit.ERAS:
            return end_date.get(ChronoField.ERA) - self.get(ChronoField.ERA)
        raise UnsupportedUnitError(f"Unsupported unit: {unit}")

    def _days_until(self, end: "PersianDate") -> int:
        return end.to_epoch_day() - self.to_epoch_day()

    def _months_until(self, end: "PersianDate") -> int:
        packed1 = self.proleptic_month * 32 + self._day
        packed2 = end.proleptic_month * 32 + end._day
        return _trunc_div(packed2 - packed1, 32)

    def _period_until(self, end: "PersianDate") -> Period:
        total_months = end.proleptic_month - self.proleptic_month
        days = end._day - self._day
        if total_months > 0 and days < 0:
            total_months -= 1
            calc_date = self.plus_months(total_months)
            days = end.to_epoch_day() - calc_date.to_epoch_day()
        elif total_months < 0 and days > 0:
            total_months += 1
            days -= end.length_of_month()
        years = _trunc_div(total_months, 12)
        months = total_months - years * 12
        return Period(years, months, days)

    # ---------------------------------------------------------
    # Comparison, hashing, formatting
    # ---------------------------------------------------------

    def _key(self):
        return (self._year, self._month, self._day)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PersianDate):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PersianDate):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, PersianDate):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, PersianDate):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, PersianDate):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def is_after(self, other: "PersianDate") -> bool:
        return self > other

    def is_before(self, other: "PersianDate") -> bool:
        return self < other

    def __add__(self, other: object) -> "PersianDate":
        if isinstance(other, timedelta):
            return self.plus_days(other.days)
        if isinstance(other, Period):
            return self.plus_period(other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: object) -> Any:
        if isinstance(other, timedelta):
            return self.plus_days(-other.days)
        if isinstance(other, Period):
            return self.plus_period(other.negated())
        if isinstance(other, PersianDate):
            return other.until(self)
        return NotImplemented

    def __str__(self) -> str:
        return f"{self._year:04d}/{self._month:02d}/{self._day:02d}"

    def __repr__(self) -> str:
        return f"PersianDate({self._year}, {self._month}, {self._day})"

    def isoformat(self) -> str:
        return f"{self._year:04d}-{self._month:02d}-{self._day:02d}"


PersianDate.MIN = PersianDate.of(CHRONOLOGY.range(ChronoField.YEAR).minimum, 1, 1)
PersianDate.MAX = PersianDate.of(CHRONOLOGY.range(ChronoField.YEAR).maximum, 12, 29)
