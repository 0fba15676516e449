from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Any, Dict, Optional

from .errors import DateTimeError, DateTimeRangeError

if TYPE_CHECKING:
    from ..engines.date import PersianDate


@dataclass(frozen=True)
class ValueRange:
    """
    Bounds of a date field.

    The minimum and maximum are each a pair (smallest, largest) so that a field
    whose upper bound depends on context (day-of-month is 29..31) can say so.
    """
    min_smallest: int
    min_largest: int
    max_smallest: int
    max_largest: int

    @staticmethod
    def of(*bounds: int) -> "ValueRange":
        if len(bounds) == 2:
            lo, hi = bounds
            return ValueRange(lo, lo, hi, hi)
        if len(bounds) == 3:
            lo, hi_small, hi_large = bounds
            return ValueRange(lo, lo, hi_small, hi_large)
        if len(bounds) == 4:
            return ValueRange(*bounds)
        raise TypeError(f"ValueRange.of takes 2, 3 or 4 bounds, got {len(bounds)}")

    def __post_init__(self) -> None:
        if self.min_smallest > self.min_largest:
            raise ValueError("smallest minimum must be <= largest minimum")
        if self.max_smallest > self.max_largest:
            raise ValueError("smallest maximum must be <= largest maximum")
        if self.min_largest > self.max_largest:
            raise ValueError("minimum must be <= maximum")

    @property
    def minimum(self) -> int:
        return self.min_smallest

    @property
    def maximum(self) -> int:
        return self.max_largest

    def is_valid_value(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum

    def check_valid_value(self, value: int, label: str) -> int:
        if not self.is_valid_value(value):
            raise DateTimeRangeError(f"Invalid value for {label} (valid values {self}): {value}")
        return value

    def __str__(self) -> str:
        lo = str(self.min_smallest)
        if self.min_smallest != self.min_largest:
            lo += f"/{self.min_largest}"
        hi = str(self.max_smallest)
        if self.max_smallest != self.max_largest:
            hi += f"/{self.max_largest}"
        return f"{lo} - {hi}"


class ChronoField(Enum):
    """Date fields, each with the generic range used when a calendar does not narrow it."""

    DAY_OF_WEEK = ("DayOfWeek", ValueRange.of(1, 7))
    ALIGNED_DAY_OF_WEEK_IN_MONTH = ("AlignedDayOfWeekInMonth", ValueRange.of(1, 7))
    ALIGNED_DAY_OF_WEEK_IN_YEAR = ("AlignedDayOfWeekInYear", ValueRange.of(1, 7))
    DAY_OF_MONTH = ("DayOfMonth", ValueRange.of(1, 28, 31))
    DAY_OF_YEAR = ("DayOfYear", ValueRange.of(1, 365, 366))
    EPOCH_DAY = ("EpochDay", ValueRange.of(-365243219162, 365241780471))
    ALIGNED_WEEK_OF_MONTH = ("AlignedWeekOfMonth", ValueRange.of(1, 4, 5))
    ALIGNED_WEEK_OF_YEAR = ("AlignedWeekOfYear", ValueRange.of(1, 53))
    MONTH_OF_YEAR = ("MonthOfYear", ValueRange.of(1, 12))
    PROLEPTIC_MONTH = ("ProlepticMonth", ValueRange.of(-999999999 * 12, 999999999 * 12 + 11))
    YEAR_OF_ERA = ("YearOfEra", ValueRange.of(1, 999999999, 1000000000))
    YEAR = ("Year", ValueRange.of(-999999999, 999999999))
    ERA = ("Era", ValueRange.of(0, 1))
    # time-of-day fields exist so that date-only types can reject them
    HOUR_OF_DAY = ("HourOfDay", ValueRange.of(0, 23))
    MINUTE_OF_HOUR = ("MinuteOfHour", ValueRange.of(0, 59))
    SECOND_OF_MINUTE = ("SecondOfMinute", ValueRange.of(0, 59))

    def __init__(self, label: str, base_range: ValueRange) -> None:
        self.label = label
        self.base_range = base_range

    @property
    def is_date_based(self) -> bool:
        return self not in (ChronoField.HOUR_OF_DAY, ChronoField.MINUTE_OF_HOUR, ChronoField.SECOND_OF_MINUTE)

    def range(self) -> ValueRange:
        return self.base_range

    def __str__(self) -> str:
        return self.label


class ChronoUnit(Enum):
    """Units for date arithmetic and differences."""

    SECONDS = "Seconds"
    MINUTES = "Minutes"
    HOURS = "Hours"
    DAYS = "Days"
    WEEKS = "Weeks"
    MONTHS = "Months"
    YEARS = "Years"
    DECADES = "Decades"
    CENTURIES = "Centuries"
    MILLENNIA = "Millennia"
    ERAS = "Eras"
    FOREVER = "Forever"

    def __str__(self) -> str:
        return self.value


class DayOfWeek(IntEnum):
    """ISO weekday numbering: Monday = 1 ... Sunday = 7."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @staticmethod
    def of(value: int) -> "DayOfWeek":
        if not 1 <= value <= 7:
            raise DateTimeError(f"Invalid value for DayOfWeek: {value}")
        return DayOfWeek(value)

    def plus(self, days: int) -> "DayOfWeek":
        return DayOfWeek((self.value - 1 + days) % 7 + 1)


@dataclass(frozen=True)
class Period:
    """A calendar amount: years, months and days, all sharing one sign."""
    years: int = 0
    months: int = 0
    days: int = 0

    @property
    def is_zero(self) -> bool:
        return self.years == 0 and self.months == 0 and self.days == 0

    @property
    def is_negative(self) -> bool:
        return self.years < 0 or self.months < 0 or self.days < 0

    def to_total_months(self) -> int:
        return self.years * 12 + self.months

    def negated(self) -> "Period":
        return Period(-self.years, -self.months, -self.days)

    def __neg__(self) -> "Period":
        return self.negated()

    def __str__(self) -> str:
        if self.is_zero:
            return "P0D"
        out = "P"
        if self.years:
            out += f"{self.years}Y"
        if self.months:
            out += f"{self.months}M"
        if self.days:
            out += f"{self.days}D"
        return out


@dataclass(frozen=True)
class DayInfo:
    civil_date: date
    persian: "PersianDate"
    julian_day: int
    epoch_day: int
    weekday: DayOfWeek
    leap_year: bool
    attributes: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None
