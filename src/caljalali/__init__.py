"""caljalali public API.

Keep this surface small: users should mostly interact with the date type and
the functions re-exported here.
"""

# Register the standard day attributes on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    now,
    of,
    parse,
    from_gregorian,
    from_gregorian_epoch_day,
    to_gregorian,
    is_leap_year,
    leap_years,
    day_info,
    explain,
    between,
    days_in_month,
    first_day_of_month,
    last_day_of_month,
    month_bounds,
    new_year_day,
    month_calendar,
)
from .attributes.registry import register_attribute, list_attributes
from .core.errors import (
    CaljalaliError,
    DateTimeError,
    DateTimeRangeError,
    InvalidDateError,
    InvalidEraError,
    UnsupportedFieldError,
    UnsupportedUnitError,
    DateParseError,
    NonPositiveJulianDayError,
)
from .core.types import ChronoField, ChronoUnit, DayInfo, DayOfWeek, Period, ValueRange
from .engines.chronology import INSTANCE as CHRONOLOGY, PersianChronology
from .engines.date import PersianDate
from .engines.era import PersianEra
from .engines.month import PersianMonth

__all__ = [
    "now",
    "of",
    "parse",
    "from_gregorian",
    "from_gregorian_epoch_day",
    "to_gregorian",
    "is_leap_year",
    "leap_years",
    "day_info",
    "explain",
    "between",
    "days_in_month",
    "first_day_of_month",
    "last_day_of_month",
    "month_bounds",
    "new_year_day",
    "month_calendar",
    "register_attribute",
    "list_attributes",
    "CaljalaliError",
    "DateTimeError",
    "DateTimeRangeError",
    "InvalidDateError",
    "InvalidEraError",
    "UnsupportedFieldError",
    "UnsupportedUnitError",
    "DateParseError",
    "NonPositiveJulianDayError",
    "ChronoField",
    "ChronoUnit",
    "DayInfo",
    "DayOfWeek",
    "Period",
    "ValueRange",
    "CHRONOLOGY",
    "PersianChronology",
    "PersianDate",
    "PersianEra",
    "PersianMonth",
]
