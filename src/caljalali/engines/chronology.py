"""
caljalali.engines.chronology
----------------------------
Calendar-wide rules of the solar Hijri calendar: the field-range table, the
leap-year predicate, era lookup and the date factories.

The chronology holds no state beyond constant tables, so a single shared
instance (`INSTANCE`) serves every caller.
"""

from __future__ import annotations

from datetime import date
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, List, Mapping

from caljalali.core.errors import DateTimeError, DateTimeRangeError
from caljalali.core.time import gregorian_epoch_day
from caljalali.core.types import ChronoField, ValueRange
from . import julian
from .era import PersianEra

if TYPE_CHECKING:
    from .date import PersianDate

MIN_YEAR = 1
MAX_YEAR = 1999

_RANGES: Mapping[ChronoField, ValueRange] = MappingProxyType({
    ChronoField.DAY_OF_MONTH: ValueRange.of(1, 1, 29, 31),
    ChronoField.DAY_OF_YEAR: ValueRange.of(1, 1, 365, 366),
    ChronoField.ALIGNED_WEEK_OF_MONTH: ValueRange.of(1, 5),
    ChronoField.YEAR: ValueRange.of(MIN_YEAR, MAX_YEAR),
    ChronoField.YEAR_OF_ERA: ValueRange.of(MIN_YEAR, MAX_YEAR),
    ChronoField.ERA: ValueRange.of(1, 1),
})


class PersianChronology:
    __slots__ = ()

    @property
    def id(self) -> str:
        return "Persian"

    @property
    def calendar_type(self) -> str:
        return "persian"

    # ---------------------------------------------------------
    # Validation
    # ---------------------------------------------------------

    def range(self, field: ChronoField) -> ValueRange:
        if not isinstance(field, ChronoField):
            raise DateTimeError(f"Parameter 'field' is not supported: {field!r}")
        return _RANGES.get(field, field.range())

    def check_valid_value(self, value: int, field: ChronoField) -> int:
        return self.range(field).check_valid_value(value, str(field))

    def check_day_of_year(self, year: int, day_of_year: int) -> None:
        self.check_valid_value(year, ChronoField.YEAR)
        max_day_of_year = 366 if self.is_leap_year(year) else 365
        if not 1 <= day_of_year <= max_day_of_year:
            raise DateTimeRangeError(f"Invalid value for dayOfYear: {day_of_year}")

    def is_leap_year(self, year: int) -> bool:
        self.check_valid_value(year, ChronoField.YEAR)
        return julian.is_leap(year)

    # ---------------------------------------------------------
    # Eras
    # ---------------------------------------------------------

    def era_of(self, era_value: int) -> PersianEra:
        return PersianEra.of(era_value)

    def eras(self) -> List[PersianEra]:
        return list(PersianEra)

    def proleptic_year(self, era: Any, year_of_era: int) -> int:
        if not isinstance(era, PersianEra):
            raise TypeError("Era must be PersianEra")
        return year_of_era

    # ---------------------------------------------------------
    # Factories
    # ---------------------------------------------------------

    def date(self, year: int, month: int, day_of_month: int) -> "PersianDate":
        from .date import PersianDate
        return PersianDate.of(year, month, day_of_month)

    def date_year_day(self, year: int, day_of_year: int) -> "PersianDate":
        from .date import PersianDate
        self.check_day_of_year(year, day_of_year)
        return PersianDate.of(year, 1, 1).plus_days(day_of_year - 1)

    def date_epoch_day(self, epoch_day: int) -> "PersianDate":
        from .date import PersianDate
        return PersianDate.of_epoch_day(epoch_day)

    def date_from(self, temporal: Any) -> "PersianDate":
        """
        Convert any date-like object.

        Accepts a PersianDate (returned unchanged), a Gregorian `datetime.date`
        (a `datetime` contributes its date part), or any object with a
        `to_epoch_day()` method.
        """
        from .date import PersianDate
        if isinstance(temporal, PersianDate):
            return temporal
        if isinstance(temporal, date):
            return PersianDate.of_epoch_day(gregorian_epoch_day(temporal))
        to_epoch_day = getattr(temporal, "to_epoch_day", None)
        if callable(to_epoch_day):
            return PersianDate.of_epoch_day(int(to_epoch_day()))
        raise DateTimeError(f"Unable to obtain PersianDate from {type(temporal).__name__}")

    def date_now(self, epoch_day: int) -> "PersianDate":
        return self.date_epoch_day(epoch_day)

    def __repr__(self) -> str:
        return "PersianChronology()"


INSTANCE = PersianChronology()
