from __future__ import annotations

from enum import Enum

from caljalali.core.errors import InvalidEraError
from caljalali.core.types import ChronoField, ValueRange


class PersianEra(Enum):
    """
    The only era of the solar Hijri calendar: Anno Hegirae Solari.

    There is no era before year 1, so the proleptic year and the year-of-era
    are always the same number.
    """
    AHS = 1

    @staticmethod
    def of(era: int) -> "PersianEra":
        if era == 1:
            return PersianEra.AHS
        raise InvalidEraError(f"Invalid era: {era}")

    def range(self, field: ChronoField) -> ValueRange:
        # the generic ERA range is 0..1; this calendar has a single era
        if field is ChronoField.ERA:
            return ValueRange.of(1, 1)
        return field.range()
