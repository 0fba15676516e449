"""
caljalali.engines.month
-----------------------
The twelve months of the solar Hijri year.

The first six months have 31 days, the next five have 30, and Esfand has
29 days in a common year and 30 in a leap year.
"""

from __future__ import annotations

from enum import Enum

from caljalali.core.errors import DateTimeRangeError


class PersianMonth(Enum):
    """
    A month-of-year, such as Mehr.

    Use `value` (1..12) for the numeric position, never the member index.
    """
    FARVARDIN = (1, "فروردین")
    ORDIBEHESHT = (2, "اردیبهشت")
    KHORDAD = (3, "خرداد")
    TIR = (4, "تیر")
    MORDAD = (5, "مرداد")
    SHAHRIVAR = (6, "شهریور")
    MEHR = (7, "مهر")
    ABAN = (8, "آبان")
    AZAR = (9, "آذر")
    DEY = (10, "دی")
    BAHMAN = (11, "بهمن")
    ESFAND = (12, "اسفند")

    def __new__(cls, position: int, persian_name: str) -> "PersianMonth":
        obj = object.__new__(cls)
        obj._value_ = position
        obj.persian_name = persian_name
        return obj

    @staticmethod
    def of(month: int) -> "PersianMonth":
        if not 1 <= month <= 12:
            raise DateTimeRangeError(f"month {month} is out of valid range [1, 12]")
        return _BY_POSITION[month - 1]

    def length(self, leap_year: bool) -> int:
        if self.value < 7:
            return 31
        if self.value != 12:
            return 30
        return 30 if leap_year else 29

    def max_length(self) -> int:
        return self.length(True)

    def min_length(self) -> int:
        return self.length(False)

    def days_to_first_of_month(self) -> int:
        """Days elapsed from the first of the year to the first of this month."""
        if self.value <= 6:
            return 31 * (self.value - 1)
        return 186 + 30 * (self.value - 7)

    def plus(self, months: int) -> "PersianMonth":
        """Month `months` after this one, rolling over Esfand -> Farvardin."""
        return _BY_POSITION[(self.value - 1 + months) % 12]

    def minus(self, months: int) -> "PersianMonth":
        return self.plus(-months)

    def first_month_of_quarter(self) -> "PersianMonth":
        return _BY_POSITION[((self.value - 1) // 3) * 3]


_BY_POSITION = tuple(PersianMonth)
