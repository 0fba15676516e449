"""
caljalali.engines.julian
------------------------
Exact integer conversion between solar Hijri dates and day numbers.

This is the closed-form 2820-year grand-cycle arithmetic: within a grand
cycle the leap years are placed by the ratio 683/2820 through the
`(epyear * 682 - 110) // 2816` term, so no year-by-year search is needed.

Every division is a floor division, which keeps the formulas valid for
years before 474 where the cycle offset is negative.

"Julian day" here counts from the same origin as the astronomical JD at
the start (midnight) of the day, i.e. one less than the civil JDN:
1396/08/06 (2017-10-28) is 2458054.
"""

from __future__ import annotations

import math
from typing import Tuple

from caljalali.core.time import is_between, require_positive
from .month import PersianMonth

GRAND_CYCLE_YEARS = 2820
GRAND_CYCLE_DAYS = 1029983
GRAND_CYCLE_LEAPS = 683

# day number of 1/1/1 and 475/1/1 (start of the grand cycle used as origin)
EPOCH_OFFSET = 1948319
CYCLE_ORIGIN = 2121445

# year 474 spans [2121079, 2121444]; it ends the grand cycle preceding the origin
YEAR_474_FIRST = 2121079
YEAR_474_LAST = 2121444

# day number of 1970-01-01 on this scale
EPOCH_DAY_OFFSET = 2440587


def to_julian_day(year: int, month: int, day: int) -> int:
    """Day number of (year, month, day). No range checks."""
    epbase = year - 474
    epyear = 474 + epbase % GRAND_CYCLE_YEARS
    return (
        day
        + PersianMonth.of(month).days_to_first_of_month()
        + (epyear * 682 - 110) // 2816
        + (epyear - 1) * 365
        + (epbase // GRAND_CYCLE_YEARS) * GRAND_CYCLE_DAYS
        + EPOCH_OFFSET
    )

def year_from_julian_day(jd: int) -> int:
    depoch = jd - CYCLE_ORIGIN
    cycle = depoch // GRAND_CYCLE_DAYS
    cyear = depoch % GRAND_CYCLE_DAYS
    if cyear == GRAND_CYCLE_DAYS - 1:
        ycycle = GRAND_CYCLE_YEARS
    else:
        aux1, aux2 = divmod(cyear, 366)
        ycycle = (2134 * aux1 + 2816 * aux2 + 2815) // 1028522 + aux1
        if ycycle >= 0:
            ycycle += 1
    if is_between(jd, YEAR_474_FIRST, YEAR_474_LAST):
        return 474
    return ycycle + GRAND_CYCLE_YEARS * cycle + 474

def ymd_from_julian_day(jd: int) -> Tuple[int, int, int]:
    """Inverse of to_julian_day for jd > 0."""
    require_positive(jd, "julian_day")
    year = year_from_julian_day(jd)
    year_day = jd - to_julian_day(year, 1, 1) + 1
    # real division and ceiling: months 1..6 have 31 days, 7..12 have 30
    month = math.ceil(year_day / 31 if year_day <= 186 else (year_day - 6) / 30)
    day = jd - to_julian_day(year, month, 1) + 1
    return year, month, day

def year_length(year: int) -> int:
    return to_julian_day(year + 1, 1, 1) - to_julian_day(year, 1, 1)

def is_leap(year: int) -> bool:
    """Leap test for any proleptic year, without the calendar's range limits."""
    return year_length(year) > 365
