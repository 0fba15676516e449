from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Union

from .attributes.registry import compute_attributes
from .core.time import from_jdn, gregorian_from_epoch_day, today_epoch_day
from .core.types import ChronoUnit, DayInfo, Period
from .engines import julian
from .engines.chronology import INSTANCE as CHRONOLOGY
from .engines.date import PersianDate

DateLike = Union[date, PersianDate]


def _persian(d: DateLike) -> PersianDate:
    return CHRONOLOGY.date_from(d)

def now(epoch_day: Optional[int] = None) -> PersianDate:
    """Today's Persian date; `epoch_day` overrides the system clock."""
    if epoch_day is None:
        epoch_day = today_epoch_day()
    return PersianDate.now(epoch_day)

def of(year: int, month: int, day: int) -> PersianDate:
    return PersianDate.of(year, month, day)

def parse(text: str) -> PersianDate:
    return PersianDate.parse(text)

def from_gregorian(d: date) -> PersianDate:
    return PersianDate.from_gregorian(d)

def from_gregorian_epoch_day(epoch_day: int) -> PersianDate:
    return PersianDate.from_gregorian_epoch_day(epoch_day)

def to_gregorian(p: PersianDate) -> date:
    return p.to_gregorian()

def is_leap_year(year: int) -> bool:
    return CHRONOLOGY.is_leap_year(year)

def leap_years(start: int, end: int) -> List[int]:
    """Leap years in [start, end], both within the supported range."""
    return [y for y in range(start, end + 1) if CHRONOLOGY.is_leap_year(y)]

def day_info(
    d: DateLike,
    *,
    attributes: Sequence[str] = (),
    debug: bool = False,
) -> DayInfo:
    p = _persian(d)
    jd = p.to_julian_day()
    info = DayInfo(
        civil_date=p.to_gregorian(),
        persian=p,
        julian_day=jd,
        epoch_day=p.to_epoch_day(),
        weekday=p.day_of_week,
        leap_year=p.is_leap_year(),
    )
    if debug:
        info = replace(info, debug=explain(p))
    if attributes:
        attrs = compute_attributes(info, attributes)
        info = replace(info, attributes=attrs)
    return info

def explain(d: DateLike) -> Dict[str, Any]:
    """Intermediate quantities of the grand-cycle conversion for one day."""
    p = _persian(d)
    epbase = p.year - 474
    jd = p.to_julian_day()
    depoch = jd - julian.CYCLE_ORIGIN
    return {
        "epbase": epbase,
        "epyear": 474 + epbase % julian.GRAND_CYCLE_YEARS,
        "grand_cycle": epbase // julian.GRAND_CYCLE_YEARS,
        "depoch": depoch,
        "cycle_day": depoch % julian.GRAND_CYCLE_DAYS,
        "julian_day": jd,
        "civil_jdn": jd + 1,
        "year_length": julian.year_length(p.year),
        "day_of_year": p.day_of_year,
    }

def between(start: DateLike, end: DateLike, unit: Optional[ChronoUnit] = None) -> Union[Period, int]:
    p = _persian(start)
    if unit is None:
        return p.until(end)
    return p.until(end, unit)

# ============================================================
# Month / year helpers
# ============================================================

def days_in_month(Y: int, M: int) -> int:
    return PersianDate.of(Y, M, 1).length_of_month()

def first_day_of_month(Y: int, M: int) -> PersianDate:
    return PersianDate.of(Y, M, 1)

def last_day_of_month(Y: int, M: int) -> PersianDate:
    first = PersianDate.of(Y, M, 1)
    return first.with_day_of_month(first.length_of_month())

def month_bounds(Y: int, M: int, *, as_date: bool = True) -> dict:
    first = first_day_of_month(Y, M)
    last = last_day_of_month(Y, M)
    out = {
        "Y": Y,
        "M": M,
        "days": last.day_of_month,
        "first_jd": first.to_julian_day(),
        "last_jd": last.to_julian_day(),
    }
    if as_date:
        out["first_date"] = first.to_gregorian()
        out["last_date"] = last.to_gregorian()
    return out

def new_year_day(Y: int, *, as_date: bool = True) -> dict:
    """Nowruz (1 Farvardin) of year Y."""
    p = PersianDate.of(Y, 1, 1)
    jd = p.to_julian_day()
    out = {"Y": Y, "jd": jd, "leap_year": p.is_leap_year(), "weekday": p.day_of_week}
    if as_date:
        out["date"] = from_jdn(jd + 1)
    return out

def month_calendar(Y: int, M: int) -> List[Dict[str, Any]]:
    """One row per day of the month, with its Gregorian date and weekday."""
    first = first_day_of_month(Y, M)
    rows = []
    for i in range(first.length_of_month()):
        p = first.plus_days(i)
        rows.append({
            "persian": p,
            "date": gregorian_from_epoch_day(p.to_epoch_day()),
            "weekday": p.day_of_week,
        })
    return rows
