from __future__ import annotations
from typing import Any, Dict

from ..core.types import ChronoField, DayInfo, DayOfWeek
from .registry import register_attribute

# Persian week starts on Saturday
WEEKDAY_NAMES: Dict[DayOfWeek, str] = {
    DayOfWeek.SATURDAY: "شنبه",
    DayOfWeek.SUNDAY: "یکشنبه",
    DayOfWeek.MONDAY: "دوشنبه",
    DayOfWeek.TUESDAY: "سه‌شنبه",
    DayOfWeek.WEDNESDAY: "چهارشنبه",
    DayOfWeek.THURSDAY: "پنجشنبه",
    DayOfWeek.FRIDAY: "جمعه",
}

def persian_weekday_number(dow: DayOfWeek) -> int:
    """1 = Saturday ... 7 = Friday."""
    return (dow.value + 1) % 7 + 1

def weekday(info: DayInfo) -> Dict[str, Any]:
    return {
        "weekday_name": WEEKDAY_NAMES[info.weekday],
        "weekday_number": persian_weekday_number(info.weekday),
    }

def month_name(info: DayInfo) -> Dict[str, Any]:
    m = info.persian.month
    return {"month_name": m.persian_name, "month_label": m.name.capitalize()}

def year_day(info: DayInfo) -> Dict[str, Any]:
    p = info.persian
    return {"day_of_year": p.day_of_year, "days_left": p.length_of_year() - p.day_of_year}

def aligned_week(info: DayInfo) -> Dict[str, Any]:
    p = info.persian
    return {
        "week_of_month": p.get(ChronoField.ALIGNED_WEEK_OF_MONTH),
        "week_of_year": p.get(ChronoField.ALIGNED_WEEK_OF_YEAR),
    }

register_attribute("weekday", weekday)
register_attribute("month_name", month_name)
register_attribute("year_day", year_day)
register_attribute("aligned_week", aligned_week)
