"""
Human-readable Persian renderings of moments: "3 روز پیش", "1396/08/06 - 10:15:00".

Moments are naive or aware `datetime` objects, or strings in `DEFAULT_FORMAT`.
A naive moment is read as UTC. Every moment is converted to `zone`
(Asia/Tehran unless given) before its date or clock time is taken.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from typing import List, Optional, Union
from zoneinfo import ZoneInfo

from .engines.date import PersianDate

DEFAULT_FORMAT = "%Y-%m-%d %H:%M:%S"
TEHRAN = ZoneInfo("Asia/Tehran")

JUST_NOW = "همین الان"
MOMENTS_AGO = "لحظاتی پیش"
AGO = "پیش"
LATER = "بعد"

TIMES = {
    "year": "سال",
    "month": "ماه",
    "week": "هفته",
    "day": "روز",
    "hour": "ساعت",
    "minute": "دقیقه",
    "second": "ثانیه",
}

Moment = Union[datetime, str, None]


def _parse(moment: Moment, fmt: str) -> Optional[datetime]:
    if moment is None:
        return None
    if isinstance(moment, datetime):
        return moment
    if not moment.strip():
        return None
    return datetime.strptime(moment.strip(), fmt)

def _localize(dt: datetime, zone: tzinfo) -> datetime:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(zone)

def _whole_days(earlier: datetime, later: datetime) -> PersianDate:
    """Persian date of `later`, stepped back a day when its clock is behind `earlier`'s."""
    d = later.date()
    if later.time() < earlier.time():
        d -= timedelta(days=1)
    return PersianDate.from_gregorian(d)

def period(
    moment: Moment,
    *,
    now: Optional[datetime] = None,
    short: bool = True,
    fmt: str = DEFAULT_FORMAT,
    zone: tzinfo = TEHRAN,
) -> str:
    """
    Distance from `moment` to `now` in Persian words.

    The calendar part (years, months, days) is the solar Hijri period between
    the two local dates, counting only whole elapsed days; hours, minutes and
    seconds come from the rest of the elapsed time. With `short` only the
    largest non-zero part is kept. `now` defaults to the current time.
    """
    dt = _parse(moment, fmt)
    if dt is None:
        return MOMENTS_AGO
    if now is None:
        now = datetime.now(timezone.utc)
    dt = _localize(dt, zone)
    now = _localize(now, zone)

    total_seconds = int((now - dt).total_seconds())
    if total_seconds == 0:
        return JUST_NOW

    earlier, later = (dt, now) if total_seconds > 0 else (now, dt)
    calendar = PersianDate.from_gregorian(earlier.date()).until(_whole_days(earlier, later))
    suffix = LATER if total_seconds < 0 else AGO

    secs = abs(total_seconds)
    parts = [
        (calendar.years, "year"),
        (calendar.months, "month"),
        (calendar.days, "day"),
        (secs // 3600 % 24, "hour"),
        (secs // 60 % 60, "minute"),
        (secs % 60, "second"),
    ]

    out: List[str] = []
    for amount, unit in parts:
        if amount == 0:
            continue
        out.append(f"{amount} {TIMES[unit]}")
        if short:
            break
    return f"{', '.join(out)} {suffix}"

def to_persian(
    moment: Moment,
    *,
    with_time: bool = False,
    fmt: str = DEFAULT_FORMAT,
    zone: tzinfo = TEHRAN,
) -> str:
    """The local Persian date of `moment` as YYYY/MM/DD, optionally with its clock time."""
    dt = _parse(moment, fmt)
    if dt is None:
        return ""
    local = _localize(dt, zone)
    p = PersianDate.from_gregorian(local.date())
    if with_time:
        return f"{p} - {local.time().replace(microsecond=0).isoformat()}"
    return str(p)

def clock(moment: Moment, fmt: str = DEFAULT_FORMAT, *, zone: tzinfo = TEHRAN) -> str:
    dt = _parse(moment, fmt)
    if dt is None:
        return ""
    return _localize(dt, zone).strftime("%H:%M")
