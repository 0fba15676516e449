# tests/test_humanize.py

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from caljalali import humanize
from caljalali.digits import to_english, to_farsi

NOON = datetime(2024, 1, 1, 12, 0, 0)


def test_period_missing_moment():
    assert humanize.period(None) == humanize.MOMENTS_AGO
    assert humanize.period("   ") == humanize.MOMENTS_AGO


def test_period_just_now():
    assert humanize.period(NOON, now=NOON) == humanize.JUST_NOW
    assert humanize.period(NOON - timedelta(milliseconds=10), now=NOON) == humanize.JUST_NOW
    assert humanize.period(NOON + timedelta(milliseconds=10), now=NOON) == humanize.JUST_NOW


def test_period_seconds():
    assert humanize.period(NOON - timedelta(seconds=1), now=NOON) == "1 ثانیه پیش"
    assert humanize.period(NOON + timedelta(seconds=1), now=NOON) == "1 ثانیه بعد"


def test_period_days_short():
    assert humanize.period(NOON, now=datetime(2024, 1, 4, 12, 0, 0)) == "3 روز پیش"


def test_period_long_form():
    out = humanize.period(
        datetime(2024, 1, 1, 10, 0, 0),
        now=datetime(2024, 1, 4, 12, 30, 5),
        short=False,
    )
    assert out == "3 روز, 2 ساعت, 30 دقیقه, 5 ثانیه پیش"


def test_period_future_months():
    assert humanize.period(datetime(2024, 3, 5), now=datetime(2024, 1, 1)) == "2 ماه بعد"


def test_period_years():
    # 1396/01/01 -> 1397/01/01
    assert humanize.period(datetime(2017, 3, 21, 8), now=datetime(2018, 3, 21, 8)) == "1 سال پیش"


def test_period_counts_only_whole_days():
    out = humanize.period(datetime(2024, 1, 1, 23, 0), now=datetime(2024, 1, 2, 1, 0), short=False)
    assert out == "2 ساعت پیش"
    out = humanize.period(
        datetime(2024, 1, 1, 23, 0), now=datetime(2024, 1, 2, 1, 0), short=False, zone=timezone.utc
    )
    assert out == "2 ساعت پیش"
    # midnight in Tehran falls at 20:30 UTC
    out = humanize.period(datetime(2024, 1, 1, 20, 0), now=datetime(2024, 1, 1, 21, 0), short=False)
    assert out == "1 ساعت پیش"
    out = humanize.period(datetime(2024, 1, 2, 1, 0), now=datetime(2024, 1, 1, 23, 0), short=False)
    assert out == "2 ساعت بعد"
    out = humanize.period(datetime(2024, 1, 1, 23, 0), now=datetime(2024, 1, 3, 1, 0), short=False)
    assert out == "1 روز, 2 ساعت پیش"


def test_period_aware_and_naive_mix():
    moment = datetime(2024, 1, 1, 15, 30, tzinfo=ZoneInfo("Asia/Tehran"))
    assert humanize.period(moment, now=datetime(2024, 1, 1, 12, 0, 1)) == "1 ثانیه پیش"


def test_period_string_moment():
    out = humanize.period("2024-01-01 12:00:00", now=datetime(2024, 1, 1, 12, 0, 5))
    assert out == "5 ثانیه پیش"
    out = humanize.period("01/01/2024", now=datetime(2024, 1, 2), fmt="%d/%m/%Y")
    assert out == "1 روز پیش"


def test_to_persian():
    # naive moments are UTC; Tehran was at +03:30 in late October 2017
    moment = datetime(2017, 10, 28, 10, 15, 0, 250000)
    assert humanize.to_persian(moment) == "1396/08/06"
    assert humanize.to_persian(moment, with_time=True) == "1396/08/06 - 13:45:00"
    assert humanize.to_persian("2024-03-20 00:00:00") == "1403/01/01"
    assert humanize.to_persian(None) == ""


def test_to_persian_converts_to_tehran_date():
    assert humanize.to_persian("2017-10-27 21:00:00") == "1396/08/06"
    assert humanize.to_persian("2017-10-27 20:00:00") == "1396/08/05"
    assert humanize.to_persian("2017-10-27 21:00:00", zone=timezone.utc) == "1396/08/05"


def test_clock():
    assert humanize.clock(datetime(2017, 10, 28, 9, 5, 59)) == "12:35"
    assert humanize.clock("2024-01-01 23:45:00") == "03:15"
    assert humanize.clock("2024-01-01 23:45:00", zone=timezone.utc) == "23:45"
    assert humanize.clock("") == ""


def test_clock_aware_moment():
    tehran = ZoneInfo("Asia/Tehran")
    assert humanize.clock(datetime(2024, 1, 1, 8, 0, tzinfo=tehran)) == "08:00"
    assert humanize.clock(datetime(2024, 1, 1, 8, 0, tzinfo=timezone.utc)) == "11:30"


def test_digits():
    assert to_farsi("1396/08/06") == "۱۳۹۶/۰۸/۰۶"
    assert to_farsi(1234) == "۱۲۳۴"
    assert to_farsi("1,234.5") == "۱٬۲۳۴٫۵"
    assert to_english("۱۳۹۶/۰۸/۰۶") == "1396/08/06"
    assert to_english("٣٠") == "30"
    assert to_english("۱٬۲۳۴") == "1٬234"
