from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import caljalali
from caljalali.attributes.standard import persian_weekday_number


def dow_header() -> str:
    return "Sa     Su     Mo     Tu     We     Th     Fr"


def cell(top: str, bot: str, w: int = 6) -> Tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def build_weeks(Y: int, M: int) -> List[List[Tuple[str, str]]]:
    rows = caljalali.month_calendar(Y, M)
    weeks: List[List[Tuple[str, str]]] = []
    wk: List[Tuple[str, str]] = []
    pad = persian_weekday_number(rows[0]["weekday"]) - 1  # Saturday=0
    for _ in range(pad):
        wk.append(cell("", ""))
    for r in rows:
        d = r["date"]
        wk.append(cell(f"{r['persian'].day_of_month:2d}", f"{d.month:02d}-{d.day:02d}"))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def print_grid(title: str, weeks: List[List[Tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Print a solar Hijri month grid with Gregorian dates.")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("--count", type=int, default=1, help="Number of consecutive months to print.")
    args = p.parse_args(argv)

    first = caljalali.PersianDate.of(args.year, args.month, 1)
    for i in range(max(1, args.count)):
        m = first.plus_months(i)
        b = caljalali.month_bounds(m.year, m.month_value)
        title = f"{m.month.name.capitalize()} {m.year}  ({b['first_date']} .. {b['last_date']})"
        print_grid(title, build_weeks(m.year, m.month_value))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
