from __future__ import annotations

import argparse
from datetime import date
from typing import List, Optional, Tuple

import caljalali
from caljalali.attributes.standard import WEEKDAY_NAMES


def nowruz_rows(Y0: int, Y1: int) -> List[Tuple[int, date, bool, str]]:
    rows = []
    for Y in range(Y0, Y1 + 1):
        ny = caljalali.new_year_day(Y)
        rows.append((Y, ny["date"], ny["leap_year"], WEEKDAY_NAMES[ny["weekday"]]))
    return rows


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Print the Gregorian date of Nowruz (1 Farvardin) for a range of years.")
    p.add_argument("--from-year", type=int, default=1395)
    p.add_argument("--to-year", type=int, default=1410)
    p.add_argument(
        "--list-day",
        type=int,
        default=21,
        help="After the table, list the years whose Nowruz falls on this day of March (default: 21).",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    rows = nowruz_rows(Y0, Y1)
    line = "  ".join(["Year".ljust(5), "Nowruz".ljust(10), "Leap".ljust(4), "Weekday"])
    print(line)
    print("-" * len(line))
    for Y, d, leap, wd in rows:
        print("  ".join([str(Y).ljust(5), d.isoformat(), ("yes" if leap else "").ljust(4), wd]))

    hits = [Y for Y, d, _, _ in rows if d.month == 3 and d.day == args.list_day]
    print(f"\nNowruz on March {args.list_day}:")
    print(", ".join(str(Y) for Y in hits) if hits else "(none)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
