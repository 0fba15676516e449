from __future__ import annotations

import argparse
from datetime import date
import sys
import re
import importlib
import inspect


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_UNITS = ("days", "weeks", "months", "years", "decades", "centuries", "millennia")


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_day(argv: list[str]) -> int:
    import caljalali

    p = argparse.ArgumentParser(prog="caljalali day", description="Gregorian -> Persian day info")
    p.add_argument("date", nargs="?", default=None, help="YYYY-MM-DD (default: today)")
    p.add_argument("--debug", action="store_true")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    try:
        d = _parse_ymd(args.date) if args.date else caljalali.now().to_gregorian()
        info = caljalali.day_info(d, attributes=tuple(args.attr), debug=args.debug)
    except KeyError as e:
        raise SystemExit(str(e.args[0]))
    except ValueError as e:
        raise SystemExit(f"error: {e}")

    print(f"Gregorian : {info.civil_date.isoformat()}")
    print(f"Persian   : {info.persian}")
    print(f"Weekday   : {info.weekday.name.capitalize()}")
    print(f"Leap year : {'yes' if info.leap_year else 'no'}")
    print(f"Julian day: {info.julian_day}")
    print(f"Epoch day : {info.epoch_day}")
    for k, v in (info.attributes or {}).items():
        print(f"  {k} = {v}")
    if info.debug:
        print("Debug:")
        for k, v in info.debug.items():
            print(f"  {k} = {v}")
    return 0


def cmd_to_gregorian(argv: list[str]) -> int:
    import caljalali

    p = argparse.ArgumentParser(prog="caljalali to-gregorian", description="Persian -> Gregorian date")
    p.add_argument("date", help="YYYY/MM/DD (Persian)")
    args = p.parse_args(argv)

    try:
        pd = caljalali.parse(args.date)
    except caljalali.DateTimeError as e:
        raise SystemExit(f"error: {e}")
    print(pd.to_gregorian().isoformat())
    return 0


def cmd_diff(argv: list[str]) -> int:
    import caljalali
    from caljalali.core.types import ChronoUnit

    p = argparse.ArgumentParser(prog="caljalali diff", description="Amount of time between two Persian dates")
    p.add_argument("start", help="YYYY/MM/DD (inclusive)")
    p.add_argument("end", help="YYYY/MM/DD (exclusive)")
    p.add_argument("--unit", choices=_UNITS, default=None, help="count whole units instead of a period")
    args = p.parse_args(argv)

    try:
        start = caljalali.parse(args.start)
        end = caljalali.parse(args.end)
    except caljalali.DateTimeError as e:
        raise SystemExit(f"error: {e}")

    if args.unit is None:
        period = start.until(end)
        print(f"{period}  ({period.years} years, {period.months} months, {period.days} days)")
    else:
        print(start.until(end, ChronoUnit[args.unit.upper()]))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # shorthand: `caljalali YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="caljalali", description="Solar Hijri (Persian) calendar toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_day = sub.add_parser("day", help="Gregorian -> Persian day info")
    p_day.add_argument("date", nargs="?", default=None, help="YYYY-MM-DD (default: today)")
    p_day.add_argument("--debug", action="store_true")
    p_day.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")

    sub.add_parser("to-gregorian", help="Persian -> Gregorian date")
    sub.add_parser("diff", help="Period or unit count between two Persian dates")
    sub.add_parser("month", help="Print a Persian month grid (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["leap-years", "round-trip", "new-years"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.cmd == "day":
        day_argv = [args.date] if args.date else []
        if args.debug:
            day_argv += ["--debug"]
        for a in args.attr:
            day_argv += ["--attr", a]
        day_argv += rest
        return cmd_day(day_argv)

    if args.cmd == "to-gregorian":
        return cmd_to_gregorian(rest)

    if args.cmd == "diff":
        return cmd_diff(rest)

    if args.cmd == "month":
        return _run_module_main("caljalali.diagnostics.pretty_month", rest)

    if args.cmd == "diag":
        tool_map = {
            "leap-years": "caljalali.diagnostics.leap_years",
            "round-trip": "caljalali.diagnostics.round_trip",
            "new-years": "caljalali.diagnostics.new_years_table",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
