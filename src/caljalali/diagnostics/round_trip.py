from __future__ import annotations

import argparse
import random
from typing import List, Optional

from caljalali import PersianDate


def roundtrip_test(N: int, start_jd: int, end_jd: int, seed: int, *, max_failures: int) -> int:
    """jd -> PersianDate -> jd, plus the Gregorian bridge, for N random days."""
    random.seed(seed)
    failures = 0

    for _ in range(N):
        jd = random.randint(start_jd, end_jd)
        p = PersianDate.of_julian_day(jd)
        back = p.to_julian_day()
        greg = PersianDate.from_gregorian(p.to_gregorian())
        if back != jd or greg != p:
            failures += 1
            print("\nFAIL")
            print("jd:", jd)
            print("persian:", p)
            print("back:", back)
            print("via gregorian:", greg)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: day number -> Persian -> day number.")
    p.add_argument("--N", type=int, default=20000, help="Number of trials.")
    p.add_argument("--start", type=str, default=str(PersianDate.MIN), help="Start date YYYY/MM/DD.")
    p.add_argument("--end", type=str, default=str(PersianDate.MAX), help="End date YYYY/MM/DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start = PersianDate.parse(args.start)
    end = PersianDate.parse(args.end)
    if end < start:
        raise SystemExit("--end must be >= --start")

    failures = roundtrip_test(
        args.N, start.to_julian_day(), end.to_julian_day(), args.seed, max_failures=args.max_failures
    )
    if failures == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
