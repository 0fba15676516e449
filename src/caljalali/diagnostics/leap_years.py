#!/usr/bin/env python3
"""
Leap-year structure of the 2820-year grand cycle.

Leap years are not evenly spaced: they come every 4 or 5 years, grouped in
sub-cycles of 29, 33 and 37 years. Over a full grand cycle exactly 683 of the
2820 years are leap years.
"""
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Dict, List, Optional

import numpy as np

from caljalali.engines import julian


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "caljalali[diagnostics]"') from e


@dataclass(frozen=True)
class CycleStats:
    first_year: int
    cycles: int
    leaps_per_cycle: np.ndarray
    gap_counts: Dict[int, int]

    @property
    def leap_fraction(self) -> float:
        return float(self.leaps_per_cycle.sum()) / (self.cycles * julian.GRAND_CYCLE_YEARS)


def leap_mask(start_year: int, end_year: int) -> np.ndarray:
    """Boolean array, one entry per year in [start_year, end_year]."""
    return np.array([julian.is_leap(y) for y in range(start_year, end_year + 1)], dtype=bool)


def leap_gaps(start_year: int, end_year: int) -> np.ndarray:
    """Distances between consecutive leap years in the range."""
    years = np.flatnonzero(leap_mask(start_year, end_year)) + start_year
    return np.diff(years)


def cycle_stats(first_year: int = 475, cycles: int = 3) -> CycleStats:
    n = cycles * julian.GRAND_CYCLE_YEARS
    mask = leap_mask(first_year, first_year + n - 1)
    per_cycle = mask.reshape(cycles, julian.GRAND_CYCLE_YEARS).sum(axis=1)
    gaps = leap_gaps(first_year, first_year + n - 1)
    values, counts = np.unique(gaps, return_counts=True)
    return CycleStats(
        first_year=first_year,
        cycles=cycles,
        leaps_per_cycle=per_cycle,
        gap_counts={int(v): int(c) for v, c in zip(values, counts)},
    )


def plot_barcode(start_year: int, end_year: int, out: str, title: str) -> None:
    plt = _need_matplotlib()
    mask = leap_mask(start_year, end_year)
    years = np.arange(start_year, end_year + 1)

    fig, ax = plt.subplots(figsize=(16, 2.4))
    ax.vlines(years[mask], 0, 1, colors="0.15", linewidth=1.0)
    ax.set_xlim(start_year - 0.5, end_year + 0.5)
    ax.set_ylim(0, 1)
    ax.set_yticks([])
    ax.tick_params(axis="x", length=0)
    ax.set_xlabel("Solar Hijri year")
    ax.set_title(title)
    fig.tight_layout()
    fig.savefig(out, dpi=250)
    print(f"Saved: {out}")


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Leap-year statistics over grand cycles.")
    p.add_argument("--first-year", type=int, default=475, help="First year of the first grand cycle.")
    p.add_argument("--cycles", type=int, default=3)
    p.add_argument("--out", default="", help="If set, save a leap-year barcode plot (needs matplotlib).")
    p.add_argument("--plot-start", type=int, default=1300)
    p.add_argument("--plot-end", type=int, default=1500)
    args = p.parse_args(argv)

    if args.cycles < 1:
        raise SystemExit("--cycles must be >= 1")

    st = cycle_stats(args.first_year, args.cycles)
    print(f"Grand cycles from year {st.first_year}: {st.cycles}")
    for i, n in enumerate(st.leaps_per_cycle):
        y0 = st.first_year + i * julian.GRAND_CYCLE_YEARS
        print(f"  {y0}..{y0 + julian.GRAND_CYCLE_YEARS - 1}: {int(n)} leap years")
    print(f"Leap fraction: {st.leap_fraction:.9f}  (683/2820 = {683 / 2820:.9f})")
    print("Gaps between leap years:")
    for gap, count in sorted(st.gap_counts.items()):
        print(f"  {gap} years: {count}")

    if args.out:
        plot_barcode(args.plot_start, args.plot_end, args.out, "Solar Hijri leap years")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
