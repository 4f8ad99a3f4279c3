#!/usr/bin/env python3
from __future__ import annotations

import argparse
from datetime import date
from typing import List, Optional, Tuple

import nelsc


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "nelsc[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "nelsc[diagnostics]"') from e


def day_of_year(d: date) -> int:
    return (d - date(d.year, 1, 1)).days + 1


def days_since_equinox(d: date) -> int:
    """Days from March 20 of the same Gregorian year (March 20 = 0)."""
    return (d - date(d.year, 3, 20)).days


def rolling_median(np, y, win: int = 11):
    """Centered rolling median with edge padding."""
    if win < 3:
        return y.astype(float)
    if win % 2 == 0:
        win += 1
    k = win // 2
    ypad = np.pad(y, (k, k), mode="edge")
    out = np.empty_like(y, dtype=float)
    for i in range(len(y)):
        out[i] = float(np.median(ypad[i : i + win]))
    return out


def build_series(np, *, metric: str) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    """Returns (Gregorian year, metric value, long-year flag) per NELSC year."""
    rows = nelsc.new_year_rows()
    x = np.array([r.gregorian.year for r in rows], dtype=int)
    y = np.empty(len(rows), dtype=float)
    long_year = np.array([nelsc.is_long_year(r.year) for r in rows], dtype=bool)

    for i, r in enumerate(rows):
        if metric == "doy":
            y[i] = float(day_of_year(r.gregorian))
        elif metric == "since-equinox":
            y[i] = float(days_since_equinox(r.gregorian))
        else:
            raise ValueError("metric must be 'doy' or 'since-equinox'")

    return x, y, long_year


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of the Gregorian date of every NELSC new year.")
    p.add_argument("--show-trend", action="store_true")
    p.add_argument("--trend-win", type=int, default=11, help="Rolling median window (odd recommended).")
    p.add_argument("--outbase", default="nelsc_new_year_scatter", help="Output base name (writes .png)")
    p.add_argument(
        "--metric",
        choices=("since-equinox", "doy"),
        default="since-equinox",
        help="Y-axis metric (default: days since March 20).",
    )
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "legend.fontsize": 10,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    ax.set_xlabel("Gregorian year")
    if args.metric == "doy":
        ax.set_ylabel("Day-of-year (Jan 1 = 1)")
    else:
        ax.set_ylabel("Days since March 20")
    ax.set_title("NELSC new year days")

    x, y, long_year = build_series(np, metric=args.metric)
    ax.scatter(x[~long_year], y[~long_year], s=12, c="tab:blue", alpha=0.5, label="short year (12 months)")
    ax.scatter(x[long_year], y[long_year], s=12, c="tab:red", alpha=0.5, label="long year (13 months)")

    if args.show_trend:
        ax.plot(x, rolling_median(np, y, win=int(args.trend_win)), color="0.30", linewidth=1.8)

    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=300)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
