from __future__ import annotations

import argparse
from datetime import date
from typing import List

import nelsc
from nelsc.core.types import NewYearRow
from nelsc.formats import base24, dates


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def print_table(rows: List[NewYearRow], *, group: int = 4) -> None:
    for i, row in enumerate(rows):
        if i and i % group == 0:
            print()
        g = row.gregorian
        print(
            f"{base24.int_to_pair(row.year)}  "
            f"{dates.format_gregorian(g.year, g.month, g.day)}  "
            f"equinox month offset {row.equinox_offset:2d}"
        )


def print_summary(rows: List[NewYearRow]) -> None:
    # compare (month, day) only, ignoring the year
    by_md = sorted(rows, key=lambda r: (r.gregorian.month, r.gregorian.day))
    offsets = [r.equinox_offset for r in rows]
    print()
    print(f"Range of first day of year:  {mmdd(by_md[0].gregorian)} - {mmdd(by_md[-1].gregorian)}")
    print(f"Range of equinox offsets:    [{min(offsets)}, {max(offsets)}]")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Chart every NELSC year with the Gregorian date of its first day "
                    "and the month offset of March 20 within the year."
    )
    p.add_argument("--group", type=int, default=4, help="Blank line after this many years (default: 4).")
    args = p.parse_args(argv)

    if args.group < 1:
        raise SystemExit("--group must be >= 1")

    rows = nelsc.new_year_rows()
    print_table(rows, group=args.group)
    print_summary(rows)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
