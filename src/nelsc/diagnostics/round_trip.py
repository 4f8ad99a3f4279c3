from __future__ import annotations

import argparse
import random

import nelsc
from nelsc.engines import gregorian
from nelsc.engines import nelsc_cycle as cyc
from nelsc.formats import dates


def gregorian_round_trip(N: int, seed: int, *, max_failures: int) -> int:
    """offset -> (y, m, d) -> offset, plus the printed form back through the scanner."""
    random.seed(seed)
    failures = 0
    for _ in range(N):
        offs = random.randint(gregorian.DAY_MIN, gregorian.DAY_MAX)
        y, m, d = gregorian.offset_to_ymd(offs)
        back = gregorian.date_to_offset(y, m, d)
        scanned = dates.scan_gregorian(dates.format_gregorian(y, m, d))
        if back != offs or scanned is None or scanned[0] != offs:
            failures += 1
            print("\nFAIL (gregorian)")
            print("offset:", offs)
            print("ymd:", (y, m, d))
            print("back:", back)
            print("scanned:", scanned)
            if failures >= max_failures:
                return failures
    return failures


def nelsc_round_trip(N: int, seed: int, *, max_failures: int) -> int:
    """day -> NELSC date -> day, directly and through the text form."""
    random.seed(seed)
    failures = 0
    for _ in range(N):
        day = random.randint(cyc.DAY_MIN, cyc.DAY_MAX)
        t = nelsc.nelsc_date(day)
        back = nelsc.nelsc_day(t.year, t.month, t.day)
        text = dates.format_nelsc_date(t)
        parsed = nelsc.parse_date(text)
        if back != day or parsed != day:
            failures += 1
            print("\nFAIL (nelsc)")
            print("day:", day)
            print("nelsc:", t, text)
            print("back:", back)
            print("parsed:", parsed)
            print("day_info:", nelsc.day_info(day))
            if failures >= max_failures:
                return failures
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests for the Gregorian and NELSC engines.")
    p.add_argument("--N", type=int, default=20000, help="Trials per engine.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per engine.")
    args = p.parse_args(argv)

    total_fail = 0
    print("Testing gregorian ...")
    total_fail += gregorian_round_trip(args.N, args.seed, max_failures=args.max_failures)
    print("Testing nelsc ...")
    total_fail += nelsc_round_trip(args.N, args.seed, max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
