from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import sys

from nelsc.engines import nelsc_cycle as cyc
from nelsc.formats import base24, dates

log = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s  [%(levelname)s]  %(name)s: %(message)s"


def _setup_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT, datefmt="%H:%M:%S")


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


def _parse_int(s: str, what: str = "argument") -> int:
    try:
        return int(s)
    except ValueError:
        raise SystemExit(f"Could not parse {what} as decimal integer!") from None


def _require_range(v: int, lo: int, hi: int, what: str = "Argument") -> None:
    if not (lo <= v <= hi):
        raise SystemExit(f"{what} must be in range {lo} to {hi}!")


def print_day_information(day: int) -> None:
    import nelsc

    info = nelsc.day_info(day)
    g = info.gregorian
    print(f"Day offset:      {info.day}")
    print(f"Absolute month:  {info.absolute_month}")
    print(f"NELSC date:      {dates.format_nelsc_date(info.nelsc)}")
    print(f"Month length:    {'long' if info.long_month else 'short'}")
    print(f"Year length:     {'long' if info.long_year else 'short'}")
    print(f"Gregorian date:  {dates.format_gregorian(g.year, g.month, g.day)}")


# ============================================================
# Base-24 commands
# ============================================================

def cmd_to24pair(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="nelsc to24pair", description="Signed decimal integer -> base-24 pair")
    p.add_argument("value", help=f"decimal integer in {base24.PAIR_MIN}..{base24.PAIR_MAX}")
    args = p.parse_args(argv)

    v = _parse_int(args.value)
    _require_range(v, base24.PAIR_MIN, base24.PAIR_MAX)
    print(f"Decimal value:  {v}")
    print(f"Base-24 pair:   {base24.int_to_pair(v)}")
    return 0

def cmd_from24pair(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="nelsc from24pair", description="Signed base-24 pair -> decimal integer")
    p.add_argument("pair", help="exactly two base-24 digits")
    args = p.parse_args(argv)

    s = args.pair.strip()
    v = base24.pair_to_int(s) if len(s) == 2 else None
    if v is None:
        raise SystemExit("Could not parse as a base-24 pair!")
    print(f"Base-24 pair:   {base24.int_to_pair(v)}")
    print(f"Decimal value:  {v}")
    return 0

def cmd_to24digit(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="nelsc to24digit", description="Integer 0..23 -> base-24 digit")
    p.add_argument("value", help=f"decimal integer in 0..{base24.DIGIT_MAX}")
    args = p.parse_args(argv)

    v = _parse_int(args.value)
    _require_range(v, 0, base24.DIGIT_MAX)
    print(f"Decimal value:  {v}")
    print(f"Base-24 digit:  {base24.int_to_digit(v)}")
    return 0

def cmd_from24digit(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="nelsc from24digit", description="Base-24 digit -> decimal integer")
    p.add_argument("digit", help="a single base-24 digit")
    args = p.parse_args(argv)

    s = "".join(args.digit.split())
    if not s:
        raise SystemExit("Provide a base-24 digit!")
    if len(s) > 1:
        raise SystemExit("Provide no more than one base-24 digit!")
    v = base24.digit_to_int(s)
    if v is None:
        raise SystemExit("Could not parse as base-24 digit!")
    print(f"Base-24 digit:  {s}")
    print(f"Decimal value:  {v}")
    return 0


# ============================================================
# Calendar commands
# ============================================================

def cmd_day(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="nelsc day", description="Information about a NELSC absolute day")
    p.add_argument("day", help=f"NELSC absolute day offset in {cyc.DAY_MIN}..{cyc.DAY_MAX}")
    args = p.parse_args(argv)

    day = _parse_int(args.day)
    _require_range(day, cyc.DAY_MIN, cyc.DAY_MAX)
    print_day_information(day)
    return 0

def cmd_month(argv: list[str]) -> int:
    import nelsc

    p = argparse.ArgumentParser(prog="nelsc month", description="Information about the first day of a NELSC absolute month")
    p.add_argument("month", help=f"NELSC absolute month offset in {cyc.MONTH_MIN}..{cyc.MONTH_MAX}")
    args = p.parse_args(argv)

    month = _parse_int(args.month)
    _require_range(month, cyc.MONTH_MIN, cyc.MONTH_MAX)
    print_day_information(nelsc.month_to_day(month))
    return 0

def cmd_date(argv: list[str]) -> int:
    import nelsc

    p = argparse.ArgumentParser(prog="nelsc date", description="Information about a calendar date")
    p.add_argument("date", help="NELSC date (3T:C4-7) or Gregorian date (YYYY-MM-DD)")
    args = p.parse_args(argv)

    day = nelsc.parse_date(args.date)
    if day is None:
        lo = dates.format_gregorian_day(cyc.DAY_MIN + cyc.GREGORIAN_OFFSET)
        hi = dates.format_gregorian_day(cyc.DAY_MAX + cyc.GREGORIAN_OFFSET)
        raise SystemExit(
            "Could not parse as a valid calendar date!\n"
            f"(Note: Gregorian dates must be in range {lo} to {hi}.)"
        )
    print_day_information(day)
    return 0

def cmd_fullmoon(argv: list[str]) -> int:
    import nelsc

    p = argparse.ArgumentParser(prog="nelsc fullmoon", description="Gregorian dates of NELSC full moon weeks")
    p.add_argument("first", help="first NELSC absolute month")
    p.add_argument("last", help="last NELSC absolute month")
    args = p.parse_args(argv)

    first = _parse_int(args.first, "first argument")
    last = _parse_int(args.last, "second argument")
    if not (cyc.MONTH_MIN <= first <= cyc.MONTH_MAX and cyc.MONTH_MIN <= last <= cyc.MONTH_MAX):
        raise SystemExit(f"Arguments must be in range {cyc.MONTH_MIN} to {cyc.MONTH_MAX}!")
    if last < first:
        raise SystemExit("Second argument must not be less than first!")

    last_year = None
    for w in nelsc.full_moon_weeks(first, last):
        if last_year is not None and last_year != w.first.year:
            print()
        last_year = w.first.year
        print(
            f"{dates.format_gregorian(w.first.year, w.first.month, w.first.day)} - "
            f"{dates.format_gregorian(w.last.year, w.last.month, w.last.day)}"
        )
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="nelsc", description="NELSC calendar toolkit CLI.")
    p.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING).",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    # base-24 codec
    sub.add_parser("to24pair", add_help=False, help="Signed decimal integer -> base-24 pair")
    sub.add_parser("from24pair", add_help=False, help="Signed base-24 pair -> decimal integer")
    sub.add_parser("to24digit", add_help=False, help="Integer 0..23 -> base-24 digit")
    sub.add_parser("from24digit", add_help=False, help="Base-24 digit -> decimal integer")

    # calendar
    sub.add_parser("day", add_help=False, help="Information about a NELSC absolute day")
    sub.add_parser("month", add_help=False, help="Information about the first day of a NELSC absolute month")
    sub.add_parser("date", add_help=False, help="Information about a NELSC or Gregorian date")
    sub.add_parser("fullmoon", add_help=False, help="Gregorian dates of full moon weeks from month m1 to m2")
    sub.add_parser("newyear", add_help=False, help="Chart of the first day of every NELSC year")

    # diagnostics
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "newyear-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    _setup_logging(args.log_level)
    log.debug("command %s, arguments %r", args.cmd, rest)

    commands = {
        "to24pair": cmd_to24pair,
        "from24pair": cmd_from24pair,
        "to24digit": cmd_to24digit,
        "from24digit": cmd_from24digit,
        "day": cmd_day,
        "month": cmd_month,
        "date": cmd_date,
        "fullmoon": cmd_fullmoon,
    }
    if args.cmd in commands:
        return commands[args.cmd](rest)

    if args.cmd == "newyear":
        return _run_module_main("nelsc.diagnostics.new_year_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "nelsc.diagnostics.round_trip",
            "newyear-scatter": "nelsc.diagnostics.new_year_scatter",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
