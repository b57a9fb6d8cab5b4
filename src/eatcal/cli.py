from __future__ import annotations

import argparse
import importlib
import inspect
import json
import logging
import re
import sys

from eatcal.core.types import Date, Duration, Month
from eatcal.engines.rules import is_leap


_DATE_RE = re.compile(r"^(-?\d+)-(\d{1,2})-(\d{1,2})$")


def _parse_ymd(s: str) -> Date:
    """YYYY-MM-DD; the year may be negative or longer than four digits."""
    m = _DATE_RE.match(s.strip())
    if m is None:
        raise SystemExit(f"Not a date: {s!r} (expected YYYY-MM-DD)")
    y, mo, d = (int(g) for g in m.groups())
    if not 1 <= mo <= 12:
        raise SystemExit(f"Month out of range in {s!r}")
    if not 1 <= d <= Month(mo).days(is_leap(y)):
        raise SystemExit(f"Day out of range in {s!r}")
    return Date.init(y, mo, d)


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


def _calendar_arg(p: argparse.ArgumentParser) -> None:
    from eatcal.engines.specs import DEFAULT_CALENDAR
    p.add_argument("--calendar", default=DEFAULT_CALENDAR, help=f"Calendar name (default: {DEFAULT_CALENDAR}).")


def cmd_from_epoch(argv: list[str]) -> int:
    import eatcal

    p = argparse.ArgumentParser(prog="eatcal from-epoch", description="Epoch day -> Gregorian date")
    p.add_argument("days", type=int, help="Days since the calendar's epoch")
    _calendar_arg(p)
    args = p.parse_args(argv)

    print(eatcal.from_epoch(args.days, calendar=args.calendar))
    return 0


def cmd_to_epoch(argv: list[str]) -> int:
    import eatcal

    p = argparse.ArgumentParser(prog="eatcal to-epoch", description="Gregorian date -> epoch day")
    p.add_argument("date", help="YYYY-MM-DD (use -- before negative years)")
    _calendar_arg(p)
    args = p.parse_args(argv)

    print(eatcal.to_epoch(_parse_ymd(args.date), calendar=args.calendar))
    return 0


def cmd_add(argv: list[str]) -> int:
    import eatcal

    p = argparse.ArgumentParser(prog="eatcal add", description="Add a (years, months, days) offset to a date")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--years", type=int, default=0)
    p.add_argument("--months", type=int, default=0)
    p.add_argument("--days", type=int, default=0)
    _calendar_arg(p)
    args = p.parse_args(argv)

    d = _parse_ymd(args.date)
    out = eatcal.add(d, Duration(args.years, args.months, args.days), calendar=args.calendar)
    print(out)
    return 0


def cmd_weekday(argv: list[str]) -> int:
    import eatcal

    p = argparse.ArgumentParser(prog="eatcal weekday", description="Day of week of a date")
    p.add_argument("date", help="YYYY-MM-DD")
    _calendar_arg(p)
    args = p.parse_args(argv)

    wd = eatcal.weekday(_parse_ymd(args.date), calendar=args.calendar)
    print(f"{wd.name.capitalize()} ({wd.numeric()})")
    return 0


def cmd_info(argv: list[str]) -> int:
    import eatcal

    p = argparse.ArgumentParser(prog="eatcal info", description="Solved configuration of a calendar")
    _calendar_arg(p)
    args = p.parse_args(argv)

    print(json.dumps(eatcal.calendar_info(args.calendar), indent=2))
    return 0


def cmd_list(argv: list[str]) -> int:
    import eatcal

    argparse.ArgumentParser(prog="eatcal list", description="List registered calendars").parse_args(argv)
    for name in eatcal.list_calendars():
        print(name)
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="eatcal", description="Gregorian <-> epoch-day conversion toolkit CLI.")
    p.add_argument("--log-level", default="WARNING", help="Logging level for the eatcal loggers.")
    sub = p.add_subparsers(dest="cmd", required=True)

    # conversions
    sub.add_parser("from-epoch", help="Epoch day -> Gregorian date", add_help=False)
    sub.add_parser("to-epoch", help="Gregorian date -> epoch day", add_help=False)
    sub.add_parser("add", help="Calendar arithmetic on a date", add_help=False)
    sub.add_parser("weekday", help="Day of week of a date", add_help=False)

    # configuration
    sub.add_parser("info", help="Solved configuration of a calendar", add_help=False)
    sub.add_parser("list", help="List registered calendars", add_help=False)

    # diagnostics
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "bias-table"],
        help="Which diagnostic to run",
    )

    # design tools
    sub.add_parser("reciprocal-params", help="Derive and verify multiply-shift division constants.", add_help=False)

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))

    if args.cmd == "from-epoch":
        return cmd_from_epoch(rest)

    if args.cmd == "to-epoch":
        return cmd_to_epoch(rest)

    if args.cmd == "add":
        return cmd_add(rest)

    if args.cmd == "weekday":
        return cmd_weekday(rest)

    if args.cmd == "info":
        return cmd_info(rest)

    if args.cmd == "list":
        return cmd_list(rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "eatcal.diagnostics.round_trip",
            "bias-table": "eatcal.diagnostics.bias_table",
        }
        return _run_module_main(tool_map[args.tool], rest)

    if args.cmd == "reciprocal-params":
        return _run_module_main("eatcal.design.reciprocal_params", rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
