from __future__ import annotations

import argparse

import eatcal


COLUMNS = (
    ("calendar", 14),
    ("shift", 22),
    ("working", 8),
    ("epoch days", 11),
    ("min_epoch_day", 26),
    ("max_epoch_day", 26),
)


def row(values) -> str:
    return " ".join(str(v).rjust(w) if i else str(v).ljust(w) for i, (v, (_, w)) in enumerate(zip(values, COLUMNS)))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print solved bias constants for registered calendars.")
    p.add_argument("--calendars", type=str, default="", help="Comma-separated calendar list (default: all).")
    p.add_argument("--show-k", action="store_true", help="Also print K and L on a second line.")
    args = p.parse_args(argv)

    names = [x.strip() for x in args.calendars.split(",") if x.strip()] or eatcal.list_calendars()

    print(row([c for c, _ in COLUMNS]))
    print("-" * (sum(w for _, w in COLUMNS) + len(COLUMNS) - 1))
    for name in names:
        info = eatcal.calendar_info(name)
        print(row([
            name,
            info["shift"],
            info["working_type"],
            info["epoch_days_type"],
            info["min_epoch_day"],
            info["max_epoch_day"],
        ]))
        if args.show_k:
            print(f"    K={info['K']}  L={info['L']}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
