from __future__ import annotations

import argparse
import random
from typing import List

import eatcal


def parse_calendars(s: str) -> List[str]:
    # "unix-i16,unix-u32" -> ["unix-i16", ...]
    if s.strip() == "all":
        return eatcal.list_calendars()
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(
    calendar: str,
    edge: int,
    samples: int,
    seed: int,
    *,
    max_failures: int,
) -> int:
    """
    Check from_epoch/to_epoch on the first and last `edge` epoch days of the
    range, plus `samples` uniformly random days in between.
    """
    cal = eatcal.get_calendar(calendar)
    lo, hi = cal.min_epoch_day, cal.max_epoch_day
    edge = min(edge, hi - lo + 1)

    days = [lo + i for i in range(edge)]
    days += [hi - i for i in range(edge)]
    rng = random.Random(seed)
    days += [rng.randint(lo, hi) for _ in range(samples)]

    failures = 0
    for d in days:
        back = cal.to_epoch(cal.from_epoch(d))
        if back != d:
            failures += 1
            print("\nFAIL")
            print("calendar:", calendar)
            print("epoch day:", d)
            print("date:", cal.from_epoch(d))
            print("back:", back)
            if failures >= max_failures:
                return failures
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Round-trip sweep: epoch day -> date -> epoch day.")
    p.add_argument("--calendars", type=str, default="all", help="Comma-separated calendar list, or 'all'.")
    p.add_argument("--edge", type=int, default=1 << 16, help="Days checked at each end of the range.")
    p.add_argument("--samples", type=int, default=10000, help="Random days checked inside the range.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    total_fail = 0
    for name in parse_calendars(args.calendars):
        print(f"Testing {name} ...")
        total_fail += roundtrip_test(
            name, args.edge, args.samples, args.seed, max_failures=args.max_failures
        )

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
