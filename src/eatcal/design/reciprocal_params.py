# design/reciprocal_params.py

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import List, Optional, Tuple

from eatcal.engines.affine import (
    MONTH_EAF,
    MONTH_RECIPROCAL,
    YEAR_RECIPROCAL,
    AffineTransform,
    ReciprocalDivision,
)


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "eatcal[design]"') from e


CHUNK = 1 << 20


@dataclass(frozen=True)
class ReciprocalCandidate:
    multiplier: int
    offset_lo: int
    offset_hi: int
    bound: int  # first n for which no offset in [offset_lo, offset_hi] works

    @property
    def offset(self) -> int:
        return self.offset_lo


def multiplier_candidates(a: int, d: int, k: int) -> Tuple[int, int]:
    """floor and ceil of a * 2^k / d."""
    num = a << k
    lo = num // d
    return lo, lo + (1 if num % d else 0)


def offset_interval(eaf: AffineTransform, multiplier: int, k: int, limit: int) -> ReciprocalCandidate:
    """
    Largest n-range on which (multiplier*n + offset) >> k reproduces the
    quotient of `eaf` for a single offset.

    For each n the admissible offsets form the interval
        [q*2^k - M*n, (q+1)*2^k - M*n - 1]
    and the running intersection empties at the returned bound.
    """
    np = _need_numpy()
    one = 1 << k
    lo, hi = -(1 << 62), 1 << 62
    start = 0
    while start < limit:
        n = np.arange(start, min(start + CHUNK, limit), dtype=np.int64)
        q = (eaf.a * n + eaf.b) // eaf.d
        lo_n = q * one - multiplier * n
        hi_n = lo_n + one - 1
        run_lo = np.maximum.accumulate(np.maximum(lo_n, lo))
        run_hi = np.minimum.accumulate(np.minimum(hi_n, hi))
        bad = np.nonzero(run_lo > run_hi)[0]
        if bad.size:
            i = int(bad[0])
            if i > 0:
                lo, hi = int(run_lo[i - 1]), int(run_hi[i - 1])
            return ReciprocalCandidate(multiplier, lo, hi, start + i)
        lo, hi = int(run_lo[-1]), int(run_hi[-1])
        start += n.size
    return ReciprocalCandidate(multiplier, lo, hi, limit)


def first_failure(recip: ReciprocalDivision, eaf: AffineTransform, limit: int) -> int:
    """
    First n in [0, limit) where the reciprocal quotient or scaled remainder
    differs from the reference transform; `limit` if none.
    """
    np = _need_numpy()
    mask = (1 << recip.shift) - 1
    start = 0
    while start < limit:
        n = np.arange(start, min(start + CHUNK, limit), dtype=np.int64)
        p = recip.multiplier * n + recip.offset
        q = p >> recip.shift
        r = (p & mask) // (recip.multiplier * recip.scale)
        ref = eaf.a * n + eaf.b
        q_ref = ref // eaf.d
        r_ref = (ref % eaf.d) // (eaf.a * recip.scale)
        bad = np.nonzero((q != q_ref) | (r != r_ref))[0]
        if bad.size:
            return start + int(bad[0])
        start += n.size
    return limit


def design(eaf: AffineTransform, k: int, limit: int) -> List[ReciprocalCandidate]:
    out = []
    for m in sorted(set(multiplier_candidates(eaf.a, eaf.d, k))):
        out.append(offset_interval(eaf, m, k, limit))
    return out


# Reference transforms over the raw reciprocal input. The year step is fed
# 4*N_C + 3, so its reference is a plain division by 1461.
ENGINE_STEPS = (
    ("year split", AffineTransform(1, 0, 1_461), YEAR_RECIPROCAL),
    ("month split", MONTH_EAF, MONTH_RECIPROCAL),
)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Derive and verify multiply-shift constants for Euclidean affine divisions.")
    p.add_argument("--a", type=int, default=None, help="Scale of the affine function (a*n + b) // d.")
    p.add_argument("--b", type=int, default=0, help="Offset of the affine function.")
    p.add_argument("--d", type=int, default=None, help="Divisor of the affine function.")
    p.add_argument("--k", type=int, default=32, help="Shift: the reciprocal denominator is 2^k.")
    p.add_argument("--limit", type=int, default=1 << 25, help="Largest n to examine (exclusive).")
    p.add_argument("--out-txt", type=str, default="", help="Optional file to save the output table.")
    args = p.parse_args(argv)

    lines = []
    if args.a is not None and args.d is not None:
        eaf = AffineTransform(args.a, args.b, args.d)
        lines.append(f"Reciprocals for ({eaf.a}*n + {eaf.b}) // {eaf.d} with k={args.k}")
        lines.append("=" * 80)
        lines.append(f"{'multiplier':<14} | {'offset range':<32} | {'bound'}")
        lines.append("-" * 80)
        for c in design(eaf, args.k, args.limit):
            rng = f"[{c.offset_lo}, {c.offset_hi}]"
            lines.append(f"{c.multiplier:<14} | {rng:<32} | {c.bound}")
    else:
        lines.append("Engine reciprocal steps")
        lines.append("=" * 80)
        for name, eaf, recip in ENGINE_STEPS:
            limit = max(args.limit, recip.bound + 1)
            found = first_failure(recip, eaf, limit)
            status = "ok" if found >= recip.bound else "BROKEN"
            lines.append(
                f"{name:<12} M={recip.multiplier} B={recip.offset} k={recip.shift} "
                f"claimed bound={recip.bound} first failure={found} [{status}]"
            )

    output_text = "\n".join(lines)
    print(output_text)

    if args.out_txt:
        with open(args.out_txt, "w", encoding="utf-8") as f:
            f.write(output_text)
        print(f"\nSaved results to {args.out_txt}")

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
