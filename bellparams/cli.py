"""Command line entry point: build a random sparse matrix and report its Blocked-ELL parameters."""

from __future__ import annotations

import re
import sys

import numpy as np

from bellparams.blocked_ell import BellParamsError, get_bell_params

__all__ = ["make_matrix", "main"]

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _leading_int(text: str) -> int:
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _leading_float(text: str) -> float:
    match = _FLOAT_RE.match(text)
    return float(match.group(1)) if match else 0.0


def make_matrix(x: int, y: int, threshold: float, seed: int = 42) -> np.ndarray:
    """Return an x-by-y float32 normal matrix with entries below ``threshold`` set to zero."""
    rng = np.random.default_rng(seed)
    a = rng.standard_normal((x, y)).astype(np.float32)
    a[a < threshold] = 0
    return a


def main(argv: list[str] | None = None) -> int:
    """Run the command; return the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 4:
        print("Usage: x, y, threshold, print debug")
        return 1

    x = _leading_int(args[0])
    y = _leading_int(args[1])
    threshold = _leading_float(args[2])
    debug = _leading_int(args[3]) != 0

    a = make_matrix(x, y, threshold)
    try:
        result = get_bell_params(a, debug)
    except BellParamsError as exc:
        print(exc)
        print("Error code 1, exiting!")
        return 1

    bs = result.ell_block_size
    t = result.timings
    print(f"divisorsSize: {result.divisor_count}")
    print(f"computeZeroBlocks time: {t['compute_zero_blocks']:f}")
    print(f"computeEllCols time: {t['compute_ell_cols']:f}")
    print(f"getEllColInd time: {t['get_ell_col_ind']:f}")
    print(f"getEllValues time: {t['get_ell_values']:f}")
    print(f"We can filter out {result.zero_count} zeroes with a kernel of size {bs}")
    print(f"Matrix has {result.zero_blocks} zero blocks of size {bs}")
    print(f"Total time needed for computation: {t['total']:7.6f}")
    print(f"BEST_KERNEL_SIZE: {bs}")
    print(f"ELLCOLS: {result.ell_cols}")
    print("All done. Great Success!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())