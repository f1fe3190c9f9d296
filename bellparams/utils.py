"""Small numeric helpers and text formatting for Blocked-ELL data."""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np

__all__ = ["is_prime", "find_divisors", "format_matrix", "format_ell_value"]


def is_prime(x: int) -> bool:
    """Return True when no integer in [2, sqrt(x)] divides ``x``.

    Values below 4 (including 0 and 1) have no such candidate and count as prime.
    """
    if x < 4:
        return True
    return all(x % i for i in range(2, math.isqrt(x) + 1))


def find_divisors(x: int) -> list[int]:
    """Return the divisors of ``x`` from 2 up to ``x // 2``, in ascending order."""
    if x < 4:
        return []
    return [i for i in range(2, x // 2 + 1) if x % i == 0]


def _format_item(value: object) -> str:
    if isinstance(value, (float, np.floating)):
        return f"{float(value):g}"
    return str(value)


def format_matrix(matrix: Iterable[Iterable[object]]) -> str:
    """Render a 2-D matrix row by row, each item followed by a space."""
    return "".join(
        "".join(f"{_format_item(item)} " for item in row) + "\n" for row in matrix
    )


def format_ell_value(ell_value, rows: int, cols: int, kernel_size: int) -> str:
    """Render a Blocked-ELL value array as a dense grid of ``%7.4f`` numbers.

    ``ell_value`` holds ``rows * cols`` blocks of ``kernel_size`` squared values,
    stored block after block, each block row-major.
    """
    flat = np.asarray(ell_value, dtype=np.float64).ravel()
    expected = rows * cols * kernel_size * kernel_size
    if flat.size != expected:
        raise ValueError(
            f"ell_value has {flat.size} items, expected {expected}"
        )
    grid = (
        flat.reshape(rows, cols, kernel_size, kernel_size)
        .transpose(0, 2, 1, 3)
        .reshape(rows * kernel_size, cols * kernel_size)
    )
    return "".join(
        "".join(f"{value:7.4f} " for value in line) + "\n" for line in grid
    )