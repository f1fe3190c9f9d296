"""Find the Blocked-ELL parameters (block size, columns, indices, values) of a matrix."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

import numpy as np

from bellparams.utils import find_divisors, format_ell_value, format_matrix, is_prime

__all__ = [
    "BellParamsError",
    "BellParams",
    "compute_zero_blocks",
    "iterative_compute_zero_blocks",
    "compute_block_sums",
    "iterative_compute_block_sums",
    "compute_ell_col_ind",
    "compute_ell_values",
    "get_bell_params",
]


class BellParamsError(ValueError):
    """Raised when a matrix cannot be converted to Blocked-ELL form."""


@dataclass
class BellParams:
    """The parameters describing a matrix in Blocked-ELL form."""

    ell_block_size: int
    ell_cols: int
    ell_col_ind: np.ndarray
    ell_value: np.ndarray
    zero_count: int
    divisor_count: int
    timings: dict[str, float] = field(default_factory=dict)

    @property
    def zero_blocks(self) -> int:
        """Number of all-zero blocks of the chosen size."""
        return self.zero_count // (self.ell_block_size * self.ell_block_size)


def _as_matrix(a) -> np.ndarray:
    matrix = np.asarray(a, dtype=np.float32)
    if matrix.ndim != 2:
        raise BellParamsError("Matrix must be two-dimensional")
    return matrix


def _check_kernel(kernel_size: int) -> None:
    if kernel_size <= 0:
        raise BellParamsError(f"Block size must be positive, got {kernel_size}")


def _blocks(a: np.ndarray, kernel_size: int, *, strict: bool) -> np.ndarray:
    """View ``a`` as (blocks_h, kernel, blocks_w, kernel)."""
    _check_kernel(kernel_size)
    rows, cols = a.shape
    n_h, n_w = rows // kernel_size, cols // kernel_size
    if strict and (n_h * kernel_size != rows or n_w * kernel_size != cols):
        raise BellParamsError(
            f"Matrix of shape {a.shape} cannot be split into blocks of size {kernel_size}"
        )
    trimmed = a[: n_h * kernel_size, : n_w * kernel_size]
    return trimmed.reshape(n_h, kernel_size, n_w, kernel_size)


def compute_zero_blocks(a, kernel_size: int) -> int:
    """Count the square blocks whose values sum to zero.

    The matrix dimensions must be multiples of ``kernel_size``.
    """
    sums = compute_block_sums(a, kernel_size)
    return int(np.count_nonzero(sums == 0))


def iterative_compute_zero_blocks(a, kernel_size: int) -> int:
    """Count the square blocks whose values are all zero.

    Rows and columns beyond the last whole block are ignored.
    """
    blocks = _blocks(_as_matrix(a), kernel_size, strict=False)
    return int(np.count_nonzero(np.all(blocks == 0, axis=(1, 3))))


def compute_block_sums(a, kernel_size: int) -> np.ndarray:
    """Return the (blocks_h, blocks_w) array of block sums.

    The matrix dimensions must be multiples of ``kernel_size``.
    """
    blocks = _blocks(_as_matrix(a), kernel_size, strict=True)
    return blocks.sum(axis=(1, 3), dtype=np.float32)


def iterative_compute_block_sums(a, kernel_size: int) -> np.ndarray:
    """Return block sums, ignoring rows and columns beyond the last whole block."""
    blocks = _blocks(_as_matrix(a), kernel_size, strict=False)
    return blocks.sum(axis=(1, 3), dtype=np.float32)


def compute_ell_col_ind(block_sums, cols: int) -> np.ndarray:
    """Return the block-column indices of the non-zero blocks of each block row.

    Each row holds ``cols`` entries; rows with fewer non-zero blocks are padded
    with -1.
    """
    sums = np.asarray(block_sums)
    if sums.ndim != 2:
        raise BellParamsError("Block sums must be two-dimensional")
    result = np.full((sums.shape[0], cols), -1, dtype=np.int64)
    for out_row, sum_row in zip(result, sums):
        nonzero = np.flatnonzero(sum_row)
        if nonzero.size > cols:
            raise BellParamsError(
                f"A block row has {nonzero.size} non-zero blocks, more than {cols}"
            )
        out_row[: nonzero.size] = nonzero
    return result


def compute_ell_values(a, ell_col_ind, block_size: int) -> np.ndarray:
    """Gather the blocks named by ``ell_col_ind`` into a (rows, cols, bs, bs) array.

    Entries of -1 yield zero blocks.
    """
    _check_kernel(block_size)
    matrix = _as_matrix(a)
    indices = np.asarray(ell_col_ind, dtype=np.int64)
    if indices.ndim != 2:
        raise BellParamsError("Column index array must be two-dimensional")
    rows, cols = indices.shape
    values = np.zeros((rows, cols, block_size, block_size), dtype=np.float32)
    for (i, j), block_col in np.ndenumerate(indices):
        if block_col == -1:
            continue
        r0, c0 = i * block_size, int(block_col) * block_size
        block = matrix[r0 : r0 + block_size, c0 : c0 + block_size]
        if block.shape != (block_size, block_size):
            raise BellParamsError(
                f"Block ({i}, {block_col}) lies outside the matrix"
            )
        values[i, j] = block
    return values


def get_bell_params(a, debug: bool = False) -> BellParams:
    """Choose the block size that filters out the most zeros and build the Blocked-ELL arrays.

    Among block sizes removing the same number of zeros the smallest wins.
    With ``debug`` the matrix and the computed arrays are printed.
    """
    matrix = _as_matrix(a)
    x, y = matrix.shape
    if x != y:
        raise BellParamsError("Matrix must be square")
    if is_prime(x):
        raise BellParamsError("Matrix dimensions can't be prime")

    timings: dict[str, float] = {}
    start = time.perf_counter()

    divisors = find_divisors(x)
    zero_count, block_size = 0, 0
    for kernel in divisors:
        zeros = iterative_compute_zero_blocks(matrix, kernel) * kernel * kernel
        if zeros > zero_count:
            zero_count, block_size = zeros, kernel
    mark = time.perf_counter()
    timings["compute_zero_blocks"] = mark - start
    if block_size == 0:
        raise BellParamsError("Matrix has no zero blocks of any admissible size")

    step = time.perf_counter()
    block_sums = compute_block_sums(matrix, block_size)
    ell_cols = int(np.count_nonzero(block_sums, axis=1).max())
    timings["compute_ell_cols"] = time.perf_counter() - step

    step = time.perf_counter()
    ell_col_ind = compute_ell_col_ind(block_sums, ell_cols)
    timings["get_ell_col_ind"] = time.perf_counter() - step

    step = time.perf_counter()
    ell_value = compute_ell_values(matrix, ell_col_ind, block_size)
    timings["get_ell_values"] = time.perf_counter() - step
    timings["total"] = time.perf_counter() - start

    if debug:
        rows = x // block_size
        print(matrix)
        print(block_sums)
        print(format_matrix(ell_col_ind), end="")
        print(format_ell_value(ell_value, rows, ell_cols, block_size), end="")

    return BellParams(
        ell_block_size=block_size,
        ell_cols=ell_cols,
        ell_col_ind=ell_col_ind,
        ell_value=ell_value,
        zero_count=zero_count,
        divisor_count=len(divisors),
        timings=timings,
    )