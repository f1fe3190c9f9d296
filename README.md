# bellparams

Given a sparse square matrix, `bellparams` tries every divisor of its size
from 2 up to half the size as a square block size, and picks the one that
filters out the most zeroes (the number of all-zero blocks times the block
area; on a tie the smaller block size wins). It then builds the arrays that
describe the matrix in Blocked-ELL form: the block size, the number of block
columns per block row (`ell_cols`), the block column index array and the
block value array.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Command line

```
find-bell-params X Y THRESHOLD DEBUG
```

The command builds a random `X` by `Y` float32 matrix of standard normal
values from the fixed seed 42, sets every entry below `THRESHOLD` to zero,
and runs the block size search on it. Each argument is read from its leading
number; an argument that does not start with one counts as 0. A non-zero
`DEBUG` also prints the matrix, the block sums, the column index array and
the value array.

On success it prints the number of candidate block sizes, the time spent in
each step, how many zeroes the chosen block size filters out, the number of
zero blocks, and finally:

```
BEST_KERNEL_SIZE: <block size>
ELLCOLS: <ell_cols>
All done. Great Success!
```

and exits with status 0. With fewer than four arguments it prints a usage
line and exits with status 1. If the matrix is not square, its size has no
divisor between 2 and its square root (sizes below 4 included), or it has
no all-zero block of any candidate size, it prints the reason followed by
`Error code 1, exiting!` and exits with status 1.

```
find-bell-params 8 8 0.5 0
```

## Library

```python
from bellparams.cli import make_matrix
from bellparams.blocked_ell import get_bell_params, BellParamsError

a = make_matrix(16, 16, 0.5, 42)
try:
    params = get_bell_params(a, False)
except BellParamsError as exc:
    print(exc)
else:
    print(params.ell_block_size)   # chosen block size
    print(params.ell_cols)         # block columns per block row
    print(params.ell_col_ind)      # int64 array, shape (rows, ell_cols)
    print(params.ell_value)        # float32 array, shape (rows, ell_cols, bs, bs)
```

`get_bell_params(a, debug)` returns a `BellParams` dataclass with the fields
`ell_block_size`, `ell_cols`, `ell_col_ind`, `ell_value`, `zero_count` (the
number of zeroes filtered out), `divisor_count` (the number of candidate
block sizes) and `timings` (seconds per step, keyed `compute_zero_blocks`,
`compute_ell_cols`, `get_ell_col_ind`, `get_ell_values` and `total`), plus
the property `zero_blocks`. `BellParamsError`, a subclass of `ValueError`,
is raised for matrices that cannot be handled.

The building blocks in `bellparams.blocked_ell` are available on their own:

- `compute_zero_blocks(a, kernel_size)` counts the `k` by `k` blocks whose
  values sum to zero; the matrix dimensions must be multiples of `k`.
- `iterative_compute_zero_blocks(a, kernel_size)` counts the blocks whose
  values are all zero, ignoring rows and columns past the last whole block.
- `compute_block_sums(a, kernel_size)` returns the array of block sums; the
  dimensions must be multiples of `k`. `iterative_compute_block_sums` does
  the same but ignores rows and columns past the last whole block.
- `compute_ell_col_ind(block_sums, cols)` lists, for each block row, the
  indices of its non-zero blocks, padded with `-1` to `cols` entries.
- `compute_ell_values(a, ell_col_ind, block_size)` gathers the selected
  blocks into the value array; `-1` entries give zero blocks.

`bellparams.utils` provides `is_prime`, `find_divisors` (the divisors of
`x` from 2 up to `x // 2`, in ascending order), `format_matrix` and
`format_ell_value` (the value array laid out as a dense grid).

## What it does not do

The package only computes the Blocked-ELL parameters and arrays. It does
not create sparse matrix objects, perform sparse matrix products, or run
anything on a GPU; passing the arrays to such a library is left to the
caller.