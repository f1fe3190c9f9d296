import numpy as np

from bellparams.blocked_ell import get_bell_params
from bellparams.cli import main, make_matrix
from bellparams.utils import format_matrix


def test_make_matrix_shape_and_threshold():
    a = make_matrix(6, 8, 0.5)
    assert a.shape == (6, 8)
    assert a.dtype == np.float32
    nonzero = a[a != 0]
    assert np.all(nonzero >= 0.5)


def test_make_matrix_deterministic():
    assert np.array_equal(make_matrix(5, 5, 0.0, 3), make_matrix(5, 5, 0.0, 3))
    assert not np.array_equal(make_matrix(5, 5, -5.0, 3), make_matrix(5, 5, -5.0, 4))


def test_usage_on_missing_arguments(capsys):
    assert main(["4", "4"]) == 1
    assert "Usage: x, y, threshold, print debug" in capsys.readouterr().out


def test_non_square_is_error(capsys):
    assert main(["4", "6", "0.5", "0"]) == 1
    out = capsys.readouterr().out
    assert "Matrix must be square" in out
    assert "Error code 1, exiting!" in out


def test_prime_is_error(capsys):
    assert main(["7", "7", "0", "0"]) == 1
    assert "Matrix dimensions can't be prime" in capsys.readouterr().out


def test_no_zero_blocks_is_error(capsys):
    assert main(["8", "8", "-100", "0"]) == 1
    assert "Error code 1, exiting!" in capsys.readouterr().out


def test_success_reports_parameters(capsys):
    assert main(["16", "16", "1.5", "0"]) == 0
    out = capsys.readouterr().out
    expected = get_bell_params(make_matrix(16, 16, 1.5))
    assert f"BEST_KERNEL_SIZE: {expected.ell_block_size}\n" in out
    assert f"ELLCOLS: {expected.ell_cols}\n" in out
    assert out.rstrip().endswith("All done. Great Success!")


def test_debug_prints_column_indices(capsys):
    assert main(["8", "8", "1.5", "1"]) == 0
    out = capsys.readouterr().out
    expected = get_bell_params(make_matrix(8, 8, 1.5))
    assert format_matrix(expected.ell_col_ind) in out