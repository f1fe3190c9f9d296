import numpy as np
import pytest

from bellparams.utils import find_divisors, format_ell_value, format_matrix, is_prime


@pytest.mark.parametrize("n", [2, 3, 5, 7, 11, 13, 97])
def test_primes_are_prime(n):
    assert is_prime(n)


@pytest.mark.parametrize("n", [4, 6, 9, 15, 100, 121])
def test_composites_are_not_prime(n):
    assert not is_prime(n)


def test_is_prime_agrees_with_divisors():
    for n in range(2, 300):
        assert is_prime(n) == (find_divisors(n) == [])


def test_find_divisors_pinned():
    assert find_divisors(12) == [2, 3, 4, 6]


@pytest.mark.parametrize("n", [16, 36, 60, 97, 128, 210])
def test_find_divisors_invariants(n):
    divisors = find_divisors(n)
    assert divisors == sorted(divisors)
    assert all(n % d == 0 for d in divisors)
    assert all(2 <= d <= n // 2 for d in divisors)
    for d in divisors:
        assert n // d in divisors


def test_format_matrix_layout():
    assert format_matrix([[1, -1], [0, 2]]) == "1 -1 \n0 2 \n"


def test_format_matrix_numpy_rows():
    text = format_matrix(np.array([[3, 4, 5]]))
    assert text.splitlines() == ["3 4 5 "]


def test_format_ell_value_shape_and_order():
    values = np.arange(8, dtype=np.float32)
    text = format_ell_value(values, 1, 2, 2)
    lines = text.splitlines()
    assert len(lines) == 2
    assert all(len(line.split()) == 4 for line in lines)
    assert [float(tok) for tok in lines[0].split()] == [0.0, 1.0, 4.0, 5.0]
    parsed = sorted(float(tok) for line in lines for tok in line.split())
    assert parsed == sorted(values.tolist())


def test_format_ell_value_width():
    text = format_ell_value([1.5, -2.25, 0.0, 3.0], 1, 1, 2)
    for line in text.splitlines(keepends=True):
        cells = line.rstrip("\n")
        assert len(cells) == 2 * 8


def test_format_ell_value_size_mismatch():
    with pytest.raises(ValueError):
        format_ell_value([1.0, 2.0, 3.0], 1, 1, 2)