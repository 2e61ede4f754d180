from math import comb

import pytest
from hypothesis import given, settings, strategies as st

from polyconv.complex_fft import fft, fft_2d, multiply, multiply_2d, normalize

coeffs = st.lists(st.integers(-100, 100), min_size=1, max_size=64)


def evaluate(poly, x):
    return sum(c * x ** i for i, c in enumerate(poly))


def evaluate_2d(grid, x, y):
    return sum(c * x ** i * y ** j for i, row in enumerate(grid) for j, c in enumerate(row))


def test_fft_of_delta():
    assert fft([1, 0, 0, 0]) == pytest.approx([1, 1, 1, 1])


def test_fft_of_shift():
    assert fft([0, 1, 0, 0]) == pytest.approx([1, 1j, -1, -1j])


def test_fft_empty():
    assert fft([]) == []


def test_fft_rejects_bad_length():
    with pytest.raises(ValueError):
        fft([1, 2, 3])


@given(st.integers(0, 5).flatmap(lambda lg: st.lists(st.integers(-50, 50), min_size=1 << lg, max_size=1 << lg)))
def test_fft_inverse_round_trip(a):
    transformed = fft(a)
    back = fft([transformed[0], *transformed[:0:-1]])
    assert [v / len(a) for v in back] == pytest.approx(a)


@settings(max_examples=50)
@given(coeffs, coeffs)
def test_multiply_evaluation_invariants(a, b):
    product = multiply(a, b)
    assert len(product) == len(a) + len(b) - 1
    for x in (1, -1, 2):
        assert evaluate(product, x) == evaluate(a, x) * evaluate(b, x)


def test_multiply_vandermonde_identity():
    a = [comb(21, k) for k in range(22)]
    b = [comb(22, k) for k in range(23)]
    assert multiply(a, b) == [comb(43, k) for k in range(44)]


def test_multiply_floats():
    a = [0.5] * 30
    b = [2.0] * 25
    product = multiply(a, b, integral=False)
    assert sum(product) == pytest.approx(sum(a) * sum(b))
    assert product[0] == pytest.approx(1.0)


def test_multiply_empty():
    assert multiply([], [1, 2]) == []


def test_normalize():
    assert normalize([1, 2, 0, 0]) == [1, 2]
    assert normalize([0, 0]) == []


@given(st.integers(0, 3).flatmap(
    lambda lg: st.lists(
        st.lists(st.integers(-9, 9), min_size=1 << lg, max_size=1 << lg),
        min_size=1 << lg,
        max_size=1 << lg,
    )
))
def test_fft_2d_round_trip(grid):
    back = fft_2d(fft_2d(grid), invert=True)
    for row, expected in zip(back, grid):
        assert row == pytest.approx(expected)


def test_fft_2d_rejects_non_square():
    with pytest.raises(ValueError):
        fft_2d([[1, 2], [3, 4], [5, 6]])


@settings(max_examples=30)
@given(
    st.integers(1, 5).flatmap(lambda w: st.lists(st.lists(st.integers(-9, 9), min_size=w, max_size=w), min_size=1, max_size=5)),
    st.integers(1, 5).flatmap(lambda w: st.lists(st.lists(st.integers(-9, 9), min_size=w, max_size=w), min_size=1, max_size=5)),
)
def test_multiply_2d_evaluation_invariant(a, b):
    product = multiply_2d(a, b)
    assert len(product) == len(a) + len(b) - 1
    assert all(len(row) == len(a[0]) + len(b[0]) - 1 for row in product)
    for x, y in ((1, 1), (2, 3), (-1, 2)):
        assert evaluate_2d(product, x, y) == evaluate_2d(a, x, y) * evaluate_2d(b, x, y)


def test_multiply_2d_empty():
    assert multiply_2d([], [[1]]) == []
    assert multiply_2d([[]], [[1]]) == []