"""Floating-point FFT and polynomial multiplication in one and two dimensions."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from functools import lru_cache
from typing import Any

_NAIVE_LIMIT = 20


@lru_cache(maxsize=None)
def _reversed_masks(n: int) -> tuple[int, ...]:
    lg = n.bit_length() - 1
    rev = [0] * n
    for mask in range(1, n):
        rev[mask] = (rev[mask >> 1] >> 1) | ((mask & 1) << (lg - 1))
    return tuple(rev)


@lru_cache(maxsize=None)
def _roots(length: int) -> tuple[complex, ...]:
    return tuple(
        complex(math.cos(math.pi * i / length), math.sin(math.pi * i / length))
        for i in range(length)
    )


def fft(a: Iterable[Any]) -> list[complex]:
    """Forward DFT with kernel exp(+2*pi*i*j*k/n); length must be a power of two."""
    values = [complex(v) for v in a]
    n = len(values)
    if n == 0:
        return values
    if n & (n - 1):
        raise ValueError(f"length {n} is not a power of two")

    for i, r in enumerate(_reversed_masks(n)):
        if i < r:
            values[i], values[r] = values[r], values[i]

    length = 1
    while length < n:
        roots = _roots(length)
        for start in range(0, n, length << 1):
            for j, root in enumerate(roots):
                u = values[start + j]
                v = values[start + j + length] * root
                values[start + j] = u + v
                values[start + j + length] = u - v
        length <<= 1
    return values


def _all_integral(values: Iterable[Any]) -> bool:
    return all(isinstance(v, int) for v in values)


def _convert(value: float, integral: bool) -> Any:
    return round(value) if integral else value


def multiply(a: Sequence[Any], b: Sequence[Any], integral: bool | None = None) -> list[Any]:
    """Product of two polynomials; results are rounded to int when integral.

    With integral left as None it is true exactly when every input is an int.
    """
    if not a or not b:
        return []
    if integral is None:
        integral = _all_integral(a) and _all_integral(b)

    n, m = len(a), len(b)
    if min(n, m) <= _NAIVE_LIMIT:
        cast = int if integral else float
        product: list[Any] = [cast(0)] * (n + m - 1)
        for i, x in enumerate(a):
            for j, y in enumerate(b):
                product[i + j] += cast(x) * cast(y)
        return product

    real_size = n + m - 1
    base = 2
    while base < real_size:
        base <<= 1

    packed = [0j] * base
    for i, x in enumerate(a):
        packed[i] = complex(x, packed[i].imag)
    for i, y in enumerate(b):
        packed[i] = complex(packed[i].real, y)

    res = fft(packed)
    coeff = complex(0, -0.25 / base)
    for i in range((base >> 1) + 1):
        j = (base - i) & (base - 1)
        sq_i = res[i] * res[i]
        sq_j = res[j] * res[j]
        num = (sq_j - sq_i.conjugate()) * coeff
        res[j] = (sq_i - sq_j.conjugate()) * coeff
        res[i] = num

    half = base >> 1
    for i in range(half):
        a0 = res[i] + res[i + half]
        twiddle = complex(math.cos(math.pi * i / half), math.sin(math.pi * i / half))
        a1 = (res[i] - res[i + half]) * twiddle
        res[i] = a0 + a1 * 1j

    res = fft(res[:half])
    return [
        _convert(res[i >> 1].imag if i & 1 else res[i >> 1].real, integral)
        for i in range(real_size)
    ]


def normalize(poly: Sequence[Any]) -> list[Any]:
    """Return poly without trailing zero coefficients."""
    result = list(poly)
    while result and result[-1] == 0:
        result.pop()
    return result


def fft_2d(a: Sequence[Sequence[Any]], invert: bool = False) -> list[list[complex]]:
    """Two-dimensional DFT of a square power-of-two grid, or its inverse."""
    n = len(a)
    if any(len(row) != n for row in a):
        raise ValueError("grid must be square")
    grid = [[complex(v) for v in row] for row in a]
    for _ in range(2):
        rows = []
        for row in grid:
            transformed = fft(row)
            if invert and transformed:
                size = len(transformed)
                transformed = [v / size for v in [transformed[0], *transformed[:0:-1]]]
            rows.append(transformed)
        grid = [list(col) for col in zip(*rows)]
    return grid


def multiply_2d(
    a: Sequence[Sequence[Any]],
    b: Sequence[Sequence[Any]],
    integral: bool | None = None,
) -> list[list[Any]]:
    """Product of two bivariate polynomials given as coefficient grids."""
    if not a or not b or not a[0] or not b[0]:
        return []
    if integral is None:
        integral = all(_all_integral(row) for row in a) and all(_all_integral(row) for row in b)

    size_x = len(a) + len(b) - 1
    size_y = len(a[0]) + len(b[0]) - 1
    base = 2
    while base < max(size_x, size_y):
        base <<= 1

    def to_grid(m: Sequence[Sequence[Any]]) -> list[list[complex]]:
        grid = [[0j] * base for _ in range(base)]
        for i, row in enumerate(m):
            for j, v in enumerate(row):
                grid[i][j] = complex(v)
        return grid

    fa = fft_2d(to_grid(a))
    fb = fft_2d(to_grid(b))
    product = fft_2d(
        [[x * y for x, y in zip(ra, rb)] for ra, rb in zip(fa, fb)], invert=True
    )
    return [
        [_convert(product[i][j].real, integral) for j in range(size_y)]
        for i in range(size_x)
    ]