"""Lagrange interpolation over any field (ints are treated as rationals)."""

from __future__ import annotations

from collections.abc import Sequence
from fractions import Fraction
from typing import Any


def _divide(a: Any, b: Any) -> Any:
    if isinstance(a, int) and isinstance(b, int):
        q = Fraction(a, b)
        return q.numerator if q.denominator == 1 else q
    return a / b


def lagrange_interpolation(x: Sequence[Any], y: Sequence[Any]) -> list[Any]:
    """Return coefficients of the degree < n polynomial f with f(x[i]) = y[i]."""
    if len(x) != len(y):
        raise ValueError("x and y must have the same length")
    n = len(x)

    prod: list[Any] = [1]
    for xi in x:
        shifted = [0] + prod
        for j, c in enumerate(prod):
            shifted[j] -= xi * c
        prod = shifted

    f: list[Any] = [0] * n
    for i, (xi, yi) in enumerate(zip(x, y)):
        denom = 1
        for j, xj in enumerate(x):
            if j != i:
                denom *= xi - xj
        if denom == 0:
            raise ValueError("x values must be distinct")
        coeff = _divide(yi, denom)
        val = prod[n]
        for j in reversed(range(n)):
            f[j] += val * coeff
            val = prod[j] + xi * val
    return f