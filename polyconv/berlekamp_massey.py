"""Berlekamp-Massey recurrence search and k-th term evaluation."""

from __future__ import annotations

from collections.abc import Sequence
from fractions import Fraction
from typing import Any


def _divide(a: Any, b: Any) -> Any:
    if isinstance(a, int) and isinstance(b, int):
        q = Fraction(a, b)
        return q.numerator if q.denominator == 1 else q
    return a / b


def find_recurrence(values: Sequence[Any]) -> list[Any]:
    """Return the shortest c with values[i] = sum(c[j] * values[i - j - 1])."""
    add_option: list[Any] = []
    recurrence: list[Any] = []
    add_position = -1
    add_value: Any = None

    for i, current in enumerate(values):
        value = sum(
            (values[i - j - 1] * c for j, c in enumerate(recurrence)), 0
        )
        delta = current - value
        if delta == 0:
            continue

        if add_position == -1:
            new_recurrence = [0] * (i + 1)
        else:
            shifted = [0] * (i - add_position - 1) + [-1] + add_option
            coeff = -_divide(delta, add_value)
            new_recurrence = [x * coeff for x in shifted]
            if len(new_recurrence) < len(recurrence):
                new_recurrence += [0] * (len(recurrence) - len(new_recurrence))
            for j, c in enumerate(recurrence):
                new_recurrence[j] += c

        if add_position == -1 or i - len(recurrence) >= add_position - len(add_option):
            add_option = recurrence
            add_position = i
            add_value = delta
        recurrence = new_recurrence
    return recurrence


def multiply(first: Sequence[Any], second: Sequence[Any]) -> list[Any]:
    """Schoolbook polynomial product."""
    prod: list[Any] = [0] * max(0, len(first) + len(second) - 1)
    for i, x in enumerate(first):
        for j, y in enumerate(second):
            prod[i + j] += x * y
    return prod


def poly_remainder(first: Sequence[Any], second: Sequence[Any]) -> list[Any]:
    """Remainder of first modulo second; second must have a non-zero leading term."""
    if not second:
        return []
    if second[-1] == 0:
        raise ValueError("divisor must have a non-zero leading coefficient")
    rem = list(first)
    m = len(second)
    while rem and len(rem) >= m:
        if rem[-1] == 0:
            rem.pop()
            continue
        coeff = _divide(rem[-1], second[-1])
        offset = len(rem) - m
        for i, s in enumerate(second):
            rem[offset + i] -= coeff * s
        rem.pop()
    return rem


def power_remainder(recurrence: Sequence[Any], k: int) -> list[Any]:
    """Return x**k modulo the polynomial given by recurrence."""
    if k < 0:
        raise ValueError("k must be non-negative")
    modulus = list(recurrence)
    while modulus and modulus[-1] == 0:
        modulus.pop()
    result: list[Any] = [1]
    value: list[Any] = [0, 1]
    while k:
        if k & 1:
            result = poly_remainder(multiply(result, value), modulus)
        value = poly_remainder(multiply(value, value), modulus)
        k >>= 1
    return result


def find_kth(values: Sequence[Any], recurrence: Sequence[Any], k: int) -> Any:
    """Return the k-th term of the sequence defined by its first values and recurrence."""
    characteristic = list(reversed(recurrence)) + [-1]
    poly = power_remainder(characteristic, k)
    if len(poly) > len(values):
        raise ValueError("not enough initial values for this recurrence")
    return sum((p * v for p, v in zip(poly, values)), 0)