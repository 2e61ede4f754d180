"""Bitwise convolutions: AND, XOR (Walsh-Hadamard) and subset products."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def _check_power_of_two(n: int) -> None:
    if n & (n - 1):
        raise ValueError(f"length {n} is not a power of two")


def _padded(seq: Sequence[Any], n: int) -> list[Any]:
    values = list(seq)
    return values + [0] * (n - len(values))


def _common_size(a: Sequence[Any], b: Sequence[Any]) -> int:
    longest = max(len(a), len(b))
    return 1 << (longest - 1).bit_length()


def and_transform(a: Sequence[Any], inverse: bool = False) -> list[Any]:
    """Superset-sum transform (or its inverse) of a power-of-two length sequence."""
    values = list(a)
    n = len(values)
    _check_power_of_two(n)
    bit = 1
    while bit < n:
        for mask in range(n):
            if not mask & bit:
                if inverse:
                    values[mask] -= values[mask | bit]
                else:
                    values[mask] += values[mask | bit]
        bit <<= 1
    return values


def _or_transform(a: Sequence[Any], inverse: bool = False) -> list[Any]:
    """Subset-sum transform (or its inverse) of a power-of-two length sequence."""
    values = list(a)
    n = len(values)
    _check_power_of_two(n)
    bit = 1
    while bit < n:
        for mask in range(n):
            if mask & bit:
                if inverse:
                    values[mask] -= values[mask ^ bit]
                else:
                    values[mask] += values[mask ^ bit]
        bit <<= 1
    return values


def and_multiply(a: Sequence[Any], b: Sequence[Any]) -> list[Any]:
    """Return c with c[k] = sum of a[i] * b[j] over all i & j == k."""
    if not a or not b:
        return []
    n = _common_size(a, b)
    fa = and_transform(_padded(a, n))
    fb = and_transform(_padded(b, n))
    return and_transform([x * y for x, y in zip(fa, fb)], inverse=True)


def hadamard_transform(a: Sequence[Any]) -> list[Any]:
    """Unnormalised Walsh-Hadamard transform of a power-of-two length sequence."""
    values = list(a)
    n = len(values)
    _check_power_of_two(n)
    length = 1
    while length < n:
        for start in range(0, n, length << 1):
            for j in range(start, start + length):
                v, u = values[j], values[j + length]
                values[j] = v + u
                values[j + length] = v - u
        length <<= 1
    return values


def _scale_down(value: Any, n: int) -> Any:
    if isinstance(value, int):
        return value // n
    return value / n


def xor_multiply(a: Sequence[Any], b: Sequence[Any]) -> list[Any]:
    """Return c with c[k] = sum of a[i] * b[j] over all i ^ j == k."""
    if not a or not b:
        return []
    n = _common_size(a, b)
    fa = hadamard_transform(_padded(a, n))
    fb = hadamard_transform(_padded(b, n))
    product = hadamard_transform([x * y for x, y in zip(fa, fb)])
    return [_scale_down(x, n) for x in product]


def subset_multiply(a: Sequence[Any], b: Sequence[Any]) -> list[Any]:
    """Return c with c[i | j] += a[i] * b[j] for every disjoint pair (i & j == 0)."""
    if not a or not b:
        return []
    n = _common_size(a, b)
    levels = n.bit_length()

    def ranked(seq: Sequence[Any]) -> list[list[Any]]:
        layers = [[0] * n for _ in range(levels)]
        for i, x in enumerate(seq):
            layers[i.bit_count()][i] = x
        return [_or_transform(layer) for layer in layers]

    at = ranked(a)
    bt = ranked(b)
    prod: list[list[Any]] = [[0] * n for _ in range(levels)]
    for level1, row1 in enumerate(at):
        for level2 in range(levels - level1):
            target = prod[level1 + level2]
            for i, (x, y) in enumerate(zip(row1, bt[level2])):
                target[i] += x * y

    prod = [_or_transform(layer, inverse=True) for layer in prod]
    return [prod[i.bit_count()][i] for i in range(n)]