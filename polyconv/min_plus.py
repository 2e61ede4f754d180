"""(min, +) and (max, +) convolutions with convex operands."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def _require_nonempty(f: Sequence[Any], g: Sequence[Any]) -> None:
    if not f or not g:
        raise ValueError("f and g must not be empty")


def _require_convex(seq: Sequence[Any], name: str) -> None:
    for a, b, c in zip(seq, seq[1:], seq[2:]):
        if b - a > c - b:
            raise ValueError(f"{name} is not convex")


def min_plus_convex_convex(f: Sequence[Any], g: Sequence[Any]) -> list[Any]:
    """h[k] = min over i + j == k of f[i] + g[j], for convex f and g."""
    _require_nonempty(f, g)
    _require_convex(f, "f")
    _require_convex(g, "g")
    n, m = len(f), len(g)
    conv: list[Any] = []
    i = j = 0
    while i < n and j < m:
        conv.append(f[i] + g[j])
        if j + 1 == m or (i + 1 != n and f[i + 1] - f[i] <= g[j + 1] - g[j]):
            i += 1
        else:
            j += 1
    return conv


def max_plus_convex_convex(f: Sequence[Any], g: Sequence[Any]) -> list[Any]:
    """h[k] = max over i + j == k of f[i] + g[j], for concave f and g."""
    result = min_plus_convex_convex([-x for x in f], [-x for x in g])
    return [-x for x in result]


def min_plus_convex_arbitrary(f: Sequence[Any], g: Sequence[Any]) -> list[Any]:
    """h[k] = min over i + j == k of f[i] + g[j], for convex f and any g."""
    _require_nonempty(f, g)
    _require_convex(f, "f")
    n = len(f)
    conv: list[Any] = [0] * (n + len(g) - 1)

    def solve(lo: int, hi: int, opt_lo: int, opt_hi: int) -> None:
        if hi <= lo:
            return
        mid = (lo + hi) // 2
        best = -1
        for i in range(max(opt_lo, mid - n + 1), min(opt_hi, mid + 1)):
            if best == -1 or g[best] + f[mid - best] > g[i] + f[mid - i]:
                best = i
        conv[mid] = g[best] + f[mid - best]
        solve(lo, mid, opt_lo, best + 1)
        solve(mid + 1, hi, best, opt_hi)

    solve(0, len(conv), 0, len(g))
    return conv


def max_plus_convex_arbitrary(f: Sequence[Any], g: Sequence[Any]) -> list[Any]:
    """h[k] = max over i + j == k of f[i] + g[j], for concave f and any g."""
    result = min_plus_convex_arbitrary([-x for x in f], [-x for x in g])
    return [-x for x in result]