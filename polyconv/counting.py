"""Counting with power series: connected graphs and unbounded knapsack."""

from __future__ import annotations

from collections.abc import Sequence

from polyconv.polynom import MOD, Polynom, modular_inverse


def connected_graphs(n: int) -> list[int]:
    """Entry k is the number of connected labelled simple graphs on k vertices, for k <= n.

    Entry 0 is 0; counts are taken modulo MOD.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    factorials = [1]
    for k in range(1, n + 1):
        factorials.append(factorials[-1] * k % MOD)
    series = Polynom(
        pow(2, k * (k - 1) // 2, MOD) * modular_inverse(factorials[k]) for k in range(n + 1)
    )
    logged = series.log(n + 1)
    return [c * factorials[k] % MOD for k, c in enumerate(logged)]


def knapsack(weights: Sequence[int], max_weight: int) -> Polynom:
    """Entry w counts the multisets of the given weights summing to w, modulo MOD."""
    if max_weight < 0:
        raise ValueError("max_weight must be non-negative")
    distinct = sorted(set(weights))
    if any(w <= 0 for w in distinct):
        raise ValueError("weights must be positive")
    series = [0] * (max_weight + 1)
    for w in distinct:
        for k in range(w, max_weight + 1, w):
            series[k] = (series[k] + modular_inverse(k // w)) % MOD
    return Polynom(series).exp(max_weight + 1)


def restore_weights(weights: Sequence[int], weight: int) -> list[int]:
    """Return weights (with repetition) summing to weight, or [] if none exist."""
    ways = knapsack(weights, weight)
    if ways[weight] == 0:
        return []
    result = []
    for w in weights:
        while w <= weight and ways[weight - w] != 0:
            result.append(w)
            weight -= w
    if weight != 0:
        raise ArithmeticError("could not restore the weights")
    return result