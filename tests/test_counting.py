from math import comb

import pytest

from polyconv.counting import connected_graphs, knapsack, restore_weights
from polyconv.polynom import MOD


def _count_multisets(weights, limit):
    ways = [1] + [0] * limit
    for w in sorted(set(weights)):
        for s in range(w, limit + 1):
            ways[s] += ways[s - w]
    return [v % MOD for v in ways]


def test_connected_graphs_small_values():
    counts = connected_graphs(3)
    assert counts[:4] == [0, 1, 1, 4]


def test_connected_graphs_satisfy_decomposition():
    n = 10
    conn = connected_graphs(n)
    assert len(conn) == n + 1
    for m in range(1, n + 1):
        total = sum(
            comb(m - 1, k - 1) * conn[k] * pow(2, comb(m - k, 2), MOD) for k in range(1, m + 1)
        )
        assert total % MOD == pow(2, comb(m, 2), MOD)


def test_connected_graphs_rejects_negative():
    with pytest.raises(ValueError):
        connected_graphs(-1)


@pytest.mark.parametrize("weights", [[1, 3, 5], [2, 7], [1], [4, 6, 9, 10]])
def test_knapsack_matches_counting(weights):
    limit = 40
    assert list(knapsack(weights, limit)) == _count_multisets(weights, limit)


def test_knapsack_ignores_duplicates():
    assert knapsack([2, 3, 2, 3], 30) == knapsack([3, 2], 30)


def test_knapsack_rejects_bad_weights():
    with pytest.raises(ValueError):
        knapsack([0, 2], 10)
    with pytest.raises(ValueError):
        knapsack([2], -1)


@pytest.mark.parametrize("weights,weight", [([3, 5], 19), ([7, 2], 11), ([1, 4], 9)])
def test_restore_weights_sums_to_target(weights, weight):
    result = restore_weights(weights, weight)
    assert sum(result) == weight
    assert set(result) <= set(weights)


def test_restore_weights_impossible():
    assert restore_weights([2, 4], 5) == []