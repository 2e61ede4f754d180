import random

import pytest

from polyconv.multipoint import MultipointEvaluationTree, interpolate, multipoint_evaluation
from polyconv.polynom import MOD, Polynom


def _random_values(seed, count):
    rng = random.Random(seed)
    return [rng.randrange(MOD) for _ in range(count)]


@pytest.mark.parametrize("degree,count", [(5, 40), (40, 5), (50, 70), (100, 33)])
def test_multipoint_matches_direct_evaluation(degree, count):
    poly = Polynom(_random_values(degree, degree))
    points = _random_values(count + 1000, count)
    assert multipoint_evaluation(poly, points) == [poly.eval(x) for x in points]


def test_tree_evaluate_small_polynomial():
    poly = Polynom([1, 2, 3])
    points = list(range(20))
    tree = MultipointEvaluationTree(points)
    assert tree.evaluate(poly) == [poly.eval(x) for x in points]
    assert len(tree) == 20


def test_tree_evaluate_empty_points():
    assert MultipointEvaluationTree([]).evaluate([1, 2, 3]) == []


def test_interpolate_round_trip():
    x = list(range(1, 41))
    y = _random_values(7, 40)
    f = interpolate(x, y)
    assert len(f) == 40
    assert [f.eval(v) for v in x] == y


def test_interpolate_recovers_polynomial():
    original = Polynom(_random_values(11, 25))
    x = _random_values(12, 25)
    y = [original.eval(v) for v in x]
    assert interpolate(x, y) == original


def test_interpolate_single_point():
    f = interpolate([5], [9])
    assert list(f) == [9]


def test_interpolate_empty():
    assert list(interpolate([], [])) == []


def test_interpolate_rejects_duplicates():
    with pytest.raises(ValueError):
        interpolate([1, 2, 2], [3, 4, 5])


def test_interpolate_rejects_length_mismatch():
    with pytest.raises(ValueError):
        interpolate([1, 2], [3])