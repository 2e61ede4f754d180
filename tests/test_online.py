import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from polyconv.online import ConvolutionOnline
from polyconv.polynom import MOD, Polynom


def test_matches_full_product_while_pushing():
    rng = random.Random(7)
    n = 70
    f = [rng.randrange(MOD) for _ in range(n)]
    g = [rng.randrange(MOD) for _ in range(n)]
    full = Polynom(f) * Polynom(g)
    conv = ConvolutionOnline()
    for i, (a, b) in enumerate(zip(f, g)):
        conv.push_back(a, b)
        assert conv.query(i) == full[i]
    assert [conv.query(i) for i in range(n)] == full[:n]
    assert len(conv) == n


@given(st.lists(st.tuples(st.integers(0, MOD - 1), st.integers(0, MOD - 1)),
                min_size=1, max_size=40))
@settings(max_examples=30)
def test_random_sequences(pairs):
    conv = ConvolutionOnline()
    for a, b in pairs:
        conv.push_back(a, b)
    f = Polynom(a for a, _ in pairs)
    g = Polynom(b for _, b in pairs)
    full = f * g
    assert [conv.query(i) for i in range(len(pairs))] == full[: len(pairs)]


def test_values_are_reduced():
    conv = ConvolutionOnline()
    conv.push_back(-1, -1)
    assert conv.query(0) == 1


def test_query_out_of_range():
    conv = ConvolutionOnline()
    with pytest.raises(IndexError):
        conv.query(0)
    conv.push_back(2, 3)
    with pytest.raises(IndexError):
        conv.query(1)
    with pytest.raises(IndexError):
        conv.query(-1)