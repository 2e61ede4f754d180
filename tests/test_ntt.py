import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from polyconv import ntt
from polyconv.berlekamp_massey import multiply as schoolbook

MOD = ntt.MOD

coeff = st.integers(min_value=0, max_value=MOD - 1)


def _mod_list(values):
    return [v % MOD for v in values]


def test_known_primitive_roots():
    assert ntt.primitive_root(998_244_353) == 3
    assert ntt.primitive_root(786_433) == 10


@pytest.mark.parametrize("mod", [7, 17, 97, 7681])
def test_primitive_root_has_full_order(mod):
    g = ntt.primitive_root(mod)
    powers = {pow(g, k, mod) for k in range(1, mod)}
    assert len(powers) == mod - 1


def test_normalize_strips_trailing_zeros():
    assert ntt.normalize([1, 0, 2, 0, 0]) == [1, 0, 2]
    assert ntt.normalize([0, 0]) == []


def test_ntt_rejects_non_power_of_two():
    with pytest.raises(ValueError):
        ntt.ntt([1, 2, 3])


def test_ntt_of_delta_is_all_ones():
    assert ntt.ntt([1, 0, 0, 0, 0, 0, 0, 0]) == [1] * 8


@settings(max_examples=30, deadline=None)
@given(st.integers(min_value=0, max_value=5).flatmap(
    lambda k: st.lists(coeff, min_size=1 << k, max_size=1 << k)))
def test_ntt_twice_reverses_and_scales(values):
    n = len(values)
    twice = ntt.ntt(ntt.ntt(values))
    restored = [twice[0]] + twice[:0:-1]
    assert restored == [v * n % MOD for v in values]


def test_small_multiply():
    assert ntt.multiply([1, 1], [1, 1]) == [1, 2, 1]
    assert ntt.multiply([], [1, 2]) == []


@settings(max_examples=15, deadline=None)
@given(st.lists(coeff, min_size=1, max_size=120), st.lists(coeff, min_size=1, max_size=120))
def test_multiply_matches_schoolbook(a, b):
    assert ntt.multiply(a, b) == _mod_list(schoolbook(a, b))


def test_multiply_large_uses_transform_correctly():
    a = [(i * 7919 + 3) % MOD for i in range(200)]
    b = [(i * i + 11) % MOD for i in range(150)]
    assert ntt.multiply(a, b) == _mod_list(schoolbook(a, b))


def test_multiply_with_small_modulus():
    a = [(i * 5 + 1) % 7681 for i in range(100)]
    b = [(i * 3 + 2) % 7681 for i in range(90)]
    expected = [v % 7681 for v in schoolbook(a, b)]
    assert ntt.multiply(a, b, 7681) == expected


def test_fft_2d_round_trip():
    grid = [[(i * 4 + j) * 13 % MOD for j in range(4)] for i in range(4)]
    assert ntt.fft_2d(ntt.fft_2d(grid), invert=True) == grid


def test_fft_2d_rejects_non_square():
    with pytest.raises(ValueError):
        ntt.fft_2d([[1, 2], [3, 4], [5, 6]])


def test_multiply_2d_of_outer_products():
    a1, a2 = [1, 2, 3], [4, 5]
    b1, b2 = [6, 7], [8, 9, 10]
    a = [[x * y for y in a2] for x in a1]
    b = [[x * y for y in b2] for x in b1]
    rows = ntt.multiply(a1, b1)
    cols = ntt.multiply(a2, b2)
    assert ntt.multiply_2d(a, b) == [[x * y % MOD for y in cols] for x in rows]


def test_multiply_2d_single_row_matches_multiply():
    a = [[3, 1, 4, 1, 5]]
    b = [[9, 2, 6]]
    assert ntt.multiply_2d(a, b) == [ntt.multiply(a[0], b[0])]


def test_multiply_2d_empty():
    assert ntt.multiply_2d([], [[1]]) == []


@pytest.mark.parametrize("degree", [1, 5, 128, 300])
def test_inverse_product_is_one(degree):
    p = [1 + i * 37 % 1000 for i in range(200)]
    inv = ntt.inverse(p, degree)
    assert len(inv) == degree
    product = ntt.multiply(p, inv)[:degree]
    assert product == [1] + [0] * (degree - 1)


def test_inverse_rejects_zero_constant():
    with pytest.raises(ValueError):
        ntt.inverse([0, 1], 4)


@pytest.mark.parametrize("n,m", [(10, 3), (140, 100), (300, 100), (5, 8)])
def test_divide_reconstructs(n, m):
    a = [(i * 31 + 7) % MOD for i in range(n)]
    b = [(i * 17 + 5) % MOD for i in range(m)]
    q, r = ntt.divide(a, b)
    assert len(r) < len(b)
    recombined = ntt.multiply(q, b) if q else []
    length = max(len(recombined), len(r))
    total = [
        ((recombined[i] if i < len(recombined) else 0) + (r[i] if i < len(r) else 0)) % MOD
        for i in range(length)
    ]
    assert ntt.normalize(total) == ntt.normalize(a)


def test_divide_by_zero_polynomial():
    with pytest.raises(ZeroDivisionError):
        ntt.divide([1, 2], [0, 0])


def test_multipoint_evaluation_matches_remainders():
    p = [(i * 97 + 1) % MOD for i in range(100)]
    points = [(i * 12345 + 6) % MOD for i in range(70)]
    values = ntt.multipoint_evaluation(p, points)
    for point, value in zip(points, values):
        remainder = ntt.divide(p, [-point % MOD, 1])[1]
        assert value == (remainder[0] if remainder else 0)


def test_multipoint_evaluation_empty():
    assert ntt.multipoint_evaluation([1, 2, 3], []) == []


def test_log_of_one_minus_x():
    coeffs = ntt.log([1, MOD - 1], 10)
    assert coeffs[0] == 0
    for k in range(1, 10):
        assert k * coeffs[k] % MOD == MOD - 1


def test_log_requires_unit_constant():
    with pytest.raises(ValueError):
        ntt.log([2, 1], 4)


@pytest.mark.parametrize("degree", [1, 8, 40])
def test_exp_log_round_trip(degree):
    p = [1] + [(i * 53 + 2) % MOD for i in range(1, 30)]
    expected = (p + [0] * degree)[:degree]
    assert ntt.exp(ntt.log(p, degree), degree) == expected


def test_log_exp_round_trip():
    q = [0] + [(i * 71 + 9) % MOD for i in range(1, 25)]
    degree = 20
    assert ntt.log(ntt.exp(q, degree), degree) == q[:degree]


def test_exp_of_zero_is_one():
    assert ntt.exp([0], 5) == [1, 0, 0, 0, 0]