"""Number-theoretic transform and polynomial arithmetic modulo a prime."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

MOD = 998_244_353

_NAIVE_MIN = 20
_NAIVE_MAX = 64
_DIV_N_CUT = 128
_DIV_M_CUT = 64
_INV_BRUTE = 128
_EVAL_BLOCK = 32


@lru_cache(maxsize=None)
def primitive_root(mod: int = MOD) -> int:
    """Return the smallest primitive root of the prime mod (known ones are fixed)."""
    if mod == 998_244_353:
        return 3
    if mod == 786_433:
        return 10
    if mod < 2:
        raise ValueError("modulus must be a prime")
    if mod == 2:
        return 1

    primes = []
    value = mod - 1
    d = 2
    while d * d <= value:
        if value % d == 0:
            primes.append(d)
            while value % d == 0:
                value //= d
        d += 1
    if value != 1:
        primes.append(value)

    r = 2
    while True:
        if all(pow(r, (mod - 1) // p, mod) != 1 for p in primes):
            return r
        r += 1


def normalize(poly: Sequence[int]) -> list[int]:
    """Return poly without trailing zero coefficients."""
    result = list(poly)
    while result and result[-1] == 0:
        result.pop()
    return result


@lru_cache(maxsize=None)
def _reversed_masks(n: int) -> tuple[int, ...]:
    lg = n.bit_length() - 1
    rev = [0] * n
    for mask in range(1, n):
        rev[mask] = (rev[mask >> 1] >> 1) | ((mask & 1) << (lg - 1))
    return tuple(rev)


def ntt(a: Sequence[int], mod: int = MOD) -> list[int]:
    """Forward transform: result[k] = sum a[j] * w**(j*k) with w of order len(a)."""
    values = [v % mod for v in a]
    n = len(values)
    if n == 0:
        return values
    if n & (n - 1):
        raise ValueError(f"length {n} is not a power of two")
    if (mod - 1) % n:
        raise ValueError(f"modulus {mod} has no root of unity of order {n}")

    for i, r in enumerate(_reversed_masks(n)):
        if r < i:
            values[i], values[r] = values[r], values[i]

    g = primitive_root(mod)
    length = 1
    while length < n:
        root = pow(g, (mod - 1) // (length << 1), mod)
        for start in range(0, n, length << 1):
            current = 1
            for j in range(start, start + length):
                v = values[j + length] * current % mod
                u = values[j]
                values[j + length] = (u - v) % mod
                values[j] = (u + v) % mod
                current = current * root % mod
        length <<= 1
    return values


def _intt(a: Sequence[int], mod: int) -> list[int]:
    values = ntt(a, mod)
    if not values:
        return values
    inv_n = pow(len(values), -1, mod)
    return [v * inv_n % mod for v in [values[0], *values[:0:-1]]]


def multiply(a: Sequence[int], b: Sequence[int], mod: int = MOD) -> list[int]:
    """Product of two polynomials with coefficients reduced modulo mod."""
    if not a or not b:
        return []
    n, m = len(a), len(b)
    if min(n, m) <= _NAIVE_MIN or max(n, m) <= _NAIVE_MAX:
        prod = [0] * (n + m - 1)
        for i, x in enumerate(a):
            for j, y in enumerate(b):
                prod[i + j] += x * y
        return [v % mod for v in prod]

    real_size = n + m - 1
    size = 1
    while size < real_size:
        size <<= 1
    fa = ntt(list(a) + [0] * (size - n), mod)
    fb = ntt(list(b) + [0] * (size - m), mod)
    return _intt([x * y % mod for x, y in zip(fa, fb)], mod)[:real_size]


def fft_2d(a: Sequence[Sequence[int]], invert: bool = False, mod: int = MOD) -> list[list[int]]:
    """Two-dimensional transform of a square power-of-two grid, or its inverse."""
    n = len(a)
    if any(len(row) != n for row in a):
        raise ValueError("grid must be square")
    grid = [[v % mod for v in row] for row in a]
    for _ in range(2):
        rows = [_intt(row, mod) if invert else ntt(row, mod) for row in grid]
        grid = [list(col) for col in zip(*rows)]
    return grid


def multiply_2d(
    a: Sequence[Sequence[int]], b: Sequence[Sequence[int]], mod: int = MOD
) -> list[list[int]]:
    """Product of two bivariate polynomials given as coefficient grids."""
    if not a or not b or not a[0] or not b[0]:
        return []
    size_x = len(a) + len(b) - 1
    size_y = len(a[0]) + len(b[0]) - 1
    base = 2
    while base < max(size_x, size_y):
        base <<= 1

    def to_grid(m: Sequence[Sequence[int]]) -> list[list[int]]:
        grid = [[0] * base for _ in range(base)]
        for i, row in enumerate(m):
            for j, v in enumerate(row):
                grid[i][j] = v
        return grid

    fa = fft_2d(to_grid(a), False, mod)
    fb = fft_2d(to_grid(b), False, mod)
    product = fft_2d(
        [[x * y % mod for x, y in zip(ra, rb)] for ra, rb in zip(fa, fb)], True, mod
    )
    return [row[:size_y] for row in product[:size_x]]


def _resized(poly: list[int], size: int) -> list[int]:
    if len(poly) >= size:
        return poly[:size]
    return poly + [0] * (size - len(poly))


def inverse(p: Sequence[int], degree: int, mod: int = MOD) -> list[int]:
    """Return the inverse of p modulo x**degree."""
    coeffs = [v % mod for v in p]
    if not coeffs or coeffs[0] == 0:
        raise ValueError("polynomial is not invertible")
    if degree < 0:
        raise ValueError("degree must be non-negative")
    size = len(coeffs)

    brute = min(degree, _INV_BRUTE)
    inv = [0] * brute
    have = [0] * brute
    start_inv = pow(coeffs[0], -1, mod)
    for i in range(brute):
        inv[i] = ((1 if i == 0 else 0) - have[i]) * start_inv % mod
        for j in range(min(size, brute - i)):
            have[i + j] = (have[i + j] + inv[i] * coeffs[j]) % mod

    power = brute
    while power < degree:
        product = multiply(inv, coeffs[: min(size, 2 * power)], mod)
        limit = min(len(product), 2 * power)
        correction = [((2 if i == 0 else 0) - product[i]) % mod for i in range(limit)]
        inv = _resized(multiply(inv, correction, mod), 2 * power)
        power <<= 1
    return _resized(inv, degree)


def divide(a: Sequence[int], b: Sequence[int], mod: int = MOD) -> tuple[list[int], list[int]]:
    """Return (quotient, remainder) of a divided by b."""
    a = normalize([v % mod for v in a])
    b = normalize([v % mod for v in b])
    if not b:
        raise ZeroDivisionError("polynomial division by zero")
    n, m = len(a), len(b)
    if n < m:
        return [], a

    if n <= _DIV_N_CUT or m <= _DIV_M_CUT:
        quotient = [0] * (n - m + 1)
        inv_b = pow(b[-1], -1, mod)
        for i in range(n - 1, m - 2, -1):
            pos = i - m + 1
            q = a[i] * inv_b % mod
            quotient[pos] = q
            for j, bj in enumerate(b):
                a[pos + j] = (a[pos + j] - bj * q) % mod
        return quotient, normalize(a)

    inv_b = inverse(b[::-1], n - m + 1, mod)
    quotient = multiply(a[::-1], inv_b, mod)[: n - m + 1]
    quotient = normalize(quotient[::-1])
    product = multiply(quotient, b, mod)
    remainder = [(a[i] - product[i]) % mod for i in range(m)]
    return quotient, normalize(remainder)


def multipoint_evaluation(p: Sequence[int], x: Sequence[int], mod: int = MOD) -> list[int]:
    """Evaluate polynomial p at each point of x."""
    n = len(x)
    if n == 0:
        return []
    tree_size = (n + _EVAL_BLOCK - 1) // _EVAL_BLOCK
    tree: list[list[int]] = [[] for _ in range(2 * tree_size)]
    for v in range(tree_size):
        leaf = [1]
        for point in x[v * _EVAL_BLOCK : (v + 1) * _EVAL_BLOCK]:
            shifted = [0] + leaf
            for j, c in enumerate(leaf):
                shifted[j] = (shifted[j] - c * point) % mod
            leaf = shifted
        tree[tree_size + v] = leaf

    for v in range(tree_size - 1, 0, -1):
        tree[v] = multiply(tree[2 * v], tree[2 * v + 1], mod)

    tree[1] = divide(p, tree[1], mod)[1]
    for v in range(2, 2 * tree_size):
        tree[v] = divide(tree[v >> 1], tree[v], mod)[1]

    result = []
    for i, point in enumerate(x):
        value = 0
        for c in reversed(tree[tree_size + i // _EVAL_BLOCK]):
            value = (value * point + c) % mod
        result.append(value)
    return result


def log(p: Sequence[int], degree: int, mod: int = MOD) -> list[int]:
    """Return log(p) modulo x**degree; p must start with 1."""
    coeffs = [v % mod for v in p]
    if not coeffs or coeffs[0] != 1:
        raise ValueError("log is defined only for polynomials with constant term 1")
    if degree <= 0:
        return []
    derivative = [c * i % mod for i, c in enumerate(coeffs) if i > 0]
    inv_p = inverse(coeffs, degree, mod)
    prod = _resized(multiply(derivative, inv_p, mod), degree)
    return [0] + [prod[i - 1] * pow(i, -1, mod) % mod for i in range(1, degree)]


def exp(p: Sequence[int], degree: int, mod: int = MOD) -> list[int]:
    """Return exp(p) modulo x**degree."""
    coeffs = [v % mod for v in p]
    result = [1]
    while len(result) < degree:
        size = 2 * len(result)
        lg = log(result, size, mod)
        cur = [(-v) % mod for v in lg]
        cur[0] = (cur[0] + 1) % mod
        for i, c in enumerate(coeffs[:size]):
            cur[i] = (cur[i] + c) % mod
        result = _resized(multiply(result, cur, mod), size)
    return result[:degree]