"""Polynomials over the integers modulo 998244353 with fast arithmetic."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import lru_cache

MOD = 998_244_353
_RANK = 23
_ROOT = 3

_MUL_MIN_CUT = 20
_MUL_MAX_CUT = 1 << 6
_DIV_N_CUT = 1 << 7
_DIV_M_CUT = 1 << 6
_INV_BRUTE_FORCE_SIZE = 1 << 3


def modular_inverse(x: int) -> int:
    """Return the inverse of x modulo MOD."""
    if x % MOD == 0:
        raise ZeroDivisionError("zero has no modular inverse")
    return pow(x, -1, MOD)


def _reverse_bits(value: int, bits: int) -> int:
    if bits == 0:
        return 0
    return int(format(value, f"0{bits}b")[::-1], 2)


@lru_cache(maxsize=None)
def _block_roots(level: int, right_half: bool) -> tuple[int, ...]:
    base = pow(_ROOT, (MOD - 1) >> (level + 1), MOD)
    extra = pow(_ROOT, (MOD - 1) >> (level + 2), MOD) if right_half else 1
    return tuple(
        extra * pow(base, _reverse_bits(i, level), MOD) % MOD for i in range(1 << level)
    )


@lru_cache(maxsize=None)
def _inverse_block_roots(level: int, right_half: bool) -> tuple[int, ...]:
    return tuple(pow(r, -1, MOD) for r in _block_roots(level, right_half))


def _check_length(n: int, right_half: bool) -> int:
    if n == 0 or n & (n - 1):
        raise ValueError(f"length {n} is not a positive power of two")
    lg = n.bit_length() - 1
    if lg + (1 if right_half else 0) > _RANK:
        raise ValueError(f"length {n} is too large for the modulus")
    return lg


def _transform(a: Iterable[int], right_half: bool) -> Polynom:
    values = [v % MOD for v in a]
    n = len(values)
    lg = _check_length(n, right_half)
    for level in range(lg):
        m = n >> (level + 1)
        for i, r in enumerate(_block_roots(level, right_half)):
            start = i << (lg - level)
            for j in range(start, start + m):
                u = values[j]
                v = values[j + m] * r % MOD
                values[j] = (u + v) % MOD
                values[j + m] = (u - v) % MOD
    return Polynom(values)


def _inverse_transform(a: Iterable[int], right_half: bool) -> Polynom:
    values = [v % MOD for v in a]
    n = len(values)
    lg = _check_length(n, right_half)
    for level in reversed(range(lg)):
        m = n >> (level + 1)
        for i, ir in enumerate(_inverse_block_roots(level, right_half)):
            start = i << (lg - level)
            for j in range(start, start + m):
                u = values[j]
                v = values[j + m]
                values[j] = (u + v) % MOD
                values[j + m] = (u - v) * ir % MOD
    inv_n = pow(n, -1, MOD)
    return Polynom(v * inv_n for v in values)


def fft(a: Iterable[int]) -> Polynom:
    """Evaluate a at the len(a)-th roots of unity, in bit-reversed order."""
    return _transform(a, False)


def inv_fft(a: Iterable[int]) -> Polynom:
    """Inverse of fft: inv_fft(fft(a)) == a."""
    return _inverse_transform(a, False)


def _right_half_fft(a: Iterable[int]) -> Polynom:
    """Finish a transform of twice the length, given the right half after its first step."""
    return _transform(a, True)


def _inv_right_half_fft(a: Iterable[int]) -> Polynom:
    """Inverse of _right_half_fft."""
    return _inverse_transform(a, True)


def _is_poly(value: object) -> bool:
    return isinstance(value, (list, tuple))


class Polynom(list):
    """Coefficient list (lowest degree first) of a polynomial modulo MOD."""

    def __init__(self, coefficients: Iterable[int] = ()) -> None:
        super().__init__(int(c) % MOD for c in coefficients)

    def __repr__(self) -> str:
        return f"Polynom({list(self)!r})"

    def __str__(self) -> str:
        return " ".join(str(c) for c in self)

    def resized(self, n: int) -> Polynom:
        """Return a copy truncated or zero-padded to length n."""
        if n < 0:
            raise ValueError("size must be non-negative")
        return Polynom(self[:n] + [0] * (n - len(self)))

    def normalize(self) -> None:
        """Drop trailing zero coefficients in place."""
        while self and self[-1] % MOD == 0:
            self.pop()

    def degree(self) -> int:
        """Return the degree, or -1 if every coefficient is zero."""
        deg = len(self) - 1
        while deg >= 0 and self[deg] % MOD == 0:
            deg -= 1
        return deg

    def eval(self, x: int) -> int:
        """Value of the polynomial at x."""
        value = 0
        x %= MOD
        for c in reversed(self):
            value = (value * x + c) % MOD
        return value

    def _combine(self, other: Sequence[int], sign: int) -> Polynom:
        result = self.resized(max(len(self), len(other)))
        for i, c in enumerate(other):
            result[i] = (result[i] + sign * c) % MOD
        return result

    def __neg__(self) -> Polynom:
        return Polynom(-c for c in self)

    def __add__(self, other: object) -> Polynom:
        if not _is_poly(other):
            return NotImplemented
        return self._combine(other, 1)

    def __radd__(self, other: object) -> Polynom:
        return self.__add__(other)

    def __iadd__(self, other: object) -> Polynom:
        return self.__add__(other)

    def __sub__(self, other: object) -> Polynom:
        if not _is_poly(other):
            return NotImplemented
        return self._combine(other, -1)

    def __rsub__(self, other: object) -> Polynom:
        if not _is_poly(other):
            return NotImplemented
        return Polynom(other)._combine(self, -1)

    def __isub__(self, other: object) -> Polynom:
        return self.__sub__(other)

    def _scaled(self, value: int) -> Polynom:
        value %= MOD
        return Polynom(c * value for c in self)

    def _product(self, other: Sequence[int]) -> Polynom:
        b = other if isinstance(other, Polynom) else Polynom(other)
        if not self or not b:
            return Polynom()
        n, m = len(self), len(b)
        if min(n, m) <= _MUL_MIN_CUT or max(n, m) <= _MUL_MAX_CUT:
            product = [0] * (n + m - 1)
            for i, x in enumerate(self):
                if x:
                    for j, y in enumerate(b):
                        product[i + j] += x * y
            return Polynom(product)

        real_size = n + m - 1
        size = 1
        while size < real_size:
            size <<= 1
        fa = fft(self.resized(size))
        fb = fa if self is b or list.__eq__(self, b) else fft(b.resized(size))
        return inv_fft([x * y for x, y in zip(fa, fb)]).resized(real_size)

    def __mul__(self, other: object) -> Polynom:
        if isinstance(other, int):
            return self._scaled(other)
        if _is_poly(other):
            return self._product(other)
        return NotImplemented

    def __rmul__(self, other: object) -> Polynom:
        return self.__mul__(other)

    def __imul__(self, other: object) -> Polynom:
        return self.__mul__(other)

    def _quotient(self, other: Sequence[int]) -> Polynom:
        a = Polynom(self)
        b = Polynom(other)
        a.normalize()
        b.normalize()
        if not b:
            raise ZeroDivisionError("polynomial division by zero")
        n, m = len(a), len(b)
        if n < m:
            return Polynom()
        if n <= _DIV_N_CUT or m <= _DIV_M_CUT:
            quotient = Polynom([0] * (n - m + 1))
            inv_b = modular_inverse(b[-1])
            for i in range(n - 1, m - 2, -1):
                pos = i - m + 1
                q = a[i] * inv_b % MOD
                quotient[pos] = q
                for j, bj in enumerate(b):
                    a[pos + j] = (a[pos + j] - bj * q) % MOD
            quotient.normalize()
            return quotient

        size = n - m + 1
        reversed_b = Polynom(b[::-1])
        quotient = (Polynom(a[::-1]) * reversed_b.inv(size)).resized(size)
        quotient = Polynom(quotient[::-1])
        quotient.normalize()
        return quotient

    def __truediv__(self, other: object) -> Polynom:
        if isinstance(other, int):
            return self._scaled(modular_inverse(other))
        if _is_poly(other):
            return self._quotient(other)
        return NotImplemented

    def __floordiv__(self, other: object) -> Polynom:
        if not _is_poly(other):
            return NotImplemented
        return self._quotient(other)

    def __mod__(self, other: object) -> Polynom:
        if not _is_poly(other):
            return NotImplemented
        remainder = self - self._quotient(other) * other
        remainder.normalize()
        return remainder

    def __divmod__(self, other: object) -> tuple[Polynom, Polynom]:
        if not _is_poly(other):
            return NotImplemented
        quotient = self._quotient(other)
        remainder = self - quotient * other
        remainder.normalize()
        return quotient, remainder

    def derivative(self) -> Polynom:
        """Formal derivative."""
        return Polynom(i * c for i, c in enumerate(self) if i > 0)

    def integral(self, constant: int = 0) -> Polynom:
        """Antiderivative with the given constant term."""
        return Polynom([constant] + [c * modular_inverse(i) for i, c in enumerate(self, 1)])

    def inv(self, degree: int) -> Polynom:
        """Return the inverse modulo x**degree."""
        if not self or self[0] % MOD == 0:
            raise ValueError("polynomial is not invertible")
        if degree < 0:
            raise ValueError("degree must be non-negative")

        brute = min(degree, _INV_BRUTE_FORCE_SIZE)
        start_inv = modular_inverse(self[0])
        start = [0] * brute
        have = [0] * brute
        for i in range(brute):
            start[i] = ((1 if i == 0 else 0) - have[i]) * start_inv % MOD
            for j, c in enumerate(self[: brute - i]):
                have[i + j] = (have[i + j] + start[i] * c) % MOD

        result = Polynom(start)
        power = brute
        while power < degree:
            size = power << 1
            correction = -(Polynom(self[:size]) * result).resized(size)
            correction[0] = (correction[0] + 2) % MOD
            result = (result * correction).resized(size)
            power = size
        return result.resized(degree)

    def log(self, degree: int) -> Polynom:
        """Return log(p) modulo x**degree; the constant term must be 1."""
        if not self or self[0] % MOD != 1:
            raise ValueError("log is not defined")
        if degree < 0:
            raise ValueError("degree must be non-negative")
        derivative = self.derivative().resized(min(degree, len(self)))
        return (derivative * self.inv(degree)).resized(degree).integral(0).resized(degree)

    def exp(self, degree: int) -> Polynom:
        """Return exp(p) modulo x**degree; the constant term must be 0."""
        if not self or self[0] % MOD != 0:
            raise ValueError("exp is not defined")
        if degree < 0:
            raise ValueError("degree must be non-negative")
        result = Polynom([1])
        while len(result) < degree:
            size = 2 * len(result)
            correction = Polynom(self[:size]) - result.log(size)
            correction[0] = (correction[0] + 1) % MOD
            result = (result * correction).resized(size)
        return result.resized(degree)

    def power(self, d: int, degree: int) -> Polynom:
        """Return p**d modulo x**degree."""
        if d < 0:
            raise ValueError("exponent must be non-negative")
        if degree < 0:
            raise ValueError("degree must be non-negative")
        if d == 0 or degree == 0:
            return Polynom([1]).resized(degree)
        pos = next((i for i, c in enumerate(self) if c % MOD), None)
        if pos is None or pos >= (degree + d - 1) // d:
            return Polynom([0] * degree)

        shift = d * pos
        left = degree - shift
        lead = self[pos] % MOD
        base = Polynom(self[pos:]) / lead
        result = (base.log(left) * d).exp(left) * pow(lead, d, MOD)
        return Polynom([0] * shift + result[:left])

    def change_of_variable(self, c: int) -> Polynom:
        """Return the polynomial x -> p(x + c)."""
        n = len(self)
        p = [0] * n
        q = [0] * n
        fact = ifact = power = 1
        for i, coeff in enumerate(self):
            p[n - 1 - i] = coeff * fact % MOD
            q[i] = power * ifact % MOD
            fact = fact * (i + 1) % MOD
            ifact = ifact * modular_inverse(i + 1) % MOD
            power = power * c % MOD

        shifted = (Polynom(p) * Polynom(q)).resized(n)[::-1]
        result = []
        ifact = 1
        for i, value in enumerate(shifted):
            result.append(value * ifact)
            ifact = ifact * modular_inverse(i + 1) % MOD
        return Polynom(result)