"""Arbitrary-precision decimal integers with FFT multiplication and recursive division."""

from __future__ import annotations

from collections.abc import Sequence
from functools import total_ordering

from polyconv import complex_fft

_DIGITS = "0123456789"


def _normalize(digits: Sequence[int], negative: bool) -> tuple[list[int], bool]:
    """Propagate carries of little-endian digits that may lie outside 0..9."""
    out = []
    carry = 0
    for d in digits:
        carry, digit = divmod(d + carry, 10)
        out.append(digit)
    if carry < 0:
        return _normalize([-d for d in digits], not negative)
    while carry:
        carry, digit = divmod(carry, 10)
        out.append(digit)
    while len(out) > 1 and out[-1] == 0:
        out.pop()
    if not out:
        out = [0]
    if out == [0]:
        negative = False
    return out, negative


def _parse(text: str) -> tuple[list[int], bool]:
    negative = text.startswith("-")
    body = text[1:] if negative else text
    if not body or any(c not in _DIGITS for c in body):
        raise ValueError(f"invalid integer literal: {text!r}")
    return _normalize([int(c) for c in reversed(body)], negative)


@total_ordering
class BigInt:
    """Signed integer stored as little-endian decimal digits."""

    __slots__ = ("digits", "negative")

    def __init__(self, value: int | str | Sequence[int] | BigInt = 0) -> None:
        if isinstance(value, BigInt):
            digits, negative = list(value.digits), value.negative
        elif isinstance(value, int):
            digits, negative = _parse(str(int(value)))
        elif isinstance(value, str):
            digits, negative = _parse(value)
        else:
            digits, negative = _normalize(list(value), False)
        self.digits: tuple[int, ...] = tuple(digits)
        self.negative: bool = negative

    @classmethod
    def _from_signed(cls, digits: Sequence[int]) -> BigInt:
        result = cls.__new__(cls)
        normalized, negative = _normalize(digits, False)
        result.digits = tuple(normalized)
        result.negative = negative
        return result

    def _signed(self) -> list[int]:
        return [-d for d in self.digits] if self.negative else list(self.digits)

    def is_zero(self) -> bool:
        return self.digits == (0,)

    def __str__(self) -> str:
        body = "".join(str(d) for d in reversed(self.digits))
        return "-" + body if self.negative else body

    def __repr__(self) -> str:
        return f"BigInt({str(self)!r})"

    def __int__(self) -> int:
        return int(str(self))

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __hash__(self) -> int:
        return hash(int(self))

    def __neg__(self) -> BigInt:
        return BigInt._from_signed([-d for d in self._signed()])

    def __abs__(self) -> BigInt:
        return BigInt._from_signed(list(self.digits))

    def __eq__(self, other: object) -> bool:
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        return self.negative == other_big.negative and self.digits == other_big.digits

    def __lt__(self, other: object) -> bool:
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        return _compare(self, other_big) < 0

    def _combine(self, other: BigInt, sign: int) -> BigInt:
        a = self._signed()
        b = other._signed()
        size = max(len(a), len(b))
        a += [0] * (size - len(a))
        b += [0] * (size - len(b))
        return BigInt._from_signed([x + sign * y for x, y in zip(a, b)])

    def __add__(self, other: object) -> BigInt:
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        return self._combine(other_big, 1)

    def __radd__(self, other: object) -> BigInt:
        return self.__add__(other)

    def __sub__(self, other: object) -> BigInt:
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        return self._combine(other_big, -1)

    def __rsub__(self, other: object) -> BigInt:
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        return other_big._combine(self, -1)

    def __mul__(self, other: object) -> BigInt:
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        product = complex_fft.multiply(list(self.digits), list(other_big.digits), integral=True)
        result = BigInt._from_signed(product)
        if not result.is_zero():
            result.negative = self.negative != other_big.negative
        return result

    def __rmul__(self, other: object) -> BigInt:
        return self.__mul__(other)

    def shift_left(self, shift: int) -> BigInt:
        """Magnitude multiplied by 10**shift."""
        if shift < 0:
            raise ValueError("shift must be non-negative")
        return BigInt._from_signed([0] * shift + list(self.digits))

    def shift_right(self, shift: int) -> BigInt:
        """Magnitude divided by 10**shift, rounded down."""
        if shift < 0:
            raise ValueError("shift must be non-negative")
        if shift >= len(self.digits):
            return BigInt(0)
        return BigInt._from_signed(list(self.digits[shift:]))

    def divmod(self, other: object) -> tuple[BigInt, BigInt]:
        """Return (quotient, remainder): the quotient is truncated toward zero and the
        remainder is |self| mod |other|, always non-negative."""
        other_big = _coerce(other)
        if other_big is None:
            raise TypeError(f"cannot divide BigInt by {type(other).__name__}")
        if other_big.is_zero():
            raise ZeroDivisionError("division by zero")
        a, b = abs(self), abs(other_big)
        if a < b:
            quotient, remainder = BigInt(0), a
        else:
            size = 1
            while size < max(len(a.digits), len(b.digits)):
                size <<= 1
            quotient, remainder = _divide32(a, b, size)
        if not quotient.is_zero() and self.negative != other_big.negative:
            quotient = -quotient
        return quotient, remainder

    __divmod__ = divmod

    def __floordiv__(self, other: object) -> BigInt:
        """Quotient truncated toward zero, as returned by divmod."""
        return self.divmod(other)[0]

    def __mod__(self, other: object) -> BigInt:
        """Non-negative remainder of the magnitudes, as returned by divmod."""
        return self.divmod(other)[1]


def _coerce(value: object) -> BigInt | None:
    if isinstance(value, BigInt):
        return value
    if isinstance(value, int):
        return BigInt(value)
    return None


def _compare(a: BigInt, b: BigInt) -> int:
    if a.negative != b.negative:
        return -1 if a.negative else 1
    if len(a.digits) != len(b.digits):
        magnitude = -1 if len(a.digits) < len(b.digits) else 1
    elif a.digits == b.digits:
        magnitude = 0
    else:
        magnitude = -1 if a.digits[::-1] < b.digits[::-1] else 1
    return -magnitude if a.negative else magnitude


def _small_divmod(a: BigInt, b: BigInt) -> tuple[BigInt, BigInt]:
    q, r = divmod(int(a), int(b))
    return BigInt(q), BigInt(r)


def _divide21(a: BigInt, b: BigInt, n: int) -> tuple[BigInt, BigInt]:
    if a < b:
        return BigInt(0), a
    if n <= 9:
        return _small_divmod(a, b)
    half = n // 2
    coeff, rem = _divide32(a.shift_right(half), b, half)
    low = BigInt(list(a.digits[: min(half, len(a.digits))]))
    coeff2, rem2 = _divide32(rem.shift_left(half) + low, b, half)
    return coeff.shift_left(half) + coeff2, rem2


def _divide32(a: BigInt, b: BigInt, n: int) -> tuple[BigInt, BigInt]:
    if a < b:
        return BigInt(0), a
    if len(b.digits) <= n:
        return _divide21(a, b, n)
    if n <= 6:
        return _small_divmod(a, b)
    k = len(b.digits) - n
    a1, b1 = a.shift_right(k), b.shift_right(k)
    if b1.shift_left(n) < a1:
        coeff = BigInt(1).shift_left(n)
    else:
        coeff = _divide21(a1, b1, n)[0]
    current = a - b * coeff
    while current < 0:
        current = current + b
        coeff = coeff - 1
    while current >= b:
        current = current - b
        coeff = coeff + 1
    return coeff, current