"""Online convolution: coefficients of f * g while f and g grow term by term."""

from __future__ import annotations

from polyconv.polynom import MOD, Polynom, fft, inv_fft


class ConvolutionOnline:
    """Keeps [x^i](f * g) up to date as terms are appended to f and g."""

    def __init__(self) -> None:
        self._f: list[int] = []
        self._g: list[int] = []
        self._prod: list[int] = []
        self._fft_f: dict[int, Polynom] = {}
        self._fft_g: dict[int, Polynom] = {}

    def __len__(self) -> int:
        return len(self._f)

    def _expand(self, index: int) -> None:
        if len(self._prod) <= index:
            self._prod.extend([0] * (index + 1 - len(self._prod)))

    def push_back(self, a: int, b: int) -> None:
        """Append a to f and b to g."""
        f, g = self._f, self._g
        f.append(a % MOD)
        g.append(b % MOD)
        last = len(f) - 1
        self._expand(last)
        extra = f[0] * g[last] + (f[last] * g[0] if last else 0)
        self._prod[last] = (self._prod[last] + extra) % MOD

        degree = len(f)
        size = 1
        while size <= degree:
            if degree & ((size << 1) - 1) == size:
                self._absorb(degree, size)
            size <<= 1

    def _absorb(self, degree: int, size: int) -> None:
        f, g, prod = self._f, self._g, self._prod
        if size == degree:
            if size == 1:
                return
            full = Polynom(f) * Polynom(g)
            self._expand(degree + size - 1)
            for i in range(degree, degree + size - 1):
                prod[i] = (prod[i] + full[i]) % MOD
            return

        if degree == 3 * size:
            self._fft_f[size] = fft(f[: 2 * size])
            self._fft_g[size] = fft(g[: 2 * size])

        aux_f = fft(f[-size:] + [0] * size)
        aux_g = fft(g[-size:] + [0] * size)
        mixed = inv_fft(
            x * y + u * v
            for x, y, u, v in zip(self._fft_g[size], aux_f, self._fft_f[size], aux_g)
        )
        self._expand(degree + size - 1)
        for i in range(size):
            prod[degree + i] = (prod[degree + i] + mixed[size + i]) % MOD

    def query(self, i: int) -> int:
        """Return [x^i](f * g); i must be below the number of pushed terms."""
        if not 0 <= i < len(self._f):
            raise IndexError("coefficient index out of range")
        return self._prod[i]