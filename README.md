# polyconv

Convolutions and polynomial algebra, linear recurrences, a decimal big integer and a small set of planar geometry tools. Pure Python with no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `polyconv.bitwise` | `and_transform`, `and_multiply`, `hadamard_transform`, `xor_multiply`, `subset_multiply` |
| `polyconv.berlekamp_massey` | `find_recurrence`, `multiply`, `poly_remainder`, `power_remainder`, `find_kth` |
| `polyconv.lagrange` | `lagrange_interpolation` |
| `polyconv.min_plus` | `min_plus_convex_convex`, `max_plus_convex_convex`, `min_plus_convex_arbitrary`, `max_plus_convex_arbitrary` |
| `polyconv.complex_fft` | floating-point `fft`, `multiply`, `fft_2d`, `multiply_2d`, `normalize` |
| `polyconv.ntt` | transform modulo a prime (default `MOD = 998244353`): `ntt`, `multiply`, `fft_2d`, `multiply_2d`, `inverse`, `divide`, `multipoint_evaluation`, `log`, `exp`, `normalize`, `primitive_root` |
| `polyconv.polynom` | `Polynom`, a coefficient list modulo 998244353 with `+ - * / // % divmod`, `inv`, `log`, `exp`, `power`, `derivative`, `integral`, `eval`, `degree`, `normalize`, `resized`, `change_of_variable`; plus `fft`, `inv_fft`, `modular_inverse` |
| `polyconv.online` | `ConvolutionOnline`: `push_back(a, b)` appends a term to f and g, `query(i)` returns `[x^i](f * g)` |
| `polyconv.multipoint` | `MultipointEvaluationTree` (`evaluate`, `interpolate`), `multipoint_evaluation`, `interpolate` |
| `polyconv.counting` | `connected_graphs`, `knapsack`, `restore_weights` (counts modulo 998244353) |
| `polyconv.bigint` | `BigInt`, a signed decimal integer with FFT multiplication, `shift_left`, `shift_right`, `divmod` |
| `polyconv.halfplane` | `Plane` (`a*x + b*y + c >= 0`) and `halfplane_intersection` for bounded intersections |
| `polyconv.geometry` | `Point`, `Line`, `Segment`, `Ray`, `ConvexPolygon`, `sgn`, `in_angle` |

## Examples

Multiply two polynomials modulo 998244353:

```python
from polyconv import ntt

ntt.multiply([1, 2, 3], [4, 5])   # [4, 13, 22, 15]
```

Find the shortest linear recurrence of a sequence and jump far ahead:

```python
from fractions import Fraction
from polyconv.berlekamp_massey import find_recurrence, find_kth

fib = [Fraction(v) for v in (0, 1, 1, 2, 3, 5, 8, 13)]
rec = find_recurrence(fib)        # == [1, 1]
find_kth(fib, rec, 50)            # == 12586269025
```

XOR convolution:

```python
from polyconv.bitwise import xor_multiply

xor_multiply([1, 2], [3, 4])      # [11, 10]
```

Power series modulo 998244353:

```python
from polyconv.polynom import Polynom

p = Polynom([1, 1])
p.inv(4)                          # coefficients of 1 / (1 + x) up to x^3
```

Convex polygons:

```python
from polyconv.geometry import Point, ConvexPolygon

square = ConvexPolygon([Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)])
square.area2()                    # 8
square.contains(Point(1, 1))      # True
```

## Behaviour worth knowing

- Functions that multiply pad their inputs to a power of two themselves. The bare transforms (`and_transform`, `hadamard_transform`, `complex_fft.fft`, `ntt.ntt`, `polynom.fft`) return a new list and raise `ValueError` when the length is not a power of two; `fft_2d` in both modules requires a square grid.
- `complex_fft.multiply` and `multiply_2d` round results to `int` when every input is an `int`, unless `integral` is given.
- `xor_multiply` divides by the padded length with integer division for `int` values and true division otherwise.
- `lagrange_interpolation`, `find_recurrence` and `poly_remainder` treat `int` inputs as rationals and may return `Fraction` values.
- Undefined series operations raise `ValueError`: inverting a series with zero constant term, `log` when the constant term is not 1, `exp` when it is not 0. Dividing by a zero polynomial raises `ZeroDivisionError`.
- `BigInt.divmod` (and `//`, `%`) truncates the quotient toward zero and returns the non-negative remainder of the magnitudes.
- `halfplane_intersection` handles bounded intersections only; unbounded or antiparallel inputs may raise `ValueError`.

## What it does not do

This is a library only: it has no command-line tool and reads or writes no files.