"""Evaluation at many points and interpolation modulo 998244353 via a subproduct tree."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from polyconv.polynom import MOD, Polynom, modular_inverse

_EVAL_BRUTE_SIZE = 1 << 4


@dataclass
class _Node:
    product: Polynom
    lo: int
    hi: int
    left: _Node | None = None
    right: _Node | None = None


class MultipointEvaluationTree:
    """Products of (x - p) over ranges of the points, shared by evaluation and interpolation."""

    def __init__(self, points: Sequence[int]) -> None:
        self._points = [p % MOD for p in points]
        self._root = self._build(0, len(self._points)) if self._points else None

    def __len__(self) -> int:
        return len(self._points)

    def _build(self, lo: int, hi: int) -> _Node:
        if hi - lo == 1:
            return _Node(Polynom([-self._points[lo], 1]), lo, hi)
        mid = (lo + hi) // 2
        left = self._build(lo, mid)
        right = self._build(mid, hi)
        return _Node(left.product * right.product, lo, hi, left, right)

    def evaluate(self, f: Sequence[int]) -> list[int]:
        """Return the values of f at every point of the tree."""
        if self._root is None:
            return []
        values = [0] * len(self._points)
        stack = [(self._root, Polynom(f) % self._root.product)]
        while stack:
            node, remainder = stack.pop()
            if node.left is None or node.right is None:
                values[node.lo] = remainder.eval(self._points[node.lo])
                continue
            stack.append((node.left, remainder % node.left.product))
            stack.append((node.right, remainder % node.right.product))
        return values

    def interpolate(self, y: Sequence[int]) -> Polynom:
        """Return the polynomial of degree below len(points) taking value y[i] at point i."""
        if len(y) != len(self._points):
            raise ValueError("x and y must have the same length")
        if self._root is None:
            return Polynom()
        weights = self.evaluate(self._root.product.derivative())
        if any(w == 0 for w in weights):
            raise ValueError("x values must be distinct")

        def combine(node: _Node) -> Polynom:
            if node.left is None or node.right is None:
                return Polynom([y[node.lo] * modular_inverse(weights[node.lo])])
            return combine(node.left) * node.right.product + combine(node.right) * node.left.product

        return combine(self._root).resized(len(self._points))


def multipoint_evaluation(poly: Sequence[int], points: Sequence[int]) -> list[int]:
    """Evaluate poly at each of the points."""
    p = Polynom(poly)
    if min(len(p), len(points)) <= _EVAL_BRUTE_SIZE:
        return [p.eval(x) for x in points]
    return MultipointEvaluationTree(points).evaluate(p)


def interpolate(x: Sequence[int], y: Sequence[int]) -> Polynom:
    """Return the polynomial f of degree below len(x) with f(x[i]) == y[i]."""
    if len(x) != len(y):
        raise ValueError("x and y must have the same length")
    return MultipointEvaluationTree(x).interpolate(y)