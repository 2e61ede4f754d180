"""Intersection of half-planes a*x + b*y + c >= 0 whose result is bounded."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from functools import cmp_to_key

_PARALLEL_EPS = 1e-5
_CONTAINS_EPS = 1e-8

PlanePoint = tuple[float, float]


@dataclass(frozen=True)
class Plane:
    """The closed half-plane of points (x, y) with a*x + b*y + c >= 0."""

    a: int
    b: int
    c: int

    def intersection(self, other: Plane) -> PlanePoint:
        """Point where the boundary lines of the two half-planes meet."""
        denom = float(self.a * other.b) - float(self.b * other.a)
        if abs(denom) <= _PARALLEL_EPS:
            raise ValueError("boundary lines are parallel")
        return (
            (self.b * other.c - self.c * other.b) / denom,
            (self.c * other.a - self.a * other.c) / denom,
        )

    def contains(self, point: PlanePoint) -> bool:
        """True if the point lies in the half-plane, up to a small tolerance."""
        x, y = point
        return self.a * x + self.b * y + self.c > -_CONTAINS_EPS

    def any_point(self) -> PlanePoint:
        """Some point on the boundary line."""
        if self.b != 0:
            return (1.0, (-self.c - self.a) / self.b)
        if self.a != 0:
            return ((-self.c - self.b) / self.a, 1.0)
        raise ValueError("half-plane has no boundary line")

    def _lower_half(self) -> bool:
        return (self.a, self.b) < (0, 0)

    def _cross(self, other: Plane) -> int:
        return self.a * other.b - self.b * other.a


def _less(p: Plane, q: Plane) -> bool:
    if p._lower_half() != q._lower_half():
        return p._lower_half() < q._lower_half()
    prod = p._cross(q)
    if prod != 0:
        return prod > 0
    return not q.contains(p.any_point())


def _compare(p: Plane, q: Plane) -> int:
    if _less(p, q):
        return -1
    if _less(q, p):
        return 1
    return 0


def halfplane_intersection(planes: list[Plane]) -> list[PlanePoint]:
    """Vertices of the bounded intersection of the half-planes, counterclockwise.

    Returns an empty list when nothing survives; unbounded or antiparallel
    configurations may raise ValueError.
    """
    ordered = sorted(planes, key=cmp_to_key(_compare))

    useful = [
        p
        for p, nxt in zip(ordered, [*ordered[1:], None])
        if nxt is None or p._lower_half() != nxt._lower_half() or p._cross(nxt) != 0
    ]

    points: deque[PlanePoint] = deque()
    hull: deque[Plane] = deque()
    for p in useful:
        while points and not p.contains(points[-1]):
            points.pop()
            hull.pop()
        while points and not p.contains(points[0]):
            points.popleft()
            hull.popleft()
        if hull:
            pt = p.intersection(hull[-1])
            if not hull[0].contains(pt):
                continue
            points.append(pt)
        hull.append(p)

    if not points:
        return []
    points.append(hull[-1].intersection(hull[0]))
    return list(points)