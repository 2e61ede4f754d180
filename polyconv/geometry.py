"""Planar geometry on exact (integer) or floating coordinates."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from functools import cmp_to_key, total_ordering
from typing import Any


def sgn(x: Any) -> int:
    """Sign of x as -1, 0 or 1."""
    if x < 0:
        return -1
    return 1 if x > 0 else 0


@dataclass(frozen=True, order=True)
class Point:
    """A point or vector in the plane, ordered by (x, y)."""

    x: Any = 0
    y: Any = 0

    @classmethod
    def between(cls, a: Point, b: Point) -> Point:
        """Vector from a to b."""
        return cls(b.x - a.x, b.y - a.y)

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __iter__(self) -> Iterator[Any]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"{self.x} {self.y}"

    def dot(self, other: Point) -> Any:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Point) -> Any:
        return self.x * other.y - self.y * other.x

    def length2(self) -> Any:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self, length: float = 1.0) -> Point:
        """Vector in the same direction with the given length."""
        scale = length / self.length()
        return Point(self.x * scale, self.y * scale)


def in_angle(a: Point, o: Point, b: Point, c: Point) -> bool:
    """True if c lies inside the angle a-o-b (boundary included)."""
    oa, ob, oc = Point.between(o, a), Point.between(o, b), Point.between(o, c)
    if ob.cross(oa) == 0:
        raise ValueError("angle sides are collinear")
    return (
        sgn(sgn(ob.cross(oc)) * sgn(ob.cross(oa))) >= 0
        and sgn(sgn(oa.cross(oc)) * sgn(oa.cross(ob))) >= 0
    )


def _all_int(*values: Any) -> bool:
    return all(isinstance(v, int) for v in values)


def _div(value: Any, g: Any) -> Any:
    if isinstance(value, int) and isinstance(g, int):
        q = abs(value) // g
        return q if value >= 0 else -q
    return value / g


@total_ordering
@dataclass(frozen=True, eq=False)
class Line:
    """The line a*x + b*y + c == 0."""

    a: Any = 0
    b: Any = 0
    c: Any = 0
    any_point: Point | None = field(default=None)

    @classmethod
    def through(cls, pa: Point, pb: Point) -> Line:
        """Line through two points."""
        a = pb.y - pa.y
        b = pa.x - pb.x
        return cls(a, b, -a * pa.x - b * pa.y, pa)

    def normalized(self) -> Line:
        """Equivalent line with a positive leading coefficient and reduced scale."""
        a, b, c = self.a, self.b, self.c
        if a < 0 or (a == 0 and b < 0):
            a, b, c = -a, -b, -c
        g = math.gcd(a, b) if _all_int(a, b) else math.hypot(a, b)
        if g:
            a, b, c = _div(a, g), _div(b, g), _div(c, g)
        return Line(a, b, c, self.any_point)

    def _key(self) -> tuple[Any, Any, Any]:
        n = self.normalized()
        return (n.a, n.b, n.c)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: Line) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return f"{{{self.a}, {self.b}, {self.c}}}"

    def _anchor(self) -> Point:
        if self.any_point is not None:
            return self.any_point
        if self.b:
            return Point(0, -self.c / self.b)
        if self.a:
            return Point(-self.c / self.a, 0)
        raise ValueError("degenerate line")

    def value(self, pt: Point) -> Any:
        return self.a * pt.x + self.b * pt.y + self.c

    def contains(self, pt: Point) -> bool:
        return self.value(pt) == 0

    def different_side(self, pa: Point, pb: Point) -> int:
        """-1 if strictly on different sides, 0 if one is on the line, 1 otherwise."""
        return sgn(sgn(self.value(pa)) * sgn(self.value(pb)))

    def is_parallel(self, other: Line) -> bool:
        return sgn(Point(self.a, self.b).cross(Point(other.a, other.b))) == 0

    def intersect(self, other: Line) -> Point:
        """Intersection point of two non-parallel lines."""
        denominator = self.a * other.b - other.a * self.b
        if denominator == 0:
            raise ValueError("lines are parallel")
        return Point(
            (self.b * other.c - other.b * self.c) / denominator,
            -(self.a * other.c - other.a * self.c) / denominator,
        )

    def distance(self, other: Point | Line) -> float:
        """Distance to a point or to another line."""
        if isinstance(other, Point):
            norm = math.hypot(self.a, self.b)
            if norm == 0:
                raise ValueError("degenerate line")
            return abs(self.value(other)) / norm
        if isinstance(other, Line):
            if self.is_parallel(other):
                return other.distance(self._anchor())
            return 0.0
        raise TypeError(f"unsupported operand: {type(other).__name__}")


@dataclass(frozen=True, eq=False)
class Segment:
    """Closed segment between two points; endpoint order does not matter for equality."""

    a: Point
    b: Point

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Segment):
            return NotImplemented
        return (self.a == other.a and self.b == other.b) or (
            self.a == other.b and self.b == other.a
        )

    def __hash__(self) -> int:
        return hash(frozenset((self.a, self.b)))

    def __str__(self) -> str:
        return f"({self.a}, {self.b})"

    def contains(self, pt: Point) -> bool:
        return (
            Line.through(self.a, self.b).contains(pt)
            and sgn(Point.between(pt, self.a).dot(Point.between(pt, self.b))) <= 0
        )

    def intersects(self, other: Line | Segment) -> bool:
        if isinstance(other, Line):
            return other.different_side(self.a, self.b) <= 0
        if isinstance(other, Segment):
            if (
                self.contains(other.a)
                or self.contains(other.b)
                or other.contains(self.a)
                or other.contains(self.b)
            ):
                return True
            return (
                Line.through(self.a, self.b).different_side(other.a, other.b) < 0
                and Line.through(other.a, other.b).different_side(self.a, self.b) < 0
            )
        raise TypeError(f"unsupported operand: {type(other).__name__}")

    def distance(self, other: Point | Line | Segment) -> float:
        """Distance to a point, a line or another segment."""
        if isinstance(other, Point):
            if self.contains(other):
                return 0.0
            if sgn(Point.between(self.a, self.b).dot(Point.between(self.b, other))) >= 0:
                return Point.between(self.b, other).length()
            if sgn(Point.between(self.b, self.a).dot(Point.between(self.a, other))) >= 0:
                return Point.between(self.a, other).length()
            return Line.through(self.a, self.b).distance(other)
        if isinstance(other, Line):
            if self.intersects(other):
                return 0.0
            return min(other.distance(self.a), other.distance(self.b))
        if isinstance(other, Segment):
            if self.intersects(other):
                return 0.0
            return min(
                self.distance(other.a),
                self.distance(other.b),
                other.distance(self.a),
                other.distance(self.b),
            )
        raise TypeError(f"unsupported operand: {type(other).__name__}")


@dataclass(frozen=True)
class Ray:
    """Ray starting at o in direction vec."""

    o: Point
    vec: Point

    def __str__(self) -> str:
        return f"{{{self.o}, {self.vec}}}"

    def _line(self) -> Line:
        return Line.through(self.o, self.o + self.vec)

    def contains(self, pt: Point) -> bool:
        return self._line().contains(pt) and sgn(Point.between(self.o, pt).dot(self.vec)) >= 0

    def intersects(self, other: Segment | Line | Ray) -> bool:
        if isinstance(other, Segment):
            if other.contains(self.o):
                return True
            if Line.through(other.a, other.b).contains(self.o):
                return self.contains(other.a)
            return in_angle(other.a, self.o, other.b, self.o + self.vec)
        if isinstance(other, Line):
            if other.different_side(self.o, self.o + self.vec) <= 0:
                return True
            return abs(other.value(self.o)) > abs(other.value(self.o + self.vec))
        if isinstance(other, Ray):
            if sgn(self.vec.cross(other.vec)) == 0:
                return self.contains(other.o) or other.contains(self.o)
            return other.intersects(self._line()) and self.intersects(other._line())
        raise TypeError(f"unsupported operand: {type(other).__name__}")

    def distance(self, other: Point | Segment | Line | Ray) -> float:
        """Distance to a point, a segment, a line or another ray."""
        if isinstance(other, Point):
            if sgn(self.vec.dot(Point.between(self.o, other))) >= 0:
                return self._line().distance(other)
            return Point.between(self.o, other).length()
        if isinstance(other, Segment):
            if self.intersects(other):
                return 0.0
            return min(other.distance(self.o), self.distance(other.a), self.distance(other.b))
        if isinstance(other, Line):
            if self.intersects(other):
                return 0.0
            return other.distance(self.o)
        if isinstance(other, Ray):
            if self.intersects(other):
                return 0.0
            return min(self.distance(other.o), other.distance(self.o))
        raise TypeError(f"unsupported operand: {type(other).__name__}")


def _convex_hull(points: Iterable[Point]) -> list[Point]:
    pts = sorted(set(points))
    if not pts:
        return []
    origin = pts[0]

    def compare(p: Point, q: Point) -> int:
        va, vb = p - origin, q - origin
        s = sgn(va.cross(vb))
        if s != 0:
            return -s
        return sgn(va.length2() - vb.length2())

    rest = sorted(pts[1:], key=cmp_to_key(compare))
    hull = [origin]
    for pt in rest:
        while len(hull) > 1 and sgn((hull[-1] - hull[-2]).cross(pt - hull[-1])) <= 0:
            hull.pop()
        hull.append(pt)
    return hull


class ConvexPolygon:
    """Convex hull of a set of points, counterclockwise from its least vertex."""

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[Point] = ()) -> None:
        self._points: tuple[Point, ...] = tuple(_convex_hull(points))

    @classmethod
    def _raw(cls, points: Iterable[Point]) -> ConvexPolygon:
        polygon = cls.__new__(cls)
        polygon._points = tuple(points)
        return polygon

    @property
    def points(self) -> tuple[Point, ...]:
        return self._points

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConvexPolygon):
            return NotImplemented
        return self._points == other._points

    def __hash__(self) -> int:
        return hash(self._points)

    def __repr__(self) -> str:
        return f"ConvexPolygon({list(self._points)!r})"

    def __str__(self) -> str:
        return "{" + ", ".join(str(p) for p in self._points) + "}"

    def _rotated(self) -> ConvexPolygon:
        if not self._points:
            return self
        start = self._points.index(min(self._points))
        return ConvexPolygon._raw(self._points[start:] + self._points[:start])

    def _edges(self) -> list[Point]:
        pts = self._points
        return [pts[(i + 1) % len(pts)] - p for i, p in enumerate(pts)]

    def minkowski_sum(self, other: ConvexPolygon) -> ConvexPolygon:
        """Minkowski sum of two polygons."""
        if not self._points or not other._points:
            raise ValueError("polygons must not be empty")
        result = [self._points[0] + other._points[0]]

        def add(vec: Point) -> None:
            if len(result) == 1:
                result.append(result[-1] + vec)
                return
            last = result[-1] - result[-2]
            if sgn(last.cross(vec)) == 0 and sgn(last.dot(vec)) >= 0:
                result[-1] = result[-1] + vec
            else:
                result.append(result[-1] + vec)

        other_edges = other._edges()
        j = 0
        for edge in self._edges():
            while j < len(other_edges) and sgn(other_edges[j].cross(edge)) >= 0:
                add(other_edges[j])
                j += 1
            add(edge)
        for edge in other_edges[j:]:
            add(edge)

        result.pop()
        return ConvexPolygon._raw(result)

    __add__ = minkowski_sum

    def contains(self, pt: Point) -> bool:
        """True if pt lies inside or on the boundary."""
        pol = self._points
        n = len(pol)
        if n == 0:
            return False
        if n == 1:
            return pt == pol[0]
        if n == 2:
            return Segment(pol[0], pol[1]).contains(pt)
        if pt == pol[0]:
            return True
        if sgn((pol[1] - pol[0]).cross(pt - pol[0])) == -1:
            return False

        lo, hi = 1, n - 1
        while hi - lo > 1:
            mid = (lo + hi) >> 1
            if sgn((pol[mid] - pol[0]).cross(pt - pol[mid])) >= 0:
                lo = mid
            else:
                hi = mid

        whole = abs((pol[lo] - pol[0]).cross(pol[lo + 1] - pol[0]))
        parts = (
            abs((pol[0] - pt).cross(pol[lo] - pt))
            + abs((pol[lo] - pt).cross(pol[lo + 1] - pt))
            + abs((pol[lo + 1] - pt).cross(pol[0] - pt))
        )
        return whole == parts

    def tangents(self, pt: Point) -> tuple[int, int]:
        """Indices of the two vertices touched by tangents from an outside point."""
        pol = self._points
        n = len(pol)
        if n == 0:
            return (-1, -1)
        if n == 1:
            return (0, 0)
        if n == 2:
            return (0, 1)

        def compare(i: int, j: int) -> int:
            return sgn((pol[i] - pt).cross(pol[j] - pt))

        who = compare(0, 1)
        if who == 0:
            who = -1 if (pol[0] - pt).length2() < (pol[1] - pt).length2() else 1

        lo, hi = 0, n + 1
        while hi - lo > 1:
            mid = (lo + hi) >> 1
            real = 0 if mid == n else mid
            if real != 0 and compare(0, real) <= 0:
                if who == -1:
                    lo = mid
                else:
                    hi = mid
            elif compare(mid - 1, real) > 0:
                lo = mid
            else:
                hi = mid
        first = lo % n

        lo, hi = 0, n + 1
        while hi - lo > 1:
            mid = (lo + hi) >> 1
            real = 0 if mid == n else mid
            if real != 0 and compare(0, real) >= 0:
                if who == -1:
                    hi = mid
                else:
                    lo = mid
            elif compare(real, mid - 1) > 0:
                lo = mid
            else:
                hi = mid
        second = lo % n
        return (first, second)

    def area2(self) -> Any:
        """Twice the area."""
        pol = self._points
        total = sum((p.cross(pol[(i + 1) % len(pol)]) for i, p in enumerate(pol)), 0)
        return abs(total)

    def perimeter(self) -> float:
        return sum((edge.length() for edge in self._edges()), 0.0)

    def diameter(self) -> float:
        """Largest distance between two vertices (rotating calipers)."""
        pol = self._points
        n = len(pol)
        if n == 0:
            raise ValueError("polygon is empty")
        lo = pol.index(min(pol))
        hi = pol.index(max(pol))
        best = 0.0
        for _ in range(2 * n):
            best = max(best, (pol[hi] - pol[lo]).length())
            if sgn((pol[(lo + 1) % n] - pol[lo]).cross(pol[hi] - pol[(hi + 1) % n])) >= 0:
                lo = (lo + 1) % n
            else:
                hi = (hi + 1) % n
        return best

    def distance(self, other: Point | ConvexPolygon) -> float:
        """Distance from the boundary to a point, or between two polygons."""
        if not self._points:
            raise ValueError("polygon is empty")
        if isinstance(other, Point):
            pol = self._points
            return min(
                Segment(p, pol[(i + 1) % len(pol)]).distance(other) for i, p in enumerate(pol)
            )
        if isinstance(other, ConvexPolygon):
            mirrored = ConvexPolygon(-p for p in other._points)
            return (self._rotated() + mirrored._rotated()).distance(Point(0, 0))
        raise TypeError(f"unsupported operand: {type(other).__name__}")