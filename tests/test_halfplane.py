import pytest

from polyconv.halfplane import Plane, halfplane_intersection

SQUARE = [Plane(1, 0, 0), Plane(-1, 0, 1), Plane(0, 1, 0), Plane(0, -1, 1)]
TRIANGLE = [Plane(1, 0, 0), Plane(0, 1, 0), Plane(-1, -1, 1)]


def _rounded(points):
    return {(round(x, 9) + 0.0, round(y, 9) + 0.0) for x, y in points}


def _signed_area2(points):
    total = 0.0
    for (x1, y1), (x2, y2) in zip(points, points[1:] + points[:1]):
        total += x1 * y2 - y1 * x2
    return total


def test_square_corners():
    result = halfplane_intersection(SQUARE)
    assert len(result) == 4
    assert _rounded(result) == {(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)}


def test_triangle_vertices_in_order():
    result = halfplane_intersection(TRIANGLE)
    assert result == [
        pytest.approx((0.0, 0.0)),
        pytest.approx((1.0, 0.0)),
        pytest.approx((0.0, 1.0)),
    ]


@pytest.mark.parametrize("planes", [SQUARE, TRIANGLE])
def test_vertices_satisfy_every_plane(planes):
    result = halfplane_intersection(planes)
    assert result
    for point in result:
        assert all(p.contains(point) for p in planes)


@pytest.mark.parametrize("planes", [SQUARE, TRIANGLE])
def test_counterclockwise(planes):
    assert _signed_area2(halfplane_intersection(planes)) > 0


def test_redundant_parallel_plane_is_dropped():
    with_extra = SQUARE + [Plane(1, 0, 5), Plane(0, -1, 7)]
    assert _rounded(halfplane_intersection(with_extra)) == _rounded(
        halfplane_intersection(SQUARE)
    )


def test_input_order_does_not_matter():
    assert _rounded(halfplane_intersection(list(reversed(SQUARE)))) == _rounded(
        halfplane_intersection(SQUARE)
    )


def test_no_planes_gives_nothing():
    assert halfplane_intersection([]) == []


def test_antiparallel_infeasible_raises():
    planes = [Plane(1, 0, -1), Plane(-1, 0, 0), Plane(0, 1, 0), Plane(0, -1, 1)]
    with pytest.raises(ValueError):
        halfplane_intersection(planes)


@pytest.mark.parametrize("plane", [Plane(2, 3, -4), Plane(0, 5, 1), Plane(-3, 0, 6)])
def test_any_point_on_boundary(plane):
    x, y = plane.any_point()
    assert plane.a * x + plane.b * y + plane.c == pytest.approx(0.0)


def test_any_point_degenerate_raises():
    with pytest.raises(ValueError):
        Plane(0, 0, 1).any_point()


def test_intersection_lies_on_both_lines():
    p, q = Plane(1, 2, -3), Plane(3, -1, 4)
    x, y = p.intersection(q)
    assert p.a * x + p.b * y + p.c == pytest.approx(0.0)
    assert q.a * x + q.b * y + q.c == pytest.approx(0.0)


def test_intersection_parallel_raises():
    with pytest.raises(ValueError):
        Plane(1, 1, 0).intersection(Plane(2, 2, 5))


def test_contains_boundary_and_outside():
    plane = Plane(1, 0, -2)
    assert plane.contains((2.0, 10.0))
    assert plane.contains((3.0, 0.0))
    assert not plane.contains((1.0, 0.0))