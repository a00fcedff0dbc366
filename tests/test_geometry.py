import pytest

from avoidpath.geometry import (
    Containment,
    PathfindingError,
    between,
    collinear,
    interior_entered,
    is_left,
    is_left_or_on,
    nearest_boundary_point,
    nearest_free_point,
    normalize_winding,
    point_in_polygon,
    point_on_screen_border,
    polygon_signed_area,
    segment_intersection,
    segments_intersect,
    segments_properly_intersect,
    signed_area,
)
from avoidpath.scene import AccessType, Point

SQUARE = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]


def _barred_square():
    return normalize_winding(SQUARE, AccessType.BARRED)


def test_left_is_up_when_walking_right_on_screen():
    assert signed_area((0, 0), (10, 0), (0, -10)) == 100
    assert is_left((0, 0), (10, 0), (0, -10))
    assert not is_left((0, 0), (10, 0), (0, 10))
    assert not is_left((0, 0), (10, 0), (20, 0))
    assert is_left_or_on((0, 0), (10, 0), (20, 0))
    assert collinear((0, 0), (10, 0), (20, 0))


@pytest.mark.parametrize(
    'a, b, c, expected',
    [
        ((0, 0), (10, 0), (5, 0), True),
        ((0, 0), (10, 0), (0, 0), True),
        ((0, 0), (10, 0), (11, 0), False),
        ((0, 0), (10, 0), (5, 1), False),
        ((0, 0), (0, 10), (0, 10), True),
        ((0, 10), (0, 0), (0, 4), True),
        ((0, 0), (0, 10), (0, -1), False),
    ],
)
def test_between(a, b, c, expected):
    assert between(a, b, c) is expected


def test_proper_intersection_requires_a_transversal_crossing():
    assert segments_properly_intersect((0, 0), (10, 10), (0, 10), (10, 0))
    assert not segments_properly_intersect((0, 0), (10, 0), (10, 0), (10, 10))
    assert not segments_properly_intersect((0, 0), (10, 0), (5, 0), (5, 5))
    assert not segments_properly_intersect((0, 0), (10, 0), (2, 0), (8, 0))
    assert segments_intersect((0, 0), (10, 0), (5, 0), (5, 5))
    assert not segments_intersect((0, 0), (10, 0), (0, 5), (10, 5))


@pytest.mark.parametrize(
    'point, expected',
    [
        ((5, 5), Containment.INSIDE),
        ((15, 5), Containment.OUTSIDE),
        ((-1, 5), Containment.OUTSIDE),
        ((10, 5), Containment.ON_EDGE),
        ((0, 0), Containment.ON_EDGE),
        ((10, 10), Containment.ON_EDGE),
    ],
)
def test_point_in_polygon(point, expected):
    assert point_in_polygon(point, _barred_square(), AccessType.BARRED) == expected


@pytest.mark.parametrize('point', [(5, 5), (15, 5), (-3, 7), (10, 5), (0, 0), (10, 10), (4, 0)])
def test_contained_access_inverts_inside_and_outside_only(point):
    plain = point_in_polygon(point, SQUARE, AccessType.BARRED)
    inverted = point_in_polygon(point, SQUARE, AccessType.CONTAINED)
    if plain == Containment.ON_EDGE:
        assert inverted == Containment.ON_EDGE
    else:
        assert (inverted == Containment.INSIDE) == (plain == Containment.OUTSIDE)


def test_polygon_area_matches_triangle_fan():
    points = [Point(0, 0), Point(8, 0), Point(8, 8), Point(4, 3), Point(0, 8)]
    fan = sum(signed_area(points[0], points[i], points[i + 1]) for i in range(1, len(points) - 1))
    assert polygon_signed_area(points) == fan
    assert polygon_signed_area(points[:2]) == 0


def test_winding_is_normalized_per_access_type():
    assert polygon_signed_area(normalize_winding(SQUARE, AccessType.BARRED)) > 0
    assert polygon_signed_area(normalize_winding(SQUARE, AccessType.NEAREST)) > 0
    assert polygon_signed_area(normalize_winding(SQUARE, AccessType.CONTAINED)) < 0
    assert normalize_winding(SQUARE, AccessType.BARRED) == list(reversed(SQUARE))
    assert normalize_winding(SQUARE, AccessType.CONTAINED) == SQUARE


def test_interior_entered_at_convex_vertex():
    prev, cur, nxt = Point(0, 10), Point(10, 10), Point(10, 0)
    assert interior_entered((5, 5), prev, cur, nxt)
    assert not interior_entered((20, 20), prev, cur, nxt)
    assert not interior_entered((20, 5), prev, cur, nxt)


def test_interior_entered_at_reflex_vertex():
    # collinear neighbours count as reflex: any interior side enters
    prev, cur, nxt = Point(0, 10), Point(5, 10), Point(10, 10)
    assert interior_entered((5, 5), prev, cur, nxt)
    assert not interior_entered((5, 15), prev, cur, nxt)


def test_segment_intersection_excludes_edge_endpoints():
    assert segment_intersection((0, 5), (20, 5), (10, 0), (10, 10)) == pytest.approx((10.0, 5.0))
    assert segment_intersection((0, 5), (20, 5), (10, 5), (10, 10)) is None
    assert segment_intersection((0, 5), (20, 5), (0, 6), (20, 6)) is None
    assert segment_intersection((0, 5), (5, 5), (10, 0), (10, 10)) is None


def test_nearest_free_point_rounds_then_probes():
    square = _barred_square()
    assert nearest_free_point((10.2, 5.4), square, AccessType.BARRED) == (10, 5)
    assert nearest_free_point((9.4, 5.0), square, AccessType.BARRED) == (10, 5)


def test_nearest_free_point_fails_deep_inside():
    with pytest.raises(PathfindingError):
        nearest_free_point((5.0, 5.0), _barred_square(), AccessType.BARRED)


def test_nearest_boundary_point_skips_screen_border_edges():
    # the x=0 and y=0 edges lie on the border of a 100x100 screen
    point = nearest_boundary_point((3, 5), _barred_square(), AccessType.BARRED, 100, 100)
    assert point == (3, 10)


def test_nearest_boundary_point_keeps_border_edges_for_contained_access():
    point = nearest_boundary_point((3, 5), SQUARE, AccessType.CONTAINED, 100, 100)
    assert point == (0, 5)


def test_nearest_boundary_point_needs_an_usable_edge():
    border = normalize_winding([Point(0, 0), Point(99, 0), Point(99, 99), Point(0, 99)], AccessType.BARRED)
    with pytest.raises(PathfindingError):
        nearest_boundary_point((50, 50), border, AccessType.BARRED, 100, 100)


def test_screen_border_predicates():
    assert point_on_screen_border((0, 50), 320, 190)
    assert point_on_screen_border((319, 50), 320, 190)
    assert point_on_screen_border((50, 189), 320, 190)
    assert not point_on_screen_border((50, 190), 320, 190)
