"""Exact geometric predicates on integer scene points.

Scene coordinates have ``y`` growing downward. ``signed_area`` is positive
when ``c`` lies to the left of the directed line ``a -> b`` as drawn on the
screen, and polygons other than contained-access ones are stored so that
their interior is on the left of every edge.
"""

from __future__ import annotations

import math
from enum import IntEnum
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .scene import AccessType, Point

FloatPoint = Tuple[float, float]
PointLike = Tuple[int, int]


class PathfindingError(RuntimeError):
    """Raised when the planner cannot place a point outside a polygon."""


class Containment(IntEnum):
    OUTSIDE = 0
    ON_EDGE = 1
    INSIDE = 2


def signed_area(a: PointLike, b: PointLike, c: PointLike) -> int:
    """Return twice the signed area of triangle ``(a, b, c)``."""

    return (b[0] - a[0]) * (a[1] - c[1]) - (c[0] - a[0]) * (a[1] - b[1])


def is_left(a: PointLike, b: PointLike, c: PointLike) -> bool:
    return signed_area(a, b, c) > 0


def is_left_or_on(a: PointLike, b: PointLike, c: PointLike) -> bool:
    return signed_area(a, b, c) >= 0


def collinear(a: PointLike, b: PointLike, c: PointLike) -> bool:
    return signed_area(a, b, c) == 0


def between(a: PointLike, b: PointLike, c: PointLike) -> bool:
    """Return ``True`` when ``c`` lies on the closed segment ``(a, b)``."""

    if not collinear(a, b, c):
        return False

    # a == b degenerates to the y-range test
    if a[0] != b[0]:
        return (a[0] <= c[0] <= b[0]) or (a[0] >= c[0] >= b[0])
    return (a[1] <= c[1] <= b[1]) or (a[1] >= c[1] >= b[1])


def segments_properly_intersect(a: PointLike, b: PointLike, c: PointLike, d: PointLike) -> bool:
    """Return ``True`` when the open segments ``(a, b)`` and ``(c, d)`` cross."""

    ab = (is_left(a, b, c) and is_left(b, a, d)) or (is_left(a, b, d) and is_left(b, a, c))
    cd = (is_left(c, d, a) and is_left(d, c, b)) or (is_left(c, d, b) and is_left(d, c, a))
    return ab and cd


def segments_intersect(a: PointLike, b: PointLike, c: PointLike, d: PointLike) -> bool:
    if segments_properly_intersect(a, b, c, d):
        return True
    return between(a, b, c) or between(a, b, d) or between(c, d, a) or between(c, d, b)


def point_in_polygon(p: PointLike, points: Sequence[PointLike], access: AccessType) -> Containment:
    """Classify ``p`` against the polygon ``points``.

    A horizontal ray from ``p`` is intersected with every edge and the
    crossings left and right of ``p`` are counted separately. An odd total
    means ``p`` sits on the boundary. Contained-access polygons invert the
    inside/outside answer since their free space is the interior.
    """

    lcross = 0
    rcross = 0
    px, py = p[0], p[1]
    count = len(points)

    for idx in range(count):
        v1 = points[idx]
        v2 = points[(idx + 1) % count]

        if v1[0] == px and v1[1] == py:
            return Containment.ON_EDGE

        rstrad = (v1[1] < py) != (v2[1] < py)
        lstrad = (v1[1] > py) != (v2[1] > py)

        if lstrad or rstrad:
            # x / xq is the ray intersection abscissa
            x = v2[0] * v1[1] - v1[0] * v2[1] + (v1[0] - v2[0]) * py
            xq = v1[1] - v2[1]
            if xq < 0:
                x = -x
                xq = -xq

            if rstrad and x > xq * px:
                rcross += 1
            elif lstrad and x < xq * px:
                lcross += 1

    if (lcross + rcross) % 2 == 1:
        return Containment.ON_EDGE

    if rcross % 2 == 1:
        if access == AccessType.CONTAINED:
            return Containment.OUTSIDE
        return Containment.INSIDE

    if access == AccessType.CONTAINED:
        return Containment.INSIDE
    return Containment.OUTSIDE


def polygon_signed_area(points: Sequence[PointLike]) -> int:
    """Return twice the signed polygon area, in the ``signed_area`` convention."""

    if len(points) < 3:
        return 0
    coords = np.asarray(points, dtype=np.int64).reshape(-1, 2)
    xs = coords[:, 0]
    ys = coords[:, 1]
    shoelace = np.dot(xs, np.roll(ys, -1)) - np.dot(np.roll(xs, -1), ys)
    return -int(shoelace)


def normalize_winding(points: Sequence[Point], access: AccessType) -> List[Point]:
    """Return ``points`` ordered clockwise for contained access, anti-clockwise otherwise."""

    ordered = list(points)
    area = polygon_signed_area(ordered)
    if (area > 0 and access == AccessType.CONTAINED) or (area < 0 and access != AccessType.CONTAINED):
        ordered.reverse()
    return ordered


def interior_entered(p: PointLike, prev: PointLike, cur: PointLike, nxt: PointLike) -> bool:
    """Return ``True`` when the line ``(p, cur)`` enters the polygon interior at ``cur``."""

    if is_left(prev, cur, nxt):
        # convex vertex
        return is_left(cur, nxt, p) and is_left(prev, cur, p)
    return is_left(cur, nxt, p) or is_left(prev, cur, p)


def point_on_screen_border(p: PointLike, width: int, height: int) -> bool:
    return p[0] == 0 or p[0] == width - 1 or p[1] == 0 or p[1] == height - 1


def round_point(f: FloatPoint) -> Point:
    return Point(int(math.floor(f[0] + 0.5)), int(math.floor(f[1] + 0.5)))


def segment_intersection(
    a: PointLike, b: PointLike, c: PointLike, d: PointLike
) -> Optional[FloatPoint]:
    """Intersect segment ``(a, b)`` with the edge ``(c, d)`` excluding the edge endpoints."""

    denom = (
        a[0] * float(d[1] - c[1])
        + b[0] * float(c[1] - d[1])
        + d[0] * float(b[1] - a[1])
        + c[0] * float(a[1] - b[1])
    )
    if denom == 0.0:
        return None

    num = a[0] * float(d[1] - c[1]) + c[0] * float(a[1] - d[1]) + d[0] * float(c[1] - a[1])
    s = num / denom

    num = -(a[0] * float(c[1] - b[1]) + b[0] * float(a[1] - c[1]) + c[0] * float(b[1] - a[1]))
    t = num / denom

    if 0.0 <= s <= 1.0 and 0.0 < t < 1.0:
        return (a[0] + s * (b[0] - a[0]), a[1] + s * (b[1] - a[1]))
    return None


def nearest_free_point(f: FloatPoint, points: Sequence[PointLike], access: AccessType) -> Point:
    """Return a lattice point near ``f`` that is not inside the polygon."""

    p = round_point(f)
    if point_in_polygon(p, points, access) != Containment.INSIDE:
        return p

    x = int(math.floor(f[0]))
    y = int(math.floor(f[1]))
    for probe in (Point(x, y), Point(x + 1, y), Point(x + 1, y + 1), Point(x, y + 1)):
        if point_in_polygon(probe, points, access) != Containment.INSIDE:
            return probe

    raise PathfindingError(f"no free point near ({f[0]:.2f}, {f[1]:.2f}) outside polygon")


def nearest_boundary_point(
    p: PointLike,
    points: Sequence[PointLike],
    access: AccessType,
    width: int,
    height: int,
) -> Point:
    """Project ``p`` onto the closest polygon edge and return a free point there.

    Edges lying on the screen border are ignored unless the polygon is of
    contained access. A polygon with no other edge raises
    :class:`PathfindingError` instead of snapping towards ``(0, 0)``, so the
    caller falls back to the direct path.
    """

    if not points:
        raise PathfindingError("cannot project onto an empty polygon")

    p1 = np.asarray(points, dtype=np.int64).reshape(-1, 2)
    p2 = np.roll(p1, -1, axis=0)
    target = np.array([p[0], p[1]], dtype=np.int64)

    if access == AccessType.CONTAINED:
        usable = np.ones(len(p1), dtype=bool)
    else:
        on_border = (
            ((p1[:, 0] == 0) & (p2[:, 0] == 0))
            | ((p1[:, 1] == 0) & (p2[:, 1] == 0))
            | ((p1[:, 0] == width - 1) & (p2[:, 0] == width - 1))
            | ((p1[:, 1] == height - 1) & (p2[:, 1] == height - 1))
        )
        usable = ~on_border

    if not usable.any():
        raise PathfindingError("polygon has no edge off the screen border")

    delta = p2 - p1
    sqr_len = (delta * delta).sum(axis=1)
    num = ((target - p1) * delta).sum(axis=1)
    u = np.divide(
        num.astype(np.float64),
        sqr_len.astype(np.float64),
        out=np.zeros(len(p1), dtype=np.float64),
        where=sqr_len != 0,
    )
    u = np.clip(u, 0.0, 1.0)

    projected = p1 + u[:, np.newaxis] * delta
    rounded = np.floor(projected + 0.5)
    dist = ((rounded - target) ** 2).sum(axis=1)
    dist[~usable] = np.inf

    best = int(np.argmin(dist))
    near = (float(projected[best, 0]), float(projected[best, 1]))
    return nearest_free_point(near, points, access)


__all__ = [
    "FloatPoint",
    "PathfindingError",
    "Containment",
    "signed_area",
    "is_left",
    "is_left_or_on",
    "collinear",
    "between",
    "segments_properly_intersect",
    "segments_intersect",
    "point_in_polygon",
    "polygon_signed_area",
    "normalize_winding",
    "interior_entered",
    "point_on_screen_border",
    "round_point",
    "segment_intersection",
    "nearest_free_point",
    "nearest_boundary_point",
]
