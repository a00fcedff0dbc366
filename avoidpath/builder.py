"""Conversion of a scene description into a pathfinding state."""

from __future__ import annotations

import logging
from typing import List, Optional

from .config import PlannerConfig, get_planner_config
from .geometry import (
    Containment,
    FloatPoint,
    PathfindingError,
    between,
    is_left,
    nearest_free_point,
    round_point,
    segment_intersection,
)
from .logging_utils import debug_log_call
from .model import PathfindingState, Polygon, inside, merge_point
from .scene import AccessType, Point, RawPolygon, Scene

logger = logging.getLogger(__name__)


def convert_polygon(raw: RawPolygon) -> Optional[Polygon]:
    """Return the internal polygon for ``raw``.

    ``None`` is returned for polygons without vertices and for unknown
    access types.
    """

    if not raw.vertices or not isinstance(raw.access, AccessType):
        return None
    return Polygon.from_points(raw.access, raw.vertices)


def convert_polygons(polygons: List[RawPolygon], config: PlannerConfig) -> List[Polygon]:
    converted: List[Polygon] = []
    seen: List[RawPolygon] = []
    for raw in polygons:
        if not isinstance(raw.access, AccessType):
            logger.warning("Ignoring polygon with unknown type %r", raw.access)
            continue
        if config.skip_duplicate_polygons and raw in seen:
            logger.warning("Ignoring duplicate %s polygon with %d vertices", raw.access.keyword, len(raw.vertices))
            continue
        seen.append(raw)
        polygon = convert_polygon(raw)
        if polygon is not None:
            converted.append(polygon)
    return converted


def nearby_polygon(point: Point, polygon: Polygon, tolerance: int) -> bool:
    """Return ``True`` when ``point`` lies within ``tolerance`` of a contained-access polygon."""

    assert polygon.access == AccessType.CONTAINED
    probes = (
        Point(point.x, point.y + tolerance),
        Point(point.x, point.y - tolerance),
        Point(point.x + tolerance, point.y),
        Point(point.x - tolerance, point.y),
    )
    return any(polygon.contains(probe) != Containment.INSIDE for probe in probes)


def fixup_start_point(state: PathfindingState, start: Point, config: PlannerConfig) -> Point:
    """Drop polygons irrelevant to ``start`` and move it out of blocking polygons."""

    new_start = start

    for polygon in list(state.polygons):
        cont = polygon.contains(start)
        access = polygon.access

        if access == AccessType.TOTAL:
            if cont != Containment.OUTSIDE:
                state.remove_polygon(polygon)
        elif access == AccessType.CONTAINED and cont == Containment.INSIDE and not nearby_polygon(
            start, polygon, config.nearby_tolerance
        ):
            # containment is inverted: start is outside this region
            state.remove_polygon(polygon)
        elif cont == Containment.INSIDE:
            if state.prepend_point is not None:
                logger.warning("AvoidPath: start point %s is contained in multiple polygons", tuple(start))
            else:
                new_start = state.find_near_point(start, polygon)
                if access in (AccessType.BARRED, AccessType.CONTAINED):
                    logger.warning("AvoidPath: start position %s at unreachable location", tuple(start))
                state.prepend_point = start

    return new_start


def fixup_end_point(state: PathfindingState, end: Point) -> Point:
    """Drop total-access polygons holding ``end`` and move it out of blocking polygons."""

    new_end = end
    relocated = False

    for polygon in list(state.polygons):
        cont = polygon.contains(end)
        access = polygon.access

        if access == AccessType.TOTAL:
            if cont != Containment.OUTSIDE:
                state.remove_polygon(polygon)
        elif cont != Containment.OUTSIDE:
            if relocated:
                logger.warning("AvoidPath: end point %s is contained in multiple polygons", tuple(end))
            else:
                new_end = state.find_near_point(end, polygon)
                relocated = True
                # nearest-access polygons walk on to the original end point
                if access == AccessType.NEAREST:
                    state.append_point = end

    return new_end


def change_polygons_opt_0(state: PathfindingState) -> None:
    """Drop total-access polygons and treat nearest-access ones as total access."""

    for polygon in list(state.polygons):
        if polygon.access == AccessType.TOTAL:
            state.remove_polygon(polygon)
        elif polygon.access == AccessType.NEAREST:
            polygon.access = AccessType.TOTAL


def nearest_intersection(state: PathfindingState, p: Point, q: Point) -> Optional[Point]:
    """Return the free point nearest to ``p`` where ``(p, q)`` first runs into a polygon.

    Intersections reached from inside a polygon and improper touches that
    do not block the line are ignored. ``None`` means nothing was hit.
    """

    best: Optional[FloatPoint] = None
    best_polygon: Optional[Polygon] = None
    best_dist: Optional[int] = None

    for polygon in state.polygons:
        for vertex in polygon.vertices:
            nxt = vertex.next
            if between(p, q, vertex.point):
                if not inside(q, vertex):
                    continue
                isec: Optional[FloatPoint] = (float(vertex.point.x), float(vertex.point.y))
            else:
                if not is_left(vertex.point, nxt.point, q):
                    continue
                isec = segment_intersection(p, q, vertex.point, nxt.point)
                if isec is None:
                    continue

            dist = p.sqr_dist(round_point(isec))
            if best_dist is None or dist < best_dist:
                best = isec
                best_polygon = polygon
                best_dist = dist

    if best is None or best_polygon is None:
        return None
    return nearest_free_point(best, best_polygon.points, best_polygon.access)


@debug_log_call(logger)
def build_state(scene: Scene, config: Optional[PlannerConfig] = None) -> PathfindingState:
    """Build the pathfinding state for ``scene``.

    Raises :class:`PathfindingError` when the start, end or keyboard
    intersection point cannot be placed.
    """

    config = config or get_planner_config()
    state = PathfindingState(scene.width, scene.height)
    state.polygons = convert_polygons(scene.polygons, config)

    if scene.opt == 0:
        # keyboard movement: no fixups, stop at the first obstacle
        change_polygons_opt_0(state)
        intersection = nearest_intersection(state, scene.start, scene.end)
        if intersection is not None:
            state.prepend_point = scene.start
            state.vertex_start = merge_point(state, intersection)
        else:
            state.vertex_start = merge_point(state, scene.start)
        state.vertex_end = merge_point(state, scene.end)
    else:
        try:
            new_start = fixup_start_point(state, scene.start, config)
        except PathfindingError:
            logger.warning("AvoidPath: couldn't fixup start position for pathfinding")
            raise
        try:
            new_end = fixup_end_point(state, scene.end)
        except PathfindingError:
            logger.warning("AvoidPath: couldn't fixup end position for pathfinding")
            raise
        state.vertex_start = merge_point(state, new_start)
        state.vertex_end = merge_point(state, new_end)

    state.build_vertex_index()
    logger.debug(
        "Built pathfinding state: %d polygon(s), %d vertices",
        len(state.polygons),
        len(state.vertex_index),
    )
    return state


__all__ = [
    "convert_polygon",
    "convert_polygons",
    "nearby_polygon",
    "fixup_start_point",
    "fixup_end_point",
    "change_polygons_opt_0",
    "nearest_intersection",
    "build_state",
]
