"""Planner entry points and path assembly."""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional, Sequence, Tuple

from .builder import build_state, convert_polygon
from .config import PlannerConfig, get_planner_config
from .geometry import Containment, PathfindingError
from .logging_utils import debug_log_call
from .model import PathfindingState
from .printer import print_scene
from .scene import DEFAULT_HEIGHT, DEFAULT_WIDTH, AccessType, Point, RawPolygon, Scene, as_point
from .search import astar

logger = logging.getLogger(__name__)


def direct_path(start: Point, end: Point, sentinel: Point) -> List[Point]:
    return [start, end, sentinel]


def output_path(state: PathfindingState, sentinel: Point) -> List[Point]:
    """Return the sentinel-terminated path held in the state's predecessor links.

    When the end vertex was not reached, only the way up to the start vertex
    is returned.
    """

    start = state.vertex_start
    end = state.vertex_end
    assert start is not None and end is not None

    if end.path_prev is None:
        first = state.prepend_point if state.prepend_point is not None else start.point
        return [first, start.point, sentinel]

    points: List[Point] = []
    vertex = end
    while vertex is not None:
        points.append(vertex.point)
        vertex = vertex.path_prev
    points.reverse()

    path: List[Point] = []
    if state.prepend_point is not None:
        path.append(state.prepend_point)
    path.extend(points)
    if state.append_point is not None:
        path.append(state.append_point)
    path.append(sentinel)
    return path


@debug_log_call(logger)
def plan(scene: Scene, config: Optional[PlannerConfig] = None) -> List[Point]:
    """Plan a walk for ``scene`` and return the sentinel-terminated point list.

    Planning never raises for geometric reasons: if the scene cannot be set
    up the direct segment from start to end is returned instead.
    """

    config = config or get_planner_config()

    try:
        state = build_state(scene, config)
    except PathfindingError as exc:
        logger.warning("[avoidpath] Error: pathfinding failed (%s) for following input:\n%s", exc, print_scene(scene))
        logger.warning("[avoidpath] Returning direct path from start point to end point")
        return direct_path(scene.start, scene.end, config.sentinel)

    astar(state, avoid_screen_border=config.avoid_screen_border)
    return output_path(state, config.sentinel)


def avoid_path(
    start: Sequence[int],
    end: Sequence[int],
    polygons: Iterable[RawPolygon] = (),
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    opt: int = 1,
    config: Optional[PlannerConfig] = None,
) -> List[Point]:
    scene = Scene(as_point(start), as_point(end), list(polygons), width, height, opt)
    return plan(scene, config)


def contains_point(point: Sequence[int], polygon: RawPolygon) -> bool:
    """Static hit test: is ``point`` inside or on the edge of ``polygon``?

    The polygon is always treated as barred, so contained-access polygons
    are not inverted here.
    """

    converted = convert_polygon(RawPolygon(AccessType.BARRED, polygon.vertices))
    if converted is None:
        return False
    return converted.contains(as_point(point)) != Containment.OUTSIDE


def strip_sentinel(path: Sequence[Point], sentinel: Optional[Point] = None) -> List[Point]:
    marker = sentinel or get_planner_config().sentinel
    points = list(path)
    if points and points[-1] == marker:
        points.pop()
    return points


def path_length(path: Sequence[Tuple[int, int]]) -> float:
    return sum(math.hypot(a[0] - b[0], a[1] - b[1]) for a, b in zip(path, path[1:]))


__all__ = [
    "direct_path",
    "output_path",
    "plan",
    "avoid_path",
    "contains_point",
    "strip_sentinel",
    "path_length",
]
