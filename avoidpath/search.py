"""A* search over the lazily computed visibility graph."""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from typing import List, Set, Tuple

from .model import PathfindingState, Vertex
from .visibility import visible_vertices

logger = logging.getLogger(__name__)


def distance(a: Vertex, b: Vertex) -> float:
    return math.hypot(a.point.x - b.point.x, a.point.y - b.point.y)


def astar(state: PathfindingState, avoid_screen_border: bool = True) -> bool:
    """Compute a shortest path from ``state.vertex_start`` to ``state.vertex_end``.

    The path is left in the ``path_prev`` links, to be followed back from the
    end vertex. Returns ``False`` when the end vertex is unreachable, in which
    case its ``path_prev`` stays ``None``.

    Open vertices are expanded by lowest ``cost_f``; ties go to the vertex
    whose cost was set first.
    """

    start = state.vertex_start
    end = state.vertex_end
    assert start is not None and end is not None

    for vertex in state.vertex_index:
        vertex.reset_search_state()

    order = itertools.count()
    start.cost_g = 0.0
    start.cost_f = distance(start, end)

    open_heap: List[Tuple[float, int, Vertex]] = [(start.cost_f, next(order), start)]
    closed_set: Set[Vertex] = set()

    while open_heap:
        cost_f, _, vertex_min = heapq.heappop(open_heap)
        if vertex_min in closed_set or cost_f > vertex_min.cost_f:
            continue  # stale entry

        if vertex_min is end:
            return True

        closed_set.add(vertex_min)

        for vertex in visible_vertices(state, vertex_min):
            if vertex in closed_set:
                continue

            if avoid_screen_border and vertex is not end and state.point_on_screen_border(vertex.point):
                continue

            new_dist = vertex_min.cost_g + distance(vertex_min, vertex)
            if new_dist < vertex.cost_g:
                vertex.cost_g = new_dist
                vertex.cost_f = new_dist + distance(vertex, end)
                vertex.path_prev = vertex_min
                heapq.heappush(open_heap, (vertex.cost_f, next(order), vertex))

    logger.warning("[avoidpath] End point (%i, %i) is unreachable", end.point.x, end.point.y)
    return False


__all__ = ["distance", "astar"]
