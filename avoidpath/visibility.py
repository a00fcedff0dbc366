"""Visibility queries over the polygon set."""

from __future__ import annotations

from typing import List

from .geometry import between, segments_properly_intersect
from .model import PathfindingState, Vertex, inside


def sight_line_blocked(state: PathfindingState, vertex_cur: Vertex, vertex: Vertex) -> bool:
    """Return ``True`` if the segment between the two vertices cuts through a polygon."""

    a = vertex_cur.point
    b = vertex.point

    for edge in state.vertex_index:
        if not edge.has_edges:
            continue

        if between(a, b, edge.point):
            # passing through a vertex is fine unless it enters its polygon there
            if inside(a, edge) or inside(b, edge):
                return True
            continue

        if segments_properly_intersect(a, b, edge.point, edge.next.point):
            return True

    return False


def visible_vertices(state: PathfindingState, vertex_cur: Vertex) -> List[Vertex]:
    """Return the vertices reachable from ``vertex_cur`` by an unobstructed segment.

    The result follows the order of ``state.vertex_index``.
    """

    visible: List[Vertex] = []
    for vertex in state.vertex_index:
        if vertex is vertex_cur:
            continue
        if inside(vertex.point, vertex_cur) or inside(vertex_cur.point, vertex):
            continue
        if sight_line_blocked(state, vertex_cur, vertex):
            continue
        visible.append(vertex)
    return visible


__all__ = ["sight_line_blocked", "visible_vertices"]
