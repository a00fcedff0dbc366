"""Polygon set owned by a single planning call."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple

from .geometry import (
    Containment,
    between,
    interior_entered,
    nearest_boundary_point,
    normalize_winding,
    point_in_polygon,
    point_on_screen_border,
)
from .scene import AccessType, Point


@dataclass(eq=False)
class Vertex:
    """Polygon vertex plus the A* bookkeeping of the current search."""

    point: Point
    polygon: "Polygon" = field(repr=False)
    index: int = 0
    cost_g: float = math.inf
    cost_f: float = math.inf
    path_prev: Optional["Vertex"] = field(default=None, repr=False)

    @property
    def has_edges(self) -> bool:
        return len(self.polygon.vertices) > 1

    @property
    def next(self) -> "Vertex":
        vertices = self.polygon.vertices
        return vertices[(self.index + 1) % len(vertices)]

    @property
    def prev(self) -> "Vertex":
        vertices = self.polygon.vertices
        return vertices[(self.index - 1) % len(vertices)]

    def reset_search_state(self) -> None:
        self.cost_g = math.inf
        self.cost_f = math.inf
        self.path_prev = None


@dataclass(eq=False)
class Polygon:
    """Cyclic vertex sequence with an access type."""

    access: AccessType
    vertices: List[Vertex] = field(default_factory=list)

    @classmethod
    def from_points(cls, access: AccessType, points: Sequence[Point]) -> "Polygon":
        polygon = cls(access)
        for point in normalize_winding(points, access):
            polygon.append(point)
        return polygon

    @property
    def points(self) -> List[Point]:
        return [vertex.point for vertex in self.vertices]

    def append(self, point: Point) -> Vertex:
        vertex = Vertex(point, self, index=len(self.vertices))
        self.vertices.append(vertex)
        return vertex

    def insert_after(self, vertex: Vertex, point: Point) -> Vertex:
        """Split the edge leaving ``vertex`` with a new vertex at ``point``."""

        new_vertex = Vertex(point, self)
        self.vertices.insert(vertex.index + 1, new_vertex)
        for idx, v in enumerate(self.vertices):
            v.index = idx
        return new_vertex

    def edges(self) -> Iterator[Tuple[Vertex, Vertex]]:
        if len(self.vertices) < 2:
            return
        for vertex in self.vertices:
            yield vertex, vertex.next

    def contains(self, p: Point) -> Containment:
        return point_in_polygon(p, self.points, self.access)


def inside(p: Point, vertex: Vertex) -> bool:
    """Return ``True`` if the line ``(p, vertex)`` enters the polygon locally at ``vertex``."""

    if not vertex.has_edges:
        return False
    return interior_entered(p, vertex.prev.point, vertex.point, vertex.next.point)


@dataclass(eq=False)
class PathfindingState:
    width: int
    height: int
    polygons: List[Polygon] = field(default_factory=list)
    vertex_start: Optional[Vertex] = None
    vertex_end: Optional[Vertex] = None
    vertex_index: List[Vertex] = field(default_factory=list)
    prepend_point: Optional[Point] = None
    append_point: Optional[Point] = None

    def point_on_screen_border(self, p: Point) -> bool:
        return point_on_screen_border(p, self.width, self.height)

    def find_near_point(self, p: Point, polygon: Polygon) -> Point:
        return nearest_boundary_point(p, polygon.points, polygon.access, self.width, self.height)

    def remove_polygon(self, polygon: Polygon) -> None:
        self.polygons = [other for other in self.polygons if other is not polygon]

    def iter_vertices(self) -> Iterator[Vertex]:
        for polygon in self.polygons:
            yield from polygon.vertices

    def build_vertex_index(self) -> List[Vertex]:
        self.vertex_index = list(self.iter_vertices())
        return self.vertex_index


def merge_point(state: PathfindingState, point: Point) -> Vertex:
    """Return the vertex at ``point``, creating it if needed.

    An existing vertex is reused. A point on an existing edge splits that
    edge. Any other point becomes a single-vertex barred polygon.
    """

    for vertex in state.iter_vertices():
        if vertex.point == point:
            return vertex

    for polygon in state.polygons:
        if len(polygon.vertices) < 2:
            continue
        for vertex, nxt in polygon.edges():
            if between(vertex.point, nxt.point, point):
                return polygon.insert_after(vertex, point)

    polygon = Polygon(AccessType.BARRED)
    vertex = polygon.append(point)
    state.polygons.append(polygon)
    return vertex


__all__ = [
    "Vertex",
    "Polygon",
    "PathfindingState",
    "inside",
    "merge_point",
]
