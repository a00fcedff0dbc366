"""Scene description consumed by the planner."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

DEFAULT_WIDTH = 320
DEFAULT_HEIGHT = 190


class Point(NamedTuple):
    """Integer scene coordinate; ``y`` grows downward."""

    x: int
    y: int

    def sqr_dist(self, other: Tuple[int, int]) -> int:
        dx = self.x - other[0]
        dy = self.y - other[1]
        return dx * dx + dy * dy


class AccessType(IntEnum):
    TOTAL = 0
    NEAREST = 1
    BARRED = 2
    CONTAINED = 3

    @property
    def keyword(self) -> str:
        return self.name.lower()


@dataclass
class Span:
    line: int
    col: int


def as_point(value: Sequence[int]) -> Point:
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(int(x), int(y))


@dataclass(frozen=True)
class RawPolygon:
    """Polygon as supplied by the host: an access type and its vertex list."""

    access: AccessType
    vertices: Tuple[Point, ...]
    span: Optional[Span] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        access = self.access
        if not isinstance(access, AccessType) and isinstance(access, int):
            try:
                access = AccessType(access)
            except ValueError:
                pass  # reported by validate()
        object.__setattr__(self, "access", access)
        object.__setattr__(self, "vertices", tuple(as_point(v) for v in self.vertices))


@dataclass
class Scene:
    start: Point
    end: Point
    polygons: List[RawPolygon] = field(default_factory=list)
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    opt: int = 1
    spans: Dict[str, Span] = field(default_factory=dict, compare=False, repr=False)

    def __post_init__(self) -> None:
        self.start = as_point(self.start)
        self.end = as_point(self.end)
        self.polygons = list(self.polygons)


__all__ = [
    "DEFAULT_WIDTH",
    "DEFAULT_HEIGHT",
    "Point",
    "AccessType",
    "Span",
    "RawPolygon",
    "Scene",
    "as_point",
]
