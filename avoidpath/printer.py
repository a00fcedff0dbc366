from typing import Iterable, Optional, Sequence, Tuple

from .scene import DEFAULT_HEIGHT, DEFAULT_WIDTH, RawPolygon, Scene


def point_str(point: Tuple[int, int]) -> str:
    return f"({point[0]}, {point[1]})"


def polygon_str(polygon: RawPolygon) -> str:
    parts = [f"polygon {getattr(polygon.access, 'keyword', polygon.access)}"]
    parts.extend(point_str(point) for point in polygon.vertices)
    return " ".join(parts)


def print_scene(scene: Scene, *, include_defaults: bool = False) -> str:
    lines = []
    if include_defaults or (scene.width, scene.height) != (DEFAULT_WIDTH, DEFAULT_HEIGHT):
        lines.append(f"bounds {scene.width} {scene.height}")
    lines.append(f"start {point_str(scene.start)}")
    lines.append(f"end {point_str(scene.end)}")
    if include_defaults or scene.opt != 1:
        lines.append(f"opt {scene.opt}")
    for polygon in scene.polygons:
        lines.append(polygon_str(polygon))
    return "\n".join(lines) + "\n"


def format_path(path: Sequence[Tuple[int, int]], sentinel: Optional[Tuple[int, int]] = None) -> str:
    points: Iterable[Tuple[int, int]] = path
    if sentinel is not None and path and tuple(path[-1]) == tuple(sentinel):
        points = path[:-1]
    return " ".join(point_str(point) for point in points)
