from dataclasses import dataclass
from typing import List, Optional, Tuple

from .builder import convert_polygon, nearby_polygon
from .config import PlannerConfig, get_planner_config
from .geometry import Containment, segments_intersect
from .model import PathfindingState, Polygon, Vertex
from .scene import AccessType, RawPolygon, Scene, Span


@dataclass
class SceneWarning:
    line: int
    col: int
    kind: str
    message: str

    def __str__(self) -> str:
        return self.message


def _warning(kind: str, message: str, span: Optional[Span] = None) -> SceneWarning:
    if span is None:
        return SceneWarning(0, 0, kind, message)
    return SceneWarning(span.line, span.col, kind, message)


def find_intersecting_polygons(state: PathfindingState) -> List[Tuple[Vertex, Vertex]]:
    """Return pairs of intersecting, non-neighbouring edges (each named by its first vertex)."""

    found: List[Tuple[Vertex, Vertex]] = []
    vertices = [vertex for vertex in state.iter_vertices() if vertex.has_edges]
    for i, v1 in enumerate(vertices):
        for v2 in vertices[i + 1:]:
            if v1.next is v2 or v1.prev is v2:
                continue
            if segments_intersect(v1.point, v1.next.point, v2.point, v2.next.point):
                found.append((v1, v2))
    return found


def _relocating_polygons(
    point, polygons: List[Polygon], *, for_start: bool, config: PlannerConfig
) -> List[Polygon]:
    hits: List[Polygon] = []
    for polygon in polygons:
        if polygon.access == AccessType.TOTAL:
            continue
        cont = polygon.contains(point)
        if for_start:
            if cont != Containment.INSIDE:
                continue
            if polygon.access == AccessType.CONTAINED and not nearby_polygon(
                point, polygon, config.nearby_tolerance
            ):
                continue
        elif cont == Containment.OUTSIDE:
            continue
        hits.append(polygon)
    return hits


def check_scene(scene: Scene, config: Optional[PlannerConfig] = None) -> List[SceneWarning]:
    """Report scene problems that the planner tolerates but that usually signal bad input."""

    config = config or get_planner_config()
    warnings: List[SceneWarning] = []
    seen: List[RawPolygon] = []
    owners = {}
    state = PathfindingState(scene.width, scene.height)

    for idx, raw in enumerate(scene.polygons):
        if raw in seen:
            warnings.append(_warning('duplicate_polygon', f'polygon {idx} duplicates an earlier polygon', raw.span))
            continue
        seen.append(raw)
        if 0 < len(raw.vertices) < 3:
            warnings.append(
                _warning(
                    'degenerate_polygon',
                    f'polygon {idx} has only {len(raw.vertices)} vertex/vertices and encloses no area',
                    raw.span,
                )
            )
        polygon = convert_polygon(raw)
        if polygon is None:
            continue
        state.polygons.append(polygon)
        owners[id(polygon)] = (idx, raw)

    for v1, v2 in find_intersecting_polygons(state):
        idx1, raw1 = owners[id(v1.polygon)]
        idx2, _ = owners[id(v2.polygon)]
        where = f'polygon {idx1}' if idx1 == idx2 else f'polygons {idx1} and {idx2}'
        warnings.append(
            _warning(
                'intersecting_polygons',
                f'{where}: edge {tuple(v1.point)}-{tuple(v1.next.point)} intersects '
                f'edge {tuple(v2.point)}-{tuple(v2.next.point)}',
                raw1.span,
            )
        )

    if scene.opt != 0:
        for name, point, for_start in (('start', scene.start, True), ('end', scene.end, False)):
            hits = _relocating_polygons(point, state.polygons, for_start=for_start, config=config)
            if len(hits) > 1:
                indices = ', '.join(str(owners[id(polygon)][0]) for polygon in hits)
                warnings.append(
                    _warning(
                        f'ambiguous_{name}',
                        f'{name} point {tuple(point)} is contained in polygons {indices}; only the first is used',
                        scene.spans.get(name),
                    )
                )

    return warnings


__all__ = ['SceneWarning', 'find_intersecting_polygons', 'check_scene']
