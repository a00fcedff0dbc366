from .scene import AccessType, Point, RawPolygon, Scene, Span, DEFAULT_WIDTH, DEFAULT_HEIGHT
from .geometry import Containment, PathfindingError, point_in_polygon
from .config import PlannerConfig, get_planner_config, set_planner_config
from .model import PathfindingState, Polygon, Vertex, merge_point
from .builder import build_state
from .visibility import visible_vertices
from .search import astar
from .planner import avoid_path, contains_point, path_length, plan, strip_sentinel
from .parser import parse_scene
from .printer import format_path, print_scene
from .validate import validate, ValidationError
from .consistency import check_scene, SceneWarning

__all__ = [
    'AccessType',
    'Point',
    'RawPolygon',
    'Scene',
    'Span',
    'DEFAULT_WIDTH',
    'DEFAULT_HEIGHT',
    'Containment',
    'PathfindingError',
    'point_in_polygon',
    'PlannerConfig',
    'get_planner_config',
    'set_planner_config',
    'PathfindingState',
    'Polygon',
    'Vertex',
    'merge_point',
    'build_state',
    'visible_vertices',
    'astar',
    'avoid_path',
    'contains_point',
    'path_length',
    'plan',
    'strip_sentinel',
    'parse_scene',
    'format_path',
    'print_scene',
    'validate',
    'ValidationError',
    'check_scene',
    'SceneWarning',
]
