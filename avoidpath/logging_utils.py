from __future__ import annotations

import logging
import reprlib
from functools import wraps
from typing import Any, Callable, MutableMapping, Optional, Sequence, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 160
_repr.maxlist = 8
_repr.maxtuple = 8


def _safe_repr(value: Any, *, max_items: int = 6, max_length: int = 400) -> str:
    # local imports keep this module importable from every planner module
    from .model import PathfindingState, Polygon, Vertex
    from .scene import Point, RawPolygon, Scene

    if isinstance(value, Point):
        return f"({value.x}, {value.y})"

    if isinstance(value, Vertex):
        return f"Vertex{_safe_repr(value.point)}"

    if isinstance(value, (Polygon, RawPolygon)):
        points = value.points if isinstance(value, Polygon) else list(value.vertices)
        return f"{getattr(value.access, 'keyword', value.access)}-polygon[{len(points)}]{_safe_repr(points, max_items=max_items)}"

    if isinstance(value, Scene):
        return (
            f"Scene(start={_safe_repr(value.start)}, end={_safe_repr(value.end)}, "
            f"polygons={len(value.polygons)}, bounds={value.width}x{value.height}, opt={value.opt})"
        )

    if isinstance(value, PathfindingState):
        return (
            f"PathfindingState(polygons={len(value.polygons)}, "
            f"vertices={len(value.vertex_index)}, bounds={value.width}x{value.height})"
        )

    if isinstance(value, np.ndarray):
        return f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"

    if isinstance(value, (list, tuple)) and not isinstance(value, Point):
        open_br, close_br = ("(", ")") if isinstance(value, tuple) else ("[", "]")
        items = []
        for idx, item in enumerate(value):
            if idx >= max_items:
                items.append(f"... {len(value) - max_items} more")
                break
            items.append(_safe_repr(item))
        return f"{open_br}{', '.join(items)}{close_br}"

    rendered = _repr.repr(value)
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = []
    if args:
        parts.append("args=[" + ", ".join(_safe_repr(arg) for arg in args) + "]")
    if kwargs:
        parts.append(
            "kwargs={"
            + ", ".join(f"{key}={_safe_repr(value)}" for key, value in kwargs.items())
            + "}"
        )
    if not parts:
        return "no-args"
    return ", ".join(parts)


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator that emits DEBUG records on entry and exit of planner calls."""

    def decorator(func: F) -> F:
        qualname = name or getattr(func, "__qualname__", getattr(func, "__name__", "<callable>"))

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Entering %s (%s)", qualname, _format_arguments(args, kwargs))
            result = func(*args, **kwargs)
            if logger.isEnabledFor(logging.DEBUG):
                if log_result:
                    logger.debug("Exiting %s -> %s", qualname, _safe_repr(result))
                else:
                    logger.debug("Exiting %s", qualname)
            return result

        return cast(F, wrapper)

    return decorator
