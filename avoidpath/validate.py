from typing import Optional, Tuple

from .scene import AccessType, Scene, Span

INT16_MIN = -32768
INT16_MAX = 32767
OPT_LEVELS = (0, 1, 2)


class ValidationError(Exception):
    pass


def _where(sp: Optional[Span]) -> str:
    if sp is None:
        return ''
    return f'[line {sp.line}, col {sp.col}] '


def _check_point(point: Tuple[int, int], what: str, sp: Optional[Span]) -> None:
    for coord in point:
        if not isinstance(coord, int) or isinstance(coord, bool):
            raise ValidationError(f'{_where(sp)}{what} coordinates must be integers, got {point!r}')
        if not INT16_MIN <= coord <= INT16_MAX:
            raise ValidationError(f'{_where(sp)}{what} coordinate {coord} out of range')


def validate(scene: Scene) -> None:
    bounds_sp = scene.spans.get('bounds')
    if scene.width <= 0 or scene.height <= 0:
        raise ValidationError(f'{_where(bounds_sp)}bounds must be positive, got {scene.width}x{scene.height}')
    if scene.opt not in OPT_LEVELS:
        raise ValidationError(f'{_where(scene.spans.get("opt"))}optimization level must be 0, 1 or 2, got {scene.opt}')

    _check_point(scene.start, 'start', scene.spans.get('start'))
    _check_point(scene.end, 'end', scene.spans.get('end'))

    for idx, polygon in enumerate(scene.polygons):
        if not isinstance(polygon.access, AccessType):
            raise ValidationError(f'{_where(polygon.span)}polygon {idx} has unknown type {polygon.access!r}')
        for point in polygon.vertices:
            _check_point(point, f'polygon {idx} vertex', polygon.span)
