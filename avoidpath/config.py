"""Planner configuration."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from .scene import Point

POLY_LAST_POINT = 0x7777
NEARBY_TOLERANCE = 1


@dataclass
class PlannerConfig:
    """Tuning knobs shared by the scene builder and the search."""

    # distance probed in four directions around a start point outside a
    # contained-access polygon before that polygon is dropped
    nearby_tolerance: int = NEARBY_TOLERANCE
    avoid_screen_border: bool = True
    # identical polygons are all kept unless set
    skip_duplicate_polygons: bool = False
    sentinel: Point = field(default_factory=lambda: Point(POLY_LAST_POINT, POLY_LAST_POINT))


_PLANNER_CONFIG = PlannerConfig()


def get_planner_config() -> PlannerConfig:
    return copy.deepcopy(_PLANNER_CONFIG)


def set_planner_config(config: PlannerConfig) -> None:
    global _PLANNER_CONFIG
    _PLANNER_CONFIG = copy.deepcopy(config)


__all__ = [
    "POLY_LAST_POINT",
    "NEARBY_TOLERANCE",
    "PlannerConfig",
    "get_planner_config",
    "set_planner_config",
]
