import argparse
import logging
import sys
from typing import Optional, Sequence

from avoidpath import (
    check_scene,
    contains_point,
    format_path,
    get_planner_config,
    parse_scene,
    plan,
    validate,
)
from avoidpath.scene import Point

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_point(value: Optional[str]) -> Optional[Point]:
    if not value:
        return None
    parts = [part.strip() for part in value.split(",") if part.strip()]
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected X,Y but got {value!r}")
    try:
        return Point(int(parts[0]), int(parts[1]))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected integer coordinates, got {value!r}") from exc


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Plan a walk around scene polygons")
    parser.add_argument("path", help="Path to the scene description file")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--opt",
        type=int,
        choices=[0, 1, 2],
        help="Override the scene's optimization level",
    )
    parser.add_argument("--width", type=int, help="Override the scene width")
    parser.add_argument("--height", type=int, help="Override the scene height")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Print scene diagnostics before planning",
    )
    parser.add_argument(
        "--contains",
        type=_parse_point,
        metavar="X,Y",
        help="Only hit-test X,Y against every polygon instead of planning",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    with open(args.path) as fin:
        text = fin.read()

    logger.info("Parsing scene from %s", args.path)
    scene = parse_scene(text)
    if args.opt is not None:
        scene.opt = args.opt
    if args.width is not None:
        scene.width = args.width
    if args.height is not None:
        scene.height = args.height
    validate(scene)
    logger.info("Validation succeeded")

    if args.contains is not None:
        point: Point = args.contains
        for idx, polygon in enumerate(scene.polygons):
            hit = contains_point(point, polygon)
            print(f"polygon {idx} ({polygon.access.keyword}): {'hit' if hit else 'miss'}")
        return

    if args.check:
        warnings = check_scene(scene)
        print("Warnings:")
        if warnings:
            for warning in warnings:
                print(f"  - {warning}")
        else:
            print("  (none)")

    config = get_planner_config()
    path = plan(scene, config)
    logger.info("Planned path with %d point(s)", len(path) - 1)
    print(f"Path: {format_path(path, config.sentinel)}")


if __name__ == "__main__":
    main(sys.argv[1:])
