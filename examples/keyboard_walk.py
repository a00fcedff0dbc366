"""Keyboard movement: walk toward the target and stop at the first obstacle."""

from avoidpath import AccessType, RawPolygon, avoid_path, check_scene, Scene

WALL = RawPolygon(AccessType.BARRED, ((150, 40), (170, 40), (170, 160), (150, 160)))
RUG = RawPolygon(AccessType.TOTAL, ((60, 90), (100, 90), (100, 110), (60, 110)))


def main() -> None:
    scene = Scene((40, 100), (280, 100), [WALL, RUG], opt=0)
    for warning in check_scene(scene):
        print(f"warning: {warning}")

    path = avoid_path(scene.start, scene.end, scene.polygons, opt=scene.opt)
    print("path:", path[:-1])


if __name__ == "__main__":
    main()
