"""Walk around a barred crate and stop next to a nearest-access counter."""

from avoidpath import parse_scene, plan, print_scene, strip_sentinel, validate, path_length

SCENE = """
bounds 320 190
start (20, 120)
end (250, 100)
polygon barred (100, 90) (160, 90) (160, 150) (100, 150)
polygon nearest (230, 80) (280, 80) (280, 120) (230, 120)
"""


def main() -> None:
    scene = parse_scene(SCENE)
    validate(scene)
    print(print_scene(scene, include_defaults=True))

    path = strip_sentinel(plan(scene))
    for x, y in path:
        print(f"  ({x}, {y})")
    print(f"length: {path_length(path):.2f}")


if __name__ == "__main__":
    main()
