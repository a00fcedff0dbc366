from avoidpath import AccessType, Point, RawPolygon, Scene, format_path, parse_scene, print_scene


def test_print_scene_omits_defaults():
    scene = Scene((1, 2), (3, 4), [RawPolygon(AccessType.BARRED, ((0, 0), (5, 0), (5, 5)))])
    assert print_scene(scene) == "start (1, 2)\nend (3, 4)\npolygon barred (0, 0) (5, 0) (5, 5)\n"


def test_print_scene_with_defaults():
    scene = Scene((1, 2), (3, 4))
    assert print_scene(scene, include_defaults=True) == "bounds 320 190\nstart (1, 2)\nend (3, 4)\nopt 1\n"


def test_printed_scene_parses_back():
    scene = Scene(
        (10, -50),
        (90, 50),
        [
            RawPolygon(AccessType.NEAREST, ((40, 40), (60, 40), (60, 60))),
            RawPolygon(AccessType.CONTAINED, ((0, 0), (99, 0), (99, 99), (0, 99))),
            RawPolygon(AccessType.TOTAL, ()),
        ],
        width=100,
        height=120,
        opt=0,
    )
    assert parse_scene(print_scene(scene)) == scene


def test_format_path_drops_sentinel():
    sentinel = Point(0x7777, 0x7777)
    assert format_path([Point(1, 2), Point(3, 4), sentinel], sentinel) == "(1, 2) (3, 4)"
    assert format_path([Point(1, 2), sentinel]) == "(1, 2) (30583, 30583)"
