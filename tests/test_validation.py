import pytest

from avoidpath import AccessType, RawPolygon, Scene, ValidationError, parse_scene, validate


def test_valid_scene_passes():
    validate(Scene((0, 0), (10, 10), [RawPolygon(AccessType.BARRED, ((1, 1), (5, 1), (5, 5)))]))


@pytest.mark.parametrize(
    'scene, message',
    [
        (Scene((0, 0), (1, 1), width=0), "bounds must be positive"),
        (Scene((0, 0), (1, 1), height=-5), "bounds must be positive"),
        (Scene((0, 0), (1, 1), opt=3), "optimization level must be 0, 1 or 2"),
        (Scene((0, 40000), (1, 1)), "start coordinate 40000 out of range"),
        (Scene((0, 0), (-40000, 1)), "end coordinate -40000 out of range"),
        (
            Scene((0, 0), (1, 1), [RawPolygon(AccessType.TOTAL, ((0, 0), (32768, 0)))]),
            "polygon 0 vertex coordinate 32768 out of range",
        ),
        (Scene((0, 0), (1, 1), [RawPolygon(7, ((0, 0),))]), "polygon 0 has unknown type 7"),
    ],
)
def test_invalid_scenes(scene, message):
    with pytest.raises(ValidationError, match=message):
        validate(scene)


def test_numeric_access_is_coerced():
    polygon = RawPolygon(2, ((0, 0), (1, 0), (1, 1)))
    assert polygon.access is AccessType.BARRED
    validate(Scene((0, 0), (1, 1), [polygon]))


def test_errors_carry_source_location():
    scene = parse_scene("start (1, 2)\nend (3, 4)\nopt 5\n")
    with pytest.raises(ValidationError) as excinfo:
        validate(scene)
    assert str(excinfo.value).startswith("[line 3, col 1] optimization level")


def test_polygon_errors_point_at_polygon_line():
    scene = parse_scene("start (1, 2)\nend (3, 4)\n\npolygon barred (0, 0) (99999, 0) (5, 5)\n")
    with pytest.raises(ValidationError, match=r"^\[line 4, col 1\] polygon 0 vertex"):
        validate(scene)
