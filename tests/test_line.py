import pytest

from shapes2d import FrozenShapeError, Line, Vector2


def test_direction_and_length_of_horizontal_line():
    line = Line(Vector2(0.0, 0.0), Vector2(2.0, 0.0))
    assert line.direction == Vector2(2.0, 0.0)
    assert line.length == 2.0


def test_endpoints_are_stored_verbatim():
    line = Line((1.5, -2.0), (3.0, 4.0))
    assert line.origin == Vector2(1.5, -2.0)
    assert line.end == Vector2(3.0, 4.0)

    line.origin = (0, 0)
    line.end = (-1, -1)
    assert line.origin == Vector2.ZERO
    assert line.end == Vector2.NEG_ONE


def test_center():
    assert Line((0, 0), (2, 4)).center == Vector2(1, 2)
    assert Line((-3, 1), (1, -1)).center == Vector2(-1, 0)


@pytest.mark.parametrize(
    "end, expected_length, expected_euclidean",
    [
        ((3.0, 4.0), 4.0, 5.0),
        ((0.0, -3.0), 0.0, 3.0),
        ((-2.0, -5.0), -2.0, 5.385164807),
        ((0.0, 0.0), 0.0, 0.0),
    ],
)
def test_length_is_max_component_not_distance(end, expected_length, expected_euclidean):
    line = Line(Vector2.ZERO, end)
    assert line.length == expected_length
    assert line.euclidean_length == pytest.approx(expected_euclidean, rel=1e-6)


def test_from_direction_normalizes_direction():
    line = Line.from_direction((1, 1), (0, 2), 3)
    assert line.origin == Vector2(1, 1)
    assert line.end == Vector2(1, 4)


def test_from_direction_with_diagonal():
    line = Line.from_direction(Vector2.ZERO, (3, 4), 10)
    assert tuple(line.end) == pytest.approx((6.0, 8.0), rel=1e-6)


@pytest.mark.parametrize("distance", [0.0, 1.0, -7.5, 1000.0])
def test_from_direction_with_zero_direction_is_degenerate(distance):
    line = Line.from_direction((2, 3), Vector2.ZERO, distance)
    assert line.end == line.origin == Vector2(2, 3)
    assert line.direction == Vector2.ZERO


@pytest.mark.parametrize(
    "line, end",
    [
        (Line.UP, Vector2(0, 1)),
        (Line.DOWN, Vector2(0, -1)),
        (Line.LEFT, Vector2(-1, 0)),
        (Line.RIGHT, Vector2(1, 0)),
    ],
)
def test_constants(line, end):
    assert line.origin == Vector2.ZERO
    assert line.end == end
    with pytest.raises(FrozenShapeError):
        line.end = Vector2.ONE


def test_default_and_string_rendering():
    line = Line.default()
    assert line == Line(Vector2.ZERO, Vector2.ONE)
    assert str(line) == "Line { origin: [0.0, 0.0], end: [1.0, 1.0] }"


def test_getters_are_idempotent():
    line = Line((0.5, 1.5), (-2.0, 4.0))
    assert line.center == line.center
    assert line.direction == line.direction
    assert line.length == line.length
    assert line.origin == Vector2(0.5, 1.5)
    assert line.end == Vector2(-2.0, 4.0)
