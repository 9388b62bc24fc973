import pytest

from shapes2d import Circle, Vector2


def test_from_diameter():
    circle = Circle.from_diameter(Vector2(0.0, 0.0), 2.0)
    assert circle.radius == 1.0
    assert circle.diameter == 2.0


def test_radius_and_diameter_setters():
    circle = Circle(Vector2.ZERO, 3.0)
    assert circle.diameter == 6.0

    circle.diameter = 5.0
    assert circle.radius == 2.5

    circle.radius = 0.25
    assert circle.diameter == 0.5


def test_center_setter_keeps_radius():
    circle = Circle((1, 1), 4.0)
    circle.center = (-2, 3)
    assert circle.center == Vector2(-2, 3)
    assert circle.radius == 4.0


@pytest.mark.parametrize("radius", [-1.0, 0.0, -0.5])
def test_non_positive_radius_is_not_validated(radius):
    circle = Circle(Vector2.ZERO, radius)
    assert circle.radius == radius
    assert circle.diameter == radius * 2


def test_negative_diameter_is_not_validated():
    circle = Circle.from_diameter(Vector2.ZERO, -4.0)
    assert circle.radius == -2.0


def test_default_and_string_rendering():
    circle = Circle.default()
    assert circle == Circle(Vector2.ZERO, 1.0)
    assert str(circle) == "Circle { center: [0.0, 0.0], radius: 1.0 }"
