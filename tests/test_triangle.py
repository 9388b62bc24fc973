from shapes2d import Triangle, Vector2


def test_coordinates_are_independent():
    triangle = Triangle((0, 0), (1, 0), (0, 1))

    triangle.coordinate2 = Vector2(5.0, 5.0)

    assert triangle.coordinate1 == Vector2(0, 0)
    assert triangle.coordinate2 == Vector2(5, 5)
    assert triangle.coordinate3 == Vector2(0, 1)

    triangle.coordinate1 = (-1, -1)
    triangle.coordinate3 = (2, 2)
    assert triangle.coordinate1 == Vector2(-1, -1)
    assert triangle.coordinate2 == Vector2(5, 5)
    assert triangle.coordinate3 == Vector2(2, 2)


def test_degenerate_triangles_are_valid():
    collinear = Triangle((0, 0), (1, 1), (2, 2))
    assert collinear.coordinate3 == Vector2(2, 2)

    coincident = Triangle(Vector2.ONE, Vector2.ONE, Vector2.ONE)
    assert coincident.coordinate1 == coincident.coordinate2 == coincident.coordinate3


def test_default():
    triangle = Triangle.default()
    assert triangle.coordinate1 == Vector2.ONE
    assert triangle.coordinate2 == Vector2.ZERO
    assert triangle.coordinate3 == Vector2(1.0, 0.0)


def test_string_rendering():
    assert str(Triangle.default()) == (
        "Triangle { coordinate1: [1.0, 1.0], coordinate2: [0.0, 0.0], coordinate3: [1.0, 0.0] }"
    )
