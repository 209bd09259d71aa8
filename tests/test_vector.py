import math

import pytest

from core.ray import Ray
from core.utils import clamp, reflect
from core.vector import Vector3


def test_arithmetic():
    a = Vector3(1, 2, 3)
    b = Vector3(4, -5, 6)
    assert a + b == Vector3(5, -3, 9)
    assert a - b == Vector3(-3, 7, -3)
    assert a * 2 == Vector3(2, 4, 6)
    assert 2 * a == Vector3(2, 4, 6)
    assert a * b == Vector3(4, -10, 18)
    assert b / 2 == Vector3(2, -2.5, 3)
    assert -a == Vector3(-1, -2, -3)


def test_dot_and_cross():
    x = Vector3(1, 0, 0)
    y = Vector3(0, 1, 0)
    assert x.dot(y) == 0
    assert Vector3(1, 2, 3).dot(Vector3(4, 5, 6)) == 32
    # right-handed
    assert x.cross(y) == Vector3(0, 0, 1)
    assert y.cross(x) == Vector3(0, 0, -1)


def test_magnitude_and_distance():
    assert Vector3(3, 4, 12).magnitude() == 13
    assert Vector3(1, 1, 1).distance_to(Vector3(1, 1, 4)) == 3


@pytest.mark.parametrize("v", [
    Vector3(1, 0, 0),
    Vector3(0, -1, 0),
    Vector3(1, 2, -2) / 3,
    Vector3(0.6, 0.0, 0.8),
])
def test_normalize_unit_vector_is_identity(v):
    n = v.normalize()
    assert math.isclose(n.x, v.x, abs_tol=1e-12)
    assert math.isclose(n.y, v.y, abs_tol=1e-12)
    assert math.isclose(n.z, v.z, abs_tol=1e-12)


def test_normalize_result_has_unit_length():
    assert math.isclose(Vector3(3, -7, 0.5).normalize().magnitude(), 1.0)


def test_normalize_zero_vector_returns_zero():
    n = Vector3(0, 0, 0).normalize()
    assert n == Vector3(0, 0, 0)
    assert not any(math.isnan(c) for c in n)


def test_vector_is_immutable():
    v = Vector3(1, 2, 3)
    with pytest.raises(AttributeError):
        v.x = 5
    assert hash(v) == hash(Vector3(1, 2, 3))


def test_reflect_about_normal():
    assert reflect(Vector3(1, -1, 0), Vector3(0, 1, 0)) == Vector3(1, 1, 0)


def test_clamp():
    assert clamp(1.5, 0.2, 1.0) == 1.0
    assert clamp(-1, 0.2, 1.0) == 0.2
    assert clamp(0.5, 0.2, 1.0) == 0.5


def test_ray_at():
    ray = Ray(Vector3(1, 0, 0), Vector3(0, 0, -1))
    assert ray.at(3) == Vector3(1, 0, -3)
