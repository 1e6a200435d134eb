"""Tests for Ray."""

import pytest
from core.vector import Vector3
from core.ray import Ray


def test_stores_origin_and_direction():
    origin = Vector3(1, 2, 3)
    direction = Vector3(0, 0, -1)
    ray = Ray(origin, direction)
    assert ray.origin is origin
    assert ray.direction is direction


def test_at_zero_is_origin():
    ray = Ray(Vector3(1, -2, 3), Vector3(4, 5, -6))
    assert ray.at(0) == ray.origin


def test_at_positive_and_negative():
    ray = Ray(Vector3(0, 0, 0), Vector3(1, 0, 0))
    assert ray.at(5) == Vector3(5, 0, 0)
    assert ray.at(-5) == Vector3(-5, 0, 0)


def test_direction_need_not_be_unit():
    ray = Ray(Vector3(0, 1, 0), Vector3(0, 0, -2))
    assert ray.at(1.5) == Vector3(0, 1, -3)


@pytest.mark.parametrize("t1, t2", [(0.0, 1.0), (0.25, 0.5), (-1.5, 3.0), (10.0, -2.5)])
def test_at_is_affine(t1, t2):
    ray = Ray(Vector3(0.5, -1.0, 2.0), Vector3(1.0, 2.0, -0.5))
    lhs = ray.at(t1 + t2)
    rhs = ray.at(t1) + ray.direction * t2
    assert list(lhs) == pytest.approx(list(rhs))
