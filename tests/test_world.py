"""Tests for HittableList."""

import math
import pytest
from core.vector import Vector3
from core.ray import Ray
from geometry import HittableList, Sphere


def forward_ray():
    return Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))


def test_empty_world_misses():
    world = HittableList()
    assert len(world) == 0
    assert world.hit(forward_ray(), -math.inf, math.inf) is None


def test_picks_closest_object_regardless_of_order():
    near = Sphere(Vector3(0, 0, -1), 0.5)
    far = Sphere(Vector3(0, 0, -5), 0.5)
    for objects in ([near, far], [far, near]):
        world = HittableList(objects)
        rec = world.hit(forward_ray(), 0.0, math.inf)
        assert rec.t == pytest.approx(0.5)


def test_add_and_clear():
    world = HittableList()
    world.add(Sphere(Vector3(0, 0, -1), 0.5))
    assert len(world) == 1
    assert world.hit(forward_ray(), 0.0, math.inf) is not None
    world.clear()
    assert len(world) == 0
    assert world.hit(forward_ray(), 0.0, math.inf) is None


def test_constructor_copies_list():
    objects = [Sphere(Vector3(0, 0, -1), 0.5)]
    world = HittableList(objects)
    objects.clear()
    assert len(world) == 1
