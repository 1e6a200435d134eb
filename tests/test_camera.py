"""Tests for the fixed camera."""

from core.vector import Vector3
from camera.camera import Camera


def test_defaults():
    cam = Camera()
    assert cam.origin == Vector3(0, 0, 0)
    assert cam.lower_left_corner == Vector3(-2, -1, -1)
    assert cam.horizontal == Vector3(4, 0, 0)
    assert cam.vertical == Vector3(0, 2, 0)


def test_narrow_variant():
    cam = Camera.narrow()
    assert cam.horizontal == Vector3(2, 0, 0)
    assert cam.lower_left_corner == Vector3(-2, -1, -1)


def test_corner_rays():
    cam = Camera()
    assert cam.get_ray(0, 0).direction == Vector3(-2, -1, -1)
    assert cam.get_ray(1, 1).direction == Vector3(2, 1, -1)
    assert cam.get_ray(0.5, 0.5).direction == Vector3(0, 0, -1)


def test_direction_is_relative_to_origin():
    cam = Camera(origin=Vector3(1, 1, 1), lower_left_corner=Vector3(0, 0, 0))
    ray = cam.get_ray(0, 0)
    assert ray.origin == Vector3(1, 1, 1)
    assert ray.direction == Vector3(-1, -1, -1)
