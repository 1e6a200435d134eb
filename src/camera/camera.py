# camera/camera.py
from core.vector import Vector3
from core.ray import Ray

class Camera:
    """
    Fixed pinhole camera. The image plane is the viewport spanned by
    `horizontal` and `vertical` from `lower_left_corner`.
    """
    def __init__(self, origin: Vector3 = None, lower_left_corner: Vector3 = None,
                 horizontal: Vector3 = None, vertical: Vector3 = None):
        self.origin = origin if origin is not None else Vector3(0.0, 0.0, 0.0)
        self.lower_left_corner = (lower_left_corner if lower_left_corner is not None
                                  else Vector3(-2.0, -1.0, -1.0))
        self.horizontal = horizontal if horizontal is not None else Vector3(4.0, 0.0, 0.0)
        self.vertical = vertical if vertical is not None else Vector3(0.0, 2.0, 0.0)

    @classmethod
    def narrow(cls) -> "Camera":
        """Same camera with a viewport half as wide (horizontal = (2, 0, 0))."""
        return cls(horizontal=Vector3(2.0, 0.0, 0.0))

    def get_ray(self, u: float, v: float) -> Ray:
        """
        Generates a ray passing through the viewport coordinates (u, v).
        """
        direction = (self.lower_left_corner +
                     self.horizontal * u +
                     self.vertical * v -
                     self.origin)
        return Ray(self.origin, direction)
