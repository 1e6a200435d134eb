# renderer/raytracer.py
import math
import numbers
from typing import Callable, Iterator, Optional, TextIO, Tuple

import numpy as np

from core.vector import Vector3
from core.ray import Ray
from camera.camera import Camera
from geometry.hittable import Hittable
from geometry.sphere import Sphere
from geometry.world import HittableList
from renderer.ppm import write_header, write_color
from renderer.kernels import QUANTIZE_SCALE, render_kernel

# Scene constants, kept as tuples so no caller can mutate them
SPHERE_CENTER = (0.0, 0.0, -1.0)
SPHERE_RADIUS = 0.5
HIT_COLOR = (1.0, 0.0, 0.0)
WHITE = (1.0, 1.0, 1.0)
SKY_BLUE = (0.5, 0.7, 1.0)


def default_world() -> HittableList:
    """The one-sphere scene."""
    world = HittableList()
    world.add(Sphere(Vector3(*SPHERE_CENTER), SPHERE_RADIUS))
    return world


def ray_color(ray: Ray, world: Hittable) -> Vector3:
    """
    Returns the color seen along the ray: a flat color for anything in the
    world, otherwise a white to sky-blue gradient over the ray's height.
    """
    # Any real root counts, so only the existence of a record matters
    if world.hit(ray, -math.inf, math.inf) is not None:
        return Vector3(*HIT_COLOR)
    unit_direction = ray.direction.unit()
    t = 0.5 * (unit_direction.y + 1.0)
    return Vector3.lerp(Vector3(*WHITE), Vector3(*SKY_BLUE), t)


def quantize(c: float) -> int:
    """Maps a [0, 1] channel to an integer in [0, 255]."""
    return int(QUANTIZE_SCALE * max(0.0, min(c, 1.0)))


def quantize_color(color: Vector3) -> Tuple[int, int, int]:
    return quantize(color.r), quantize(color.g), quantize(color.b)


class Renderer:
    def __init__(self, width: int, height: int, camera: Optional[Camera] = None,
                 world: Optional[Hittable] = None):
        for size in (width, height):
            if isinstance(size, bool) or not isinstance(size, numbers.Integral) or size <= 0:
                raise ValueError(f"Image size must be positive integers, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.camera = camera if camera is not None else Camera()
        self.world = world if world is not None else default_world()

    def pixels(self, progress: Optional[Callable[[int], None]] = None) -> Iterator[Tuple[int, int, int]]:
        """
        Yields quantized pixels in output order: scanlines from the top
        (j = height - 1) down to j = 0, each left to right.
        `progress(j)` is called at the start of every scanline.
        """
        for j in range(self.height - 1, -1, -1):
            if progress is not None:
                progress(j)
            for i in range(self.width):
                u = i / self.width
                v = j / self.height
                ray = self.camera.get_ray(u, v)
                yield quantize_color(ray_color(ray, self.world))

    def render(self, file: TextIO, progress: Optional[Callable[[int], None]] = None) -> int:
        """
        Streams the image as P3 PPM into an open text file.
        Returns the number of pixels written.
        """
        write_header(file, self.width, self.height)
        count = 0
        for rgb in self.pixels(progress):
            write_color(file, rgb)
            count += 1
        return count

    def render_to_array(self) -> np.ndarray:
        """
        Renders with the compiled kernel. Returns a (width, height, 3) uint8
        array indexed [x, y], with y = 0 the top row of the image.
        Only sphere-only worlds can be handed to the kernel.
        """
        centers, radii = self._sphere_arrays()
        image = np.zeros((self.width, self.height, 3), dtype=np.uint8)
        render_kernel(
            image,
            np.array(list(self.camera.origin), dtype=np.float64),
            np.array(list(self.camera.lower_left_corner), dtype=np.float64),
            np.array(list(self.camera.horizontal), dtype=np.float64),
            np.array(list(self.camera.vertical), dtype=np.float64),
            centers,
            radii,
            np.array(HIT_COLOR, dtype=np.float64),
            np.array(WHITE, dtype=np.float64),
            np.array(SKY_BLUE, dtype=np.float64),
        )
        return image

    def _sphere_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        objects = self.world.objects if isinstance(self.world, HittableList) else [self.world]
        for obj in objects:
            if not isinstance(obj, Sphere):
                raise ValueError(f"Compiled kernel only supports spheres, got {type(obj).__name__}")
        centers = np.array([list(s.center) for s in objects], dtype=np.float64).reshape(-1, 3)
        radii = np.array([s.radius for s in objects], dtype=np.float64)
        return centers, radii
