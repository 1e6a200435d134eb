# renderer/kernels.py

from numba import njit
import numpy as np
import math

# Slightly below 256 so that a channel of exactly 1.0 maps to 255
QUANTIZE_SCALE = 255.999

@njit
def dot(a, b):
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]

@njit
def sphere_discriminant(ray_origin, ray_dir, sphere_center, sphere_radius):
    """Quarter discriminant of the ray-sphere quadratic (half-b form)."""
    oc0 = ray_origin[0] - sphere_center[0]
    oc1 = ray_origin[1] - sphere_center[1]
    oc2 = ray_origin[2] - sphere_center[2]

    a = dot(ray_dir, ray_dir)
    half_b = oc0 * ray_dir[0] + oc1 * ray_dir[1] + oc2 * ray_dir[2]
    c = (oc0 * oc0 + oc1 * oc1 + oc2 * oc2) - sphere_radius * sphere_radius
    return half_b * half_b - a * c

@njit
def quantize(c):
    return int(QUANTIZE_SCALE * max(0.0, min(c, 1.0)))

@njit
def render_kernel(image, origin, lower_left, horizontal, vertical,
                  sphere_centers, sphere_radii, hit_color, white, sky_blue):
    """
    Fills image[x, y] (y = 0 at the top) with the quantized color of the
    primary ray through each pixel. Any sphere with a positive discriminant
    covers the pixel with hit_color.
    """
    width = image.shape[0]
    height = image.shape[1]
    direction = np.empty(3, dtype=np.float64)
    color = np.empty(3, dtype=np.float64)

    for y in range(height):
        j = height - 1 - y
        v = j / height
        for x in range(width):
            u = x / width
            for k in range(3):
                direction[k] = lower_left[k] + horizontal[k] * u + vertical[k] * v - origin[k]

            hit = False
            for s in range(sphere_radii.shape[0]):
                if sphere_discriminant(origin, direction, sphere_centers[s], sphere_radii[s]) > 0:
                    hit = True
                    break

            if hit:
                for k in range(3):
                    color[k] = hit_color[k]
            else:
                length = math.sqrt(dot(direction, direction))
                t = 0.5 * (direction[1] / length + 1.0)
                for k in range(3):
                    color[k] = white[k] * (1.0 - t) + sky_blue[k] * t

            for k in range(3):
                image[x, y, k] = quantize(color[k])
