"""Fixed pinhole camera for primary ray generation.

The camera is implicit: it sits at the world origin looking down -z and has
no configurable state. A pixel (x, y) maps to normalized device coordinates

    u = (x / width) * 2 - 1        (left -1 .. right +1)
    v = (y / height) * 2 - 1       (top -1 .. bottom +1)

and the primary ray direction is normalize(u * aspect, -v, -1) with
aspect = width / height. The -v flip turns screen-space y (growing downward)
into view-space y (growing upward).

Both a Python function and a @ti.func are provided; they evaluate the same
formula.

Example:
    >>> from raylight.camera.pinhole import camera_ray_direction
    >>> camera_ray_direction(600, 400, 1200, 800)
    Vec3(x=0.0, y=-0.0, z=-1.0)
"""

import taichi as ti
import taichi.math as tm

from raylight.core.ray import Ray, make_ray, normalize_or_zero
from raylight.core.vector import Vec3, normalize

# Type alias for 3D vectors using Taichi's math module
vec3 = tm.vec3

CAMERA_ORIGIN = Vec3(0.0, 0.0, 0.0)


def pixel_to_ndc(x: float, y: float, width: int, height: int) -> tuple[float, float]:
    """Map pixel coordinates to normalized device coordinates in [-1, 1].

    Args:
        x: Pixel x-coordinate (0 = left).
        y: Pixel y-coordinate (0 = top).
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        Tuple (u, v).
    """
    u = (x / width) * 2 - 1
    v = (y / height) * 2 - 1
    return u, v


def camera_ray_direction(x: float, y: float, width: int, height: int) -> Vec3:
    """Compute the normalized primary ray direction through pixel (x, y).

    Args:
        x: Pixel x-coordinate (0 = left).
        y: Pixel y-coordinate (0 = top).
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        Unit direction vector from the camera origin through the pixel.
    """
    u, v = pixel_to_ndc(x, y, width, height)
    aspect = width / height
    return normalize(Vec3(u * aspect, -v, -1.0))


@ti.func
def get_ray(x: ti.i32, y: ti.i32, width: ti.i32, height: ti.i32) -> Ray:
    """Generate the primary ray through pixel (x, y) inside a kernel.

    Args:
        x: Pixel x-coordinate (0 = left).
        y: Pixel y-coordinate (0 = top).
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        A Ray from the origin with a normalized direction.
    """
    w = ti.cast(width, ti.f32)
    h = ti.cast(height, ti.f32)
    u = (ti.cast(x, ti.f32) / w) * 2.0 - 1.0
    v = (ti.cast(y, ti.f32) / h) * 2.0 - 1.0
    aspect = w / h
    direction = normalize_or_zero(vec3(u * aspect, -v, -1.0))
    return make_ray(vec3(0.0, 0.0, 0.0), direction)
