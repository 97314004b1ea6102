"""Taichi-side vector helpers for the rasterization kernel.

These mirror the pure-Python functions in raylight.core.vector so the
per-pixel work can run inside Taichi kernels. All functions are @ti.func and
can only be called from kernels or other Taichi functions.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from raylight.core.ray import normalize_or_zero, vec3
    >>> @ti.kernel
    ... def unit() -> ti.f32:
    ...     return ti.math.length(normalize_or_zero(vec3(3.0, 4.0, 0.0)))
"""

import taichi as ti
import taichi.math as tm

# Type alias for 3D vectors using Taichi's math module
vec3 = tm.vec3


@ti.dataclass
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray (vec3).
        direction: The direction vector of the ray (vec3). Not required to
            be normalized.
    """

    origin: vec3
    direction: vec3


@ti.func
def make_ray(origin: vec3, direction: vec3) -> Ray:
    """Create a ray from origin and direction."""
    return Ray(origin=origin, direction=direction)


@ti.func
def length(v: vec3) -> ti.f32:
    """Compute the length (magnitude) of a vector."""
    return tm.sqrt(tm.dot(v, v))


@ti.func
def normalize_or_zero(v: vec3) -> vec3:
    """Normalize a vector, returning the zero vector for zero-length input.

    Args:
        v: The input vector.

    Returns:
        A unit vector in the direction of v, or (0, 0, 0).
    """
    result = vec3(0.0, 0.0, 0.0)
    len_v = length(v)
    if len_v > 0.0:
        result = v / len_v
    return result
