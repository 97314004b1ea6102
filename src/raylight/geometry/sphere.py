"""Sphere primitive with the near-root ray-sphere intersection.

The ray-sphere intersection is found by solving:
    |origin + t * direction - center|^2 = radius^2

Expanding gives the quadratic a*t^2 + b*t + c = 0 with:
    oc = origin - center
    a = dot(direction, direction)
    b = 2 * dot(oc, direction)
    c = dot(oc, oc) - radius^2

Only the near root (-b - sqrt(b^2 - 4ac)) / 2a is returned. A negative
discriminant is not an error: it yields the NO_HIT sentinel. Callers treat
any result <= 0 as "no usable hit" (the ray fan uses a small epsilon instead).

The module offers the same test twice: `intersect` for Python callers and
`hit_distance` as a @ti.func for the rasterization kernel.

Example:
    >>> from raylight.core.vector import Vec3
    >>> from raylight.geometry.sphere import Sphere, intersect
    >>> sphere = Sphere(center=Vec3(0.0, 0.0, -5.0), radius=1.0)
    >>> intersect(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, -1.0), sphere)
    4.0
"""

import math
from dataclasses import dataclass, field

import taichi as ti
import taichi.math as tm

from raylight.core.vector import Vec3, distance, dot, subtract

# Type alias for 3D vectors using Taichi's math module
vec3 = tm.vec3

# Returned when the ray's line misses the sphere entirely
NO_HIT = -1.0


@dataclass(frozen=True)
class Sphere:
    """A sphere defined by center point, radius and surface color.

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere (must be positive).
        color: RGB surface color in [0, 1]. Default is white.
    """

    center: Vec3
    radius: float
    color: Vec3 = field(default_factory=lambda: Vec3(1.0, 1.0, 1.0))

    def __post_init__(self) -> None:
        if self.radius <= 0:
            raise ValueError(f"Sphere radius must be positive, got {self.radius}")


def intersect(origin: Vec3, direction: Vec3, sphere: Sphere) -> float:
    """Compute the signed near-root hit distance of a ray against a sphere.

    Args:
        origin: The starting point of the ray.
        direction: The direction vector of the ray (need not be normalized).
        sphere: The sphere to test against.

    Returns:
        The parameter t of the near intersection, which may be negative when
        the sphere is behind the origin or the origin is inside the sphere.
        NO_HIT (-1.0) if the discriminant is negative.
    """
    oc = subtract(origin, sphere.center)
    a = dot(direction, direction)
    b = 2.0 * dot(oc, direction)
    c = dot(oc, oc) - sphere.radius * sphere.radius
    discriminant = b * b - 4 * a * c

    if discriminant < 0:
        return NO_HIT
    return (-b - math.sqrt(discriminant)) / (2.0 * a)


def is_inside(point: Vec3, sphere: Sphere) -> bool:
    """Check whether a point lies strictly inside the sphere."""
    return distance(point, sphere.center) < sphere.radius


@ti.func
def hit_distance(
    ray_origin: vec3,
    ray_direction: vec3,
    center: vec3,
    radius: ti.f32,
) -> ti.f32:
    """Kernel-side counterpart of `intersect`.

    Args:
        ray_origin: The starting point of the ray.
        ray_direction: The direction vector of the ray.
        center: The sphere center.
        radius: The sphere radius.

    Returns:
        The near-root t, or NO_HIT if the discriminant is negative.
    """
    oc = ray_origin - center
    a = tm.dot(ray_direction, ray_direction)
    b = 2.0 * tm.dot(oc, ray_direction)
    c = tm.dot(oc, oc) - radius * radius
    discriminant = b * b - 4.0 * a * c

    t = NO_HIT
    if discriminant >= 0.0:
        t = (-b - ti.sqrt(discriminant)) / (2.0 * a)
    return t
