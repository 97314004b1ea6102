"""Immutable 3D vectors and the vector algebra used outside of kernels.

The same Vec3 shape serves as a point in world space and as an RGB color
with components in [0, 1]. All operations are pure and return new instances;
none of them can fail.

Example:
    >>> from raylight.core.vector import Vec3, normalize, length
    >>> v = normalize(Vec3(3.0, 4.0, 0.0))
    >>> round(length(v), 6)
    1.0
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec3:
    """A real-valued triple (x, y, z).

    Attributes:
        x: First component (red when used as a color).
        y: Second component (green when used as a color).
        z: Third component (blue when used as a color).
    """

    x: float
    y: float
    z: float

    def as_tuple(self) -> tuple[float, float, float]:
        """Return the components as a plain tuple."""
        return (self.x, self.y, self.z)


ZERO = Vec3(0.0, 0.0, 0.0)


def subtract(a: Vec3, b: Vec3) -> Vec3:
    """Component-wise a - b."""
    return Vec3(a.x - b.x, a.y - b.y, a.z - b.z)


def add(a: Vec3, b: Vec3) -> Vec3:
    """Component-wise a + b."""
    return Vec3(a.x + b.x, a.y + b.y, a.z + b.z)


def scale(v: Vec3, s: float) -> Vec3:
    """Multiply every component of v by the scalar s."""
    return Vec3(v.x * s, v.y * s, v.z * s)


def dot(a: Vec3, b: Vec3) -> float:
    """Compute the dot product of two vectors."""
    return a.x * b.x + a.y * b.y + a.z * b.z


def length(v: Vec3) -> float:
    """Compute the Euclidean length sqrt(dot(v, v))."""
    return math.sqrt(dot(v, v))


def distance(a: Vec3, b: Vec3) -> float:
    """Compute the Euclidean distance between two points."""
    return length(subtract(a, b))


def normalize(v: Vec3) -> Vec3:
    """Normalize a vector to unit length.

    Args:
        v: The input vector.

    Returns:
        A unit vector in the same direction as v.
        If v is zero-length, returns the zero vector instead of dividing by zero.
    """
    len_v = length(v)
    if len_v == 0:
        return ZERO
    return Vec3(v.x / len_v, v.y / len_v, v.z / len_v)
