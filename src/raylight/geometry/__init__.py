"""Geometry module for the sphere primitive.

Ray-sphere intersection is available both as a Python function (intersect)
and as a Taichi function (hit_distance) for kernels.
"""

from .sphere import NO_HIT, Sphere, hit_distance, intersect, is_inside

__all__ = [
    "Sphere",
    "NO_HIT",
    "intersect",
    "is_inside",
    "hit_distance",
]
