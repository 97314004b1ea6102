"""Core rendering module.

Components:
    vector: Immutable Vec3 and pure vector algebra
    ray: Taichi ray type and vector helpers for kernels
    rasterizer: Per-pixel silhouette rendering kernel

Note: rasterizer is NOT imported here to avoid circular imports with the
camera module. Import it directly from raylight.core.rasterizer.
"""

from .ray import Ray, make_ray, normalize_or_zero, vec3
from .vector import ZERO, Vec3, add, distance, dot, length, normalize, scale, subtract

__all__ = [
    "Vec3",
    "ZERO",
    "subtract",
    "add",
    "scale",
    "dot",
    "length",
    "distance",
    "normalize",
    "Ray",
    "make_ray",
    "normalize_or_zero",
    "vec3",
]
