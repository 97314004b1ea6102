"""Camera module for primary rays and screen projection.

Components:
    pinhole: Fixed camera at the origin looking down -z
    projection: World-to-screen projection and its inverse for a fixed depth
"""

from .pinhole import CAMERA_ORIGIN, camera_ray_direction, get_ray, pixel_to_ndc
from .projection import project, unproject

__all__ = [
    "CAMERA_ORIGIN",
    "camera_ray_direction",
    "get_ray",
    "pixel_to_ndc",
    "project",
    "unproject",
]
