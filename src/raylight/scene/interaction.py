"""Pointer-to-scene mapping for dragging the light.

A press grabs the light when it lands within the pick radius of the light's
projected position. While dragging, pointer positions are mapped back onto
the plane at the light's current depth, so only x and y change.
"""

import math

from raylight.camera.projection import project, unproject
from raylight.core.vector import Vec3

PICK_RADIUS = 60.0


def pick_light(
    pointer: tuple[float, float],
    light_position: Vec3,
    width: int,
    height: int,
    radius: float = PICK_RADIUS,
) -> bool:
    """Test whether a pointer press grabs the light.

    Args:
        pointer: Pointer (x, y) in surface pixels.
        light_position: Current world-space light position.
        width: Surface width in pixels.
        height: Surface height in pixels.
        radius: Pick radius in pixels.

    Returns:
        True if the pointer is strictly within radius of the light glyph.
    """
    light_x, light_y = project(light_position, width, height)
    return math.hypot(pointer[0] - light_x, pointer[1] - light_y) < radius


def drag_light(
    pointer: tuple[float, float],
    light_position: Vec3,
    width: int,
    height: int,
) -> Vec3:
    """Map a pointer position to a new light position at the same depth.

    Args:
        pointer: Pointer (x, y) in surface pixels.
        light_position: Current world-space light position.
        width: Surface width in pixels.
        height: Surface height in pixels.

    Returns:
        The new light position; its z equals light_position.z.
    """
    return unproject(pointer[0], pointer[1], light_position.z, width, height)
