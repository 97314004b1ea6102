"""Visualization fan of rays emitted from the light.

The fan is a flat, purely decorative set of rays in the XY plane around the
light (direction z is always 0). Each ray is intersected with the sphere and
stops at the surface when the hit lies within (min_hit_distance,
max_distance); otherwise it extends to max_distance. Both ends are projected
to screen space for the host to stroke as gradient lines.

No fan is produced while the light is inside the sphere.

Example:
    >>> from raylight.scene.ray_fan import compute_ray_fan
    >>> from raylight.scene.scene import create_scene
    >>> sphere, light = create_scene()
    >>> rays = compute_ray_fan(light.position, sphere, 1200, 800)
    >>> len(rays)
    360
"""

import math
from dataclasses import dataclass

from raylight.camera.projection import project
from raylight.core.vector import Vec3, add, normalize, scale
from raylight.geometry.sphere import Sphere, intersect, is_inside

NUM_RAYS = 360
MAX_RAY_DISTANCE = 15.0
MIN_HIT_DISTANCE = 0.01


@dataclass(frozen=True)
class RayFanEntry:
    """One fan ray as a screen-space segment.

    Attributes:
        screen_start: Projected light position (x, y) in pixels.
        screen_end: Projected ray endpoint (x, y) in pixels.
        blocked: True if the ray stops on the sphere surface.
    """

    screen_start: tuple[float, float]
    screen_end: tuple[float, float]
    blocked: bool


def fan_direction(index: int, num_rays: int = NUM_RAYS) -> Vec3:
    """Direction of the index-th ray of a fan of num_rays rays."""
    angle = (index / num_rays) * math.pi * 2
    return normalize(Vec3(math.cos(angle), math.sin(angle), 0.0))


def ray_endpoint(
    origin: Vec3,
    direction: Vec3,
    sphere: Sphere,
    max_distance: float = MAX_RAY_DISTANCE,
    min_hit_distance: float = MIN_HIT_DISTANCE,
) -> tuple[Vec3, bool]:
    """Find where a fan ray ends.

    Args:
        origin: The light position.
        direction: Unit direction of the ray.
        sphere: The blocking sphere.
        max_distance: Length of an unblocked ray.
        min_hit_distance: Hits at or below this distance are ignored.

    Returns:
        Tuple of (endpoint, blocked).
    """
    t = intersect(origin, direction, sphere)
    if min_hit_distance < t < max_distance:
        return add(origin, scale(direction, t)), True
    return add(origin, scale(direction, max_distance)), False


def compute_ray_fan(
    light_position: Vec3,
    sphere: Sphere,
    width: int,
    height: int,
    *,
    num_rays: int = NUM_RAYS,
    max_distance: float = MAX_RAY_DISTANCE,
    min_hit_distance: float = MIN_HIT_DISTANCE,
) -> tuple[RayFanEntry, ...]:
    """Compute the screen-space segments of the light's ray fan.

    Args:
        light_position: World-space light position (z non-zero).
        sphere: The sphere that blocks rays.
        width: Surface width in pixels.
        height: Surface height in pixels.
        num_rays: Number of rays, evenly spaced in angle starting at +x.
        max_distance: Length of unblocked rays in world units.
        min_hit_distance: Minimum hit distance for a ray to count as blocked.

    Returns:
        Tuple of num_rays RayFanEntry in angle order, or an empty tuple if
        the light is inside the sphere.
    """
    if is_inside(light_position, sphere):
        return ()

    screen_start = project(light_position, width, height)
    entries = []
    for i in range(num_rays):
        direction = fan_direction(i, num_rays)
        end, blocked = ray_endpoint(
            light_position, direction, sphere, max_distance, min_hit_distance
        )
        entries.append(
            RayFanEntry(
                screen_start=screen_start,
                screen_end=project(end, width, height),
                blocked=blocked,
            )
        )
    return tuple(entries)
