"""Scene configuration: one sphere and one point light.

The sphere is fixed for the session. The light is a frozen value too; moving
it means building a new Light with `Light.moved_to`, which keeps the color and
intensity and replaces the position.

Example:
    >>> from raylight.scene.scene import SceneParams, create_scene
    >>> sphere, light = create_scene()
    >>> sphere.radius
    1.5
    >>> light.position
    Vec3(x=3.0, y=0.0, z=-5.0)

    >>> # Custom parameters
    >>> params = SceneParams(light_position=(0.0, 2.0, -4.0))
    >>> sphere, light = create_scene(params)
"""

from dataclasses import dataclass, replace

from raylight.core.vector import Vec3
from raylight.geometry.sphere import Sphere

# =============================================================================
# Default Scene Constants
# =============================================================================

SPHERE_CENTER = (-2.0, 0.0, -5.0)
SPHERE_RADIUS = 1.5
SPHERE_COLOR = (1.0, 1.0, 1.0)

LIGHT_POSITION = (3.0, 0.0, -5.0)
# Warm white; color and intensity are carried but not used by the shading
LIGHT_COLOR = (1.0, 0.95, 0.7)
LIGHT_INTENSITY = 2.5


@dataclass(frozen=True)
class Light:
    """A point light.

    Attributes:
        position: World-space position. Its z must stay non-zero.
        color: RGB color in [0, 1].
        intensity: Scalar brightness.
    """

    position: Vec3
    color: Vec3
    intensity: float

    def moved_to(self, position: Vec3) -> "Light":
        """Return a copy of this light at a new position."""
        return replace(self, position=position)


@dataclass
class SceneParams:
    """Parameters for building the scene.

    All parameters default to the standard scene: a white sphere of radius
    1.5 at (-2, 0, -5) and a warm light at (3, 0, -5).

    Attributes:
        sphere_center: Sphere center (x, y, z).
        sphere_radius: Sphere radius (must be positive).
        sphere_color: Sphere RGB color.
        light_position: Initial light position (x, y, z); z must be non-zero.
        light_color: Light RGB color.
        light_intensity: Light intensity.
    """

    sphere_center: tuple[float, float, float] = SPHERE_CENTER
    sphere_radius: float = SPHERE_RADIUS
    sphere_color: tuple[float, float, float] = SPHERE_COLOR
    light_position: tuple[float, float, float] = LIGHT_POSITION
    light_color: tuple[float, float, float] = LIGHT_COLOR
    light_intensity: float = LIGHT_INTENSITY


def create_scene(params: SceneParams | None = None) -> tuple[Sphere, Light]:
    """Build the sphere and the initial light from parameters.

    Args:
        params: Scene parameters. Uses defaults when None.

    Returns:
        Tuple of (sphere, light).

    Raises:
        ValueError: If the sphere radius is not positive.
    """
    if params is None:
        params = SceneParams()

    sphere = Sphere(
        center=Vec3(*params.sphere_center),
        radius=params.sphere_radius,
        color=Vec3(*params.sphere_color),
    )
    light = Light(
        position=Vec3(*params.light_position),
        color=Vec3(*params.light_color),
        intensity=params.light_intensity,
    )
    return sphere, light
