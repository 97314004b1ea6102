"""Render configuration.

RenderConfig groups the surface size and the tuning constants of the ray
fan and the light pick test. Scene contents (sphere and light) live in
raylight.scene.scene.SceneParams.
"""

from dataclasses import dataclass

DEFAULT_WIDTH = 1200
DEFAULT_HEIGHT = 800


@dataclass(frozen=True)
class RenderConfig:
    """Surface size and overlay constants.

    Attributes:
        width: Render surface width in pixels.
        height: Render surface height in pixels.
        num_rays: Number of rays in the visualization fan (one per degree
            by default).
        max_ray_distance: World-space length of an unblocked fan ray.
        min_hit_distance: Hits closer than this to the light are ignored
            by the fan.
        pick_radius: Screen-space radius in pixels within which a pointer
            press grabs the light. Matches the glyph glow radius.

    Example:
        >>> config = RenderConfig()
        >>> config.width, config.height
        (1200, 800)
        >>> small = RenderConfig(width=300, height=200)
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    num_rays: int = 360
    max_ray_distance: float = 15.0
    min_hit_distance: float = 0.01
    pick_radius: float = 60.0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Image dimensions must be positive, got {self.width}x{self.height}"
            )
        if self.num_rays < 0:
            raise ValueError(f"num_rays must be non-negative, got {self.num_rays}")
        if self.max_ray_distance <= self.min_hit_distance:
            raise ValueError(
                "max_ray_distance must exceed min_hit_distance "
                f"({self.max_ray_distance} <= {self.min_hit_distance})"
            )
        if self.pick_radius <= 0:
            raise ValueError(f"pick_radius must be positive, got {self.pick_radius}")
