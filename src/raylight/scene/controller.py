"""Render controller: owns the light and recomputes frames when it moves.

The controller is the single owner of the scene state. Every change of the
light position goes through `on_light_moved`, which synchronously runs the
full pipeline:

    1. Rasterize the sphere silhouette (raylight.core.rasterizer)
    2. Test whether the light is inside the sphere
    3. Compute the ray fan unless it is (raylight.scene.ray_fan)
    4. Project the light to its glyph position (raylight.camera.projection)

Nothing is cached between frames; each recompute is a full redraw.

Pointer events drive a two-state machine:

    IDLE --pointer_down on the glyph--> DRAGGING
    DRAGGING --pointer_up / pointer_leave--> IDLE

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from raylight.scene.controller import RenderController
    >>> controller = RenderController()
    >>> x, y = controller.frame.glyph
    >>> controller.pointer_down(x, y)
    True
    >>> frame = controller.pointer_move(x - 100, y)
    >>> controller.pointer_up()
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum

import numpy as np
import numpy.typing as npt

from raylight.camera.projection import project
from raylight.config import RenderConfig
from raylight.core.rasterizer import render
from raylight.core.vector import Vec3
from raylight.geometry.sphere import Sphere, is_inside
from raylight.scene.interaction import drag_light, pick_light
from raylight.scene.ray_fan import RayFanEntry, compute_ray_fan
from raylight.scene.scene import Light, SceneParams, create_scene

logger = logging.getLogger(__name__)


class DragState(Enum):
    """Whether the light is currently grabbed by the pointer."""

    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass(frozen=True, eq=False)
class Frame:
    """Everything the host needs to draw one image.

    Attributes:
        light: The light the frame was computed for.
        pixels: RGBA buffer of shape (height, width, 4), dtype uint8.
        rays: Ray fan segments, empty when the light is inside the sphere.
        glyph: Screen position (x, y) of the light glyph.
        light_inside: Whether the light is inside the sphere.
    """

    light: Light
    pixels: npt.NDArray[np.uint8]
    rays: tuple[RayFanEntry, ...]
    glyph: tuple[float, float]
    light_inside: bool


class RenderController:
    """Owns the scene and the drag state, and produces frames.

    Attributes:
        config: Surface size and overlay constants.
        sphere: The fixed sphere.
    """

    def __init__(
        self,
        params: SceneParams | None = None,
        config: RenderConfig | None = None,
    ) -> None:
        """Build the scene and compute the first frame.

        Args:
            params: Scene parameters (defaults to the standard scene).
            config: Render configuration (defaults to 1200x800).

        Raises:
            ValueError: If the scene is invalid (non-positive radius or a
                light at z == 0).
        """
        self.config = config if config is not None else RenderConfig()
        self.sphere: Sphere
        self.sphere, self._light = create_scene(params)
        self._drag_state = DragState.IDLE
        self._frame: Frame | None = None
        self.on_light_moved(self._light.position)

    @property
    def light(self) -> Light:
        """The current light."""
        return self._light

    @property
    def drag_state(self) -> DragState:
        """The current drag state."""
        return self._drag_state

    @property
    def frame(self) -> Frame:
        """The most recently computed frame."""
        assert self._frame is not None
        return self._frame

    # =========================================================================
    # Recompute Pipeline
    # =========================================================================

    def on_light_moved(self, position: Vec3) -> Frame:
        """Move the light and recompute the frame.

        Args:
            position: New world-space light position.

        Returns:
            The new frame.

        Raises:
            ValueError: If position.z is zero.
        """
        if position.z == 0:
            raise ValueError(f"Light must stay off the camera plane (z != 0), got {position}")

        self._light = self._light.moved_to(position)
        return self.recompute()

    def recompute(self) -> Frame:
        """Run the full pipeline for the current light.

        Returns:
            The new frame. Identical input yields a pixel-identical buffer.
        """
        start = time.perf_counter()
        width, height = self.config.width, self.config.height
        position = self._light.position

        pixels = render(width, height, self.sphere)

        inside = is_inside(position, self.sphere)
        rays: tuple[RayFanEntry, ...] = ()
        if not inside:
            rays = compute_ray_fan(
                position,
                self.sphere,
                width,
                height,
                num_rays=self.config.num_rays,
                max_distance=self.config.max_ray_distance,
                min_hit_distance=self.config.min_hit_distance,
            )

        glyph = project(position, width, height)

        self._frame = Frame(
            light=self._light,
            pixels=pixels,
            rays=rays,
            glyph=glyph,
            light_inside=inside,
        )
        logger.debug(
            "Recomputed frame for light at (%.3f, %.3f, %.3f): %d rays in %.1f ms",
            position.x,
            position.y,
            position.z,
            len(rays),
            (time.perf_counter() - start) * 1000.0,
        )
        return self._frame

    # =========================================================================
    # Pointer Events
    # =========================================================================

    def pointer_down(self, x: float, y: float) -> bool:
        """Handle a pointer press; grabs the light if the press is on it.

        Args:
            x: Pointer x in surface pixels.
            y: Pointer y in surface pixels.

        Returns:
            True if the light was grabbed.
        """
        grabbed = pick_light(
            (x, y),
            self._light.position,
            self.config.width,
            self.config.height,
            self.config.pick_radius,
        )
        if grabbed:
            self._drag_state = DragState.DRAGGING
            logger.debug("Light grabbed at (%.1f, %.1f)", x, y)
        return grabbed

    def pointer_move(self, x: float, y: float) -> Frame | None:
        """Handle a pointer move; drags the light while it is grabbed.

        Args:
            x: Pointer x in surface pixels.
            y: Pointer y in surface pixels.

        Returns:
            The recomputed frame while dragging, None otherwise.
        """
        if self._drag_state is not DragState.DRAGGING:
            return None

        new_position = drag_light(
            (x, y), self._light.position, self.config.width, self.config.height
        )
        return self.on_light_moved(new_position)

    def pointer_up(self) -> None:
        """Handle a pointer release; always ends the drag."""
        self._release()

    def pointer_leave(self) -> None:
        """Handle the pointer leaving the surface; always ends the drag."""
        self._release()

    def _release(self) -> None:
        if self._drag_state is DragState.DRAGGING:
            logger.debug("Light released")
        self._drag_state = DragState.IDLE
