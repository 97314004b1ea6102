"""Scene module: scene contents, overlay geometry and interaction.

Components:
    scene: Light type and scene parameters
    ray_fan: Visualization rays emitted from the light
    interaction: Pointer pick test and drag mapping
    controller: Render controller owning the light and the drag state
"""

from .controller import DragState, Frame, RenderController
from .interaction import PICK_RADIUS, drag_light, pick_light
from .ray_fan import RayFanEntry, compute_ray_fan
from .scene import Light, SceneParams, create_scene

__all__ = [
    "Light",
    "SceneParams",
    "create_scene",
    "RayFanEntry",
    "compute_ray_fan",
    "PICK_RADIUS",
    "pick_light",
    "drag_light",
    "DragState",
    "Frame",
    "RenderController",
]
