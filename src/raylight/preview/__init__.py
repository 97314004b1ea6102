"""Preview module for output and visualization.

Components:
    overlay: Ray fan and light glyph compositing (Pillow)
    export: PNG export utilities
    display: Matplotlib-based static preview
    interactive: Taichi GGUI window with light dragging

Example:
    >>> from raylight.preview import save_png
    >>> from raylight.scene import RenderController
    >>>
    >>> controller = RenderController()
    >>> save_png(controller.frame, "output.png")

For the interactive window:
    >>> from raylight.preview import InteractivePreview
    >>> InteractivePreview(controller).run()
"""

from raylight.preview.display import show_frame
from raylight.preview.export import frame_to_array, frame_to_image, pixels_to_float, save_png
from raylight.preview.interactive import InteractivePreview
from raylight.preview.overlay import (
    GLYPH_GRADIENT_STOPS,
    GLYPH_RADIUS,
    RAY_GRADIENT_STOPS,
    composite_frame,
)

__all__ = [
    "InteractivePreview",
    "show_frame",
    "save_png",
    "frame_to_image",
    "frame_to_array",
    "pixels_to_float",
    "composite_frame",
    "RAY_GRADIENT_STOPS",
    "GLYPH_GRADIENT_STOPS",
    "GLYPH_RADIUS",
]
