"""Overlay compositing: ray fan and light glyph on top of the pixel buffer.

The controller only supplies geometry. This module owns the presentation
constants (gradient stops, line width, glyph radius) and draws them with
Pillow:

    - Each fan ray is stroked from the light outward as a chain of short
      sub-segments, each colored by the ray gradient at its midpoint, so the
      ray is bright near the light and fades toward its end.
    - The glyph is a radial gradient disc computed with NumPy and
      alpha-composited over the image.

Colors are (r, g, b, alpha) with r, g, b in 0..255 and alpha in 0..1.

Example:
    >>> from raylight.preview.overlay import composite_frame
    >>> image = composite_frame(controller.frame)
    >>> image.mode
    'RGBA'
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage
from PIL import ImageDraw

if TYPE_CHECKING:
    from collections.abc import Sequence

    from raylight.scene.controller import Frame
    from raylight.scene.ray_fan import RayFanEntry

# Type alias for gradient stops: (offset, (r, g, b, alpha))
GradientStops = tuple[tuple[float, tuple[int, int, int, float]], ...]

RAY_GRADIENT_STOPS: GradientStops = (
    (0.0, (255, 255, 255, 1.0)),
    (0.1, (255, 245, 200, 0.95)),
    (0.3, (255, 240, 180, 0.7)),
    (0.6, (255, 240, 180, 0.3)),
    (1.0, (255, 240, 180, 0.05)),
)
RAY_LINE_WIDTH = 1.2

# Sub-segments per ray used to approximate the linear gradient
RAY_SEGMENTS = 20

GLYPH_RADIUS = 60.0
GLYPH_GRADIENT_STOPS: GradientStops = (
    (0.0, (255, 255, 255, 1.0)),
    (0.3, (255, 240, 150, 0.9)),
    (0.6, (255, 220, 100, 0.4)),
    (1.0, (255, 200, 80, 0.0)),
)


def sample_gradient(
    stops: GradientStops,
    offsets: npt.ArrayLike,
) -> npt.NDArray[np.uint8]:
    """Evaluate a piecewise-linear gradient at the given offsets.

    Args:
        stops: Gradient stops sorted by offset.
        offsets: Offsets in [0, 1]; values outside are clamped to the end stops.

    Returns:
        Array of shape offsets.shape + (4,) with RGBA bytes.
    """
    offsets = np.asarray(offsets, dtype=np.float64)
    stop_offsets = [offset for offset, _ in stops]
    channels = []
    for k in range(4):
        values = [color[k] * 255.0 if k == 3 else color[k] for _, color in stops]
        channels.append(np.interp(offsets, stop_offsets, values))
    rgba = np.stack(channels, axis=-1)
    return np.clip(np.rint(rgba), 0, 255).astype(np.uint8)


def draw_ray_fan(
    image: PILImage.Image,
    rays: Sequence[RayFanEntry],
    *,
    segments: int = RAY_SEGMENTS,
) -> None:
    """Stroke the ray fan onto an RGBA image in place.

    Args:
        image: Target image (mode RGBA).
        rays: Screen-space ray segments.
        segments: Number of sub-segments per ray.
    """
    if not rays:
        return

    draw = ImageDraw.Draw(image, "RGBA")
    line_width = max(1, round(RAY_LINE_WIDTH))
    midpoints = (np.arange(segments) + 0.5) / segments
    colors = [tuple(int(c) for c in rgba) for rgba in sample_gradient(RAY_GRADIENT_STOPS, midpoints)]

    for ray in rays:
        x0, y0 = ray.screen_start
        x1, y1 = ray.screen_end
        dx = x1 - x0
        dy = y1 - y0
        for k in range(segments):
            a = k / segments
            b = (k + 1) / segments
            draw.line(
                [(x0 + dx * a, y0 + dy * a), (x0 + dx * b, y0 + dy * b)],
                fill=colors[k],
                width=line_width,
            )


def draw_glyph(
    image: PILImage.Image,
    center: tuple[float, float],
    radius: float = GLYPH_RADIUS,
) -> None:
    """Alpha-composite the radial-gradient light glyph onto an image in place.

    Args:
        image: Target image (mode RGBA).
        center: Glyph center (x, y) in pixels.
        radius: Glyph radius in pixels.
    """
    width, height = image.size
    cx, cy = center

    # Clip the glyph's bounding box to the image
    left = max(0, math.floor(cx - radius))
    top = max(0, math.floor(cy - radius))
    right = min(width, math.ceil(cx + radius) + 1)
    bottom = min(height, math.ceil(cy + radius) + 1)
    if left >= right or top >= bottom:
        return

    ys, xs = np.mgrid[top:bottom, left:right]
    dist = np.hypot(xs + 0.5 - cx, ys + 0.5 - cy) / radius

    layer = sample_gradient(GLYPH_GRADIENT_STOPS, dist)
    layer[dist > 1.0] = 0

    image.alpha_composite(PILImage.fromarray(layer), dest=(left, top))


def composite_frame(frame: Frame, *, overlay: bool = True) -> PILImage.Image:
    """Build the final image for a frame.

    Args:
        frame: The frame to draw.
        overlay: If False, return only the rasterized sphere.

    Returns:
        A new RGBA PIL image of the frame's size.
    """
    image = PILImage.fromarray(frame.pixels)
    if overlay:
        draw_ray_fan(image, frame.rays)
        draw_glyph(image, frame.glyph)
    return image
