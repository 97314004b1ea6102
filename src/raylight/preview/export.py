"""Image export utilities for rendered frames.

Frames are saved as 8-bit RGBA PNG files via Pillow, with or without the
ray fan overlay.

Example:
    >>> from raylight.preview.export import save_png
    >>> from raylight.scene.controller import RenderController
    >>>
    >>> controller = RenderController()
    >>> save_png(controller.frame, "scene.png")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt

from raylight.preview.overlay import composite_frame

if TYPE_CHECKING:
    from PIL import Image as PILImage

    from raylight.scene.controller import Frame

logger = logging.getLogger(__name__)


def frame_to_image(frame: Frame, *, overlay: bool = True) -> PILImage.Image:
    """Convert a frame to an RGBA PIL image.

    Args:
        frame: The frame to convert.
        overlay: Whether to draw the ray fan and light glyph.

    Returns:
        RGBA image of shape (width, height).
    """
    return composite_frame(frame, overlay=overlay)


def frame_to_array(frame: Frame, *, overlay: bool = True) -> npt.NDArray[np.uint8]:
    """Convert a frame to an RGBA byte array of shape (height, width, 4)."""
    return np.asarray(frame_to_image(frame, overlay=overlay))


def pixels_to_float(pixels: npt.NDArray[np.uint8]) -> npt.NDArray[np.float32]:
    """Convert an RGBA byte buffer to RGB floats in [0, 1] for display.

    Args:
        pixels: Array of shape (height, width, 4) with dtype uint8.

    Returns:
        Array of shape (height, width, 3) with dtype float32.
    """
    return pixels[..., :3].astype(np.float32) / np.float32(255.0)


def save_png(
    frame: Frame,
    filepath: str | Path,
    *,
    overlay: bool = True,
) -> Path:
    """Save a frame as a PNG file.

    Args:
        frame: The frame to save.
        filepath: Output file path (should end in .png).
        overlay: Whether to draw the ray fan and light glyph.

    Returns:
        The path written.
    """
    path = Path(filepath)
    frame_to_image(frame, overlay=overlay).save(path, format="PNG")
    logger.info("Saved %dx%d frame to %s", frame.pixels.shape[1], frame.pixels.shape[0], path)
    return path
