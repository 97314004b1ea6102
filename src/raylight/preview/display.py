"""Matplotlib-based static preview of a rendered frame.

Example:
    >>> from raylight.preview.display import show_frame
    >>> show_frame(controller.frame)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from raylight.preview.export import frame_to_array

if TYPE_CHECKING:
    from raylight.scene.controller import Frame


def show_frame(
    frame: Frame,
    *,
    overlay: bool = True,
    title: str | None = None,
    figsize: tuple[float, float] = (12, 8),
    block: bool = True,
) -> None:
    """Display a frame as a Matplotlib figure.

    Args:
        frame: The frame to display.
        overlay: Whether to draw the ray fan and light glyph.
        title: Custom title (default shows the light position).
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until the figure is closed.
    """
    import matplotlib.pyplot as plt

    image = frame_to_array(frame, overlay=overlay)

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.imshow(image)
    ax.axis("off")

    if title is None:
        position = frame.light.position
        title = f"Light at ({position.x:.2f}, {position.y:.2f}, {position.z:.2f})"
        if frame.light_inside:
            title += " - inside sphere"
    ax.set_title(title)

    plt.tight_layout()
    plt.show(block=block)
