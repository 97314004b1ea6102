"""Interactive preview window using Taichi GGUI.

This module hosts a RenderController in a ti.ui.Window: mouse presses,
drags and releases on the canvas are forwarded to the controller, and every
recomputed frame is composited with its overlay and shown.

Features:
    - Drag the light glyph with the left mouse button
    - Drag ends on release or when the cursor leaves the window
    - Press "s" to export the current frame as a timestamped PNG

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from raylight.preview.interactive import InteractivePreview
    >>>
    >>> preview = InteractivePreview()
    >>> preview.run()  # Blocks until the window is closed
"""

from __future__ import annotations

import os
from datetime import datetime
from typing import TYPE_CHECKING

import numpy as np
import taichi as ti

from raylight.preview.export import frame_to_array, pixels_to_float, save_png
from raylight.scene.controller import DragState, RenderController

if TYPE_CHECKING:
    import numpy.typing as npt


class InteractivePreview:
    """Interactive window that lets the user drag the light.

    Attributes:
        controller: The controller owning the scene state.
        width: Window width in pixels.
        height: Window height in pixels.
        display_image: Taichi field storing the display image (RGB float).
    """

    def __init__(
        self,
        controller: RenderController | None = None,
        *,
        title: str = "Raytracing",
    ) -> None:
        """Initialize the preview.

        Args:
            controller: Controller to host. A default one is created if None.
            title: Window title.

        Note:
            Taichi must be initialized first. The window is created lazily
            by run().
        """
        self.controller = controller if controller is not None else RenderController()
        self.width = self.controller.config.width
        self.height = self.controller.config.height
        self._title = title

        self._window: ti.ui.Window | None = None
        self._canvas: ti.ui.Canvas | None = None
        self._last_cursor: tuple[float, float] | None = None

        # Shape is (width, height) for Taichi field, RGB values stored as vec3
        self.display_image: ti.MatrixField = ti.Vector.field(
            3, dtype=ti.f32, shape=(self.width, self.height)
        )

    def _initialize_window(self) -> None:
        if self._window is not None:
            return

        self._window = ti.ui.Window(
            name=self._title,
            res=(self.width, self.height),
            vsync=True,
        )
        self._canvas = self._window.get_canvas()

    @property
    def window(self) -> ti.ui.Window:
        """Get the Taichi GGUI window, initializing if needed."""
        if self._window is None:
            self._initialize_window()
        assert self._window is not None
        return self._window

    @property
    def canvas(self) -> ti.ui.Canvas:
        """Get the canvas for rendering."""
        if self._canvas is None:
            self._initialize_window()
        assert self._canvas is not None
        return self._canvas

    def update_image(self, image: npt.NDArray[np.float32]) -> None:
        """Update the display image from a numpy array.

        Args:
            image: NumPy array of shape (height, width, 3) with dtype float32,
                values in [0, 1], origin at the top-left.

        Raises:
            ValueError: If image shape doesn't match (height, width, 3).
        """
        expected_shape = (self.height, self.width, 3)
        if image.shape != expected_shape:
            raise ValueError(
                f"Image shape {image.shape} doesn't match expected {expected_shape}"
            )

        # Taichi fields use (x, y) indexing with the origin at the bottom-left,
        # so flip rows and swap axes
        image_transposed = np.ascontiguousarray(
            np.transpose(np.flipud(image), (1, 0, 2))
        )
        self.display_image.from_numpy(image_transposed)

    def _refresh(self) -> None:
        """Composite the controller's current frame into the display image."""
        rgba = frame_to_array(self.controller.frame)
        self.update_image(pixels_to_float(rgba))

    def cursor_pixels(self) -> tuple[float, float]:
        """Current cursor position in surface pixels (origin top-left).

        GGUI reports the cursor in [0, 1] with the origin at the bottom-left.
        """
        u, v = self.window.get_cursor_pos()
        return u * self.width, (1.0 - v) * self.height

    def _cursor_inside(self, x: float, y: float) -> bool:
        return 0.0 <= x < self.width and 0.0 <= y < self.height

    def handle_events(self) -> bool:
        """Forward pending window events to the controller.

        Returns:
            True if a new frame was computed.
        """
        changed = False

        for event in self.window.get_events():
            if event.key == ti.ui.LMB:
                if event.type == ti.ui.PRESS:
                    x, y = self.cursor_pixels()
                    self.controller.pointer_down(x, y)
                    self._last_cursor = (x, y)
                elif event.type == ti.ui.RELEASE:
                    self.controller.pointer_up()
            elif event.key == "s" and event.type == ti.ui.PRESS:
                self._export_png()

        if self.controller.drag_state is DragState.DRAGGING:
            x, y = self.cursor_pixels()
            if not self._cursor_inside(x, y):
                self.controller.pointer_leave()
            elif (x, y) != self._last_cursor:
                self.controller.pointer_move(x, y)
                self._last_cursor = (x, y)
                changed = True

        return changed

    def is_running(self) -> bool:
        """Check if the window is still open."""
        return self.window.running

    def show_frame(self) -> None:
        """Present the current display image."""
        self.canvas.set_image(self.display_image)
        self.window.show()

    def run(self) -> None:
        """Run the event loop until the window is closed.

        The image is only recomputed when the light moves.
        """
        self._initialize_window()
        self._refresh()

        while self.is_running():
            if self.handle_events():
                self._refresh()
            self.show_frame()

    def close(self) -> None:
        """Close the preview window."""
        if self._window is not None:
            self._window.running = False

    @staticmethod
    def is_display_available() -> bool:
        """Check if a display is available for GUI rendering.

        Returns:
            True if a display is available, False for headless environments.
        """
        display = os.environ.get("DISPLAY")
        wayland = os.environ.get("WAYLAND_DISPLAY")

        # On macOS, display is always available if not in SSH
        if os.name != "nt" and os.uname().sysname == "Darwin":
            ssh_connection = os.environ.get("SSH_CONNECTION")
            if ssh_connection and not display:
                return False
            return True

        if display or wayland:
            return True

        # Windows generally always has display
        if os.name == "nt":
            return True

        return False

    def _export_png(self) -> None:
        """Export the current frame to a timestamped PNG file."""
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filename = f"raylight_{timestamp}.png"
        save_png(self.controller.frame, filename)
        print(f"Exported: {filename}")
