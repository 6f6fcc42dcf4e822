"""Interactive preview window using Taichi GGUI.

This module provides a window frame sink for watching an animation in real
time, using Taichi's ti.ui.Window and canvas system.

Features:
    - Frame sink interface (present) for AnimationLoop
    - Taichi GGUI-based window (GPU-accelerated)
    - Deferred window creation for headless checks

Example:
    >>> from mirrortrace.core.animation import AnimationLoop
    >>> from mirrortrace.preview.interactive import InteractivePreview
    >>> from mirrortrace.scene.reference import create_reference_scene
    >>>
    >>> scene = create_reference_scene()
    >>> preview = InteractivePreview(scene.width, scene.height)
    >>> AnimationLoop(scene, preview).run(should_continue=preview.is_running)
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

import numpy as np
import taichi as ti

if TYPE_CHECKING:
    import numpy.typing as npt


class InteractivePreview:
    """Interactive preview window using Taichi GGUI.

    This class wraps ti.ui.Window to present rendered frames. It manages the
    window, canvas, and display buffer.

    Attributes:
        width: Window width in pixels.
        height: Window height in pixels.
        display_image: Taichi field storing the display image (RGB float).
        frames_presented: Number of frames shown so far.
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        title: str = "mirrortrace",
    ) -> None:
        """Initialize the interactive preview.

        Args:
            width: Window width in pixels.
            height: Window height in pixels.
            title: Window title (default: "mirrortrace").

        Note:
            Taichi must already be initialized. The window is created on the
            first presented frame, not here.
        """
        self.width = width
        self.height = height
        self.frames_presented = 0
        self._title = title

        self._window: ti.ui.Window | None = None
        self._canvas: ti.ui.Canvas | None = None

        # Indexed (x, y) with y = 0 at the bottom row, as GGUI expects
        self.display_image: ti.MatrixField = ti.Vector.field(
            3, dtype=ti.f32, shape=(width, height)
        )

    def _open(self) -> tuple[ti.ui.Window, ti.ui.Canvas]:
        """Create the window and canvas on first use."""
        if self._window is None or self._canvas is None:
            self._window = ti.ui.Window(
                name=self._title,
                res=(self.width, self.height),
                vsync=True,
            )
            self._canvas = self._window.get_canvas()
        return self._window, self._canvas

    @property
    def title(self) -> str:
        return self._title

    @property
    def window(self) -> ti.ui.Window:
        """The GGUI window (opened on first access)."""
        return self._open()[0]

    @property
    def canvas(self) -> ti.ui.Canvas:
        return self._open()[1]

    def update_image(self, frame: npt.NDArray[np.uint8]) -> None:
        """Copy a frame into the display field without showing it.

        Args:
            frame: Array of shape (height, width, 3) with dtype uint8.

        Raises:
            ValueError: If frame shape doesn't match (height, width, 3).
        """
        expected_shape = (self.height, self.width, 3)
        if frame.shape != expected_shape:
            raise ValueError(
                f"Frame shape {frame.shape} doesn't match expected {expected_shape}"
            )

        # Row 0 is the top of the frame but the bottom of the field
        image = frame.astype(np.float32) / 255.0
        image_transposed = np.ascontiguousarray(np.transpose(np.flipud(image), (1, 0, 2)))
        self.display_image.from_numpy(image_transposed)

    def present(self, frame: npt.NDArray[np.uint8]) -> None:
        """Show a frame in the window."""
        self.update_image(frame)
        self.canvas.set_image(self.display_image)
        self.window.show()
        self.frames_presented += 1

    def is_running(self) -> bool:
        """Check if the window is still open.

        Returns:
            True if the window is running, False if it should close.
        """
        return self.window.running

    def close(self) -> None:
        """Close the preview window."""
        if self._window is not None:
            self._window.running = False

    @staticmethod
    def is_display_available() -> bool:
        """Check whether a GGUI window can be opened.

        Returns:
            False for headless sessions: no X11 or Wayland display on Linux,
            or a remote macOS login without a forwarded display.
        """
        if sys.platform == "win32":
            return True

        display = os.environ.get("DISPLAY")
        if sys.platform == "darwin":
            return not (os.environ.get("SSH_CONNECTION") and not display)

        return bool(display or os.environ.get("WAYLAND_DISPLAY"))
