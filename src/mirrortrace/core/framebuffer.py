"""Frame buffer materialization.

Converts the (x, y, color) pixel sequence produced by Scene.render() into a
NumPy image of shape (height, width, 3) with dtype uint8: row index = y,
column index = x, pixel (0, 0) at the top-left.

For RGBA consumers the byte offset of pixel (x, y) is 4 * (y * width + x),
channels ordered R, G, B, A with alpha always 0xFF.

Example:
    >>> from mirrortrace.core.framebuffer import render_frame, rgba_bytes
    >>> from mirrortrace.scene.reference import create_reference_scene
    >>>
    >>> scene = create_reference_scene()
    >>> frame = render_frame(scene)      # (600, 800, 3) uint8
    >>> data = rgba_bytes(frame)         # 800 * 600 * 4 bytes
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt

if TYPE_CHECKING:
    from mirrortrace.scene.scene import Pixel, Scene

OPAQUE_ALPHA = 0xFF


def materialize(
    pixels: Iterable[Pixel],
    width: int,
    height: int,
) -> npt.NDArray[np.uint8]:
    """Write a pixel sequence into an RGB buffer.

    Args:
        pixels: Iterable of (x, y, color) triples.
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        Array of shape (height, width, 3) with dtype uint8. Pixels missing
        from the sequence stay black.

    Raises:
        ValueError: If a pixel coordinate lies outside the image.
    """
    frame = np.zeros((height, width, 3), dtype=np.uint8)
    for x, y, color in pixels:
        if not (0 <= x < width and 0 <= y < height):
            raise ValueError(f"Pixel ({x}, {y}) outside {width}x{height} frame")
        frame[y, x] = (color.r, color.g, color.b)
    return frame


def render_frame(scene: Scene) -> npt.NDArray[np.uint8]:
    """Render a scene sequentially into an RGB buffer."""
    return materialize(scene.render(), scene.width, scene.height)


def to_rgba(frame: npt.NDArray[np.uint8]) -> npt.NDArray[np.uint8]:
    """Append an opaque alpha channel to an RGB frame.

    Args:
        frame: Array of shape (H, W, 3) with dtype uint8.

    Returns:
        Array of shape (H, W, 4) with alpha set to 0xFF.

    Raises:
        ValueError: If the frame is not an (H, W, 3) array.
    """
    if frame.ndim != 3 or frame.shape[2] != 3:
        raise ValueError(f"Expected an (H, W, 3) frame, got shape {frame.shape}")

    height, width, _ = frame.shape
    rgba = np.full((height, width, 4), OPAQUE_ALPHA, dtype=np.uint8)
    rgba[:, :, :3] = frame
    return rgba


def rgba_bytes(frame: npt.NDArray[np.uint8]) -> bytes:
    """Serialize an RGB frame as row-major RGBA bytes."""
    return np.ascontiguousarray(to_rgba(frame)).tobytes()
