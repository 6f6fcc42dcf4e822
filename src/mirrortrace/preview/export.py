"""Image export utilities for rendered frames.

This module provides functions for saving rendered frames to files and a frame
sink that writes an animation as a numbered PNG sequence.

Supported formats:
    - PNG (8-bit RGB via Pillow)

Example:
    >>> from mirrortrace.core.framebuffer import render_frame
    >>> from mirrortrace.preview.export import save_png
    >>> from mirrortrace.scene.reference import create_reference_scene
    >>>
    >>> frame = render_frame(create_reference_scene())
    >>> save_png(frame, "render.png")
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import numpy.typing as npt
from loguru import logger
from PIL import Image as PILImage


def _check_frame(frame: npt.NDArray[np.uint8]) -> None:
    """Raise ValueError unless frame is an (H, W, 3) uint8 array."""
    if frame.ndim != 3 or frame.shape[2] != 3:
        raise ValueError(f"Expected an (H, W, 3) frame, got shape {frame.shape}")
    if frame.dtype != np.uint8:
        raise ValueError(f"Expected a uint8 frame, got dtype {frame.dtype}")


def frame_to_image(frame: npt.NDArray[np.uint8]) -> PILImage.Image:
    """Wrap a frame as a Pillow RGB image.

    Args:
        frame: Array of shape (H, W, 3) with dtype uint8.

    Returns:
        The Pillow image.

    Raises:
        ValueError: If the frame has the wrong shape or dtype.
    """
    _check_frame(frame)
    return PILImage.fromarray(np.ascontiguousarray(frame))


def save_png(frame: npt.NDArray[np.uint8], filepath: str | Path) -> None:
    """Save a frame as a PNG file.

    Args:
        frame: Array of shape (H, W, 3) with dtype uint8.
        filepath: Output file path (should end in .png).

    Raises:
        ValueError: If the frame has the wrong shape or dtype.
    """
    frame_to_image(frame).save(filepath)
    logger.info("Saved {}x{} frame to {}", frame.shape[1], frame.shape[0], filepath)


class PngSequenceSink:
    """Frame sink that writes numbered PNG files.

    Frames are written as <directory>/<prefix>_0000.png, <prefix>_0001.png, ...

    Attributes:
        directory: Output directory (created on first frame).
        prefix: File name prefix.
        frames_written: Number of frames written so far.
    """

    def __init__(self, directory: str | Path, prefix: str = "frame") -> None:
        self.directory = Path(directory)
        self.prefix = prefix
        self.frames_written = 0

    def path_for(self, index: int) -> Path:
        """Get the output path of frame index."""
        return self.directory / f"{self.prefix}_{index:04d}.png"

    def present(self, frame: npt.NDArray[np.uint8]) -> None:
        """Write the next frame of the sequence."""
        self.directory.mkdir(parents=True, exist_ok=True)
        save_png(frame, self.path_for(self.frames_written))
        self.frames_written += 1


def compute_rmse(
    image_a: npt.NDArray[np.generic],
    image_b: npt.NDArray[np.generic],
) -> float:
    """Compute root mean squared error between two images.

    Args:
        image_a: First image array.
        image_b: Second image array (must have same shape as image_a).

    Returns:
        RMSE value (lower is more similar).

    Raises:
        ValueError: If image shapes don't match.
    """
    if image_a.shape != image_b.shape:
        raise ValueError(
            f"Image shapes must match: {image_a.shape} vs {image_b.shape}"
        )

    diff = image_a.astype(np.float64) - image_b.astype(np.float64)
    return float(np.sqrt(np.mean(diff**2)))
