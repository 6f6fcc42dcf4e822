"""Matplotlib-based preview display for rendered frames.

Matplotlib is an optional dependency (the "display" extra) and is only
imported when a figure is shown.

Example:
    >>> from mirrortrace.core.framebuffer import render_frame
    >>> from mirrortrace.preview.display import show_frame
    >>> from mirrortrace.scene.reference import create_reference_scene
    >>>
    >>> show_frame(render_frame(create_reference_scene()))
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from mirrortrace.preview.export import compute_rmse


def frame_difference(
    frame_a: npt.NDArray[np.uint8],
    frame_b: npt.NDArray[np.uint8],
    scale: float = 10.0,
) -> npt.NDArray[np.float32]:
    """Amplified per-pixel absolute difference of two frames, in [0, 1].

    Raises:
        ValueError: If frame shapes don't match.
    """
    if frame_a.shape != frame_b.shape:
        raise ValueError(f"Frame shapes must match: {frame_a.shape} vs {frame_b.shape}")
    diff = np.abs(frame_a.astype(np.float32) - frame_b.astype(np.float32)) / 255.0
    return np.clip(diff * scale, 0.0, 1.0).astype(np.float32)


def show_frame(
    frame: npt.NDArray[np.uint8],
    *,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 6),
    block: bool = True,
) -> None:
    """Display a frame as a Matplotlib figure.

    Args:
        frame: Array of shape (H, W, 3) with dtype uint8.
        title: Custom title (default shows the frame size).
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until figure is closed.
    """
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.imshow(frame)
    ax.axis("off")
    ax.set_title(title if title is not None else f"Render {frame.shape[1]}x{frame.shape[0]}")

    plt.tight_layout()
    plt.show(block=block)


def show_comparison(
    frame_a: npt.NDArray[np.uint8],
    frame_b: npt.NDArray[np.uint8],
    *,
    labels: tuple[str, str] = ("A", "B"),
    diff_scale: float = 10.0,
    figsize: tuple[float, float] = (16, 5),
    block: bool = True,
) -> float:
    """Display two frames side by side with their amplified difference.

    Args:
        frame_a: First frame (H, W, 3) uint8.
        frame_b: Second frame (H, W, 3) uint8.
        labels: Labels for the two frames.
        diff_scale: Scale factor for difference amplification.
        figsize: Figure size in inches.
        block: Whether to block execution until figure is closed.

    Returns:
        RMSE between the two frames in 8-bit units.
    """
    import matplotlib.pyplot as plt

    diff = frame_difference(frame_a, frame_b, diff_scale)
    rmse = compute_rmse(frame_a, frame_b)

    fig, axes = plt.subplots(1, 3, figsize=figsize)

    axes[0].imshow(frame_a)
    axes[0].set_title(labels[0])
    axes[0].axis("off")

    axes[1].imshow(frame_b)
    axes[1].set_title(labels[1])
    axes[1].axis("off")

    axes[2].imshow(diff)
    axes[2].set_title(f"Difference ({diff_scale}x) - RMSE: {rmse:.4f}")
    axes[2].axis("off")

    plt.tight_layout()
    plt.show(block=block)

    return rmse
