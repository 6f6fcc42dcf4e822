"""Preview module for frame output and visualization.

This module provides the frame sinks that consume rendered frames:

Components:
    export: Pillow PNG export and PNG sequence sink
    interactive: Taichi GGUI-based window sink
    display: Matplotlib-based static preview

Every sink accepts frames of shape (height, width, 3) with dtype uint8, as
produced by mirrortrace.core.framebuffer.render_frame() and
ParallelRenderer.render_frame().

Example:
    >>> from mirrortrace.preview import save_png
    >>> save_png(frame, "output.png")

For an interactive window:
    >>> from mirrortrace.preview import InteractivePreview
    >>> preview = InteractivePreview(800, 600)
    >>> preview.present(frame)
"""

from mirrortrace.preview.display import frame_difference, show_comparison, show_frame
from mirrortrace.preview.export import (
    PngSequenceSink,
    compute_rmse,
    frame_to_image,
    save_png,
)
from mirrortrace.preview.interactive import InteractivePreview

__all__ = [
    # Interactive preview
    "InteractivePreview",
    # Display functions
    "show_frame",
    "show_comparison",
    "frame_difference",
    # Export functions
    "save_png",
    "frame_to_image",
    "PngSequenceSink",
    "compute_rmse",
]
