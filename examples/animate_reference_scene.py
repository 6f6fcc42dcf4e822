#!/usr/bin/env python3
"""Animate the reference scene.

The spheres orbit the vertical axis through (0, 0, -1) at one radian per
second of wall-clock time. Frames go to a Taichi GGUI window, or to a numbered
PNG sequence when --output-dir is given.

Usage:
    python examples/animate_reference_scene.py [options]

Options:
    --width WIDTH         Image width in pixels (default: 400)
    --height HEIGHT       Image height in pixels (default: 300)
    --frames N            Stop after N frames (default: run until closed)
    --output-dir DIR      Write PNG frames to DIR instead of opening a window
"""

from __future__ import annotations

import argparse
import sys


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Animate the reference scene.")
    parser.add_argument("--width", type=int, default=400, help="Image width (default: 400)")
    parser.add_argument("--height", type=int, default=300, help="Image height (default: 300)")
    parser.add_argument("--frames", type=int, default=None, help="Number of frames to render")
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Write PNG frames here instead of opening a window",
    )
    return parser.parse_args()


def main() -> int:
    """Main entry point for the animation.

    Returns:
        Exit code (0 for success, non-zero for error).
    """
    args = parse_args()

    from mirrortrace.core.animation import AnimationLoop
    from mirrortrace.core.parallel import ParallelRenderer, init_backend
    from mirrortrace.preview.export import PngSequenceSink
    from mirrortrace.preview.interactive import InteractivePreview
    from mirrortrace.scene.reference import ReferenceSceneParams, create_reference_scene

    # Initialize Taichi first (before creating fields)
    init_backend()

    scene = create_reference_scene(ReferenceSceneParams(width=args.width, height=args.height))
    renderer = ParallelRenderer(scene)

    if args.output_dir is not None:
        if args.frames is None:
            print("Error: --output-dir needs --frames.", file=sys.stderr)
            return 1
        sink = PngSequenceSink(args.output_dir)
        count = AnimationLoop(scene, sink, renderer=renderer).run(num_frames=args.frames)
        print(f"Wrote {count} frames to {args.output_dir}")
        return 0

    if not InteractivePreview.is_display_available():
        print("Error: No display available. Cannot run interactive preview.")
        print("Use --output-dir to write frames to disk instead.")
        return 1

    print(f"Creating preview window ({args.width}x{args.height})...")
    preview = InteractivePreview(args.width, args.height, title="mirrortrace - reference scene")
    loop = AnimationLoop(scene, preview, renderer=renderer)

    try:
        count = loop.run(num_frames=args.frames, should_continue=preview.is_running)
        print(f"Rendered {count} frames.")
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
    finally:
        preview.close()
        print("Preview window closed.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
