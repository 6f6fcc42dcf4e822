#!/usr/bin/env python3
"""Render the reference scene to a PNG file.

This script renders one frame of the three-sphere reference scene, either with
the sequential renderer or with the parallel Taichi renderer, and saves it.

Usage:
    python examples/render_reference_scene.py [options]

Options:
    --width WIDTH       Image width in pixels (default: 800)
    --height HEIGHT     Image height in pixels (default: 600)
    --output OUTPUT     Output file path (default: render.png)
    --backend BACKEND   "python" or "taichi" (default: taichi)
    --quiet             Suppress progress output

Example:
    python examples/render_reference_scene.py --width 400 --height 300 --backend python
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the reference scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=800,
        help="Image width in pixels (default: 800)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=600,
        help="Image height in pixels (default: 600)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="render.png",
        help="Output file path (default: render.png)",
    )
    parser.add_argument(
        "--backend",
        choices=("python", "taichi"),
        default="taichi",
        help="Renderer to use (default: taichi)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args()


def render_reference_scene(
    width: int = 800,
    height: int = 600,
    output_path: str = "render.png",
    backend: str = "taichi",
    quiet: bool = False,
) -> Path:
    """Render the reference scene and save to file.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        output_path: Output file path (PNG).
        backend: "python" for the sequential renderer, "taichi" for the
            parallel renderer.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    from mirrortrace.core.framebuffer import render_frame
    from mirrortrace.preview.export import save_png
    from mirrortrace.scene.reference import ReferenceSceneParams, create_reference_scene

    if not quiet:
        print(f"Creating reference scene ({width}x{height})...")

    scene = create_reference_scene(ReferenceSceneParams(width=width, height=height))

    start_time = time.time()
    if backend == "taichi":
        from mirrortrace.core.parallel import ParallelRenderer, init_backend

        init_backend()
        renderer = ParallelRenderer(scene)
        if not quiet:
            print(f"Rendering with Taichi (bounce budget {renderer.max_bounces})...")
        frame = renderer.render_frame()
    else:
        if not quiet:
            print("Rendering sequentially...")
        frame = render_frame(scene)

    output_file = Path(output_path)
    save_png(frame, output_file)

    total_time = time.time() - start_time
    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {total_time:.2f}s")

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()

    try:
        render_reference_scene(
            width=args.width,
            height=args.height,
            output_path=args.output,
            backend=args.backend,
            quiet=args.quiet,
        )
        return 0
    except (OSError, ValueError, RuntimeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
