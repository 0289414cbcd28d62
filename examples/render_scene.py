#!/usr/bin/env python3
"""Render a scene with the Whitted ray tracer.

Renders either a JSON scene description or the built-in showcase scene,
then writes the result as PNG or PPM depending on the output extension.

Usage:
    python -m examples.render_scene [options]

Options:
    --width WIDTH       Image width in pixels (default: 200)
    --height HEIGHT     Image height in pixels (default: 100)
    --depth DEPTH       Maximum reflection/refraction bounces (default: 5)
    --scene SCENE       JSON scene file (default: built-in showcase scene)
    --output OUTPUT     Output file path, .png or .ppm (default: scene.png)
    --quiet             Suppress progress output

Example:
    python -m examples.render_scene --width 400 --height 200 --output demo.ppm
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

import taichi as ti


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a scene with the Whitted ray tracer.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=200,
        help="Image width in pixels (default: 200)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=100,
        help="Image height in pixels (default: 100)",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=5,
        help="Maximum reflection/refraction bounces (default: 5)",
    )
    parser.add_argument(
        "--scene",
        type=str,
        default=None,
        help="JSON scene file (default: built-in showcase scene)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="scene.png",
        help="Output file path, .png or .ppm (default: scene.png)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args()


def render_scene(
    width: int = 200,
    height: int = 100,
    depth: int = 5,
    scene_path: str | None = None,
    output_path: str = "scene.png",
    quiet: bool = False,
) -> Path:
    """Render a scene and save it to file.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        depth: Recursion budget for secondary rays.
        scene_path: JSON scene file, or None for the showcase scene.
        output_path: Output file path (PNG or PPM).
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    # Lazy imports to allow Taichi initialization first
    from src.whitted.preview.export import save_image
    from src.whitted.scene.config import build_camera, build_world, load_scene
    from src.whitted.scene.demo import create_demo_scene

    if scene_path is None:
        if not quiet:
            print(f"Creating showcase scene ({width}x{height})...")
        world, camera = create_demo_scene(width, height)
    else:
        if not quiet:
            print(f"Loading {scene_path} ({width}x{height})...")
        config = load_scene(scene_path)
        world = build_world(config)
        camera = build_camera(config, width=width, height=height)

    if not quiet:
        print(f"Rendering {len(world.objects)} objects at depth {depth}...")

    start_time = time.time()

    def progress_callback(rows_done: int, total_rows: int) -> None:
        if not quiet:
            elapsed = time.time() - start_time
            progress_pct = (rows_done / total_rows) * 100 if total_rows > 0 else 0
            rows_per_sec = rows_done / elapsed if elapsed > 0 else 0
            print(
                f"\r  Progress: {rows_done}/{total_rows} rows "
                f"({progress_pct:.1f}%) - {rows_per_sec:.1f} rows/s",
                end="",
                flush=True,
            )

    canvas = camera.render(world, depth=depth, callback=progress_callback)

    if not quiet:
        print()  # Newline after progress

    output_file = Path(output_path)
    save_image(canvas, output_file)

    total_time = time.time() - start_time
    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {total_time:.2f}s")

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()

    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Use GPU if available, fall back to CPU
    try:
        ti.init(arch=ti.gpu)
        if not args.quiet:
            print("Using GPU backend")
    except Exception:
        ti.init(arch=ti.cpu)
        if not args.quiet:
            print("Using CPU backend")

    try:
        render_scene(
            width=args.width,
            height=args.height,
            depth=args.depth,
            scene_path=args.scene,
            output_path=args.output,
            quiet=args.quiet,
        )
        return 0
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
