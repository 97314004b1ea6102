#!/usr/bin/env python3
"""Render the sphere scene with the light ray fan to a PNG file.

Usage:
    python -m examples.render_scene [options]

Options:
    --width WIDTH       Image width in pixels (default: 1200)
    --height HEIGHT     Image height in pixels (default: 800)
    --light-x X         Light x position (default: 3.0)
    --light-y Y         Light y position (default: 0.0)
    --light-z Z         Light z position, non-zero (default: -5.0)
    --output OUTPUT     Output file path (default: raylight.png)
    --no-overlay        Save only the rasterized sphere
    --show              Also show the frame in a Matplotlib window
    --verbose           Enable debug logging
    --quiet             Suppress progress output

Example:
    python -m examples.render_scene --light-x -2 --light-y 2.5 --output above.png
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

import taichi as ti

from raylight.config import DEFAULT_HEIGHT, DEFAULT_WIDTH
from raylight.scene.scene import LIGHT_POSITION


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the sphere scene with the light ray fan.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=DEFAULT_WIDTH,
        help=f"Image width in pixels (default: {DEFAULT_WIDTH})",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=DEFAULT_HEIGHT,
        help=f"Image height in pixels (default: {DEFAULT_HEIGHT})",
    )
    parser.add_argument("--light-x", type=float, default=LIGHT_POSITION[0], help="Light x position")
    parser.add_argument("--light-y", type=float, default=LIGHT_POSITION[1], help="Light y position")
    parser.add_argument(
        "--light-z",
        type=float,
        default=LIGHT_POSITION[2],
        help="Light z position, must be non-zero",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="raylight.png",
        help="Output file path (default: raylight.png)",
    )
    parser.add_argument(
        "--no-overlay",
        action="store_true",
        help="Save only the rasterized sphere",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Also show the frame in a Matplotlib window",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args()


def render_scene(
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    light_position: tuple[float, float, float] = LIGHT_POSITION,
    output_path: str = "raylight.png",
    overlay: bool = True,
    show: bool = False,
    quiet: bool = False,
) -> Path:
    """Render the scene for one light position and save it.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        light_position: World-space light position.
        output_path: Output file path (PNG).
        overlay: Whether to draw the ray fan and light glyph.
        show: Whether to display the frame with Matplotlib.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    # Lazy imports to allow Taichi initialization first
    from raylight.config import RenderConfig
    from raylight.preview.display import show_frame
    from raylight.preview.export import save_png
    from raylight.scene.controller import RenderController
    from raylight.scene.scene import SceneParams

    if not quiet:
        print(f"Rendering {width}x{height} with light at {light_position}...")

    start_time = time.time()
    controller = RenderController(
        SceneParams(light_position=light_position),
        RenderConfig(width=width, height=height),
    )
    frame = controller.frame

    if not quiet:
        if frame.light_inside:
            print("  Light is inside the sphere: no ray fan")
        else:
            blocked = sum(1 for ray in frame.rays if ray.blocked)
            print(f"  {len(frame.rays)} rays, {blocked} blocked by the sphere")

    output_file = save_png(frame, output_path, overlay=overlay)

    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {time.time() - start_time:.2f}s")

    if show:
        show_frame(frame, overlay=overlay)

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()

    from raylight.logging_config import setup_logging

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    ti.init(arch=ti.cpu)

    try:
        render_scene(
            width=args.width,
            height=args.height,
            light_position=(args.light_x, args.light_y, args.light_z),
            output_path=args.output,
            overlay=not args.no_overlay,
            show=args.show,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
