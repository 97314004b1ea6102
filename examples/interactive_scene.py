#!/usr/bin/env python3
"""Interactive sphere scene with a draggable light.

Usage:
    python -m examples.interactive_scene [--verbose]

Controls:
    - Drag the glowing light with the left mouse button
    - Release the button or leave the window to drop it
    - Press "s" to export the current frame as PNG
"""

from __future__ import annotations

import argparse
import logging
import sys

import taichi as ti


def main() -> int:
    """Main entry point for the interactive window.

    Returns:
        Exit code (0 for success, non-zero for error).
    """
    parser = argparse.ArgumentParser(description="Drag a light around a ray-traced sphere.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    from raylight.logging_config import setup_logging

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    # The per-pixel kernel runs on the CPU backend; the window still uses GGUI
    ti.init(arch=ti.cpu)

    # Import after Taichi initialization
    from raylight.preview.interactive import InteractivePreview

    if not InteractivePreview.is_display_available():
        print("Error: No display available. Cannot run interactive preview.")
        print("This script requires a graphical display environment.")
        return 1

    print("Creating interactive window (1200x800)...")
    preview = InteractivePreview()

    print("  - Drag the light to move it")
    print("  - Press 's' to export PNG")
    print("  - Close window to exit")
    print()

    try:
        preview.run()
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
    finally:
        preview.close()
        print("Preview window closed.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
