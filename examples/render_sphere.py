#!/usr/bin/env python3
"""Render the sphere scene with every shading policy.

This script writes three 400x225 images of the sphere at (0, 0, -1):

    red_sphere.png        solid red sphere over the sky gradient
    normal_sphere.png     sphere colored by its surface normals
    blue_background.png   sky gradient alone

Usage:
    python examples/render_sphere.py [options]

Options:
    --output-dir DIR    Directory for the output images (default: .)
    --test-pattern      Also write the calibration gradient red_image.png
    --quiet             Suppress progress output

Example:
    python examples/render_sphere.py --output-dir renders
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from spherecast.core.errors import SpherecastError
from spherecast.core.render import render_test_pattern, render_to_file
from spherecast.preview.export import save_png

# Output file name for each shading policy
RENDERS = (
    ("red_sphere.png", "solid"),
    ("normal_sphere.png", "normal"),
    ("blue_background.png", "sky"),
)


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the sphere scene with every shading policy.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=".",
        help="Directory for the output images (default: .)",
    )
    parser.add_argument(
        "--test-pattern",
        action="store_true",
        help="Also write the calibration gradient red_image.png",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args()


def render_all(output_dir: Path, test_pattern: bool = False, quiet: bool = False) -> list[Path]:
    """Render every image into output_dir.

    Args:
        output_dir: Destination directory (must exist).
        test_pattern: If True, also write the calibration gradient.
        quiet: If True, suppress progress output.

    Returns:
        Paths of the written images.
    """
    written = []

    for filename, shader_name in RENDERS:
        output_file = output_dir / filename
        start_time = time.time()

        def progress_callback(current: int, target: int) -> None:
            if not quiet:
                print(
                    f"\r  {filename}: row {current}/{target} "
                    f"({current / target * 100:.1f}%)",
                    end="",
                    flush=True,
                )

        render_to_file(output_file, shader_name, progress=progress_callback)
        written.append(output_file)

        if not quiet:
            print()  # Newline after progress
            print(f"Saved to: {output_file.absolute()} ({time.time() - start_time:.2f}s)")

    if test_pattern:
        output_file = output_dir / "red_image.png"
        save_png(render_test_pattern(), output_file)
        written.append(output_file)
        if not quiet:
            print(f"Saved to: {output_file.absolute()}")

    return written


def main() -> int:
    """Main entry point."""
    args = parse_args()

    try:
        render_all(Path(args.output_dir), test_pattern=args.test_pattern, quiet=args.quiet)
        return 0
    except SpherecastError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
