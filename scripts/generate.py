#!/usr/bin/env python3
"""
CLI: Render one annotated fractal PNG.
Usage:
  python scripts/generate.py
  python scripts/generate.py --seed 7 --no-oracle
  python scripts/generate.py --mark glyph --output out/fractal.png
Failures (oracle, disk, encoding) propagate as a traceback; no file is written if the oracle fails.
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import logging

from fractpunk.config import load_config, merge_config
from fractpunk.pipeline import generate_image


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Render a perturbed Mandelbrot image with speckles and an annotation."
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output PNG path (default: fractpunk_fractal.png in the working directory).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Optional random seed for reproducibility.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config YAML (default: config/default.yaml).",
    )
    parser.add_argument(
        "--no-oracle",
        action="store_true",
        help="Do not call the phrase API; annotate with a fixed phrase.",
    )
    parser.add_argument(
        "--fallback",
        action="store_true",
        help="If the phrase API fails, use a fixed phrase instead of aborting.",
    )
    parser.add_argument(
        "--mark",
        choices=("line", "glyph"),
        default=None,
        help="Annotation mark: placeholder line or Pillow-rendered text.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging.")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    config = load_config(args.config)
    overrides: dict = {"render": {}, "oracle": {}}
    if args.seed is not None:
        overrides["render"]["seed"] = args.seed
    if args.mark:
        overrides["render"]["mark"] = args.mark
    if args.no_oracle:
        overrides["oracle"]["enabled"] = False
    if args.fallback:
        overrides["oracle"]["fallback_on_error"] = True
    config = merge_config(config, overrides)

    path = generate_image(config, output_path=args.output)
    print(f"Done. Image: {path}")


if __name__ == "__main__":
    main()
