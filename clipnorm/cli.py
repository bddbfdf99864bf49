"""
clipnorm — turn the shapes of an SVG into an objectBoundingBox clipPath.

Usage:
  clipnorm input.svg                      # prints to terminal
  clipnorm input.svg -o clip.svg          # saves converted SVG
  clipnorm input.svg --id mask -p 4       # custom clipPath id and precision
  clipnorm folder/ -o output_folder/      # batch process folder
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from clipnorm.config import settings
from clipnorm.engine.config import PipelineConfig
from clipnorm.engine.errors import ClipPathError
from clipnorm.svg.document import convert_document

logger = logging.getLogger(__name__)


def process_file(input_path: str, output_path: str | None, clip_path_id: str, config: PipelineConfig) -> bool:
    """Convert a single SVG file. Returns True on success."""
    with open(input_path, encoding="utf-8") as f:
        svg_text = f.read()

    try:
        result = convert_document(svg_text, clip_path_id=clip_path_id, config=config)
    except ClipPathError as e:
        print(f"  ERROR: {e}")
        return False

    print(f"  {len(result.paths)} paths, {len(result.skipped)} skipped")
    for element_id, message in result.errors.items():
        print(f"  ! {element_id}: {message}")

    if output_path:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(result.svg + "\n")
        print(f"  → Saved: {output_path}")
    else:
        print(result.svg)

    return True


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Convert SVG shapes into an objectBoundingBox clipPath")
    parser.add_argument("input", help="SVG file or folder of SVGs")
    parser.add_argument("-o", "--output", help="Output file or folder")
    parser.add_argument("--id", default=settings.clip_path_id, help="id for a newly created <clipPath>")
    parser.add_argument(
        "-p", "--precision", type=int, default=settings.path_precision, help="Decimal digits in output"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline details")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    config = PipelineConfig(precision=args.precision, arc_max_sweep_degrees=settings.arc_max_sweep_degrees)

    if os.path.isdir(args.input):
        # Batch mode
        svg_files = sorted(f for f in os.listdir(args.input) if f.lower().endswith(".svg"))
        if not svg_files:
            print("No .svg files found in folder.")
            return 1

        out_dir = args.output or args.input.rstrip("/\\") + "_clip"
        os.makedirs(out_dir, exist_ok=True)

        print(f"Processing {len(svg_files)} files...\n")
        success = 0
        for fname in svg_files:
            print(f"[{fname}]")
            if process_file(os.path.join(args.input, fname), os.path.join(out_dir, fname), args.id, config):
                success += 1
            print()

        print(f"Done: {success}/{len(svg_files)} processed → {out_dir}")
        return 0

    if not os.path.exists(args.input):
        print(f"File not found: {args.input}")
        return 1

    print(f"[{os.path.basename(args.input)}]")
    return 0 if process_file(args.input, args.output, args.id, config) else 1


if __name__ == "__main__":
    sys.exit(main())
