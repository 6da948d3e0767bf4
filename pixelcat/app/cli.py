from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from ..container import DEFAULT_FORMAT
from ..decoder import DecodeResult, decode_file, iter_artwork_paths
from ..rendering import TerminalSettings, render_lines
from ..rendering.terminal import DEFAULT_ALPHA_THRESHOLD, DEFAULT_GLYPH

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="pixelcat: render layered pixel-art files as true-color terminal text."
    )
    parser.add_argument("path", help=f"Artwork file or directory of {DEFAULT_FORMAT.extension} files")
    parser.add_argument("-r", "--recursive", action="store_true", help="Descend into subdirectories")
    parser.add_argument("--png", metavar="DIR", help="Also write each decoded image as DIR/<name>.png")
    parser.add_argument("--info", action="store_true", help="Print size, layer count and mode instead of the image")
    parser.add_argument("--glyph", default=DEFAULT_GLYPH, help="Two-row glyph (default: lower half block)")
    parser.add_argument(
        "--alpha-threshold",
        type=int,
        choices=range(0, 256),
        metavar="0-255",
        default=DEFAULT_ALPHA_THRESHOLD,
        help=f"Alpha below which pixels render black (default: {DEFAULT_ALPHA_THRESHOLD})",
    )
    parser.add_argument("--no-trailing-blank", action="store_true", help="Omit the blank line after each image")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log discarded streams")
    return parser.parse_args(argv)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s [%(name)s] %(message)s",
    )


def _settings_from_args(args: argparse.Namespace) -> TerminalSettings:
    return TerminalSettings(
        glyph=args.glyph,
        alpha_threshold=args.alpha_threshold,
        trailing_blank=not args.no_trailing_blank,
    )


def _png_path(directory: str, path: str) -> str:
    stem = os.path.splitext(os.path.basename(path))[0]
    return os.path.join(directory, stem + ".png")


def emit_result(result: DecodeResult, args: argparse.Namespace, settings: TerminalSettings) -> None:
    image = result.image
    name = os.path.basename(result.path)
    if args.info:
        plural = "" if image.layer_count == 1 else "s"
        print(f"{name}: {image.width}x{image.height}, {image.layer_count} layer{plural}, {image.mode}")
    else:
        for line in render_lines(image.raster, settings):
            sys.stdout.write(line + "\n")
    if args.png:
        out_path = _png_path(args.png, result.path)
        image.raster.save_png(out_path)
        logger.info("Wrote %s", out_path)


def run_batch(paths: List[str], args: argparse.Namespace) -> int:
    settings = _settings_from_args(args)
    if args.png:
        os.makedirs(args.png, exist_ok=True)
    failures = 0
    for path in paths:
        try:
            result = decode_file(path, DEFAULT_FORMAT)
            if not result.ok:
                logger.warning("Skipping %s: %s", path, result.error)
                failures += 1
                continue
            emit_result(result, args, settings)
        except Exception as exc:
            logger.error("Failed %s: %s", path, exc)
            failures += 1
    sys.stdout.flush()
    return 1 if failures else 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    _configure_logging(args.verbose)
    try:
        paths = iter_artwork_paths(args.path, DEFAULT_FORMAT, recursive=args.recursive)
    except FileNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    if not paths:
        print(f"No {DEFAULT_FORMAT.extension} files found in {args.path}", file=sys.stderr)
        return 1
    return run_batch(paths, args)


if __name__ == "__main__":
    raise SystemExit(main())
