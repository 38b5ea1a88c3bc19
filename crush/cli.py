"""
Command line entry point.

usage:
    crush input.png [-o output.jpg] [-s 200k]
"""

import argparse
import logging
import sys
from typing import List, Optional

from crush import __version__
from crush.config import Settings
from crush.errors import CrushError
from crush.pipeline import crush_image
from crush.sizes import parse_size_target

log = logging.getLogger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crush",
        description="Re-encode an image as a JPEG close to a target file size.",
    )
    parser.add_argument("input", help="Input image file path")
    parser.add_argument(
        "-o",
        "--output",
        default=settings.default_output,
        help=f"Output image file path (default: {settings.default_output})",
    )
    parser.add_argument(
        "-s",
        "--size-target",
        default=settings.default_size_target,
        help=f"Target size in bytes, e.g. 100k or 1M (default: {settings.default_size_target})",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        print(f"crush: {exc}", file=sys.stderr)
        return 1

    args = build_parser(settings).parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(message)s",
        stream=sys.stderr,
    )

    try:
        size_target = parse_size_target(args.size_target)
        crush_image(args.input, args.output, size_target, settings)
    except CrushError as exc:
        log.error("crush: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
