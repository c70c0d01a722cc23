import argparse
import logging
import sys
from typing import Optional, Sequence

from .config import Config
from .errors import CaffParserError
from .export import export_caff, export_ciff
from .utils import load_caff, load_ciff, output_path_for


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="caffparser",
        description="Decode a CAFF or CIFF file and export it as a JPEG image.",
    )
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument(
        "-caff",
        dest="caff",
        metavar="PATH",
        help="Decode a CAFF animation and export its first frame",
    )
    mode.add_argument(
        "-ciff",
        dest="ciff",
        metavar="PATH",
        help="Decode a CIFF image and export it",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Output image path (default: input path with a .jpg extension)",
    )
    parser.add_argument(
        "--quality",
        type=int,
        default=Config.JPEG_QUALITY,
        help=f"JPEG quality (default: {Config.JPEG_QUALITY})",
    )
    parser.add_argument(
        "--strict-content-size",
        action="store_true",
        default=Config.STRICT_CONTENT_SIZE,
        help="Require content size to equal width * height * 3",
    )
    parser.add_argument(
        "--enforce-block-length",
        action="store_true",
        default=Config.ENFORCE_BLOCK_LENGTH,
        help="Reject CAFF blocks whose payload disagrees with their declared length",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log decoding details")
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> str:
    """Decode the selected input and export it, returning the output path."""
    if args.caff is not None:
        container = load_caff(
            args.caff,
            strict_content_size=args.strict_content_size,
            enforce_block_length=args.enforce_block_length,
        )
        output = args.output or output_path_for(args.caff)
        return export_caff(container, output, quality=args.quality)

    image = load_ciff(args.ciff, strict_content_size=args.strict_content_size)
    output = args.output or output_path_for(args.ciff)
    return export_ciff(image, output, quality=args.quality)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=Config.LOG_FORMAT,
    )
    try:
        run(args)
    except CaffParserError as exc:
        print(f"caffparser: {exc}", file=sys.stderr)
        return 1
    return 0
