import argparse
import logging
import sys

from asciicreator.charsets import palette_names
from asciicreator.config import Config
from asciicreator.converter import create_image
from asciicreator.engine import OUTLINE_CHAR
from asciicreator.errors import AsciiCreatorError


def setup_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root = logging.getLogger("asciicreator")
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert an image to block-character ASCII art")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument("-o", "--output", default=None, help="Text file to save the result to")
    parser.add_argument(
        "-p", "--palette", default="default", choices=palette_names(), help="Character palette (default: default)"
    )
    parser.add_argument("--charset", default=None, help="Custom character ramp, darkest first. Overrides --palette.")
    parser.add_argument("--outline", action="store_true", default=False, help="Draw an outline around the picture")
    parser.add_argument(
        "--outline-char", default=OUTLINE_CHAR, help=f"Character used for the outline (default: {OUTLINE_CHAR})"
    )
    parser.add_argument("-q", "--quiet", action="store_true", default=False, help="Don't print the result to stdout")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log pipeline details to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    config = Config(
        image_source=args.image,
        destination=args.output,
        palette=args.palette,
        use_outline=args.outline,
        charset=args.charset,
        outline_char=args.outline_char,
        echo=not args.quiet,
    )
    try:
        create_image(config)
    except (AsciiCreatorError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0
