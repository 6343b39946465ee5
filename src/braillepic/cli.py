import argparse
import logging
import math
import re
import sys
from pathlib import Path

from braillepic.converter import DEFAULT_SCALE, DEFAULT_THRESHOLD, DecodeError, image_to_braille

logger = logging.getLogger(__name__)


# Plain ASCII literals only; int() and float() alone would also take
# whitespace, underscores and non-ASCII digits.
_THRESHOLD_RE = re.compile(r"\+?[0-9]+")
_SCALE_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def parse_threshold(text: str | None) -> int:
    """Parse a 0-255 threshold, falling back to the default on anything else."""
    if text is None:
        return DEFAULT_THRESHOLD
    if not _THRESHOLD_RE.fullmatch(text):
        logger.debug("Ignoring unparsable threshold %r", text)
        return DEFAULT_THRESHOLD
    value = int(text)
    if value > 255:
        logger.debug("Ignoring out-of-range threshold %r", text)
        return DEFAULT_THRESHOLD
    return value


def parse_scale(text: str | None) -> float:
    """Parse a finite scale factor, falling back to the default on anything else."""
    if text is None:
        return DEFAULT_SCALE
    if not _SCALE_RE.fullmatch(text):
        logger.debug("Ignoring unparsable scale %r", text)
        return DEFAULT_SCALE
    value = float(text)
    if not math.isfinite(value):
        logger.debug("Ignoring non-finite scale %r", text)
        return DEFAULT_SCALE
    return value


def write_output(art: str, output: Path | None = None) -> None:
    data = art.encode("utf-8")
    if output is not None:
        output.write_bytes(data)
        return
    stream = getattr(sys.stdout, "buffer", None)
    if stream is None:
        sys.stdout.write(art)
        sys.stdout.flush()
    else:
        stream.write(data)
        stream.flush()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="braillepic", description="Render an image as Braille art")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "threshold",
        nargs="?",
        default=None,
        help=f"Luminance threshold 0-255; darker pixels become dots (default: {DEFAULT_THRESHOLD})",
    )
    parser.add_argument(
        "scale",
        nargs="?",
        default=None,
        help=f"Resize factor applied before rendering, recommended 0.1-10.0 (default: {DEFAULT_SCALE})",
    )
    parser.add_argument("-o", "--output", type=Path, default=None, help="Write to a file instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug output to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s - %(message)s",
        stream=sys.stderr,
        force=True,
    )

    threshold = parse_threshold(args.threshold)
    scale = parse_scale(args.scale)
    logger.debug("threshold=%d scale=%g", threshold, scale)

    try:
        art = image_to_braille(args.image, threshold=threshold, scale=scale)
    except (DecodeError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        write_output(art, args.output)
    except OSError as exc:
        print(f"Error: cannot write output: {exc}", file=sys.stderr)
        return 1
    return 0
