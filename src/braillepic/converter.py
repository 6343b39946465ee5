import logging
import math
import sys
from pathlib import Path

from PIL import Image

from braillepic.binarize import threshold_array
from braillepic.braille import render

DEFAULT_THRESHOLD = 128
DEFAULT_SCALE = 1.0

logger = logging.getLogger(__name__)


class DecodeError(OSError):
    """The image could not be opened or decoded."""


def load_image(path: str | Path) -> Image.Image:
    """Open an image file and return it as 8-bit grayscale."""
    path = Path(path)
    try:
        with Image.open(path) as image:
            image.load()
            gray = image.convert("L")
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        raise DecodeError(f"Cannot decode image {path}: {exc}") from exc
    logger.debug("Loaded %s (%dx%d, mode %s)", path, gray.width, gray.height, image.mode)
    return gray


def scale_image(image: Image.Image, scale: float) -> Image.Image:
    """Resize by ``scale``, rounding each side half up.

    Raises ValueError when the target size is not finite or exceeds
    Pillow's decompression bomb limit.
    """
    if abs(scale - 1.0) <= sys.float_info.epsilon:
        return image

    raw_width = image.width * scale + 0.5
    raw_height = image.height * scale + 0.5
    if not (math.isfinite(raw_width) and math.isfinite(raw_height)):
        raise ValueError(f"Scale {scale:g} gives a non-finite image size")
    new_width = max(0, math.floor(raw_width))
    new_height = max(0, math.floor(raw_height))
    limit = Image.MAX_IMAGE_PIXELS
    if limit is not None and new_width * new_height > 2 * limit:
        raise ValueError(f"Scale {scale:g} gives a {new_width}x{new_height} image, over the {2 * limit} pixel limit")
    logger.debug("Scaling %dx%d by %g to %dx%d", image.width, image.height, scale, new_width, new_height)
    if new_width == 0 or new_height == 0:
        return Image.new(image.mode, (new_width, new_height))
    return image.resize((new_width, new_height), Image.LANCZOS)


def image_to_braille(
    image: Image.Image | str | Path,
    threshold: int = DEFAULT_THRESHOLD,
    scale: float = DEFAULT_SCALE,
) -> str:
    if not isinstance(image, Image.Image):
        image = load_image(image)
    image = image.convert("L")
    image = scale_image(image, scale)

    ink = threshold_array(image, threshold)
    art = render(ink)
    logger.debug("Rendered %d lines from %dx%d pixels", art.count("\n"), image.width, image.height)
    return art
