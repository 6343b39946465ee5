import numpy as np
from PIL import Image


def threshold_array(image: Image.Image | np.ndarray, threshold: int) -> np.ndarray:
    """Boolean array of shape (height, width), True where a pixel is darker than ``threshold``.

    The threshold is compared as-is, without clamping to 0-255.
    """
    if isinstance(image, Image.Image):
        image = image.convert("L")
    # int32 keeps the comparison exact for thresholds outside the uint8 range
    arr = np.asarray(image, dtype=np.int32)
    if arr.ndim != 2:
        raise ValueError(f"Expected a 2-D luminance array, got shape {arr.shape}")
    return arr < threshold


def binarize(image: Image.Image | np.ndarray, threshold: int) -> list[list[bool]]:
    """Mark every pixel darker than ``threshold`` as ink, one list of bools per row."""
    return threshold_array(image, threshold).tolist()
