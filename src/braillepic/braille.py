from collections.abc import Sequence

import numpy as np

from braillepic.charsets import BIT_POSITIONS, BRAILLE, BRAILLE_BASE, CELL_HEIGHT, CELL_WIDTH


def cell_to_char(mask: int) -> str:
    """Map an 8-bit dot mask to its Braille pattern character."""
    if not 0 <= mask < len(BRAILLE):
        raise ValueError(f"Dot mask out of range: {mask}")
    return chr(BRAILLE_BASE + mask)


def pack_cell(matrix: Sequence[Sequence[bool]], x: int, y: int) -> int:
    """Pack the 2x4 block with its top-left corner at (x, y) into a dot mask.

    Positions past the right or bottom edge of the matrix count as blank.
    """
    height = len(matrix)
    width = len(matrix[0]) if height else 0
    mask = 0
    for (dx, dy), bit in BIT_POSITIONS.items():
        px = x + dx
        py = y + dy
        if px < width and py < height and matrix[py][px]:
            mask |= 1 << bit
    return mask


def pack_grid(ink: np.ndarray) -> np.ndarray:
    """Pack a boolean (height, width) array into dot masks of shape (ceil(h/4), ceil(w/2)).

    The array is padded with blank pixels up to whole cells before packing.
    """
    height, width = ink.shape
    rows = -(-height // CELL_HEIGHT)
    cols = -(-width // CELL_WIDTH)
    padded = np.zeros((rows * CELL_HEIGHT, cols * CELL_WIDTH), dtype=np.uint8)
    padded[:height, :width] = ink

    masks = np.zeros((rows, cols), dtype=np.uint8)
    for (dx, dy), bit in BIT_POSITIONS.items():
        masks |= padded[dy::CELL_HEIGHT, dx::CELL_WIDTH] << bit
    return masks


def render_lines(matrix: Sequence[Sequence[bool]] | np.ndarray) -> list[str]:
    """Render a binary matrix as rows of Braille characters, one per 4-pixel band."""
    ink = np.asarray(matrix, dtype=bool)
    if ink.ndim != 2 or ink.size == 0:
        return []

    codes = (pack_grid(ink).astype(np.uint32) + BRAILLE_BASE).astype("<u4")
    return [row.tobytes().decode("utf-32-le") for row in codes]


def render(matrix: Sequence[Sequence[bool]] | np.ndarray) -> str:
    """Render a binary matrix as Braille art, each line terminated by a newline."""
    return "".join(line + "\n" for line in render_lines(matrix))
