import pytest
from PIL import Image


def make_image(width, height, fill=255, black=()):
    """Grayscale image filled with ``fill``, with the given (x, y) pixels set to black."""
    img = Image.new("L", (width, height), fill)
    pixels = img.load()
    for x, y in black:
        pixels[x, y] = 0
    return img


@pytest.fixture
def image_file(tmp_path):
    """Write a small checkerboard PNG and return its path."""
    img = Image.new("L", (4, 8), 255)
    pixels = img.load()
    for y in range(8):
        for x in range(4):
            if (x + y) % 2 == 0:
                pixels[x, y] = 0
    path = tmp_path / "checker.png"
    img.save(path)
    return path
