import numpy as np
import pytest

from models.color import Color
from models.image import Image

TARGET = Color(10, 10, 10)
BACKGROUND = Color(200, 200, 200)


def make_image(height, width, color=BACKGROUND, channels=3):
    pixels = np.zeros((height, width, channels), dtype=np.uint8)
    pixels[..., :3] = color.as_rgb()
    if channels == 4:
        pixels[..., 3] = 255
    return Image(pixels=pixels)


def paint(image, points, color=TARGET):
    for x, y in points:
        image.pixels[y, x, :3] = color.as_rgb()
    return image


def block(x0, y0, size):
    return [(x, y) for y in range(y0, y0 + size) for x in range(x0, x0 + size)]


@pytest.fixture
def two_blocks_image():
    """12x12 background with two separated 3x3 target blocks."""
    img = make_image(12, 12)
    paint(img, block(1, 1, 3))
    paint(img, block(7, 6, 3))
    return img
