import numpy as np
import pytest
from PIL import Image

from asciicreator.engine import GRID_DTYPE, TRANSPARENT

# "@" stands in for a transparent cell when writing grids by hand
_HAND_TRANSPARENT = "@"


def make_grid(*rows: str) -> np.ndarray:
    """Build a grid from strings, "@" marking transparent cells."""
    cells = [[TRANSPARENT if c == _HAND_TRANSPARENT else c for c in row] for row in rows]
    return np.array(cells, dtype=GRID_DTYPE)


def make_rgba(width, height, colour=(0, 0, 0, 0)):
    return Image.new("RGBA", (width, height), colour)


@pytest.fixture
def sprite():
    """5x4 transparent image with an opaque mid-grey 3x2 rectangle at (1, 1)."""
    img = make_rgba(5, 4)
    pixels = img.load()
    for y in range(1, 3):
        for x in range(1, 4):
            pixels[x, y] = (128, 128, 128, 255)
    return img


@pytest.fixture
def sprite_path(tmp_path, sprite):
    path = tmp_path / "sprite.png"
    sprite.save(path)
    return path
