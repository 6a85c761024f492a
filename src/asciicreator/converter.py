import logging
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from asciicreator.charsets import Palette, resolve_palette
from asciicreator.config import Config
from asciicreator.engine import GRID_DTYPE, OUTLINE_CHAR, TRANSPARENT, build_grid
from asciicreator.errors import ImageLoadError
from asciicreator.outline import generate_outlines
from asciicreator.renderer import CELL_REPEAT, render, render_lines
from asciicreator.sampling import brightness_grid, palette_indices

logger = logging.getLogger(__name__)

# Glyphs too dark to be worth drawing; they are blanked with the transparent cells.
BLANK_CHARS = "."


def load_image(source: Image.Image | str | Path) -> Image.Image:
    """Open ``source`` as an RGBA image, raising ImageLoadError if it can't be decoded."""
    if isinstance(source, Image.Image):
        return source.convert("RGBA")
    path = Path(source)
    try:
        with Image.open(path) as image:
            return image.convert("RGBA")
    except FileNotFoundError as exc:
        raise ImageLoadError(f"File not found: {path}") from exc
    except UnidentifiedImageError as exc:
        raise ImageLoadError(f"Not a supported image: {path}") from exc
    except OSError as exc:
        raise ImageLoadError(f"Could not read {path}: {exc}") from exc


def quantize(grid: np.ndarray, rgba: np.ndarray, palette: str, use_outline: bool = False) -> np.ndarray:
    """Write a palette glyph for every pixel of ``rgba`` into ``grid`` in place.

    ``rgba`` is an (H, W, 3) or (H, W, 4) array. Fully transparent pixels stay
    TRANSPARENT. With an outline the image is placed one cell in from every
    edge and the border ring is left untouched.
    """
    rgba = np.asarray(rgba)
    if rgba.ndim != 3 or rgba.shape[2] not in (3, 4):
        raise ValueError(f"Expected an RGB or RGBA array of shape (H, W, 3|4), got {rgba.shape}")
    height, width = rgba.shape[:2]
    offset = 1 if use_outline else 0
    expected = (height + 2 * offset, width + 2 * offset)
    if grid.shape != expected:
        raise ValueError(f"Grid of shape {grid.shape} does not fit a {width}x{height} image, expected {expected}")

    glyphs = np.array(list(palette), dtype=GRID_DTYPE)
    cells = glyphs[palette_indices(brightness_grid(rgba), len(palette))]
    if rgba.shape[2] == 4:
        cells[rgba[..., 3] == 0] = TRANSPARENT

    grid[offset : offset + height, offset : offset + width] = cells
    return grid


def normalize(grid: np.ndarray) -> np.ndarray:
    """Replace transparent cells and near-black glyphs with spaces, in place."""
    blank = (grid == TRANSPARENT) | np.isin(grid, list(BLANK_CHARS))
    grid[blank] = " "
    return grid


def _convert(image: Image.Image, palette: str, use_outline: bool, outline_char: str) -> np.ndarray:
    rgba = np.asarray(image.convert("RGBA"))
    height, width = rgba.shape[:2]
    logger.debug("converting %dx%d image with palette %r, outline=%s", width, height, palette, use_outline)

    grid = build_grid(height, width, use_outline)
    quantize(grid, rgba, palette, use_outline)
    if use_outline:
        generate_outlines(grid, outline_char)
    return normalize(grid)


def image_to_grid(
    image: Image.Image | str | Path,
    palette: Palette | int | str = Palette.DEFAULT,
    use_outline: bool = False,
    charset: str | None = None,
    outline_char: str = OUTLINE_CHAR,
) -> np.ndarray:
    return _convert(load_image(image), resolve_palette(palette, charset), use_outline, outline_char)


def image_to_ascii(
    image: Image.Image | str | Path,
    palette: Palette | int | str = Palette.DEFAULT,
    use_outline: bool = False,
    charset: str | None = None,
    outline_char: str = OUTLINE_CHAR,
) -> str:
    """Convert an image to ASCII art, each cell printed ``CELL_REPEAT`` times wide."""
    grid = image_to_grid(image, palette, use_outline, charset, outline_char)
    return "\n".join(render_lines(grid))


def create_image(config: Config) -> np.ndarray:
    """Run a full conversion: load, convert, then print and save the result.

    The palette is resolved before the image is opened so a bad selector
    fails before any work is done. Returns the finished grid.
    """
    palette = config.resolve_palette()
    image = load_image(config.image_source)
    grid = _convert(image, palette, config.use_outline, config.outline_char)
    render(grid, config.destination, echo=config.echo)
    logger.debug("rendered %d rows of %d columns", grid.shape[0], grid.shape[1] * CELL_REPEAT)
    return grid
