"""Outline detection on a quantized character grid.

A transparent cell becomes part of the outline when one of its four
axis-aligned neighbours holds a glyph. The grid is swept once per direction;
hits are recorded as EDGE_CANDIDATE so a later sweep never mistakes a fresh
outline cell for part of the picture, then a final pass swaps the candidates
for the outline glyph.
"""

import logging

import numpy as np

from asciicreator.engine import EDGE_CANDIDATE, OUTLINE_CHAR, RESERVED, TRANSPARENT, is_opaque

logger = logging.getLogger(__name__)

# (name, axis, neighbour offset) in sweep order
SWEEPS = [
    ("up", 0, 1),  # cell below
    ("down", 0, -1),  # cell above
    ("left", 1, 1),  # cell to the right
    ("right", 1, -1),  # cell to the left
]


def _neighbour_opaque(grid: np.ndarray, axis: int, offset: int) -> np.ndarray:
    """For each cell, whether its neighbour at ``offset`` along ``axis`` holds a glyph.

    Cells on the edge facing ``offset`` have no neighbour and get False.
    """
    opaque = is_opaque(grid)
    pad_widths = [(0, 0), (0, 0)]
    pad_widths[axis] = (0, 1) if offset > 0 else (1, 0)
    padded = np.pad(opaque, pad_widths, constant_values=False)

    slices = [slice(None), slice(None)]
    slices[axis] = slice(1, None) if offset > 0 else slice(0, -1)
    return padded[tuple(slices)]


def sweep(grid: np.ndarray, axis: int, offset: int) -> int:
    """Mark transparent cells whose neighbour in one direction is opaque. Returns the number marked."""
    hits = (grid == TRANSPARENT) & _neighbour_opaque(grid, axis, offset)
    grid[hits] = EDGE_CANDIDATE
    return int(hits.sum())


def finalize(grid: np.ndarray, outline_char: str = OUTLINE_CHAR) -> int:
    """Replace every edge candidate with ``outline_char``. Returns the number replaced."""
    candidates = grid == EDGE_CANDIDATE
    grid[candidates] = outline_char
    return int(candidates.sum())


def generate_outlines(grid: np.ndarray, outline_char: str = OUTLINE_CHAR) -> np.ndarray:
    """Draw an outline around every opaque region of ``grid`` in place and return it."""
    if len(outline_char) != 1 or outline_char in RESERVED:
        raise ValueError(f"Outline character must be a single printable character, got {outline_char!r}")

    for name, axis, offset in SWEEPS:
        marked = sweep(grid, axis, offset)
        logger.debug("outline sweep %s marked %d cells", name, marked)
    total = finalize(grid, outline_char)
    logger.debug("outline drawn with %d cells", total)
    return grid
