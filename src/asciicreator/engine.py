import numpy as np

# Cell states that are never printed. Private use code points: no palette glyph
# or space read back from a text file can produce them, and numpy keeps them
# in a "<U1" cell (it strips trailing NULs).
TRANSPARENT = "\ue000"
EDGE_CANDIDATE = "\ue001"
RESERVED = frozenset((TRANSPARENT, EDGE_CANDIDATE))

OUTLINE_CHAR = "█"
GRID_DTYPE = "<U1"


def build_grid(height: int, width: int, use_outline: bool = False) -> np.ndarray:
    """Allocate the character grid for an image, every cell transparent.

    With an outline the grid gets a one-cell border on every side so there is
    room to draw around shapes touching the image edge.
    """
    if height < 0 or width < 0:
        raise ValueError(f"Grid size must not be negative: {height}x{width}")
    if use_outline:
        height += 2
        width += 2
    return np.full((height, width), TRANSPARENT, dtype=GRID_DTYPE)


def is_opaque(grid: np.ndarray) -> np.ndarray:
    """Boolean mask of cells holding a glyph rather than a reserved state."""
    return (grid != TRANSPARENT) & (grid != EDGE_CANDIDATE)
