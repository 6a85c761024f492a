import math

import numpy as np

# Perceived brightness weights, see
# https://www.nbdtech.com/Blog/archive/2008/04/27/calculating-the-perceived-brightness-of-a-color.aspx
RED_WEIGHT = 0.241
GREEN_WEIGHT = 0.691
BLUE_WEIGHT = 0.068

MAX_BRIGHTNESS = 255 * math.sqrt(RED_WEIGHT + GREEN_WEIGHT + BLUE_WEIGHT)


def get_brightness(pixel: tuple[int, ...]) -> float:
    """Perceived brightness of an RGB(A) pixel in [0, MAX_BRIGHTNESS]. Alpha is ignored."""
    r, g, b = pixel[:3]
    return math.sqrt(r * r * RED_WEIGHT + g * g * GREEN_WEIGHT + b * b * BLUE_WEIGHT)


def brightness_grid(rgba: np.ndarray) -> np.ndarray:
    """Perceived brightness for every pixel of an (H, W, 3 or 4) array."""
    arr = np.asarray(rgba, dtype=np.float64)
    r, g, b = arr[..., 0], arr[..., 1], arr[..., 2]
    return np.sqrt(r * r * RED_WEIGHT + g * g * GREEN_WEIGHT + b * b * BLUE_WEIGHT)


def palette_indices(brightness: np.ndarray, palette_length: int) -> np.ndarray:
    """Map brightness values onto palette indices.

    Values are scaled by 255 rather than MAX_BRIGHTNESS and rounded half to
    even; the result is clipped because bright pixels can round one past the
    last glyph.
    """
    index = np.rint(np.asarray(brightness, dtype=np.float64) / 255 * (palette_length - 1))
    return np.clip(index, 0, palette_length - 1).astype(np.intp)
