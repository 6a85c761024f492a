from enum import IntEnum
from types import MappingProxyType

from asciicreator.engine import RESERVED
from asciicreator.errors import InvalidPalette, InvalidSelector


class Palette(IntEnum):
    DEFAULT = 0
    LOW_CONTRAST = 1
    HIGH_CONTRAST = 2
    HIGH_CONTRAST_TWO = 3
    HIGH_COLOR_RANGE = 4


# Ramps run from the emptiest glyph to the densest one. The hints below are
# starting points, the best ramp depends on the picture.
PALETTES = MappingProxyType(
    {
        Palette.DEFAULT: " .░▒▓█",  # icons and sprites
        Palette.LOW_CONTRAST: " .░▒▒▒▓▓▓████",  # dark or low contrast images
        Palette.HIGH_CONTRAST: " .░▒▓▓█",
        Palette.HIGH_CONTRAST_TWO: " .░░▒▓█",
        Palette.HIGH_COLOR_RANGE: "  .░░░░▒▒▒▒▓▓▓██████",
    }
)


def palette_names() -> list[str]:
    """CLI spellings of the palette names, e.g. ``high-contrast-two``."""
    return [p.name.lower().replace("_", "-") for p in Palette]


def _lookup_name(name: str) -> Palette:
    key = name.strip().replace("-", "").replace("_", "").lower()
    for palette in Palette:
        if palette.name.replace("_", "").lower() == key:
            return palette
    raise InvalidSelector(f"Unknown palette: {name!r} (choose from {', '.join(palette_names())})")


def get_palette(selector: Palette | int | str) -> str:
    """Return the character ramp for a palette selector.

    Accepts a ``Palette``, its integer value or its name in any of the usual
    spellings (``HighContrastTwo``, ``high-contrast-two``, ``HIGH_CONTRAST_TWO``).
    """
    if isinstance(selector, str):
        return PALETTES[_lookup_name(selector)]
    if isinstance(selector, bool) or not isinstance(selector, int):
        raise InvalidSelector(f"Palette selector must be a Palette, int or name, not {type(selector).__name__}")
    try:
        palette = Palette(selector)
    except ValueError as exc:
        raise InvalidSelector(f"Palette selector out of range: {int(selector)}") from exc
    return PALETTES[palette]


def validate_palette(ramp: str) -> str:
    """Check a custom ramp can drive the quantizer and return it unchanged."""
    if not isinstance(ramp, str) or len(ramp) < 2:
        raise InvalidPalette(f"A palette needs at least two characters, got {ramp!r}")
    reserved = sorted(set(ramp) & RESERVED)
    if reserved:
        raise InvalidPalette(f"Palette contains reserved characters: {reserved!r}")
    return ramp


def resolve_palette(selector: Palette | int | str, charset: str | None = None) -> str:
    """Ramp to quantize with: the custom ``charset`` if given, else the selected palette."""
    if charset is not None:
        return validate_palette(charset)
    return get_palette(selector)
