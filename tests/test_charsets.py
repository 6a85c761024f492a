import pytest

from asciicreator.charsets import PALETTES, Palette, get_palette, palette_names, resolve_palette, validate_palette
from asciicreator.engine import EDGE_CANDIDATE, TRANSPARENT
from asciicreator.errors import InvalidPalette, InvalidSelector


def test_every_palette_is_registered():
    assert set(PALETTES) == set(Palette)


@pytest.mark.parametrize("palette", list(Palette))
def test_palettes_have_at_least_two_characters(palette):
    assert len(PALETTES[palette]) >= 2


@pytest.mark.parametrize("palette", list(Palette))
def test_palettes_avoid_reserved_cells(palette):
    ramp = PALETTES[palette]
    assert TRANSPARENT not in ramp
    assert EDGE_CANDIDATE not in ramp


def test_palettes_start_blank():
    for ramp in PALETTES.values():
        assert ramp[0] == " "


def test_get_palette_by_enum_and_int():
    assert get_palette(Palette.DEFAULT) == " .░▒▓█"
    assert get_palette(1) == " .░▒▒▒▓▓▓████"
    assert get_palette(4) == "  .░░░░▒▒▒▒▓▓▓██████"


@pytest.mark.parametrize("name", ["HighContrastTwo", "high-contrast-two", "HIGH_CONTRAST_TWO", " high_contrast_two "])
def test_get_palette_by_name(name):
    assert get_palette(name) == " .░░▒▓█"


@pytest.mark.parametrize("selector", [-1, 5, 99, "sepia", "", 1.0, None, True])
def test_get_palette_rejects_unknown_selectors(selector):
    with pytest.raises(InvalidSelector):
        get_palette(selector)


def test_invalid_selector_is_a_value_error():
    with pytest.raises(ValueError, match="out of range"):
        get_palette(7)


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        PALETTES[Palette.DEFAULT] = "ab"


def test_palette_names_match_cli_spelling():
    assert palette_names() == ["default", "low-contrast", "high-contrast", "high-contrast-two", "high-color-range"]


def test_validate_palette_accepts_custom_ramp():
    assert validate_palette(" .:-=+*#") == " .:-=+*#"


@pytest.mark.parametrize("ramp", ["", "#", "a" + TRANSPARENT, EDGE_CANDIDATE + "#"])
def test_validate_palette_rejects_unusable_ramps(ramp):
    with pytest.raises(InvalidPalette):
        validate_palette(ramp)


def test_resolve_palette_prefers_charset():
    assert resolve_palette(Palette.LOW_CONTRAST, " #") == " #"
    assert resolve_palette(Palette.LOW_CONTRAST) == " .░▒▒▒▓▓▓████"


def test_resolve_palette_validates_charset_and_selector():
    with pytest.raises(InvalidPalette):
        resolve_palette(Palette.DEFAULT, "#")
    with pytest.raises(InvalidSelector):
        resolve_palette(42)
