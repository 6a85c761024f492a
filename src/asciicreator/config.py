from dataclasses import dataclass
from pathlib import Path

from asciicreator.charsets import Palette, resolve_palette
from asciicreator.engine import OUTLINE_CHAR


@dataclass(frozen=True)
class Config:
    """Settings for a single conversion run."""

    image_source: str | Path
    destination: str | Path | None = None
    palette: Palette | int | str = Palette.DEFAULT
    use_outline: bool = False
    charset: str | None = None  # custom ramp, takes precedence over palette
    outline_char: str = OUTLINE_CHAR
    echo: bool = True  # mirror the result to stdout

    def resolve_palette(self) -> str:
        return resolve_palette(self.palette, self.charset)
