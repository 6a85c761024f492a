import logging
import sys
from pathlib import Path
from typing import TextIO

import numpy as np

from asciicreator.errors import IoWriteError

logger = logging.getLogger(__name__)

# Terminal glyphs are roughly twice as tall as they are wide, so every cell is
# printed twice to keep pixels square.
CELL_REPEAT = 2


def render_lines(grid: np.ndarray) -> list[str]:
    return ["".join(char * CELL_REPEAT for char in row) for row in grid.tolist()]


def _write_rows(lines: list[str], sinks: list[TextIO]) -> None:
    for line in lines:
        for sink in sinks:
            sink.write(line)
            sink.write("\n")


def render(
    grid: np.ndarray,
    destination: str | Path | None = None,
    stream: TextIO | None = None,
    echo: bool = True,
) -> list[str]:
    """Write the grid to the console and to the ``destination`` text file in one pass.

    ``stream`` defaults to stdout; with ``echo`` off only the file is written.
    Returns the rendered rows.
    """
    lines = render_lines(grid)
    sinks = [stream if stream is not None else sys.stdout] if echo else []

    if destination is None:
        _write_rows(lines, sinks)
        return lines

    path = Path(destination)
    try:
        with path.open("w", encoding="utf-8", newline="\n") as f:
            _write_rows(lines, sinks + [f])
    except OSError as exc:
        raise IoWriteError(f"Could not write {path}: {exc.strerror or exc}") from exc

    logger.debug("wrote %d rows to %s", len(lines), path)
    return lines
