"""Reading and validating ``.ber`` map files."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

WALL = "1"
EMPTY = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"

MAP_EXTENSION = ".ber"


class MapError(Exception):
    """Raised when the arguments or the map file are not acceptable."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


def check_arguments(args: Sequence[str]) -> str:
    """Return the single map path in ``args``, checking its extension.

    The extension is everything from the first dot of the path and must be
    exactly ``.ber``.
    """
    if len(args) != 1:
        raise MapError("parameter error!")
    path = args[0]
    dot = path.find(".")
    if dot == -1 or path[dot:] != MAP_EXTENSION:
        raise MapError("check extension!")
    return path


def read_lines(path: str | Path) -> list[str]:
    """Return the lines of the file at ``path`` without their newlines.

    A final newline does not start another line. An unreadable file raises
    :class:`MapError`.
    """
    try:
        text = Path(path).read_bytes().decode("latin-1")
    except OSError as exc:
        raise MapError("map not found!") from exc
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


def count_elements(rows: Sequence[str]) -> dict[str, int]:
    """Count exits, players, collectibles and unknown tiles of the inner rows.

    The first and last rows are not counted. The result has the keys
    ``"C"``, ``"E"``, ``"P"`` and ``"other"``.
    """
    counts = {COLLECTIBLE: 0, EXIT: 0, PLAYER: 0, "other": 0}
    for row in rows[1:-1]:
        for tile in row:
            if tile in (COLLECTIBLE, EXIT, PLAYER):
                counts[tile] += 1
            elif tile not in (EMPTY, WALL):
                counts["other"] += 1
    return counts


def _is_rectangle(rows: Sequence[str]) -> bool:
    height = len(rows)
    if height < 3:
        return False
    return height != len(rows[0])


def _lines_match(rows: Sequence[str]) -> bool:
    width = len(rows[0])
    return all(len(row) == width for row in rows[1:])


def _walls_closed(rows: Sequence[str]) -> bool:
    last = len(rows) - 1
    for index, row in enumerate(rows):
        if index in (0, last):
            if any(tile != WALL for tile in row):
                return False
        elif row[:1] != WALL or row[-1:] != WALL:
            return False
    return True


def _elements_valid(rows: Sequence[str]) -> bool:
    counts = count_elements(rows)
    return (
        counts[COLLECTIBLE] != 0
        and counts[EXIT] != 0
        and counts[PLAYER] == 1
        and counts["other"] == 0
    )


def validate_map(rows: Sequence[str]) -> None:
    """Check ``rows`` as a playable map, raising :class:`MapError` if not."""
    if not _is_rectangle(rows):
        raise MapError("The map must be rectangular!")
    if not _lines_match(rows):
        raise MapError("check length of lines!")
    if not _walls_closed(rows):
        raise MapError("The map must be closed/surrounded by walls!")
    if not _elements_valid(rows):
        raise MapError("map must contain at least 1 E, 1 C, and 1 P!")


def load_map(path: str | Path) -> list[str]:
    """Read and validate the map at ``path`` and return its rows."""
    rows = read_lines(path)
    if not rows:
        raise MapError("map not found!")
    validate_map(rows)
    return rows