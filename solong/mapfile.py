"""Reading and checking of ``.ber`` map files."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Sequence

NO_ARGUMENT = "Veuillez inserer un argument"
UNREADABLE = "le fichier n'est pas lisible"
EMPTY_OR_FOLDER = "C'est un dossier / le fichier est vide"
BAD_EXTENSION = "Mauvaise extension"
NOT_CLOSED = "la map n'est pas fermer"
NOT_RECTANGLE = "la map n'est pas rectangle"
BAD_ITEMS = "la map n'a pas les bon items"
WRONG_ITEM_COUNT = "Les items ne sont pas bons"
NO_PATH = "le chemin n'est pas valide"

_EXTENSION = ".ber"
_ALLOWED = frozenset("PEC10\n")
_WALL_ROW = frozenset("1\n")
_FILLABLE = frozenset("0CEP")
_VISITED = "A"
_LINE = re.compile(r"[^\n]*\n|[^\n]+")


class MapError(Exception):
    """Raised when a map file cannot be used."""


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return the lines of a file, each keeping its trailing newline."""
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise MapError(UNREADABLE) from exc
    return _LINE.findall(raw.decode("latin-1"))


def _ensure_file_has_content(name: str) -> None:
    try:
        with open(name, "rb") as handle:
            first = handle.read(1)
    except IsADirectoryError as exc:
        raise MapError(EMPTY_OR_FOLDER) from exc
    except OSError as exc:
        raise MapError(UNREADABLE) from exc
    if not first:
        raise MapError(EMPTY_OR_FOLDER)


def check_extension(path: str | os.PathLike[str] | None) -> None:
    """Check that ``path`` is a readable, non-empty file ending in ``.ber``."""
    if path is None:
        raise MapError(NO_ARGUMENT)
    name = os.fspath(path)
    _ensure_file_has_content(name)
    tail = name[-len(_EXTENSION):] if len(name) > len(_EXTENSION) else name
    matched = 0
    for expected in _EXTENSION:
        if matched < len(tail) and tail[matched] == expected:
            matched += 1
    if matched != len(tail):
        raise MapError(BAD_EXTENSION)


def line_width(line: str) -> int:
    """Number of characters before the first newline."""
    return len(line.partition("\n")[0])


def _check_characters(rows: Sequence[str]) -> None:
    for row in rows:
        if row[0] != "1" or row[line_width(row) - 1] != "1":
            raise MapError(NOT_CLOSED)
        if not set(row) <= _ALLOWED:
            raise MapError(BAD_ITEMS)


def _check_rectangle(rows: Sequence[str]) -> None:
    width = line_width(rows[0])
    if any(line_width(row) != width for row in rows):
        raise MapError(NOT_RECTANGLE)


def _check_walls(rows: Sequence[str]) -> None:
    for row in (rows[0], rows[-1]):
        if not set(row) <= _WALL_ROW:
            raise MapError(NOT_CLOSED)


def _check_items(rows: Sequence[str]) -> None:
    text = "".join(rows)
    if text.count("P") != 1 or text.count("E") != 1 or text.count("C") < 1:
        raise MapError(WRONG_ITEM_COUNT)


def validate_map(rows: Sequence[str]) -> bool:
    """Check the map's shape, walls and items.

    Returns False for an empty map and True for a valid one; raises
    MapError on the first problem found.
    """
    if not rows:
        return False
    _check_characters(rows)
    _check_rectangle(rows)
    _check_walls(rows)
    _check_items(rows)
    return True


def flood_fill(grid: list[list[str]], row: int, col: int) -> None:
    """Mark every cell reachable from (row, col) through open cells with 'A'."""
    pending = [(row, col)]
    while pending:
        r, c = pending.pop()
        if not (0 <= r < len(grid) and 0 <= c < len(grid[r])):
            continue
        if grid[r][c] not in _FILLABLE:
            continue
        grid[r][c] = _VISITED
        pending.extend(((r, c + 1), (r, c - 1), (r + 1, c), (r - 1, c)))


def check_reachable(rows: Sequence[str]) -> None:
    """Check that the exit and every collectible can be reached by the player."""
    grid = [list(row) for row in rows]
    for r, line in enumerate(grid):
        for c, cell in enumerate(line):
            if cell != "P":
                continue
            flood_fill(grid, r, c)
            if any("E" in cells or "C" in cells for cells in grid):
                raise MapError(NO_PATH)


def load_map(path: str | os.PathLike[str] | None) -> list[str]:
    """Read and fully check a map file, returning its lines."""
    check_extension(path)
    rows = read_lines(path)
    if validate_map(rows):
        check_reachable(rows)
    return rows