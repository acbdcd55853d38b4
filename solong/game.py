"""Game state: the player's position, moves, collectibles and the exit."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Sequence

from solong.mapfile import MapError

TILE_SIZE = 100
MAX_WIDTH = 2500
MAX_HEIGHT = 1400
TOO_LARGE = "La map est trop grande"

WALL = "1"
FLOOR = "0"
PLAYER = "P"
COLLECTIBLE = "C"
EXIT = "E"
_DRAWN = frozenset((WALL, FLOOR, PLAYER, COLLECTIBLE, EXIT))


class Direction(Enum):
    """A step on the grid, as (row offset, column offset)."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


class MapTooLarge(MapError):
    """Raised when the map does not fit in the largest allowed window."""


@dataclass(frozen=True)
class TileDraw:
    """One tile image to draw at pixel position (x, y)."""

    tile: str
    x: int
    y: int

    @classmethod
    def at(cls, tile: str, row: int, col: int) -> "TileDraw":
        return cls(tile, col * TILE_SIZE, row * TILE_SIZE)


def find_player(grid: Sequence[Sequence[str]]) -> tuple[int, int]:
    """Return (row, column) of the first player cell."""
    for r, line in enumerate(grid):
        for c, cell in enumerate(line):
            if cell == PLAYER:
                return r, c
    raise ValueError("the map has no player")


def window_size(grid: Sequence[Sequence[str]]) -> tuple[int, int]:
    """Return the (width, height) in pixels of the window for the map.

    The width counts one tile less than the first row's length, since
    rows carry their trailing newline.
    """
    height = len(grid) * TILE_SIZE
    width = len(grid[0]) * TILE_SIZE - TILE_SIZE
    if height > MAX_HEIGHT or width > MAX_WIDTH:
        raise MapTooLarge(TOO_LARGE)
    return width, height


class Game:
    """A running game on a checked map."""

    def __init__(self, rows: Sequence[str]) -> None:
        self.grid: list[list[str]] = [list(row) for row in rows]
        self.row, self.col = find_player(self.grid)
        self.moves = 0
        self.won = False

    @property
    def position(self) -> tuple[int, int]:
        return self.row, self.col

    def tiles(self) -> Iterator[TileDraw]:
        """Yield the drawing of every cell, row by row."""
        for r, line in enumerate(self.grid):
            for c, cell in enumerate(line):
                if cell == "\n":
                    break
                if cell in _DRAWN:
                    yield TileDraw.at(cell, r, c)

    def _cell(self, row: int, col: int) -> str:
        if 0 <= row < len(self.grid) and 0 <= col < len(self.grid[row]):
            return self.grid[row][col]
        return WALL

    def _collectibles_left(self) -> int:
        return sum(line.count(COLLECTIBLE) for line in self.grid)

    def move(self, direction: Direction) -> list[TileDraw]:
        """Move the player one step; return the tiles to redraw.

        An empty list means the player did not move.
        """
        if self.won:
            return []
        d_row, d_col = direction.value
        target_row, target_col = self.row + d_row, self.col + d_col
        target = self._cell(target_row, target_col)
        if target == WALL:
            return []
        leaving_exit = self.grid[self.row][self.col] == EXIT
        draws = [TileDraw.at(PLAYER, target_row, target_col)]
        self.moves += 1
        if leaving_exit:
            draws.append(TileDraw.at(EXIT, self.row, self.col))
        else:
            draws.append(TileDraw.at(FLOOR, self.row, self.col))
            self.grid[self.row][self.col] = FLOOR
            if target == EXIT and self._collectibles_left() == 0:
                self.won = True
        self.row, self.col = target_row, target_col
        return draws