"""The windowed game and its command-line entry point."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

import pygame

from solong.game import Direction, Game, window_size
from solong.mapfile import MapError, load_map
from solong.printf import printf
from solong.xpm import Image, XpmError, xpm_from_file

KEY_UP = 119
KEY_DOWN = 115
KEY_LEFT = 97
KEY_RIGHT = 100

TOO_MANY_ARGUMENTS = "trop d'argument"
TITLE = "SO_LONG"
ASSETS_DIR = "xpm"

TILE_FILES = {
    "1": "Brick100.xpm",
    "0": "sol100.xpm",
    "C": "bones100.xpm",
    "P": "crane100.xpm",
    "E": "coeur100.xpm",
}

_KEYS = {
    KEY_UP: Direction.UP,
    KEY_DOWN: Direction.DOWN,
    KEY_LEFT: Direction.LEFT,
    KEY_RIGHT: Direction.RIGHT,
}


def direction_for_key(key: int) -> Direction | None:
    """Return the direction bound to a key code, or None."""
    return _KEYS.get(key)


def _surface(image: Image) -> pygame.Surface:
    data = bytearray()
    for value in image.pixels:
        data += bytes(((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF))
    return pygame.image.frombuffer(data, (image.width, image.height), "RGB").copy()


def run(rows: Sequence[str], assets_dir: str | Path) -> int:
    """Play the map in a window until it is won or closed.

    Returns the number of moves made.
    """
    game = Game(rows)
    size = window_size(game.grid)
    folder = Path(assets_dir)
    images = {tile: xpm_from_file(folder / name) for tile, name in TILE_FILES.items()}

    pygame.init()
    try:
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption(TITLE)
        surfaces = {tile: _surface(image) for tile, image in images.items()}
        for draw in game.tiles():
            screen.blit(surfaces[draw.tile], (draw.x, draw.y))
        pygame.display.flip()
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return game.moves
                if event.type != pygame.KEYDOWN:
                    continue
                if event.key == pygame.K_ESCAPE:
                    return game.moves
                direction = direction_for_key(event.key)
                if direction is None:
                    continue
                draws = game.move(direction)
                if not draws:
                    continue
                for draw in draws:
                    screen.blit(surfaces[draw.tile], (draw.x, draw.y))
                pygame.display.flip()
                printf("%d\n", game.moves)
                if game.won:
                    printf("BRAVO, tu as gagner en %d coups\n", game.moves)
                    return game.moves
            clock.tick(60)
    finally:
        pygame.quit()


def _fail(message: str) -> int:
    sys.stderr.write(f"Error\n{message}")
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Check the map named on the command line and play it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) > 1:
        return _fail(TOO_MANY_ARGUMENTS)
    try:
        rows = load_map(args[0] if args else None)
        run(rows, ASSETS_DIR)
    except (MapError, XpmError) as exc:
        return _fail(str(exc))
    return 0