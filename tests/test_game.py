import pytest

from solong.game import (
    TILE_SIZE,
    Direction,
    Game,
    MapTooLarge,
    TileDraw,
    find_player,
    window_size,
)
from solong.mapfile import MapError

SIMPLE = ["11111\n", "1PCE1\n", "11111\n"]
EXIT_FIRST = ["11111\n", "1PEC1\n", "11111\n"]


def test_find_player():
    assert find_player(SIMPLE) == (1, 1)


def test_find_player_missing():
    with pytest.raises(ValueError):
        find_player(["111\n", "101\n", "111\n"])


def test_window_size_uses_tiles():
    width, height = window_size(SIMPLE)
    assert height == len(SIMPLE) * TILE_SIZE
    assert width == (len(SIMPLE[0]) - 1) * TILE_SIZE


def test_window_too_large():
    rows = ["11111\n"] * 15
    with pytest.raises(MapTooLarge) as info:
        window_size(rows)
    assert str(info.value) == "La map est trop grande"
    assert isinstance(info.value, MapError)


def test_tiles_cover_grid_without_newlines():
    game = Game(SIMPLE)
    drawn = list(game.tiles())
    assert len(drawn) == sum(len(row) - 1 for row in SIMPLE)
    assert drawn[0] == TileDraw("1", 0, 0)
    assert TileDraw("P", TILE_SIZE, TILE_SIZE) in drawn
    assert all(d.tile != "\n" for d in drawn)


def test_blocked_move():
    game = Game(SIMPLE)
    assert game.move(Direction.UP) == []
    assert game.moves == 0
    assert game.position == (1, 1)


def test_normal_move_clears_cell():
    game = Game(SIMPLE)
    draws = game.move(Direction.RIGHT)
    assert draws == [
        TileDraw("P", 2 * TILE_SIZE, TILE_SIZE),
        TileDraw("0", TILE_SIZE, TILE_SIZE),
    ]
    assert game.moves == 1
    assert game.position == (1, 2)
    assert game.grid[1][1] == "0"
    assert not game.won


def test_reaching_exit_after_collecting_wins():
    game = Game(SIMPLE)
    game.move(Direction.RIGHT)
    game.move(Direction.RIGHT)
    assert game.won
    assert game.moves == 2
    assert game.move(Direction.LEFT) == []
    assert game.moves == 2


def test_exit_with_collectibles_left_keeps_playing():
    game = Game(EXIT_FIRST)
    game.move(Direction.RIGHT)
    assert not game.won
    draws = game.move(Direction.RIGHT)
    assert draws[1] == TileDraw("E", 2 * TILE_SIZE, TILE_SIZE)
    assert game.grid[1][2] == "E"
    game.move(Direction.LEFT)
    assert game.won
    assert game.moves == 3