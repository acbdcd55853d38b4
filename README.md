# solong

A small top-down puzzle game. The player walks around a rectangular map,
picks up every collectible and then steps onto the exit. The number of
moves is printed after each step, and the final count is announced when
the level is won.

## Installing

```
pip install .
```

The game window is drawn with pygame.

## Playing

```
solong path/to/level.ber
```

The game loads its tile pictures from a folder named `xpm` in the current
working directory. It expects these XPM files there:

| Tile        | File           |
|-------------|----------------|
| wall        | `Brick100.xpm` |
| floor       | `sol100.xpm`   |
| collectible | `bones100.xpm` |
| player      | `crane100.xpm` |
| exit        | `coeur100.xpm` |

The package does not ship these pictures; supply your own. Each one is
drawn at a 100-pixel grid step.

Controls:

| Key   | Action     |
|-------|------------|
| W     | move up    |
| A     | move left  |
| S     | move down  |
| D     | move right |
| Esc   | quit       |

Closing the window also quits. After each move the move count is printed
on standard output; when the player reaches the exit with no collectible
left, `BRAVO, tu as gagner en N coups` is printed and the game ends.
Standing on the exit before everything is collected is allowed; the exit
stays in place when the player walks off it.

## Map files

A map is a plain-text file with the `.ber` extension. Each line is one
row of tiles:

| Char | Tile        |
|------|-------------|
| `1`  | wall        |
| `0`  | open floor  |
| `P`  | player      |
| `C`  | collectible |
| `E`  | exit        |

Example:

```
1111111
1P0C0E1
1111111
```

A map is rejected when:

- no file name is given, the file cannot be read, is empty, or is a
  directory;
- the name does not end in `.ber`;
- a row does not start and end with a wall;
- it contains any character other than those above;
- its rows are not all the same length;
- its first or last row is not made entirely of walls;
- it does not have exactly one player, exactly one exit and at least one
  collectible;
- the player cannot reach every collectible and the exit;
- the window it needs is wider than 2500 or taller than 1400 pixels.

On rejection, `Error` and a message (in French) are written to standard
error and the command exits with status 1. Giving more than one argument
is also an error.

## Using it as a library

The pieces of the game can be used on their own:

- `solong.mapfile.load_map(path)` reads and validates a map, returning its
  lines and raising `MapError` on failure. `validate_map(rows)`,
  `check_reachable(rows)`, `check_extension(path)`, `read_lines(path)` and
  `flood_fill(grid, row, col)` are the individual steps.
- `solong.game.Game(rows)` holds the game state (`grid`, `position`,
  `moves`, `won`). `Game.move(direction)` applies a `Direction` and returns
  the `TileDraw` items to redraw (empty if the move was blocked);
  `Game.tiles()` yields the drawing of the whole map.
  `window_size(grid)` gives the window size in pixels and raises
  `MapTooLarge` when it is over the limit; `find_player(grid)` locates the
  player.
- `solong.app.run(rows, assets_dir)` opens the pygame window and plays a
  checked map, returning the number of moves; `solong.app.main(argv)` is
  the command-line entry point; `direction_for_key(key)` maps key codes to
  directions.
- `solong.xpm.xpm_from_file(path)` and `xpm_from_data(rows)` decode XPM
  pictures into an `Image` of 0xAARRGGBB pixels (`pixel`, `set_pixel`,
  `data`); `XpmError` is raised on bad input.
- `solong.colors.lookup_color(name)` resolves X11 colour names, and
  `text_to_rgb(name, suffix)` reads XPM colour specifications.
- `solong.pixels.PixelFormat.from_masks(...)` describes a visual's channel
  layout, and `encode(color)` turns 0xRRGGBB colours into its pixel values.
- `solong.printf.format_string(template, *args)` formats a string with the
  `%c %s %d %i %u %x %X %p %%` conversions; `printf` writes it to a stream.

## Running the tests

```
pip install .[test]
pytest
```