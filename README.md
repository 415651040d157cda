# solong

A small top-down 2D game. You walk a player around a walled map, pick up
every coin, and then step onto the exit. Maps are plain text files with the
`.ber` extension; tiles are drawn from XPM images.

## Installing

```
pip install .
```

The game window is drawn with pygame.

## Playing

```
solong path/to/map.ber
```

Controls:

| Key         | Action      |
|-------------|-------------|
| `W` or `Z`  | move up     |
| `S`         | move down   |
| `A` or `Q`  | move left   |
| `D`         | move right  |
| `Esc`       | quit        |

Closing the window also ends the game. Each key press and each step is
printed, along with the running move count. A key without a direction
is not counted as a move. The exit stays closed until every coin has
been collected; stepping onto it afterwards ends the game and prints
`You won in N moves!`.

The window is the size of the map at 64 pixels per tile, capped at
1920×1080. Tile images are read from the `assets/` directory relative to
the directory the game is started from: `brickwall.xpm`,
`background.xpm`, `coin.xpm`, `player.xpm` and `exit.xpm`.

Problems are reported on standard error as `Error` followed by a message.
A wrong number of arguments or a file name without the `.ber` extension
is reported without starting the game. An unreadable or invalid map, a
window that cannot be opened, or tile images that cannot be loaded end
the command with status 1.

## Map format

A map is a rectangle of characters, one row per line:

| Character | Meaning      |
|-----------|--------------|
| `1`       | wall         |
| `0`       | floor        |
| `C`       | coin         |
| `E`       | exit         |
| `P`       | player start |

Example:

```
1111111
1P0C0E1
1111111
```

A map is accepted only when:

- the file name ends in `.ber` after a non-empty name;
- every row has the same width as the first, and the map is at least 3×3;
- the border is made entirely of walls;
- there is exactly one player, exactly one exit and at least one coin,
  and no other characters;
- every coin can be reached from the start without passing through the
  exit, and the exit itself can be reached.

## Using it as a library

The parts of the game can be used on their own:

- `solong.mapfile`: `check_ber`, `read_map_lines`, `parse_map`, and
  `GameMap` (with `from_rows`, `rows`, `in_bounds` and `cell`); problems
  raise `MapError`, a `ValueError`.
- `solong.validation`: `validate_map` and `validate_path`, which raise
  `MapError` when a check fails, and `flood_fill`, which returns the set
  of cells reachable from a start cell.
- `solong.game`: `Game`, `Key` and `Outcome`, the game rules without any
  display. `Game.handle_key` returns `Outcome.MOVED`, `BLOCKED`, `WON` or
  `QUIT`; `Game.can_move` tells whether a cell may be entered. Pass a
  callable as `echo` to receive the messages the game prints.
- `solong.xpm`: an XPM image reader (`parse_xpm`, `parse_xpm_text`,
  `load_xpm`, `split_words`, `strip_comments`), giving an `XpmImage` of
  0xAARRGGBB pixels or raising `XpmError`. A `None` colour becomes the
  value `0xFF000000`.
- `solong.colors`: `lookup_color`, the X11 colour name table; `#` names
  are read as hexadecimal, unknown names give 0 and `none` gives -1.
- `solong.pixels`: `rgb_shifts` and `get_good_color` for packing 0xRRGGBB
  colours into pixel values of a visual with the given channel masks.
- `solong.display`: `load_game`, `run`, `Renderer` (with `load` and
  `draw`), and the `main` entry point.

```python
from solong.mapfile import read_map_lines
from solong.validation import validate_map, validate_path
from solong.game import Game, Key, Outcome

game_map = read_map_lines(["11111", "1PCE1", "11111"])
validate_map(game_map)
validate_path(game_map)
game = Game(game_map)
assert game.handle_key(Key.D) is Outcome.MOVED
assert game.handle_key(Key.D) is Outcome.WON
```

## Running the tests

```
pip install .[test]
pytest
```