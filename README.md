# solong

A small tile-based puzzle game. You move a player around a walled map,
pick up every collectible and then walk out through the exit. Each step
you take is counted and printed to the terminal as `moves = N`.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
solong maps/map1.ber
```

The game takes exactly one argument, the path of a map file; with any
other number of arguments it prints a usage line and exits with status 1.
The path must end in `.ber` and be at least 10 characters long.

Before loading the map the game checks for its textures
(`collectible.xpm`, `exit.xpm`, `floor.xpm`, `player.xpm`, `wall.xpm`) in
a `textures/` directory below the working directory. The textures are XPM
images; each map cell is drawn with the image for its tile, and the cells
on the outer edge are always drawn as walls.

Controls:

| Key              | Action      |
|------------------|-------------|
| W / Up arrow     | move up     |
| A / Left arrow   | move left   |
| S / Down arrow   | move down   |
| D / Right arrow  | move right  |
| Esc              | quit        |

Esc or closing the window prints `Game closed`. Reaching the exit once
every collectible is gathered prints `!!!!YOU WIN!!!!`. The exit blocks
the player while collectibles remain. An invalid map, or a missing or
unreadable texture, prints the reason and exits with status 1.

## Map files

A map is a plain text file whose name ends in `.ber`. Every row must have
the same length, and the map is built from these characters:

| Char | Meaning           |
|------|-------------------|
| `1`  | wall              |
| `0`  | floor             |
| `P`  | player start      |
| `C`  | collectible       |
| `E`  | exit              |

A map is rejected (with `solong.gamemap.MapError`) when:

- it is empty, or a blank line is followed by more rows;
- its rows differ in length;
- it is smaller than 3×3 or larger than 40×22;
- it is not closed by walls on all four sides;
- it has no player, more than one player, no exit, more than one exit,
  or no collectibles;
- it contains any other character;
- not every collectible and the exit can be reached from the start
  (the exit can be reached but not walked through).

Example:

```
1111111
1P0C0E1
1111111
```

## Using it as a library

```python
from solong.gamemap import load_map
from solong.game import Game, Key, Outcome

game_map = load_map("maps/map1.ber")
game = Game(game_map)
outcome = game.handle_key(Key.D)   # Outcome.MOVED, BLOCKED, WON, QUIT or IGNORED
```

- `solong.gamemap`: `load_map`, `validate_path`, `read_rows`, `parse_rows`,
  the `GameMap` class (`tile(x, y)`, `reachable()`), `Tile` and `MapError`.
- `solong.game`: `Game` (`move(dx, dy)`, `handle_key(key)`), `Key` and `Outcome`.
- `solong.app`: `main`, `Renderer` (`draw_all()`, `draw_cell(x, y)`),
  `check_textures` and `load_textures`.
- `solong.xpm`: reading XPM images (`read_xpm`, `parse_xpm`, `parse_xpm_text`,
  `XpmImage`, `XpmError`, plus `split_words`, `strip_comments`, `text_to_rgb`);
  `solong.colors.lookup_color` resolves X11 colour names.
- `solong.lines`: reading a text or binary stream line by line in fixed-size
  chunks (`LineReader`, `iter_lines`).
- `solong.printf`: formatting `%c %s %d %i %u %x %X %p %%`
  (`render_format`, `printf`).
- `solong.charconv`: character classes and case (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `to_lower`, `to_upper`) and
  `atoi` / `itoa`.
- `solong.strutil`: bounded string copy and search helpers (`split`, `strchr`,
  `strrchr`, `striteri`, `strjoin`, `strlcat`, `strlcpy`, `strmapi`, `strncmp`,
  `strnstr`, `strtrim`, `substr`).
- `solong.output`: writing to a text stream (`put_char`, `put_str`,
  `put_endl`, `put_nbr`).

## What it does not do

The package has no helpers for raw byte buffers (zeroing, copying,
comparing or searching memory); Python's `bytes`, `bytearray` and
`memoryview` cover that.