# solong

A small top-down tile game. Walk through a walled map, pick up every coin,
keep off the enemies and step onto the exit to win.

## Installing

```
pip install .
```

The window is drawn with pygame, which is installed with the package.

## Playing

```
solong maps/level.ber
```

The command takes exactly one argument, the path of a map file. The path
must contain a `/` (the map sits in a folder), the file name must not start
with a single `.`, and its extension must be `.ber`.

Textures are loaded from a `textures` directory in the current working
directory. It must hold these XPM images:

| File                                   | Used for                             |
|----------------------------------------|--------------------------------------|
| `pd.xpm`, `pu.xpm`, `pl.xpm`, `pr.xpm`     | player facing down, up, left, right  |
| `pd1.xpm`, `pu1.xpm`, `pl1.xpm`, `pr1.xpm` | player standing on the closed exit   |
| `e_f0.xpm`, `e_f1_2.xpm`, `e_f1_3.xpm`   | enemy animation frames               |
| `00.xpm`                               | wall (its size sets the tile size)   |
| `01.xpm`                               | floor                                |
| `coin3.xpm`                            | coin                                 |
| `door.xpm`, `door1.xpm`                  | exit closed, exit open               |

Controls:

- `W` / `Up`, `A` / `Left`, `S` / `Down`, `D` / `Right`: a press in a new
  direction turns the player to face it; a press in the direction already
  faced moves one tile, unless a wall is in the way
- `Esc` or closing the window: leave the game (prints `Exited Early.`)

Every move prints `Steps: N` on standard output, and the count is shown in
the window. Stepping onto an enemy ends the game with `You Lose.`. The exit
opens once every coin reachable from the start has been picked up; stepping
onto it then ends the game with `You Win!`.

## Map format

A map is a rectangle of characters, one row per line:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `P`  | player start |
| `C`  | coin         |
| `E`  | exit         |
| `N`  | enemy        |

Checks made when a map is loaded:

- exactly one exit and exactly one player start
- no empty line at the start of the file or between rows
- every row has the length of the first row
- the first row, the first column and the last column are walls
- only the characters above appear
- at least one coin
- the exit and every coin can be reached from the start, moving through
  tiles that are neither walls nor enemies

Any problem is reported as `Error` followed by a reason on standard error,
and the command exits with status 1. A valid map:

```
1111111
1P0C0E1
1111111
```

## Using the map and game code directly

`solong.mapfile` parses and checks maps; problems raise `MapError`.

```python
from solong.mapfile import MapError, parse_map, validate_playable
from solong.game import Direction, Game, Outcome

try:
    game_map = parse_map("11111\n1PCE1\n11111\n")
    validate_playable(game_map)
except MapError as exc:
    print(exc)
else:
    game = Game(game_map)
    game.press(Direction.RIGHT)   # turn to face right
    game.press(Direction.RIGHT)   # step onto the coin
    print(game.update())          # Outcome.PLAYING
```

- `check_map_path(path)`, `parse_map(text)`, `load_map(path)`,
  `flood_fill(rows, start)` and `validate_playable(game_map)` in
  `solong.mapfile`; `GameMap.tile(x, y)` reads one tile.
- `Game.press(direction)`, `Game.update()` and `Game.advance_enemies()` in
  `solong.game`, with the `Direction` and `Outcome` enums.
- `Textures.load(directory)`, `Renderer.draw(game)`,
  `direction_for_key(key)` and `run(game, textures_dir)` in `solong.render`.

Enemies do not move; they only cycle through their animation frames.

## Helper modules

The package also carries small text and data helpers:

- `solong.chars`: ASCII classification, case conversion, `atoi` and `itoa`
- `solong.strings`: searching, bounded copying, trimming, splitting
- `solong.memory`: operations on `bytearray` buffers
- `solong.linkedlist`: `LinkedList` and `Node`
- `solong.output`: `put_char`, `put_str`, `put_endl`, `put_nbr` on a stream
- `solong.printf`: `render_format` and `printf` for the `%d %i %u %c %s %x
  %X %p %%` conversions, raising `FormatError` on anything else

## Running the tests

```
pip install .[test]
pytest
```