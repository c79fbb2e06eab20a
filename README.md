# solong

A small top-down puzzle game. You walk a player around a walled map, pick up
every coin, and leave through the gate once it opens. Each step is counted.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window.

## Playing

```
solong path/to/level.ber
```

The plain edition prints `counter: N` to standard output at the start and
after every step.

The bonus edition shows the move count in a header bar at the top of the
window instead, animates the player, and places enemies at random on empty
floor. Walking into an enemy ends the game:

```
solong-bonus path/to/level.ber
```

Controls: `A` / `D` / `W` / `S` move left, right, up and down. Reaching the
open gate, or being caught, ends the game with status 0. Closing the window
also exits with status 0; `Esc` exits with status 1.

Tile images are read from `images/<name>.xpm` relative to the current working
directory (`back`, `wall`, `gate`, `coin`, `open_gate`, `player`,
`player_2` to `player_4`, `en_1`, `en_4`). Any image that cannot be loaded is
drawn as a plain coloured square, so the game is playable without them.

## Map files

Exactly one argument is accepted: the path of the map. Everything from the
first `.` in that path must be exactly `.ber`, so `maps/level.ber` is
accepted but `./level.ber` or `level.v2.ber` are not.

A map is a text file with one row per line:

| Character | Meaning         |
|-----------|-----------------|
| `1`       | wall            |
| `0`       | floor           |
| `C`       | coin            |
| `E`       | exit gate       |
| `P`       | player start    |

A map is only accepted when:

- it has at least three rows and is not square (row count differs from row
  length),
- every row has the same length,
- the first and last rows are all walls, and every other row starts and ends
  with a wall,
- it holds exactly one `P`, at least one `E`, at least one `C`, and no other
  characters.

Example:

```
1111111111111
10010000000C1
1000011111001
1P0011E000001
1111111111111
```

If a check fails, or the file cannot be read, the game writes `Error:` and a
reason to standard error and exits with status 1.

## Using it as a library

- `solong.mapfile`: `check_arguments(args)`, `read_lines(path)`,
  `count_elements(rows)`, `validate_map(rows)` and `load_map(path)`; all
  problems are raised as `MapError`.
- `solong.game`: `Game(grid, bonus=False, rng=None)` holds the state.
  `Game.move(direction)` takes a `Direction` and returns a `MoveResult`
  (`MOVED`, `BLOCKED`, `WON` or `CAUGHT`). It also offers
  `collectibles_left()`, `gate_open()`, `enemy_at(row, col)`,
  `spawn_enemies()`, `tick()`, `player_frame()` and `enemy_frame()`, and the
  `moves`, `player`, `enemies` and `rows` attributes.
  `direction_for_key(keycode)` maps the numeric key codes 0, 1, 2 and 13 to
  left, down, right and up.
- `solong.display`: `Renderer(game, surface)` draws a game onto a pygame
  surface with `draw()`; `run(path, bonus=False)` opens the window and plays;
  `main(argv=None)` and `main_bonus(argv=None)` are the two commands.

```python
from solong.mapfile import load_map, MapError
from solong.game import Game, Direction

rows = load_map("level.ber")       # raises MapError on a bad map
game = Game(rows, bonus=False, rng=None)
result = game.move(Direction.RIGHT)
print(result, game.collectibles_left(), game.gate_open())
```

## Running the tests

```
pip install .[test]
pytest
```