# solong

A small top-down puzzle game played on a tile map. Walk the player around,
pick up every collectible, and then step onto the exit to win. In bonus mode
the map may also hold enemies. Stepping onto one ends the game.

## Installing

```
pip install .
```

This installs the `solong` command and its one runtime dependency, pygame.

## Playing

```
solong maps/level1.ber
solong --bonus maps/level1.ber
```

The command takes one map path, and the file name must end in `.ber`.
`--bonus` turns on bonus mode, which adds the following:

- enemy tiles (`S`);
- a player sprite that faces the way it last moved sideways;
- a move counter drawn in the window.

Controls:

- `w` `a` `s` `d` move up, left, down and right.
- `Escape`, or closing the window, quits.

Each move that no wall blocks is counted. In normal mode every such move
prints `move -> N`.

Once every collectible has been taken, the exit opens. Stepping onto the
open exit wins the game:

- normal mode prints `You WIN !!`;
- bonus mode prints `You WIN with N moves!!`.

Touching an enemy prints `GAME OVER!!`.

Sprites are loaded from a `textures/` directory relative to the current
working directory, for example `textures/wall2.xpm` and
`textures/pizza.xpm`. Any image that cannot be loaded is drawn as a plain
coloured square, so the game stays playable without them. The package does
not ship any texture files.

## Map files

A map is a plain text rectangle made of these characters:

| Char | Meaning                    |
|------|----------------------------|
| `1`  | wall                       |
| `0`  | floor                      |
| `P`  | player start (exactly one) |
| `E`  | exit (exactly one)         |
| `C`  | collectible (at least one) |
| `S`  | enemy (bonus mode only)    |

Example:

```
1111111111
1P00C00001
10110111E1
1C0000C001
1111111111
```

A map is rejected when it:

- holds any other character;
- has a number of players or exits other than one, or has no collectibles;
- is larger than 26 columns by 14 rows, or is not rectangular;
- is not closed in by walls on every side;
- has a collectible or an exit that the player cannot reach, where walls
  block the way and, in bonus mode, so do enemies;
- is empty or ends with a trailing newline.

When a map is rejected, the command prints `Error` and a reason, then
exits with status 1.

## Using the package

The game logic can be driven without opening a window:

```python
from solong.app import load_game
from solong.game import Direction, Outcome

game = load_game("maps/level1.ber", bonus=False)
outcome = game.move(Direction.RIGHT)   # Outcome.BLOCKED, MOVED, WON or LOST
print(game.moves, game.remaining, game.exit_open())
print(game.render_text())
```

- `solong.mapfile.read_map(path)` loads a map file.
- `solong.mapfile.parse_map(text)` parses map text into a `GameMap`.
- `solong.validate.validate_map(game_map, bonus)` runs all checks. They are
  also available one by one: `check_characters`, `check_shape`,
  `check_walls` and `check_path`.

All of these raise `solong.mapfile.MapError` on a bad map.

`Game.move` raises `RuntimeError` once the game has been won or lost.
`solong.app.run(game)` opens the pygame window.

The package also holds small helper modules:

- `solong.strutil`: character tests, `atoi`, `strncmp`, `strchr` and similar.
- `solong.textops`: `split`, `strtrim`, `substr`, `strlcpy`, `strlcat` and
  similar.
- `solong.streams`: writing characters, strings and numbers to a text stream.
- `solong.linereader.LineReader`: reads a stream line by line through a
  fixed-size buffer.
- `solong.printf`: `format_printf` and `print_formatted`, which accept
  `%c %s %p %d %i %u %x %X %%`.
- `solong.intlist.IntList`: a singly linked list of integers.

## Running the tests

```
pip install .[test]
pytest
```