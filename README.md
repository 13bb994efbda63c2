# solong

A small top-down puzzle game played on a grid map. Walk the player over
every collectible, then step onto the exit to win. The bonus edition adds
enemies that end the game on contact, animated sprites and an on-screen
move counter.

## Installing

```
pip install .
```

The game window is drawn with pygame.

## Playing

```
so_long path/to/level.ber
so_long_bonus path/to/level.ber
```

Move with `W`, `A`, `S`, `D`; the bonus edition also accepts the arrow
keys. `Escape` or closing the window ends the game as a loss.

- `so_long` prints `moves = N` after every step and a closing message with
  the move count when you win or quit.
- `so_long_bonus` shows `MOVES: N` in the top left corner of the window,
  animates the exit, the enemy and the idle player, shows `YOU WON!` or
  `YOU LOST!` over the map for a moment at the end, and prints the closing
  message with the move count.

If the map is rejected, the reason is printed after an `Error` line and the
game does not start. Running a command without exactly one map argument
prints a usage line.

### Textures

Textures are not included in the package. They are loaded from
`textures/*.xpm` relative to the current directory (for example
`textures/tree.xpm`, `textures/floor.xpm`, `textures/naruto.xpm`,
`textures/hat.xpm`, `textures/hinata_back.xpm`; the bonus edition uses
further frames such as `textures/sakura.xpm`). Each tile is 64×64 pixels.
The files must be in a format pygame can load; if one is missing the game
reports that it could not render and stops. `solong.sprites.Sprite` lists
every texture path.

## Map files

A map is a plain text file whose name ends in `.ber` (the file name itself
must be at least five characters long). Every line must have the same
length, and the map must be surrounded by walls.

| Character | Meaning                          |
|-----------|----------------------------------|
| `1`       | wall                             |
| `0`       | floor                            |
| `P`       | player start (exactly one)       |
| `C`       | collectible (at least one)       |
| `E`       | exit (exactly one)               |
| `X`       | enemy (bonus only, at least one) |

Every collectible and the exit must be reachable from the start; walls and
enemies block the way. The exit only opens once every collectible has been
taken.

Example for the bonus edition (the basic edition rejects the `X`):

```
1111111111
1P0C000001
1000011001
1C0000X0E1
1111111111
```

## Using the library

Map loading and the game rules work without a window:

```python
from solong.maps import load_map, MapError
from solong.game import Game, Direction, Outcome

try:
    game_map = load_map("level.ber", with_enemies=False)
except MapError as err:
    print(err)
else:
    game = Game(game_map)
    result = game.move(Direction.RIGHT)
    print(result.outcome, result.moves, result.end)
```

Modules:

- `solong.maps` — `read_rows`, the individual checks (`check_map_name`,
  `check_size`, `check_charset`, `check_walls`, `check_goals`,
  `check_path`), `find_last`, and `load_map`, which runs them all and
  returns a `GameMap`. Every failure raises `MapError`.
- `solong.game` — `Game` with `move(direction)` returning a `MoveResult`
  (`Outcome.MOVED`, `BLOCKED`, `WON` or `LOST`) and `quit()`;
  `direction_for_key`, `win_message` and `lose_message`.
- `solong.sprites` — the `Sprite` enum, the tile `SIZE` and
  `texture_path(sprite, root)`.
- `solong.animation` — `SpriteCycle` and `Animator`, the frame counters
  behind the bonus animations.
- `solong.display` — `Renderer`, `select_sprite`, `run(path, bonus)` and
  the `main` / `main_bonus` entry points.

## Running the tests

```
pip install .[test]
pytest
```