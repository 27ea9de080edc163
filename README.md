# heistgrid

A small tile-based puzzle game. You sneak through a walled compound, pick up
every piece of loot and slip out through the exit. Guards patrol in a straight
line and turn around when the next tile is anything but floor. Step onto a
guard and you take it down; let a guard walk into you and the mission is over.

## Installing

```
pip install .
```

The game window is drawn with pygame.

## Playing

```
heistgrid maps/level.ber
```

The command takes exactly one argument: the path of a map file whose name ends
in `.ber` (and is at least five characters long). Paths that do not start with
`/` or `./` are looked up relative to the current directory. Guards are always
enabled when playing from the command line.

Controls:

| Key      | Action          |
|----------|-----------------|
| W        | move up         |
| A        | move left       |
| S        | move down       |
| D        | move right      |
| Esc      | abort mission   |

Closing the window also aborts the mission. A status panel is printed to the
terminal at the start and after every accepted move, showing the move count
and the loot collected so far; the move counter is also drawn in the top-right
corner of the window. When the run ends a mission report is printed. Winning
with guards on the map and none taken down unlocks PACIFISM; taking down every
guard unlocks GENOCIDE. A run is also ended as aborted after 999999 moves.

The exit can only be entered once all loot has been collected; moves into a
wall, or into the exit too early, are ignored and not counted.

If the arguments or the map are invalid, `Error` is printed followed by a
message on standard error, and the command exits with a non-zero status
(2 for files that cannot be opened, 5 for invalid maps, 7 for too many
arguments).

## Map files

A map is a rectangle of characters, one row per line:

| Char | Meaning                              |
|------|--------------------------------------|
| `1`  | wall                                 |
| `0`  | floor                                |
| `P`  | player start (exactly one)           |
| `C`  | loot (at least one)                  |
| `E`  | exit (exactly one)                   |
| `U` `R` `D` `L` | guard walking up, right, down or left |

Example:

```
1111111111
1P0C000U01
10001110C1
1R000000E1
1111111111
```

The map is rejected if it is empty, not rectangular, not fully enclosed by
walls, contains unknown characters, has the wrong number of players or exits,
or if some loot or the exit cannot be reached from the start. The map ends at
the first empty line; anything after it is ignored.

## Textures

Tile images are loaded from a `textures/` directory in the current directory:
`wall.xpm`, `free.xpm`, `player.xpm`, `coin.xpm`, `exit.xpm`, and for guards
`up.xpm`, `right.xpm`, `down.xpm`, `left.xpm`. Every file must be openable for
reading and writing, or the game refuses to start. Each tile is 64 pixels
square; larger images are cut off.

## Using the modules

- `heistgrid.gamemap.load_map(name, with_enemies)` reads and validates a map
  file and returns a `GameMap`; failures raise `heistgrid.validate.MapError`,
  which carries `message` and `code`.
- `heistgrid.game.Game(game_map, with_enemies)` holds the running state.
  `move(Direction.UP)` and friends return `False` for refused moves and raise
  `GameOver` (with `outcome` and `report`) when the run ends;
  `status_message()` and `report(outcome)` return the printed texts.
- `heistgrid.validate` has the individual checks: `count_tiles`,
  `check_counts`, `check_edges`, `check_path`, `find_player`.
- `heistgrid.counter.counter_pixels(moves, map_width)` and
  `heistgrid.digits.digit_pixels(digit, x, y)` give the pixels of the
  on-screen counter.
- `heistgrid.display.run_game(game_map, with_enemies)` opens the window and
  returns the `Outcome`.

## Running the tests

```
pip install .[test]
pytest
```