# solong

A small top-down puzzle game played on a map read from a `.ber` file.
Walk the player around, pick up every collectible, then leave through the
exit. In bonus mode goblins chase you, each one taking a shortest-path step
towards you after every move you make: walk into one, or let one reach you,
and the game is lost.

## Installing

```
pip install .
```

The game window uses `pygame`. For the tests, install the `test` extra
(`pip install .[test]`) and run `pytest`.

## Playing

```
so_long maps/level.ber
so_long_bonus maps/level_with_goblins.ber
```

Controls:

| Key   | Action       |
|-------|--------------|
| W     | move up      |
| S     | move down    |
| A     | move left    |
| D     | move right   |
| Esc   | quit         |

Closing the window also quits. Walking into a wall does nothing, and so does
walking onto the exit while collectibles remain; once they are all picked up
the exit opens and stepping onto it wins. The win or loss message is printed
when the game ends.

The number of moves so far is printed to standard output every time the
window is redrawn in the plain game (`Moviments: N`), and drawn in the
top-left corner of the window in bonus mode.

Sprites are loaded from a `textures/` directory in the current working
directory:

```
textures/wall.xpm
textures/floor.xpm
textures/open_door.xpm
textures/closed_door.xpm
textures/coletible/chicken.xpm
textures/player/parado/cima/Player_Parado_Cima.xpm
textures/enemy/enemy.xpm        (bonus mode only)
```

Each tile is drawn 32×32 pixels, so the window is 32 times the map's size.

## Map format

A map is a rectangle of characters, one row per line:

| Char | Meaning                          |
|------|----------------------------------|
| `1`  | wall                             |
| `0`  | floor                            |
| `P`  | player start (exactly one)       |
| `E`  | exit (exactly one)               |
| `C`  | collectible (at least one)       |
| `G`  | goblin (bonus mode, at least one)|

```
1111111
1P0C0E1
1000G01
1111111
```

The map is rejected, with `Error` and a reason written to standard error and
exit status 1, when:

- there is not exactly one argument, or it does not end in `.ber`;
- the file cannot be opened, or is empty;
- it has empty lines at the start, in the middle or at the end;
- rows differ in length;
- it is not fully enclosed by walls, or is 2 rows or 2 columns or smaller;
- the counts of `P`, `E`, `C` (and `G` in bonus mode) are wrong;
- it holds any other character (`G` is only allowed in bonus mode);
- some collectible or the exit cannot be reached from the player
  (in bonus mode goblins block the way).

Goblins cannot walk through walls, collectibles, the exit or each other.

## Using it as a library

```python
from solong.mapfile import parse_map
from solong.validate import check_map, check_path
from solong.game import Game, Key

game_map = parse_map("1111111\n1P0C0E1\n1000G01\n1111111\n")
summary = check_map(game_map, with_enemies=True)
check_path(game_map, summary.player, with_enemies=True)

game = Game.from_map(game_map, with_enemies=True)
outcome = game.handle_key(Key.D)   # Outcome.PLAYING, WON, LOST or QUIT
```

The modules:

- `solong.mapfile` – `GameMap`, a grid indexed by `(row, column)` with
  `find`, `copy` and `in_bounds`; `parse_map`, `read_map` and
  `check_arguments`. Invalid input raises `MapError`.
- `solong.validate` – `check_walls`, `count_contents` (returning a
  `MapSummary`), `check_map`, `flood_fill` and `check_path`.
- `solong.pathfinding` – `bfs_previous`, `next_step` and `step_enemy`, the
  breadth-first search that moves goblins.
- `solong.game` – `Game` with `move`, `move_enemies`, `handle_key`,
  `exit_open`, and the `finished`, `message`, `movements` and `outcome`
  attributes; `Key` and `Outcome`.
- `solong.render` – `Window` (drawing and the event loop), `Sprites`,
  `load_sprites`, `sprite_paths`, `tile_sprite` and `movement_text`.
- `solong.cli` – `load_game`, which does the whole read-and-validate step
  from command-line arguments, and the `main` and `main_bonus` entry points.

## What it does not include

No maps and no sprite images come with the package; supply a `.ber` map and
a `textures/` directory of your own.