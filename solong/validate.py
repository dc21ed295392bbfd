"""Map validation: surrounding walls, tile counts and reachability."""

from __future__ import annotations

from collections import deque
from collections.abc import Container
from dataclasses import dataclass

from solong.mapfile import GameMap, MapError, Position

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
ENEMY = "G"
FILLED = "X"

_STEPS = ((0, -1), (0, 1), (-1, 0), (1, 0))


@dataclass(frozen=True)
class MapSummary:
    """Counts of the tiles found inside the walls, and the player's position."""

    collectibles: int = 0
    exits: int = 0
    players: int = 0
    enemies: int = 0
    player: Position | None = None


def check_walls(game_map: GameMap) -> None:
    """Raise MapError unless the map is closed by walls on every side."""
    last_row = game_map.height - 1
    for x, row in enumerate(game_map):
        for y, cell in enumerate(row):
            if x == 0 and cell != WALL:
                raise MapError("wall is incomplete in the first row")
            if x == last_row and cell != WALL:
                raise MapError("wall is incomplete in the last row")
            if row[0] != WALL or row[-1] != WALL:
                raise MapError("wall is incomplete in the sides")


def count_contents(game_map: GameMap) -> MapSummary:
    """Count the tiles strictly inside the border; the last player found wins."""
    counts = {COLLECTIBLE: 0, EXIT: 0, PLAYER: 0, ENEMY: 0}
    player: Position | None = None
    rows = list(game_map)
    for x, row in enumerate(rows[1:-1], start=1):
        for y, cell in enumerate(row[1:-1], start=1):
            if cell in counts:
                counts[cell] += 1
            if cell == PLAYER:
                player = (x, y)
    return MapSummary(
        collectibles=counts[COLLECTIBLE],
        exits=counts[EXIT],
        players=counts[PLAYER],
        enemies=counts[ENEMY],
        player=player,
    )


def check_map(game_map: GameMap, with_enemies: bool = False) -> MapSummary:
    """Check walls, size and contents; return the tile summary."""
    check_walls(game_map)
    summary = count_contents(game_map)
    if game_map.width <= 2 or game_map.height <= 2:
        raise MapError("Map has an invalid aaaa")
    if summary.collectibles < 1:
        raise MapError("Must have at least one collectible")
    if with_enemies and summary.enemies < 1:
        raise MapError("Must have at least one enemy")
    if summary.exits != 1:
        raise MapError("Must have just one exit")
    if summary.players != 1:
        raise MapError("Must have just one starting point")
    return summary


def flood_fill(
    game_map: GameMap, start: Position, blockers: Container[str]
) -> frozenset[Position]:
    """Positions reachable from start by orthogonal steps avoiding blocker tiles."""
    if not game_map.in_bounds(start) or game_map[start] in blockers:
        return frozenset()
    reached = {start}
    queue = deque([start])
    while queue:
        row, col = queue.popleft()
        for d_row, d_col in _STEPS:
            neighbour = (row + d_row, col + d_col)
            if (
                neighbour not in reached
                and game_map.in_bounds(neighbour)
                and game_map[neighbour] not in blockers
            ):
                reached.add(neighbour)
                queue.append(neighbour)
    return frozenset(reached)


def check_path(
    game_map: GameMap, player: Position | None, with_enemies: bool = False
) -> frozenset[Position]:
    """Check tile characters and that every collectible and exit is reachable.

    Returns the set of positions reachable from the player.
    """
    if player is None or not game_map.in_bounds(player):
        raise MapError("Map has an invalid start")
    valid_tiles = WALL + FLOOR + COLLECTIBLE + EXIT + PLAYER
    blockers = WALL + FILLED
    may_stay_unreached = FILLED + WALL + FLOOR
    if with_enemies:
        valid_tiles += ENEMY
        blockers += ENEMY
        may_stay_unreached += ENEMY
    reached = flood_fill(game_map, player, blockers)
    for x, row in enumerate(game_map):
        for y, cell in enumerate(row):
            if cell not in valid_tiles:
                raise MapError("Map has an invalid caracter")
            filled = FILLED if (x, y) in reached else cell
            if filled not in may_stay_unreached:
                raise MapError("Map has an invalid path")
    return reached