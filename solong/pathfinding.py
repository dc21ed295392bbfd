"""Breadth-first search that lets enemies chase the player one step at a time."""

from __future__ import annotations

from collections import deque
from collections.abc import Mapping

from solong.mapfile import GameMap, Position

ENEMY = "G"
FLOOR = "0"

# Tiles an enemy cannot walk through.
BLOCKING = frozenset("1CEG")

_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def bfs_previous(
    game_map: GameMap, start: Position, target: Position
) -> dict[Position, Position]:
    """Search from start towards target; map each reached cell to its predecessor.

    The start itself has no predecessor. The search stops once the target is
    taken from the queue, so cells beyond it may be missing.
    """
    previous: dict[Position, Position] = {}
    visited = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        if current == target:
            break
        row, col = current
        for d_row, d_col in _DIRECTIONS:
            neighbour = (row + d_row, col + d_col)
            if (
                neighbour in visited
                or not game_map.in_bounds(neighbour)
                or game_map[neighbour] in BLOCKING
            ):
                continue
            visited.add(neighbour)
            previous[neighbour] = current
            queue.append(neighbour)
    return previous


def next_step(
    previous: Mapping[Position, Position], start: Position, target: Position
) -> Position:
    """The first cell after start on the path to target, or start if unreachable."""
    move = start
    step = target
    while step in previous:
        move = step
        step = previous[step]
    return move


def step_enemy(game_map: GameMap, enemy: Position, target: Position) -> Position:
    """Move the enemy at `enemy` one step towards target, updating the map."""
    previous = bfs_previous(game_map, enemy, target)
    destination = next_step(previous, enemy, target)
    if game_map[enemy] == ENEMY:
        game_map[enemy] = FLOOR
    game_map[destination] = ENEMY
    return destination