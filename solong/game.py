"""Game state and rules: player moves, collectibles, exit and enemies."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

from solong.mapfile import GameMap, MapError, Position
from solong.pathfinding import step_enemy
from solong.validate import count_contents

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
ENEMY = "G"

WIN_MESSAGE = "Congratulations, you win!!"
LOSE_MESSAGE = "Ohh, you touched the globin, you lose!!!"


class Key(IntEnum):
    """X11 key symbols the game reacts to."""

    W = 119
    S = 115
    A = 97
    D = 100
    ESC = 65307


class Outcome(Enum):
    """State of a game: still running, or how it ended."""

    PLAYING = "playing"
    WON = "won"
    LOST = "lost"
    QUIT = "quit"


_KEY_STEPS = {
    Key.W: (-1, 0),
    Key.S: (1, 0),
    Key.D: (0, 1),
    Key.A: (0, -1),
}


@dataclass
class Game:
    """A game in progress on a map."""

    game_map: GameMap
    player: Position
    collectibles: int
    with_enemies: bool = False
    enemies: list[Position] = field(default_factory=list)
    movements: int = 0
    outcome: Outcome = Outcome.PLAYING

    @classmethod
    def from_map(cls, game_map: GameMap, with_enemies: bool = False) -> Game:
        """Start a game on the map; the map is played on, not copied."""
        summary = count_contents(game_map)
        if summary.player is None:
            raise MapError("Must have just one starting point")
        enemies = (
            [(row, col) for row, col in game_map.find(ENEMY) if row >= 1 and col >= 1]
            if with_enemies
            else []
        )
        return cls(
            game_map=game_map,
            player=summary.player,
            collectibles=summary.collectibles,
            with_enemies=with_enemies,
            enemies=enemies,
        )

    @property
    def finished(self) -> bool:
        """Whether the game has ended."""
        return self.outcome is not Outcome.PLAYING

    @property
    def message(self) -> str | None:
        """The message announcing a win or a loss, if there is one."""
        if self.outcome is Outcome.WON:
            return WIN_MESSAGE
        if self.outcome is Outcome.LOST:
            return LOSE_MESSAGE
        return None

    def exit_open(self) -> bool:
        """Whether every collectible has been picked up."""
        return self.collectibles == 0

    def move(self, d_row: int, d_col: int) -> Outcome:
        """Try to move the player by the offset; enemies answer a successful move."""
        if self.finished:
            return self.outcome
        row, col = self.player
        target = (row + d_row, col + d_col)
        tile = self.game_map[target]
        if tile == WALL:
            return self.outcome
        if tile == EXIT:
            if not self.exit_open():
                return self.outcome
            self.outcome = Outcome.WON
            return self.outcome
        if self.with_enemies and tile == ENEMY:
            self.outcome = Outcome.LOST
            return self.outcome
        self.game_map[self.player] = FLOOR
        if tile == COLLECTIBLE:
            self.collectibles -= 1
        self.game_map[target] = PLAYER
        self.player = target
        self.movements += 1
        if self.with_enemies:
            self.move_enemies()
        return self.outcome

    def move_enemies(self) -> Outcome:
        """Move each enemy one step towards the player, in order."""
        for index, enemy in enumerate(self.enemies):
            position = step_enemy(self.game_map, enemy, self.player)
            self.enemies[index] = position
            if position == self.player:
                self.outcome = Outcome.LOST
                break
        return self.outcome

    def handle_key(self, keysym: int) -> Outcome:
        """React to a key press: ESC quits, W/A/S/D move, anything else is ignored."""
        if self.finished:
            return self.outcome
        if keysym == Key.ESC:
            self.outcome = Outcome.QUIT
            return self.outcome
        for key, (d_row, d_col) in _KEY_STEPS.items():
            if keysym == key:
                return self.move(d_row, d_col)
        return self.outcome