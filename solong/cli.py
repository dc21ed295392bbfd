"""Command-line entry points for the game and its enemy variant."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from solong.game import Game
from solong.mapfile import MapError, check_arguments, read_map
from solong.render import Window
from solong.validate import check_map, check_path

TEXTURE_DIR = "textures"


def load_game(argv: Sequence[str], with_enemies: bool = False) -> Game:
    """Check the arguments, read and validate the map, and start a game on it."""
    path = check_arguments(argv)
    game_map = read_map(path)
    summary = check_map(game_map, with_enemies)
    check_path(game_map, summary.player, with_enemies)
    return Game.from_map(game_map, with_enemies)


def _run(argv: Sequence[str] | None, with_enemies: bool) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        game = load_game(args, with_enemies)
        window = Window(game, TEXTURE_DIR)
    except MapError as exc:
        print(f"Error\n{exc.message}", file=sys.stderr)
        return 1
    window.run()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Play a map without enemies."""
    return _run(argv, with_enemies=False)


def main_bonus(argv: Sequence[str] | None = None) -> int:
    """Play a map with enemies that chase the player."""
    return _run(argv, with_enemies=True)


if __name__ == "__main__":
    sys.exit(main())