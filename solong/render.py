"""Drawing a game in a window and running its event loop."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from solong.game import Game, Key, Outcome  # noqa: E402
from solong.mapfile import MapError  # noqa: E402

TILE_SIZE = 32
WINDOW_TITLE = "so_long"
TEXT_POSITION = (10, 10)
TEXT_COLOUR = (0x34, 0xCF, 0xEB)

_SPRITE_FILES = {
    "wall": "wall.xpm",
    "player": "player/parado/cima/Player_Parado_Cima.xpm",
    "floor": "floor.xpm",
    "exit_open": "open_door.xpm",
    "exit_close": "closed_door.xpm",
    "collectible": "coletible/chicken.xpm",
}
_ENEMY_FILE = "enemy/enemy.xpm"

_TILE_SPRITES = {
    "0": "floor",
    "1": "wall",
    "C": "collectible",
    "P": "player",
    "G": "enemy",
}

_PYGAME_KEYS = {
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_w: Key.W,
    pygame.K_s: Key.S,
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
}


@dataclass
class Sprites:
    """The images used to draw each kind of tile."""

    wall: pygame.Surface
    player: pygame.Surface
    floor: pygame.Surface
    exit_open: pygame.Surface
    exit_close: pygame.Surface
    collectible: pygame.Surface
    enemy: pygame.Surface | None = None


def sprite_paths(texture_dir: str | Path, with_enemies: bool = False) -> dict[str, Path]:
    """Paths of the sprite images, keyed by sprite name."""
    base = Path(texture_dir)
    paths = {name: base / relative for name, relative in _SPRITE_FILES.items()}
    if with_enemies:
        paths["enemy"] = base / _ENEMY_FILE
    return paths


def tile_sprite(tile: str, exit_open: bool) -> str:
    """Name of the sprite that draws a tile."""
    if tile == "E":
        return "exit_open" if exit_open else "exit_close"
    try:
        return _TILE_SPRITES[tile]
    except KeyError:
        raise ValueError(f"no sprite for tile {tile!r}") from None


def movement_text(movements: int) -> str:
    """The movement counter as shown to the player."""
    return f"Moviments: {movements}"


def load_sprites(texture_dir: str | Path, with_enemies: bool = False) -> Sprites:
    """Load every sprite image; raise MapError if one cannot be read."""
    images = {}
    for name, path in sprite_paths(texture_dir, with_enemies).items():
        try:
            images[name] = pygame.image.load(str(path))
        except (pygame.error, OSError) as exc:
            raise MapError("Couldn't find a sprite. Does it exist?") from exc
    return Sprites(**images)


class Window:
    """A window showing a game, one sprite per tile."""

    def __init__(self, game: Game, texture_dir: str | Path = "textures") -> None:
        self.game = game
        try:
            pygame.init()
            pygame.display.init()
        except pygame.error as exc:
            raise MapError("error on initialize mlx") from exc
        size = (game.game_map.width * TILE_SIZE, game.game_map.height * TILE_SIZE)
        try:
            self.screen = pygame.display.set_mode(size)
            pygame.display.set_caption(WINDOW_TITLE)
        except pygame.error as exc:
            pygame.quit()
            raise MapError("Error on creating a window") from exc
        try:
            self.sprites = load_sprites(texture_dir, game.with_enemies)
        except MapError:
            pygame.quit()
            raise
        self._font = pygame.font.Font(None, 20) if game.with_enemies else None

    def draw(self) -> None:
        """Draw every tile and show the movement counter."""
        exit_open = self.game.exit_open()
        for row, line in enumerate(self.game.game_map):
            for col, tile in enumerate(line):
                image = getattr(self.sprites, tile_sprite(tile, exit_open))
                if image is None:
                    raise ValueError(f"no sprite loaded for tile {tile!r}")
                self.screen.blit(image, (col * TILE_SIZE, row * TILE_SIZE))
        text = movement_text(self.game.movements)
        if self._font is not None:
            label = self._font.render(text, True, TEXT_COLOUR)
            self.screen.blit(label, TEXT_POSITION)
        else:
            print(text)
        pygame.display.flip()

    def run(self) -> Outcome:
        """Handle key presses until the game ends or the window is closed."""
        try:
            self.draw()
            while True:
                event = pygame.event.wait()
                if event.type == pygame.QUIT:
                    self.game.outcome = Outcome.QUIT
                    return self.game.outcome
                if event.type != pygame.KEYDOWN:
                    continue
                outcome = self.game.handle_key(_PYGAME_KEYS.get(event.key, event.key))
                if outcome is not Outcome.PLAYING:
                    if self.game.message is not None:
                        print(self.game.message)
                    return outcome
                self.draw()
        finally:
            self._close()

    def _close(self) -> None:
        pygame.quit()