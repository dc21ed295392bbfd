"""A tile-map puzzle game: map parsing and validation, game rules, goblins that chase the player, and a pygame window."""

__version__ = "1.0.0"