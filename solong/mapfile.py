"""Map files: argument checks, parsing and the in-memory tile grid."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

Position = tuple[int, int]

MAP_EXTENSION = ".ber"


class MapError(Exception):
    """A map file or its contents cannot be used to start a game."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class GameMap:
    """A rectangular grid of single-character tiles addressed by (row, column)."""

    def __init__(self, lines: Iterable[str]) -> None:
        grid = [list(line) for line in lines]
        if not grid:
            raise MapError("The map is empty.")
        width = len(grid[0])
        if any(len(row) != width for row in grid[1:]):
            raise MapError("column size diferent")
        self._grid = grid

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self._grid)

    @property
    def width(self) -> int:
        """Number of columns."""
        return len(self._grid[0])

    def in_bounds(self, position: Position) -> bool:
        """Whether the position lies inside the grid."""
        row, col = position
        return 0 <= row < self.height and 0 <= col < self.width

    def _checked(self, position: Position) -> Position:
        if not self.in_bounds(position):
            raise IndexError(f"position {position!r} is outside the map")
        return position

    def __getitem__(self, position: Position) -> str:
        row, col = self._checked(position)
        return self._grid[row][col]

    def __setitem__(self, position: Position, tile: str) -> None:
        if len(tile) != 1:
            raise ValueError(f"a tile is a single character, got {tile!r}")
        row, col = self._checked(position)
        self._grid[row][col] = tile

    def find(self, tile: str) -> list[Position]:
        """All positions holding the tile, in row-major order."""
        return [
            (row, col)
            for row, cells in enumerate(self._grid)
            for col, cell in enumerate(cells)
            if cell == tile
        ]

    def copy(self) -> GameMap:
        """An independent copy of the grid."""
        return GameMap(self)

    def __iter__(self) -> Iterator[str]:
        return ("".join(cells) for cells in self._grid)

    def __len__(self) -> int:
        return self.height

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameMap):
            return NotImplemented
        return self._grid == other._grid

    def __str__(self) -> str:
        return "\n".join(self)

    def __repr__(self) -> str:
        return f"GameMap({list(self)!r})"


def check_arguments(argv: Sequence[str]) -> str:
    """Check the command arguments (program name excluded) and return the map path."""
    if len(argv) > 1:
        raise MapError("Too many arguments (It should be only two).")
    if len(argv) < 1:
        raise MapError("The Map file is missing.")
    path = argv[0]
    if not path.endswith(MAP_EXTENSION):
        raise MapError("Map file extention is wrong (It should be .ber).")
    return path


def _check_newlines(text: str) -> None:
    if text.startswith("\n"):
        raise MapError("map with \\n in the beginning")
    if len(text) >= 2 and text[-2] == "\n":
        raise MapError("map with \\n in the end")
    if "\n\n" in text:
        raise MapError("map with \\n in the middle")


def parse_map(text: str) -> GameMap:
    """Parse the contents of a map file into a grid."""
    if not text:
        raise MapError("The map is empty.")
    _check_newlines(text)
    return GameMap(line for line in text.split("\n") if line)


def read_map(path: str | Path) -> GameMap:
    """Read and parse a map file."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise MapError(
            "The file couldn't be opened. verify name or if the file exists"
        ) from exc
    return parse_map(data.decode("latin-1"))