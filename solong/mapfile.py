"""Reading and checking the shape of ``.ber`` map files."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from os import PathLike

PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
WALL = "1"
FLOOR = "0"

MIN_SIZE = 3


class MapError(ValueError):
    """Raised when a map file cannot be read or does not describe a valid map."""


@dataclass
class GameMap:
    """A rectangular grid of tiles and the positions of its notable cells."""

    grid: list[list[str]]
    player: tuple[int, int] = (0, 0)
    exit: tuple[int, int] = (0, 0)
    collectibles: int = 0
    width: int = field(init=False)
    height: int = field(init=False)

    def __post_init__(self) -> None:
        self.height = len(self.grid)
        self.width = len(self.grid[0]) if self.grid else 0

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> GameMap:
        """Build a map from its text rows, recording player, exit and collectibles."""
        grid: list[list[str]] = []
        player = (0, 0)
        exit_pos = (0, 0)
        collectibles = 0
        for y, row in enumerate(rows):
            for x, tile in enumerate(row):
                if tile == PLAYER:
                    player = (x, y)
                elif tile == EXIT:
                    exit_pos = (x, y)
                elif tile == COLLECTIBLE:
                    collectibles += 1
            grid.append(list(row))
        return cls(grid, player, exit_pos, collectibles)

    @property
    def rows(self) -> list[str]:
        """The grid as a list of strings."""
        return ["".join(row) for row in self.grid]

    def in_bounds(self, x: int, y: int) -> bool:
        """Tell whether ``(x, y)`` lies inside the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> str:
        """Return the tile at column ``x`` of row ``y``."""
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} map")
        return self.grid[y][x]


def check_ber(name: str) -> bool:
    """Tell whether ``name`` has a ``.ber`` extension after a non-empty stem."""
    return len(name) > 4 and name.endswith(".ber")


def read_map_lines(lines: Iterable[str]) -> GameMap:
    """Build a map from the lines of a map file.

    Each line is cut at its first newline. The lines must all have the length of
    the first one, and the map must be at least 3 by 3.
    """
    rows: list[str] = []
    width = 0
    for number, raw in enumerate(lines, start=1):
        line = raw.split("\n", 1)[0]
        if number == 1:
            width = len(line)
        elif len(line) != width:
            raise MapError(f"Map not rectangular at line {number}")
        rows.append(line)
    if not rows:
        raise MapError("Empty map file")
    if len(rows) < MIN_SIZE or width < MIN_SIZE:
        raise MapError("Map must be at least 3x3")
    return GameMap.from_rows(rows)


def parse_map(path: str | PathLike[str]) -> GameMap:
    """Read the map file at ``path``."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            return read_map_lines(handle)
    except OSError as exc:
        raise MapError(f"Could not open map file: {path}") from exc