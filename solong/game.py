"""Game state and the rules for moving the player around the map."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, IntEnum

from solong.mapfile import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, GameMap


class Key(IntEnum):
    """Key symbols the game reacts to."""

    A = 0x61
    D = 0x64
    Q = 0x71
    S = 0x73
    W = 0x77
    Z = 0x7A
    ESC = 0xFF1B


_STEPS: dict[int, tuple[int, int]] = {
    Key.W: (0, -1),
    Key.Z: (0, -1),
    Key.S: (0, 1),
    Key.A: (-1, 0),
    Key.Q: (-1, 0),
    Key.D: (1, 0),
}


class Outcome(Enum):
    """What a key press did to the game."""

    MOVED = "moved"
    BLOCKED = "blocked"
    WON = "won"
    QUIT = "quit"


@dataclass
class Game:
    """A game in progress on a validated map."""

    game_map: GameMap
    echo: Callable[[str], None] | None = None
    moves: int = 0
    collected: int = 0
    finished: bool = False

    @property
    def player(self) -> tuple[int, int]:
        """The player's current position as (x, y)."""
        return self.game_map.player

    def _say(self, message: str) -> None:
        if self.echo is not None:
            self.echo(message)

    def can_move(self, x: int, y: int) -> bool:
        """Tell whether the player may step onto ``(x, y)``.

        Walls and cells outside the map are never allowed; the exit only once
        every collectible has been picked up.
        """
        if not self.game_map.in_bounds(x, y):
            return False
        tile = self.game_map.cell(x, y)
        if tile == WALL:
            return False
        if tile == EXIT and self.collected != self.game_map.collectibles:
            return False
        return True

    def handle_key(self, key: int) -> Outcome:
        """Apply a key press and report what it did.

        Keys without a direction leave the player in place and are not counted
        as moves.
        """
        if self.finished:
            raise RuntimeError("the game is over")
        self._say(f"Key pressed: {int(key)}")
        if key == Key.ESC:
            self.finished = True
            return Outcome.QUIT
        dx, dy = _STEPS.get(key, (0, 0))
        x, y = self.player
        new_x, new_y = x + dx, y + dy
        if not self.can_move(new_x, new_y):
            self._say(f"Cannot move to position ({new_x}, {new_y})")
            return Outcome.BLOCKED

        tile = self.game_map.cell(new_x, new_y)
        won = False
        if tile == COLLECTIBLE:
            self.collected += 1
            self.game_map.grid[new_y][new_x] = FLOOR
        elif tile == EXIT and self.collected == self.game_map.collectibles:
            won = True

        self.game_map.grid[y][x] = FLOOR
        self.game_map.player = (new_x, new_y)
        self.game_map.grid[new_y][new_x] = PLAYER
        if key in _STEPS:
            self.moves += 1

        if won:
            self._say(f"You won in {self.moves} moves!")
            self.finished = True
            return Outcome.WON
        self._say(f"Moves: {self.moves}")
        return Outcome.MOVED