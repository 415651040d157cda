"""Checks that a map is closed, well-formed and can be completed."""

from __future__ import annotations

from solong.mapfile import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, GameMap, MapError

_ALLOWED = {FLOOR, WALL, COLLECTIBLE, PLAYER, EXIT}


def flood_fill(
    game_map: GameMap, start: tuple[int, int], ignore_exit: bool = False
) -> set[tuple[int, int]]:
    """Return every cell reachable from ``start`` without crossing walls.

    With ``ignore_exit`` the exit is treated as a wall.
    """
    visited: set[tuple[int, int]] = set()
    pending = [start]
    while pending:
        x, y = pending.pop()
        if (x, y) in visited or not game_map.in_bounds(x, y):
            continue
        tile = game_map.cell(x, y)
        if tile == WALL or (ignore_exit and tile == EXIT):
            continue
        visited.add((x, y))
        pending.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    return visited


def _surrounded_by_walls(game_map: GameMap) -> bool:
    last_x, last_y = game_map.width - 1, game_map.height - 1
    return all(
        tile == WALL
        for y, row in enumerate(game_map.grid)
        for x, tile in enumerate(row)
        if y in (0, last_y) or x in (0, last_x)
    )


def validate_map(game_map: GameMap) -> None:
    """Raise MapError unless the map is walled in and has exactly one player,
    exactly one exit, at least one collectible and no unknown tiles."""
    if not _surrounded_by_walls(game_map):
        raise MapError("Map must be surrounded by walls")
    tiles = [tile for row in game_map.grid for tile in row]
    if any(tile not in _ALLOWED for tile in tiles):
        raise MapError("Map has invalid elements")
    if tiles.count(PLAYER) != 1:
        raise MapError("Map must have exactly one player")
    if tiles.count(EXIT) != 1:
        raise MapError("Map must have exactly one exit")
    if game_map.collectibles <= 0:
        raise MapError("Map must have at least one collectible")


def _cells_of(game_map: GameMap, wanted: str) -> list[tuple[int, int]]:
    return [
        (x, y)
        for y, row in enumerate(game_map.grid)
        for x, tile in enumerate(row)
        if tile == wanted
    ]


def validate_path(game_map: GameMap) -> None:
    """Raise MapError unless the player can collect everything and then leave.

    Collectibles must be reachable without passing through the exit.
    """
    reachable = flood_fill(game_map, game_map.player, ignore_exit=True)
    if any(cell not in reachable for cell in _cells_of(game_map, COLLECTIBLE)):
        raise MapError("Invalid path: collectibles blocked")
    reachable = flood_fill(game_map, game_map.player, ignore_exit=False)
    if any(cell not in reachable for cell in _cells_of(game_map, EXIT)):
        raise MapError("Invalid path: exit not accessible")