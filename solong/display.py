"""Window, drawing and the command that plays a map."""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence
from os import PathLike
from pathlib import Path

import pygame

from solong.game import Game, Key, Outcome
from solong.mapfile import COLLECTIBLE, EXIT, WALL, GameMap, MapError, check_ber, parse_map
from solong.validation import validate_map, validate_path
from solong.xpm import XpmError, XpmImage, load_xpm

TILE_SIZE = 64
SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080
TITLE = "so_long"
ASSET_DIR = Path("assets")
ASSET_FILES = {
    "wall": "brickwall.xpm",
    "floor": "background.xpm",
    "coin": "coin.xpm",
    "player": "player.xpm",
    "exit": "exit.xpm",
}

_OVERLAYS = {WALL: "wall", COLLECTIBLE: "coin", EXIT: "exit"}


def _error(message: str) -> None:
    sys.stderr.write(f"Error\n{message}\n")


def _to_surface(image: XpmImage) -> pygame.Surface:
    data = bytes(
        channel
        for row in image.pixels
        for value in row
        for channel in ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)
    )
    return pygame.image.frombuffer(data, (image.width, image.height), "RGB").copy()


class Renderer:
    """Draws a game onto a surface, one tile image per cell."""

    def __init__(
        self,
        surface: pygame.Surface,
        tiles: Mapping[str, pygame.Surface],
        tile_size: int = TILE_SIZE,
    ) -> None:
        missing = sorted(set(ASSET_FILES) - set(tiles))
        if missing:
            raise ValueError(f"missing tile images: {', '.join(missing)}")
        self.surface = surface
        self.tiles = dict(tiles)
        self.tile_size = tile_size

    @classmethod
    def load(
        cls,
        surface: pygame.Surface,
        asset_dir: str | PathLike[str] = ASSET_DIR,
        tile_size: int = TILE_SIZE,
    ) -> Renderer:
        """Build a renderer from the XPM tile images in ``asset_dir``."""
        base = Path(asset_dir)
        tiles = {
            name: _to_surface(load_xpm(base / filename))
            for name, filename in ASSET_FILES.items()
        }
        return cls(surface, tiles, tile_size)

    def draw(self, game: Game) -> None:
        """Draw every cell of the map and then the player."""
        size = self.tile_size
        for y, row in enumerate(game.game_map.grid):
            for x, tile in enumerate(row):
                position = (x * size, y * size)
                self.surface.blit(self.tiles["floor"], position)
                overlay = _OVERLAYS.get(tile)
                if overlay is not None:
                    self.surface.blit(self.tiles[overlay], position)
        px, py = game.player
        self.surface.blit(self.tiles["player"], (px * size, py * size))


def _window_size(game_map: GameMap, tile_size: int = TILE_SIZE) -> tuple[int, int]:
    return (
        min(game_map.width * tile_size, SCREEN_WIDTH),
        min(game_map.height * tile_size, SCREEN_HEIGHT),
    )


def load_game(map_path: str | PathLike[str]) -> Game:
    """Read and validate the map at ``map_path`` and start a game on it."""
    print(f"Opening map file: {map_path}")
    game_map = parse_map(map_path)
    print(f"Map size: {game_map.width}x{game_map.height}")
    validate_map(game_map)
    validate_path(game_map)
    print("Map parsed successfully")
    return Game(game_map)


def _keysym(key: int) -> int:
    return Key.ESC if key == pygame.K_ESCAPE else key


def run(map_path: str | PathLike[str]) -> int:
    """Play the map at ``map_path`` in a window; return the exit status."""
    try:
        game = load_game(map_path)
    except MapError as exc:
        _error(str(exc))
        return 1
    game.echo = print

    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode(_window_size(game.game_map))
        except pygame.error:
            _error("Window creation failed")
            return 1
        pygame.display.set_caption(TITLE)
        try:
            renderer = Renderer.load(screen)
        except XpmError:
            _error("Failed to load images")
            return 1
        renderer.draw(game)
        pygame.display.flip()

        clock = pygame.time.Clock()
        while not game.finished:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN:
                    outcome = game.handle_key(_keysym(event.key))
                    if outcome is Outcome.MOVED:
                        renderer.draw(game)
                        pygame.display.flip()
                    if game.finished:
                        break
            clock.tick(60)
        return 0
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``so_long <map.ber>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        _error("Usage: ./so_long <map.ber>")
        return 0
    map_path = args[0]
    if not check_ber(map_path):
        _error("Invalid map file")
        return 0
    print(f"Starting game with map: {map_path}")
    return run(map_path)


if __name__ == "__main__":
    sys.exit(main())