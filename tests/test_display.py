import pygame
import pytest

from solong.display import Renderer, load_game, main, run
from solong.game import Key
from solong.mapfile import MapError

ROWS = [
    "11111",
    "1PCE1",
    "10001",
    "11111",
]

TILE = 2
COLORS = {
    "wall": (10, 20, 30),
    "floor": (40, 50, 60),
    "coin": (70, 80, 90),
    "player": (100, 110, 120),
    "exit": (130, 140, 150),
}


def make_renderer():
    surface = pygame.Surface((len(ROWS[0]) * TILE, len(ROWS) * TILE))
    tiles = {}
    for name, color in COLORS.items():
        tile = pygame.Surface((TILE, TILE))
        tile.fill(color)
        tiles[name] = tile
    return Renderer(surface, tiles, TILE), surface


def write_map(tmp_path, rows, name="level.ber"):
    path = tmp_path / name
    path.write_text("\n".join(rows) + "\n")
    return path


def at(surface, x, y):
    return tuple(surface.get_at((x * TILE, y * TILE)))[:3]


def test_draw_places_each_tile(tmp_path):
    renderer, surface = make_renderer()
    game = load_game(write_map(tmp_path, ROWS))
    renderer.draw(game)
    assert at(surface, 0, 0) == COLORS["wall"]
    assert at(surface, 1, 1) == COLORS["player"]
    assert at(surface, 2, 1) == COLORS["coin"]
    assert at(surface, 3, 1) == COLORS["exit"]
    assert at(surface, 1, 2) == COLORS["floor"]


def test_draw_follows_the_player(tmp_path):
    renderer, surface = make_renderer()
    game = load_game(write_map(tmp_path, ROWS))
    game.handle_key(Key.S)
    renderer.draw(game)
    assert at(surface, 1, 1) == COLORS["floor"]
    assert at(surface, *game.player) == COLORS["player"]


def test_renderer_requires_all_tiles():
    surface = pygame.Surface((4, 4))
    with pytest.raises(ValueError):
        Renderer(surface, {"wall": pygame.Surface((TILE, TILE))}, TILE)


def test_load_game_reads_valid_map(tmp_path):
    game = load_game(write_map(tmp_path, ROWS))
    assert game.player == (1, 1)
    assert game.game_map.collectibles == ROWS[1].count("C")
    assert game.moves == 0
    assert game.finished is False


def test_load_game_rejects_blocked_collectible(tmp_path):
    rows = ["11111", "1P1C1", "1E001", "11111"]
    with pytest.raises(MapError, match="collectibles blocked"):
        load_game(write_map(tmp_path, rows))


def test_load_game_missing_file(tmp_path):
    with pytest.raises(MapError):
        load_game(tmp_path / "absent.ber")


def test_main_without_argument_prints_usage(capsys):
    assert main([]) == 0
    err = capsys.readouterr().err
    assert err == "Error\nUsage: ./so_long <map.ber>\n"


def test_main_rejects_wrong_extension(capsys):
    assert main(["level.txt"]) == 0
    assert "Invalid map file" in capsys.readouterr().err


def test_main_rejects_bare_extension(capsys):
    assert main([".ber"]) == 0
    assert "Invalid map file" in capsys.readouterr().err


def test_main_invalid_map_fails(tmp_path, capsys):
    path = write_map(tmp_path, ["111", "1P1", "111"])
    assert main([str(path)]) == 1
    assert capsys.readouterr().err.startswith("Error\n")


def test_run_missing_file_fails(tmp_path, capsys):
    assert run(tmp_path / "absent.ber") == 1
    assert "Could not open map file" in capsys.readouterr().err