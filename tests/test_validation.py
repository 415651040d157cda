import pytest

from solong.mapfile import MapError, read_map_lines
from solong.validation import flood_fill, validate_map, validate_path

VALID = ["11111", "1PCE1", "11111"]


def _map(rows):
    return read_map_lines(rows)


def test_flood_fill_never_enters_walls():
    game_map = _map(["1111111", "1P0E1C1", "1111111"])
    visited = flood_fill(game_map, game_map.player, False)
    assert all(game_map.cell(x, y) != "1" for x, y in visited)
    assert game_map.player in visited


def test_flood_fill_ignore_exit_excludes_exit():
    game_map = _map(VALID)
    assert game_map.exit not in flood_fill(game_map, game_map.player, True)
    assert game_map.exit in flood_fill(game_map, game_map.player, False)


def test_flood_fill_from_wall_is_empty():
    game_map = _map(VALID)
    assert flood_fill(game_map, (0, 0), False) == set()


def test_flood_fill_outside_is_empty():
    game_map = _map(VALID)
    assert flood_fill(game_map, (-1, 1), False) == set()


def test_flood_fill_ignore_exit_is_subset():
    game_map = _map(["1111111", "1PEC001", "1000001", "1111111"])
    with_exit = flood_fill(game_map, game_map.player, False)
    without_exit = flood_fill(game_map, game_map.player, True)
    assert without_exit <= with_exit


def test_valid_map_passes_both_checks():
    game_map = _map(VALID)
    validate_map(game_map)
    validate_path(game_map)
    assert game_map.rows == VALID


@pytest.mark.parametrize(
    ("rows", "message"),
    [
        (["11111", "1PCE0", "11111"], "surrounded by walls"),
        (["11111", "1PCE1", "11011"], "surrounded by walls"),
        (["111111", "1PCEX1", "111111"], "invalid elements"),
        (["111111", "1PCEP1", "111111"], "one player"),
        (["111111", "1PCEE1", "111111"], "one exit"),
        (["11111", "1PC01", "11111"], "one exit"),
        (["11111", "1P0E1", "11111"], "collectible"),
    ],
)
def test_validate_map_errors(rows, message):
    with pytest.raises(MapError, match=message):
        validate_map(_map(rows))


def test_collectible_behind_wall():
    with pytest.raises(MapError, match="collectibles blocked"):
        validate_path(_map(["1111111", "1P0E1C1", "1111111"]))


def test_collectible_only_behind_exit():
    with pytest.raises(MapError, match="collectibles blocked"):
        validate_path(_map(["1111111", "1PEC001", "1111111"]))


def test_exit_behind_wall():
    with pytest.raises(MapError, match="exit not accessible"):
        validate_path(_map(["1111111", "1PC01E1", "1111111"]))


def test_path_around_exit_is_valid():
    game_map = _map(["1111111", "1PEC001", "1000001", "1111111"])
    validate_path(game_map)
    reachable = flood_fill(game_map, game_map.player, True)
    assert game_map.exit not in reachable
    assert all(cell in reachable for cell in [(3, 1)])