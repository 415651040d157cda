import pytest

from solong.game import Game, Key, Outcome
from solong.mapfile import GameMap

ROWS = [
    "1111111",
    "1P0C0E1",
    "1111111",
]


def make_game():
    messages = []
    game = Game(GameMap.from_rows(ROWS), echo=messages.append)
    return game, messages


def test_escape_keysym_value_quits_the_game():
    game, messages = make_game()
    assert game.handle_key(0xFF1B) is Outcome.QUIT
    assert game.finished is True
    assert f"Key pressed: {0xFF1B}" in messages


def test_move_right_counts_a_move():
    game, messages = make_game()
    start_x, start_y = game.player
    assert game.handle_key(Key.D) is Outcome.MOVED
    assert game.player == (start_x + 1, start_y)
    assert game.moves == 1
    assert game.game_map.cell(start_x, start_y) == "0"
    assert game.game_map.cell(start_x + 1, start_y) == "P"
    assert "Moves: 1" in messages


def test_wall_blocks_and_does_not_count():
    game, messages = make_game()
    x, y = game.player
    assert game.handle_key(Key.W) is Outcome.BLOCKED
    assert game.player == (x, y)
    assert game.moves == 0
    assert f"Cannot move to position ({x}, {y - 1})" in messages


def test_z_and_q_are_aliases():
    game, _ = make_game()
    game.handle_key(Key.D)
    x, y = game.player
    assert game.handle_key(Key.Q) is Outcome.MOVED
    assert game.player == (x - 1, y)
    assert game.handle_key(Key.Z) is Outcome.BLOCKED


def test_unknown_key_stays_in_place_without_counting():
    game, messages = make_game()
    before = game.player
    assert game.handle_key(ord("x")) is Outcome.MOVED
    assert game.player == before
    assert game.moves == 0
    assert game.game_map.cell(*before) == "P"
    assert "Key pressed: 120" in messages


def test_collecting_a_coin():
    game, _ = make_game()
    game.handle_key(Key.D)
    game.handle_key(Key.D)
    assert game.collected == game.game_map.collectibles
    assert game.game_map.rows[1].count("C") == 0


def test_exit_closed_until_all_collected():
    game, _ = make_game()
    exit_x, exit_y = game.game_map.exit
    assert game.can_move(exit_x, exit_y) is False
    game.collected = game.game_map.collectibles
    assert game.can_move(exit_x, exit_y) is True


def test_can_move_outside_map_is_false():
    game, _ = make_game()
    assert game.can_move(-1, 1) is False
    assert game.can_move(game.game_map.width, 1) is False


def test_winning_game():
    game, messages = make_game()
    steps = [Key.D, Key.D, Key.D, Key.D]
    outcomes = [game.handle_key(key) for key in steps]
    assert outcomes[-1] is Outcome.WON
    assert game.finished is True
    assert game.moves == len(steps)
    assert game.player == game.game_map.exit
    assert messages[-1] == f"You won in {len(steps)} moves!"


def test_escape_quits():
    game, _ = make_game()
    assert game.handle_key(Key.ESC) is Outcome.QUIT
    assert game.finished is True
    assert game.moves == 0


def test_keys_after_finish_raise():
    game, _ = make_game()
    game.handle_key(Key.ESC)
    with pytest.raises(RuntimeError):
        game.handle_key(Key.D)