import io

import pytest

from solong.game import Game, Key, Outcome
from solong.gamemap import Tile, parse_rows


def _straight_game():
    game_map = parse_rows(["11111", "1PCE1", "11111"])
    return Game(game_map, stream=io.StringIO())


def _guarded_exit_game():
    game_map = parse_rows(["111111", "1PE001", "100C01", "111111"])
    return Game(game_map, stream=io.StringIO())


def test_collect_then_win():
    game = _straight_game()
    assert game.move(1, 0) is Outcome.MOVED
    assert game.map.collectibles == 0
    assert game.map.player == (2, 1)
    assert game.map.tile(1, 1) is Tile.FLOOR
    assert game.move(1, 0) is Outcome.WON
    assert game.moves == 2


def test_moves_are_reported():
    game = _straight_game()
    game.move(1, 0)
    assert game.stream.getvalue() == "moves = 1\n"


def test_wall_blocks_without_counting():
    game = _straight_game()
    assert game.move(0, -1) is Outcome.BLOCKED
    assert game.moves == 0
    assert game.map.player == (1, 1)
    assert game.stream.getvalue() == ""


def test_exit_blocked_while_collectibles_remain():
    game = _guarded_exit_game()
    assert game.handle_key(Key.D) is Outcome.BLOCKED
    assert game.moves == 0
    assert game.map.player == (1, 1)


def test_keys_move_player():
    game = _guarded_exit_game()
    assert game.handle_key(Key.S) is Outcome.MOVED
    assert game.map.player == (1, 2)
    assert game.handle_key(Key.RIGHT) is Outcome.MOVED
    assert game.map.player == (2, 2)
    assert game.handle_key(Key.UP) is Outcome.BLOCKED


def test_escape_quits():
    game = _straight_game()
    assert game.handle_key(Key.ESC) is Outcome.QUIT
    assert game.moves == 0


def test_unknown_key_ignored():
    game = _straight_game()
    assert game.handle_key(999) is Outcome.IGNORED
    assert game.map.player == (1, 1)


def test_key_codes_from_source():
    assert Key(13) is Key.W
    assert Key(53) is Key.ESC


def test_full_walk_to_exit():
    game = _guarded_exit_game()
    outcomes = [game.handle_key(k) for k in (Key.S, Key.D, Key.D, Key.W, Key.A)]
    assert outcomes[-1] is Outcome.WON
    assert game.map.collectibles == 0


def test_move_outside_map_raises():
    game = _straight_game()
    with pytest.raises(IndexError):
        game.move(-5, 0)