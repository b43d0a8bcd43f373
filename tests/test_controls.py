import math

import pytest

from raycube.controls import (
    ANGLE_SPEED,
    SPEED,
    Key,
    key_press,
    key_release,
    move_player,
    step_target,
)
from raycube.state import Game, Player

ROOM = ["11111", "10001", "10001", "10001", "11111"]


def make_game(angle=0.0):
    game = Game(grid=list(ROOM), player=Player(init_x=2, init_y=2, angle=angle))
    game.set_map_size()
    return game


@pytest.mark.parametrize(
    "key, flag",
    [
        (Key.W, "key_up"),
        (Key.S, "key_down"),
        (Key.A, "key_left"),
        (Key.D, "key_right"),
        (Key.LEFT, "left_rotate"),
        (Key.RIGHT, "right_rotate"),
    ],
)
def test_press_and_release_toggle_flags(key, flag):
    player = Player()
    assert key_press(player, key) is False
    assert getattr(player, flag) is True
    key_release(player, key)
    assert getattr(player, flag) is False


def test_escape_requests_quit():
    assert key_press(Player(), Key.ESC) is True


def test_unknown_key_changes_nothing():
    player = Player()
    assert key_press(player, 12345) is False
    assert player == Player()


@pytest.mark.parametrize(
    "code, flag",
    [
        (97, "key_left"),
        (119, "key_up"),
        (115, "key_down"),
        (100, "key_right"),
        (65361, "left_rotate"),
        (65363, "right_rotate"),
    ],
)
def test_raw_x11_key_codes_are_recognised(code, flag):
    player = Player()
    assert key_press(player, code) is False
    assert getattr(player, flag) is True
    key_release(player, code)
    assert getattr(player, flag) is False


def test_raw_escape_code_requests_quit():
    assert key_press(Player(), 0xFF1B) is True


def test_step_target_without_keys_stays():
    game = make_game()
    assert step_target(game, 1.0, 2.0) == (game.player.m_xp, game.player.m_yp)


def test_step_target_up_and_down_are_opposite():
    game = make_game()
    x, y = game.player.m_xp, game.player.m_yp
    game.player.key_up = True
    up = step_target(game, 0.5, 0.25)
    assert up == (x + 0.5, y + 0.25)
    game.player.key_up = False
    game.player.key_down = True
    down = step_target(game, 0.5, 0.25)
    assert down == (x - 0.5, y - 0.25)


def test_move_forward_east():
    game = make_game(angle=0.0)
    start = game.player.m_xp
    game.player.key_up = True
    move_player(game)
    assert game.player.m_xp == pytest.approx(start + SPEED)
    assert game.player.pos_x == pytest.approx(game.player.m_xp / game.size_mini)


def test_rotation_changes_angle():
    game = make_game()
    game.player.right_rotate = True
    move_player(game)
    assert game.player.angle == pytest.approx(ANGLE_SPEED)
    game.player.right_rotate = False
    game.player.left_rotate = True
    move_player(game)
    assert game.player.angle == pytest.approx(0.0)


def test_wall_blocks_movement():
    game = make_game(angle=0.0)
    blocked = 4 * game.size_mini - game.size_mini_player - SPEED / 2
    game.player.m_xp = blocked
    game.player.key_up = True
    move_player(game)
    assert game.player.m_xp == blocked


def test_strafe_moves_along_y():
    game = make_game(angle=0.0)
    y = game.player.m_yp
    game.player.key_right = True
    move_player(game)
    assert game.player.m_yp == pytest.approx(y + math.cos(0.0) * SPEED)