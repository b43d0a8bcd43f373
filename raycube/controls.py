"""Keyboard state and player movement with wall collision."""

from __future__ import annotations

import math
from enum import IntEnum

from raycube.state import Game, Player

SPEED = 0.1
ANGLE_SPEED = 0.02


class Key(IntEnum):
    """Key codes the game reacts to."""

    A = 97
    W = 119
    S = 115
    D = 100
    ESC = 0x00FF1B
    LEFT = 65361
    RIGHT = 65363


_FLAGS = {
    Key.S: "key_down",
    Key.W: "key_up",
    Key.D: "key_right",
    Key.A: "key_left",
    Key.LEFT: "left_rotate",
    Key.RIGHT: "right_rotate",
}


def key_press(player: Player, keycode: int) -> bool:
    """Record a pressed key; return True when the key asks the game to quit."""
    if keycode == Key.ESC:
        return True
    flag = _FLAGS.get(keycode)
    if flag is not None:
        setattr(player, flag, True)
    return False


def key_release(player: Player, keycode: int) -> None:
    """Record a released key."""
    flag = _FLAGS.get(keycode)
    if flag is not None:
        setattr(player, flag, False)


def step_target(game: Game, cos_speed: float, sin_speed: float) -> tuple[float, float]:
    """Return the minimap point the held movement keys aim for.

    With several keys held, the last of up, down, left, right wins.
    """
    player = game.player
    x, y = player.m_xp, player.m_yp
    target = (x, y)
    if player.key_up:
        target = (x + cos_speed, y + sin_speed)
    if player.key_down:
        target = (x - cos_speed, y - sin_speed)
    if player.key_left:
        target = (x + sin_speed, y - cos_speed)
    if player.key_right:
        target = (x - sin_speed, y + cos_speed)
    return target


def _fits(game: Game, x: float, y: float, size: float) -> bool:
    corners = ((x, y), (x + size, y), (x, y + size), (x + size, y + size))
    return not any(game.is_wall(cx, cy) for cx, cy in corners)


def move_player(game: Game) -> None:
    """Apply held rotation and movement keys for one frame."""
    player = game.player
    if player.left_rotate:
        player.angle -= ANGLE_SPEED
    if player.right_rotate:
        player.angle += ANGLE_SPEED
    cos_speed = math.cos(player.angle) * SPEED
    sin_speed = math.sin(player.angle) * SPEED
    size = game.size_mini_player
    new_x, new_y = step_target(game, cos_speed, sin_speed)
    old_x, old_y = player.m_xp, player.m_yp
    # Each axis is tried on its own so the player slides along walls.
    if _fits(game, new_x, old_y, size):
        player.m_xp = new_x
    if _fits(game, old_x, new_y, size):
        player.m_yp = new_y
    player.pos_x = player.m_xp / game.size_mini
    player.pos_y = player.m_yp / game.size_mini