"""Game state: screen constants, the player and the loaded map."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from raycube.errors import CubError

WIDTH = 640
HEIGHT = 480
BLOCK = 64
PROPORTIONAL = 2
EPSILON = 0.0001
FIELD_OF_VIEW = math.pi / 3

RAY_COLOR = 0x0000FF
WALL_COLOR = 0xFFF0F5
SPACE_COLOR = 0xFFC0CB
PLAYER_COLOR = 0xA9A9A9


@dataclass
class Player:
    """The player's start cell, position on the minimap and held controls."""

    init_x: int = -1
    init_y: int = -1
    angle: float = 0.0
    direction: str = ""
    pos_x: float = 0.0
    pos_y: float = 0.0
    m_xp: float = 0.0
    m_yp: float = 0.0
    b_xp: float = 0.0
    b_yp: float = 0.0
    key_up: bool = False
    key_down: bool = False
    key_left: bool = False
    key_right: bool = False
    left_rotate: bool = False
    right_rotate: bool = False


@dataclass
class Game:
    """The flooded map grid with the player and the scale of drawing."""

    grid: list[str]
    player: Player = field(default_factory=Player)
    floor: int = -1
    ceiling: int = -1
    size_block: float = 0.0
    size_mini: float = 0.0
    size_mini_player: float = 0.0
    ratio: float = -1.0

    @property
    def width(self) -> int:
        return max((len(row) for row in self.grid), default=0)

    @property
    def height(self) -> int:
        return len(self.grid)

    def set_map_size(self) -> None:
        """Derive block and minimap sizes from the map and place the player."""
        width, height = self.width, self.height
        if width <= 0 or height <= 0:
            raise CubError("error: map is not correct, the width/heigh <= 0")
        max_dim = max(width, height)
        self.size_block = float(min(WIDTH // width, BLOCK))
        if max_dim > 200:
            self.size_mini = float(WIDTH // max_dim)
        else:
            self.size_mini = float(WIDTH // PROPORTIONAL // max_dim)
        if self.size_mini <= 0:
            raise CubError("error: map is too large to draw")
        self.size_mini_player = self.size_mini / 1.5
        player = self.player
        player.m_xp = player.init_x * self.size_mini
        player.m_yp = player.init_y * self.size_mini
        player.b_xp = player.init_x * self.size_block
        player.b_yp = player.init_y * self.size_block
        self.ratio = self.size_block / self.size_mini

    def is_wall(self, x: float, y: float) -> bool:
        """True unless the minimap pixel (x, y) lies on a floor cell."""
        if self.size_mini <= 0:
            raise CubError("error: map size is not set")
        col = int(int(x) / self.size_mini)
        row = int(int(y) / self.size_mini)
        if row < 0 or row >= self.height or col < 0 or col >= self.width:
            raise CubError("map index out")
        line = self.grid[row]
        return col >= len(line) or line[col] != "0"