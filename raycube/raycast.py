"""Grid ray casting and the textured wall columns it produces."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping, Sequence

from raycube.errors import CubError
from raycube.framebuffer import FrameBuffer
from raycube.state import EPSILON, FIELD_OF_VIEW, HEIGHT, RAY_COLOR, WIDTH, Game
from raycube.xpm import XpmImage

_FAR = 1e30
_PLANE_DISTANCE = int((WIDTH / 2) / math.tan(FIELD_OF_VIEW / 2))
_MIN_DISTANCE = 0.0001


@dataclass(frozen=True)
class RayHit:
    """Where a ray met a wall: grid cell, side crossed and minimap hit point.

    side is 0 when a vertical grid line was crossed, 1 for a horizontal one.
    """

    vector_x: float
    vector_y: float
    map_x: int
    map_y: int
    step_x: int
    step_y: int
    side_x: float
    side_y: float
    side: int
    hit_x: float
    hit_y: float


@dataclass(frozen=True)
class WallSlice:
    """The screen extent of one wall column and its texture column."""

    height: int
    start_y: int
    end_y: int
    tex_x: int
    off_y: int


def _hit_point(game: Game, vx: float, vy: float, map_x: int, map_y: int,
               step_x: int, step_y: int, side_x: float, side_y: float,
               side: int) -> tuple[float, float]:
    player = game.player
    cx, cy = player.m_xp, player.m_yp
    mini = game.size_mini
    if side == 0:
        if abs(vx) < EPSILON:
            return cx, cy + side_y
        hit_x = map_x * mini if step_x > 0 else (map_x + 1) * mini
        return hit_x, cy + (hit_x - cx) * (vy / vx)
    if abs(vy) < 0.001:
        return cx + side_x, cy
    hit_y = map_y * mini if step_y > 0 else (map_y + 1) * mini
    return cx + (hit_y - cy) * (vx / vy), hit_y


def cast_ray(game: Game, direction: float) -> RayHit:
    """Step a ray through the grid from the player until it meets a wall."""
    player = game.player
    vx, vy = math.cos(direction), math.sin(direction)
    map_x, map_y = int(player.pos_x), int(player.pos_y)
    delta_x = _FAR if vx == 0 else abs(1 / vx)
    delta_y = _FAR if vy == 0 else abs(1 / vy)
    if vx < 0:
        step_x, side_x = -1, (player.pos_x - map_x) * delta_x
    else:
        step_x, side_x = 1, (map_x + 1.0 - player.pos_x) * delta_x
    if vy < 0:
        step_y, side_y = -1, (player.pos_y - map_y) * delta_y
    else:
        step_y, side_y = 1, (map_y + 1.0 - player.pos_y) * delta_y
    width, height = game.width, game.height
    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if map_x < 0 or map_x >= width:
            raise CubError("x depass the map")
        if map_y < 0 or map_y >= height:
            raise CubError("y depass the map")
        row = game.grid[map_y]
        if map_x < len(row) and row[map_x] == "1":
            break
    hit_x, hit_y = _hit_point(game, vx, vy, map_x, map_y, step_x, step_y,
                              side_x, side_y, side)
    return RayHit(vx, vy, map_x, map_y, step_x, step_y, side_x, side_y,
                  side, hit_x, hit_y)


def hit_face(hit: RayHit) -> str:
    """Return which texture the hit wall shows: 'N', 'S', 'E' or 'W'."""
    if hit.side == 0:
        return "E" if hit.step_x > 0 else "W"
    return "S" if hit.step_y > 0 else "N"


def hit_distance(game: Game, hit: RayHit) -> float:
    """Straight-line minimap distance from the player to the hit point."""
    if hit.hit_x == -1 or hit.hit_y == -1:
        raise CubError("error in hit wall")
    return math.hypot(hit.hit_x - game.player.m_xp, hit.hit_y - game.player.m_yp)


def corrected_distance(game: Game, hit: RayHit) -> float:
    """Distance projected on the view direction, removing the fish-eye effect."""
    ray_angle = math.atan2(hit.vector_y, hit.vector_x)
    return hit_distance(game, hit) * math.cos(ray_angle - game.player.angle)


def texture_column(game: Game, texture: XpmImage, hit: RayHit, distance: float) -> int:
    """Return the texture column for where the ray meets its wall block."""
    if hit.side == 0:
        wall_x = game.player.m_yp + distance * hit.vector_y
    else:
        wall_x = game.player.m_xp + distance * hit.vector_x
    wall_x -= math.floor(wall_x / game.size_mini) * game.size_mini
    wall_x /= game.size_mini
    return int(wall_x * texture.width)


def texture_color(texture: XpmImage, x: int, y: int) -> int:
    """Return the texture pixel at (x, y), clamped to the texture's edges."""
    x = min(max(x, 0), texture.width - 1)
    y = min(max(y, 0), texture.height - 1)
    return texture.pixel(x, y)


def wall_slice(game: Game, texture: XpmImage, hit: RayHit, distance: float) -> WallSlice:
    """Work out the screen rows covered by a wall at the given distance."""
    scaled = max(distance * game.ratio, _MIN_DISTANCE)
    height = int((game.size_block / scaled) * _PLANE_DISTANCE)
    start_y = HEIGHT // 2 - height // 2
    off_y = 0
    if start_y < 0:
        off_y = -start_y
        start_y = 0
    end_y = min(start_y + height, HEIGHT)
    return WallSlice(height, start_y, end_y,
                     texture_column(game, texture, hit, distance), off_y)


def draw_column(game: Game, frame: FrameBuffer, textures: Mapping[str, XpmImage],
                hit: RayHit, column: int) -> None:
    """Draw ceiling, textured wall and floor for one screen column."""
    distance = corrected_distance(game, hit)
    texture = textures[hit_face(hit)]
    wall = wall_slice(game, texture, hit, distance)
    for y in range(wall.start_y):
        frame.put_pixel(column, y, game.ceiling)
    for y in range(wall.start_y, wall.end_y):
        tex_y = ((y - wall.start_y) + wall.off_y) * texture.height // wall.height
        frame.put_pixel(column, y, texture_color(texture, wall.tex_x, tex_y))
    for y in range(max(wall.end_y, wall.start_y), HEIGHT):
        frame.put_pixel(column, y, game.floor)


def render_view(game: Game, frame: FrameBuffer,
                textures: Mapping[str, XpmImage]) -> list[RayHit]:
    """Cast one ray per screen column across the field of view and draw it."""
    fraction = FIELD_OF_VIEW / WIDTH
    direction = game.player.angle - FIELD_OF_VIEW / 2
    hits = []
    for column in range(WIDTH):
        hit = cast_ray(game, direction)
        draw_column(game, frame, textures, hit, column)
        hits.append(hit)
        direction += fraction
    return hits


def draw_rays(game: Game, frame: FrameBuffer, hits: Sequence[RayHit]) -> None:
    """Draw every ray on the minimap from the player to its hit point."""
    x0, y0 = int(game.player.m_xp), int(game.player.m_yp)
    for hit in hits:
        frame.draw_line(x0, y0, int(hit.hit_x), int(hit.hit_y), RAY_COLOR)