"""The game window: drawing a frame, the minimap and the command entry point."""

from __future__ import annotations

import math
import os
import sys
from typing import Mapping, Sequence

from raycube.config import Config
from raycube.controls import Key, key_press, key_release, move_player
from raycube.errors import CubError, format_error
from raycube.framebuffer import FrameBuffer
from raycube.parser import Scene, read_cub
from raycube.raycast import RayHit, draw_rays, render_view
from raycube.state import (
    HEIGHT,
    PLAYER_COLOR,
    SPACE_COLOR,
    WALL_COLOR,
    WIDTH,
    Game,
    Player,
)
from raycube.xpm import XpmError, XpmImage, load_xpm

HEADING_COLOR = 0xF08080
TITLE = "The Game"


def draw_minimap(game: Game, frame: FrameBuffer) -> None:
    """Draw the grid in the top-left corner: floor cells and walls."""
    size = int(game.size_mini)
    for y, row in enumerate(game.grid):
        for x, cell in enumerate(row):
            color = SPACE_COLOR if cell == "0" else WALL_COLOR
            frame.draw_square(x * size, y * size, size, color)


def draw_player_marker(game: Game, frame: FrameBuffer) -> None:
    """Draw the player square on the minimap with a short heading line."""
    player = game.player
    size = int(game.size_mini_player)
    x0, y0 = int(player.m_xp), int(player.m_yp)
    frame.draw_square(x0, y0, size, PLAYER_COLOR)
    x1 = int(x0 + math.cos(player.angle) * size)
    y1 = int(y0 + math.sin(player.angle) * size)
    frame.draw_line(x0, y0, x1, y1, HEADING_COLOR)


def load_textures(config: Config) -> dict[str, XpmImage]:
    """Load the four wall textures, keyed by face letter."""
    sources = (
        ("N", "north", config.north),
        ("S", "south", config.south),
        ("E", "east", config.east),
        ("W", "west", config.west),
    )
    textures: dict[str, XpmImage] = {}
    for face, name, path in sources:
        try:
            textures[face] = load_xpm(path)
        except XpmError as exc:
            raise CubError(f"Can't load the {name} wall texture.") from exc
    return textures


def render_frame(game: Game, frame: FrameBuffer,
                 textures: Mapping[str, XpmImage]) -> list[RayHit]:
    """Move the player, draw the 3D view, the minimap and the rays."""
    move_player(game)
    frame.clear()
    hits = render_view(game, frame, textures)
    draw_minimap(game, frame)
    draw_player_marker(game, frame)
    draw_rays(game, frame, hits)
    return hits


def check_args(argv: Sequence[str]) -> str:
    """Check the command arguments; return the scene path."""
    if len(argv) < 1:
        raise CubError("There is no argument.")
    if len(argv) > 1:
        raise CubError("There are too many arguments.")
    path = argv[0]
    if len(path) < 4 or path[-4:] != ".cub":
        raise CubError("It's not a .cub file.")
    if not os.access(path, os.R_OK):
        raise CubError("The file path is invalid.")
    return path


def _game_from_scene(scene: Scene) -> Game:
    parsed = scene.map
    player = Player(
        init_x=parsed.start_x,
        init_y=parsed.start_y,
        angle=parsed.angle,
        direction=parsed.direction,
    )
    game = Game(
        grid=list(parsed.grid),
        player=player,
        floor=scene.config.floor,
        ceiling=scene.config.ceiling,
    )
    game.set_map_size()
    return game


def _frame_to_rgb(frame: FrameBuffer) -> bytes:
    pixels = frame.pixels
    if sys.byteorder == "big":
        pixels = type(pixels)(pixels.typecode, pixels)
        pixels.byteswap()
    raw = pixels.tobytes()
    rgb = bytearray(len(raw) // 4 * 3)
    rgb[0::3] = raw[2::4]
    rgb[1::3] = raw[1::4]
    rgb[2::3] = raw[0::4]
    return bytes(rgb)


def _run_window(game: Game, textures: Mapping[str, XpmImage]) -> None:
    import pygame

    key_map = {
        pygame.K_a: Key.A,
        pygame.K_w: Key.W,
        pygame.K_s: Key.S,
        pygame.K_d: Key.D,
        pygame.K_ESCAPE: Key.ESC,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
    }
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        frame = FrameBuffer(WIDTH, HEIGHT)
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                if event.type == pygame.KEYDOWN and event.key in key_map:
                    if key_press(game.player, key_map[event.key]):
                        return
                elif event.type == pygame.KEYUP and event.key in key_map:
                    key_release(game.player, key_map[event.key])
            render_frame(game, frame, textures)
            image = pygame.image.frombuffer(_frame_to_rgb(frame), (WIDTH, HEIGHT), "RGB")
            screen.blit(image, (0, 0))
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Load a scene and play it in a window; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        path = check_args(argv)
        scene = read_cub(path)
        textures = load_textures(scene.config)
        game = _game_from_scene(scene)
        _run_window(game, textures)
    except CubError as exc:
        sys.stderr.write(format_error(exc.message))
        return 1
    return 0