"""Loading a whole scene file: header, map and player start."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from raycube.config import Config, read_config
from raycube.errors import CubError
from raycube.mapgrid import ParsedMap, build_map, find_map_start


@dataclass(frozen=True)
class Scene:
    """A checked scene: its header entries and its map."""

    config: Config
    map: ParsedMap


def parse_lines(lines: Sequence[str]) -> Scene:
    """Check and collect the header, then extract and check the map."""
    lines = list(lines)
    config = read_config(lines)
    start = find_map_start(lines, config.end_line)
    return Scene(config, build_map(lines, start))


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def read_cub(path: str | Path) -> Scene:
    """Read a .cub file and parse it into a scene."""
    try:
        text = Path(path).read_text(encoding="utf-8", errors="surrogateescape")
    except OSError as exc:
        raise CubError("can't open the file.") from exc
    return parse_lines(_split_lines(text))