"""Extracting, flooding and checking the map section of a scene file."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from raycube.config import is_space
from raycube.errors import CubError

_MAP_START_CHARS = "01NEWS"
_ALLOWED = " 01NEWS"
_PLAYER_CHARS = "NEWS"
_OUTSIDE = "V"

# East is the start of the circle; angles grow clockwise on screen.
_ANGLES = {
    "E": 0.0,
    "W": math.pi,
    "N": 3 * math.pi / 2,
    "S": math.pi / 2,
}


@dataclass(frozen=True)
class ParsedMap:
    """A checked map: padded rows, the flooded grid and the player's start."""

    rows: tuple[str, ...]
    grid: tuple[str, ...]
    start_x: int
    start_y: int
    direction: str

    @property
    def width(self) -> int:
        return max((len(row) for row in self.rows), default=0)

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def angle(self) -> float:
        """Starting view angle in radians for the player's direction letter."""
        return _ANGLES[self.direction]


def _first_visible(line: str) -> str:
    for char in line:
        if not is_space(char):
            return char
    return ""


def find_map_start(lines: Sequence[str], index: int) -> int:
    """Return the index of the first map line at or after index."""
    for position in range(index, len(lines)):
        first = _first_visible(lines[position])
        if first and first in _MAP_START_CHARS:
            return position
    raise CubError("There is no map in the .cub file.")


def count_map_lines(lines: Sequence[str], start: int) -> int:
    """Count the map lines from start to the end, rejecting blank or foreign lines."""
    tail = lines[start:]
    for line in tail:
        first = _first_visible(line)
        if not first:
            raise CubError("There are blank lines in/after the map.")
        if first not in _ALLOWED:
            raise CubError("Invalid symbols in/after the map.")
    return len(tail)


def pad_rows(rows: Sequence[str], width: int) -> list[str]:
    """Pad every row with spaces up to width."""
    return [row.ljust(width) for row in rows]


def flood_map(grid: Sequence[str]) -> list[str]:
    """Mark spaces reachable from the border as 'V' and fill the rest with '1'."""
    cells = [list(row) for row in grid]
    height = len(cells)

    def inside(y: int, x: int) -> bool:
        return 0 <= y < height and 0 <= x < len(cells[y])

    stack = [
        (y, x)
        for y, row in enumerate(cells)
        for x in range(len(row))
        if y in (0, height - 1) or x in (0, len(row) - 1)
    ]
    while stack:
        y, x = stack.pop()
        if not inside(y, x) or cells[y][x] != " ":
            continue
        cells[y][x] = _OUTSIDE
        stack.extend(((y + 1, x), (y - 1, x), (y, x + 1), (y, x - 1)))
    return ["".join(row).replace(" ", "1") for row in cells]


def _is_open(cells: list[list[str]], y: int, x: int) -> bool:
    if y == 0 or cells[y - 1][x] == _OUTSIDE:
        return True
    if y + 1 >= len(cells) or x >= len(cells[y + 1]) or cells[y + 1][x] == _OUTSIDE:
        return True
    if x == 0 or cells[y][x - 1] == _OUTSIDE:
        return True
    return x + 1 >= len(cells[y]) or cells[y][x + 1] == _OUTSIDE


def _check_closed(cells: list[list[str]], y: int, x: int) -> None:
    if _is_open(cells, y, x):
        raise CubError("Wall of the map is not closed")


def check_map(grid: Sequence[str]) -> tuple[list[str], int, int, str]:
    """Check a flooded grid; return it with the player cell as '0', and the start.

    The result is (grid, x, y, direction).
    """
    cells = [list(row) for row in grid]
    player: tuple[int, int, str] | None = None
    for y, row in enumerate(cells):
        for x, char in enumerate(row):
            if char == "0":
                _check_closed(cells, y, x)
            elif char in _PLAYER_CHARS:
                if player is not None:
                    raise CubError("There are more than one player position.")
                player = (x, y, char)
                row[x] = "0"
                _check_closed(cells, y, x)
            elif char not in (_OUTSIDE, "1"):
                raise CubError("There are invalid symbols in the map.")
    if player is None:
        raise CubError("Can't set the player's position.")
    x, y, direction = player
    return ["".join(row) for row in cells], x, y, direction


def build_map(lines: Sequence[str], start: int) -> ParsedMap:
    """Extract, pad, flood and check the map that begins at line start."""
    height = count_map_lines(lines, start)
    raw = list(lines[start:start + height])
    width = max((len(row) for row in raw), default=0)
    rows = pad_rows(raw, width)
    for row in rows:
        if any(char not in _ALLOWED for char in row):
            raise CubError("There are invalid symbols in the map.")
    grid, x, y, direction = check_map(flood_map(rows))
    return ParsedMap(tuple(rows), tuple(grid), x, y, direction)