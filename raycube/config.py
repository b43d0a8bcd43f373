"""Reading and checking the texture and colour header of a scene file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Sequence

from raycube.errors import CubError

_TEXTURE_KEYS = ("NO", "SO", "WE", "EA")
_CONFIG_COUNT = 6


@dataclass(frozen=True)
class Config:
    """Wall texture paths, floor and ceiling colours, and where the header ends."""

    north: str
    south: str
    west: str
    east: str
    floor: int
    ceiling: int
    end_line: int


def is_space(char: str) -> bool:
    """True for a single space or a character from tab to carriage return."""
    return len(char) == 1 and (char == " " or "\t" <= char <= "\r")


def is_blank(line: str | None) -> bool:
    """True if the line is missing or holds only whitespace."""
    return line is None or all(is_space(char) for char in line)


def is_digit_space(text: str | None) -> bool:
    """True if text is digits with optional surrounding spaces or tabs."""
    if text is None:
        return False
    body = text.lstrip(" \t")
    if not body:
        return False
    rest = body.lstrip("0123456789")
    return rest.lstrip(" \t") == ""


def _skip_space(line: str, pos: int = 0) -> int:
    while pos < len(line) and is_space(line[pos]):
        pos += 1
    return pos


def config_index(line: str) -> int | None:
    """Return 0-5 for NO, SO, WE, EA, F, C lines; None for anything else."""
    text = line[_skip_space(line):]
    for index, key in enumerate(_TEXTURE_KEYS):
        if len(text) >= 3 and text.startswith(key) and is_space(text[2]):
            return index
    if len(text) >= 2 and is_space(text[1]):
        if text[0] == "F":
            return 4
        if text[0] == "C":
            return 5
    return None


def value_start(line: str) -> int | None:
    """Return where the value after the identifier begins, or None."""
    pos = _skip_space(line)
    if line.startswith(_TEXTURE_KEYS, pos):
        pos += 2
    elif line.startswith(("F", "C"), pos):
        pos += 1
    else:
        return None
    return _skip_space(line, pos)


def extract_value(line: str) -> str | None:
    """Return the value of a config line without surrounding whitespace."""
    start = value_start(line)
    if start is None:
        return None
    end = len(line) - 1
    while end > start and is_space(line[end]):
        end -= 1
    return line[start:end + 1]


def parse_color(line: str) -> int:
    """Parse an 'F r,g,b' or 'C r,g,b' line into 0xRRGGBB."""
    start = value_start(line)
    if start is None:
        raise CubError("Color config: must have exactly 3 components")
    parts = [part for part in line[start:].split(",") if part]
    if len(parts) != 3:
        raise CubError("Color config: must have exactly 3 components")
    if not all(is_digit_space(part) for part in parts):
        raise CubError("Color config: must be valid digit")
    red, green, blue = (int(part.strip(" \t")) for part in parts)
    if not all(0 <= value <= 255 for value in (red, green, blue)):
        raise CubError("Color config: components out of range 0-255")
    return (red << 16) | (green << 8) | blue


def check_texture_path(line: str) -> str:
    """Check that a texture line names a readable .xpm file; return the path."""
    path = extract_value(line)
    if path is None:
        raise CubError("texture config: format path invalid")
    if len(path) < 4 or not path.endswith(".xpm"):
        raise CubError("Texture config: must end with .xpm")
    if not os.access(path, os.R_OK):
        raise CubError("Texture config: path is wrong")
    return path


def check_config(lines: Sequence[str]) -> int:
    """Validate the six header entries; return the index of the line after them."""
    seen: set[int] = set()
    count = 0
    end = len(lines)
    for position, line in enumerate(lines):
        if count == _CONFIG_COUNT:
            end = position
            break
        if is_blank(line):
            continue
        index = config_index(line)
        if index is None:
            raise CubError("Configuration: invalid format")
        if index in seen:
            raise CubError("Configuration: Duplicate")
        seen.add(index)
        if index < 4:
            check_texture_path(line)
        else:
            parse_color(line)
        count += 1
    if count < _CONFIG_COUNT:
        raise CubError("Configuration: Missing config entries")
    return end


def read_config(lines: Sequence[str]) -> Config:
    """Validate and collect the header entries of a scene file."""
    end = check_config(lines)
    values: dict[int, str | int | None] = {}
    for line in lines[:end]:
        if is_blank(line):
            continue
        index = config_index(line)
        if index is None:
            continue
        values[index] = extract_value(line) if index < 4 else parse_color(line)
    textures = [values.get(index) for index in range(4)]
    floor, ceiling = values.get(4), values.get(5)
    if (
        any(not isinstance(path, str) for path in textures)
        or not isinstance(floor, int)
        or not isinstance(ceiling, int)
        or floor < 0
        or ceiling < 0
    ):
        raise CubError("Get config: Failed to get all config values.")
    north, south, west, east = textures
    return Config(north, south, west, east, floor, ceiling, end)