import math

import pytest

from raycube.errors import CubError
from raycube.mapgrid import (
    ParsedMap,
    build_map,
    check_map,
    count_map_lines,
    find_map_start,
    flood_map,
    pad_rows,
)


def test_find_map_start_skips_blank_lines():
    lines = ["NO ./a.xpm", "", "   ", "  111", "  1N1"]
    position = find_map_start(lines, 1)
    assert lines[position] == "  111"


def test_find_map_start_without_map():
    with pytest.raises(CubError, match="There is no map in the .cub file."):
        find_map_start(["F 1,2,3", "", "  "], 1)


def test_count_map_lines_counts_tail():
    lines = ["C 0,0,0", "111", "1N1", "111"]
    assert count_map_lines(lines, 1) == len(lines) - 1


def test_count_map_lines_rejects_blank_line():
    with pytest.raises(CubError, match="blank lines"):
        count_map_lines(["111", "", "111"], 0)


def test_count_map_lines_rejects_foreign_line():
    with pytest.raises(CubError, match="Invalid symbols in/after the map."):
        count_map_lines(["111", "xyz"], 0)


def test_pad_rows_round_trip():
    rows = ["1", "111", "11"]
    padded = pad_rows(rows, 3)
    assert all(len(row) == 3 for row in padded)
    assert [row.rstrip(" ") for row in padded] == rows


def test_flood_map_marks_outside_and_fills_inside():
    assert flood_map(["  111", "  1 1", "  111"]) == ["VV111", "VV111", "VV111"]


def test_flood_map_leaves_no_spaces():
    grid = pad_rows(["  1111", " 10  1", "1N0111", "1111"], 6)
    flooded = flood_map(grid)
    assert all(" " not in row for row in flooded)
    assert [len(row) for row in flooded] == [len(row) for row in grid]


def test_check_map_finds_player():
    grid, x, y, direction = check_map(["111", "1N1", "111"])
    assert (x, y, direction) == (1, 1, "N")
    assert grid[1][1] == "0"


def test_check_map_open_wall():
    with pytest.raises(CubError, match="Wall of the map is not closed"):
        check_map(["101", "1N1", "111"])


def test_check_map_floor_next_to_outside():
    with pytest.raises(CubError, match="Wall of the map is not closed"):
        check_map(["V111", "V0N1", "V111"])


def test_check_map_two_players():
    with pytest.raises(CubError, match="more than one player"):
        check_map(["1111", "1NS1", "1111"])


def test_check_map_no_player():
    with pytest.raises(CubError, match="Can't set the player's position."):
        check_map(["111", "101", "111"])


def test_check_map_invalid_symbol():
    with pytest.raises(CubError, match="invalid symbols"):
        check_map(["111", "1X1", "1N1", "111"])


def test_build_map_irregular_rows():
    lines = ["NO ./n.xpm", "", "1111", "1E01", "111", "  "]
    # trailing whitespace-only line counts as a blank line after the map
    with pytest.raises(CubError, match="blank lines"):
        build_map(lines, 2)


def test_build_map_result():
    lines = ["C 0,0,0", "", "  1111", " 10001", "1W0011", "111111"]
    parsed = build_map(lines, 2)
    assert isinstance(parsed, ParsedMap)
    assert parsed.height == 4
    assert parsed.width == 6
    assert parsed.rows[0] == "  1111"
    assert all(len(row) == parsed.width for row in parsed.rows)
    assert (parsed.start_x, parsed.start_y, parsed.direction) == (1, 2, "W")
    assert parsed.grid[2][1] == "0"
    assert parsed.grid[0][0] == "V"


@pytest.mark.parametrize(
    ("letter", "angle"),
    [("E", 0.0), ("W", math.pi), ("N", 3 * math.pi / 2), ("S", math.pi / 2)],
)
def test_build_map_angles(letter, angle):
    parsed = build_map(["111", f"1{letter}1", "111"], 0)
    assert parsed.angle == pytest.approx(angle)


def test_build_map_rejects_tab():
    with pytest.raises(CubError, match="There are invalid symbols in the map."):
        build_map(["1111", "1N\t1", "1111"], 0)


def test_build_map_open_map():
    with pytest.raises(CubError, match="Wall of the map is not closed"):
        build_map(["1111", "1N0 ", "1111"], 0)