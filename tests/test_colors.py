import pytest

from raycube.colors import lookup_color


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("snow", 0xFFFAFA),
        ("black", 0x0),
        ("white", 0xFFFFFF),
        ("red", 0xFF0000),
        ("navy blue", 0x80),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_none_is_transparent_marker():
    assert lookup_color("none") == -1


def test_case_insensitive():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Ghost White") == lookup_color("ghost white")


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


@pytest.mark.parametrize("name", ["", "not a colour", "snow5", "gray101"])
def test_unknown_names(name):
    assert lookup_color(name) is None


def test_non_ascii_does_not_fold():
    # U+212A KELVIN SIGN lowercases to "k" but must not match "khaki".
    assert lookup_color("\u212ahaki") is None


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_agree(level):
    gray = lookup_color(f"gray{level}")
    assert gray == lookup_color(f"grey{level}")
    assert 0 <= gray <= 0xFFFFFF


def test_gray_levels_increase():
    values = [lookup_color(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    assert values[0] == lookup_color("black")
    assert values[-1] == lookup_color("white")


def test_numbered_variant_one_matches_base():
    for base in ("red", "snow", "bisque", "gold", "magenta"):
        assert lookup_color(base + "1") == lookup_color(base)