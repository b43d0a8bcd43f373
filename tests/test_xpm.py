import pytest

from raycube.xpm import (
    XpmError,
    XpmImage,
    find,
    find_unquoted,
    load_xpm,
    parse_xpm,
    parse_xpm_text,
    quoted_strings,
    split_words,
    strip_comments,
    text_to_rgb,
)

SAMPLE = """/* XPM */
static char *wall[] = {
/* columns rows colors chars-per-pixel */
"3 2 2 1 ",
"  c None",
"x c #00FF00",
// pixels
"x x",
" x ",
};
"""


def test_split_words_spaces_and_tabs():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]


def test_split_words_keeps_newlines():
    assert split_words("a\nb") == ["a\nb"]


def test_find():
    assert find("hello", "ll") == "hello".index("ll")
    assert find("abc", "z") == -1
    assert find("ab", "abc") == -1


def test_find_unquoted_skips_quoted():
    text = '"/*" /* x */'
    assert find_unquoted(text, "/*") == text.rindex("/*")


def test_find_unquoted_missing():
    assert find_unquoted('"//"', "//") == -1


def test_strip_comments_keeps_length_and_strings():
    text = '/* c */\n"a b"\n// x\n"c"'
    out = strip_comments(text)
    assert len(out) == len(text)
    assert "/*" not in out and "//" not in out
    assert list(quoted_strings(out)) == ["a b", "c"]


def test_strip_comments_inside_quotes_untouched():
    assert strip_comments('"a//b"') == '"a//b"'


def test_quoted_strings():
    assert list(quoted_strings('x "ab" y "cd" "open')) == ["ab", "cd"]


def test_text_to_rgb_hex_and_names():
    assert text_to_rgb("#FF0000", None) == 0xFF0000
    assert text_to_rgb("Red", None) == text_to_rgb("red", None)
    assert text_to_rgb("dark", "red") == 0x8B0000
    assert text_to_rgb("None", None) == -1
    assert text_to_rgb("nosuchcolour", None) == 0


def test_parse_xpm_one_char_per_pixel():
    image = parse_xpm(["2 2 2 1", ". c #FF0000", "# c None", ".#", "#."])
    assert (image.width, image.height) == (2, 2)
    assert image.pixel(0, 0) == image.pixel(1, 1) == 0xFF0000
    assert image.pixel(1, 0) == 0xFF000000


def test_direct_table_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c red", "a c blue", "a"])
    assert image.pixel(0, 0) == text_to_rgb("blue", None)


def test_wide_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "aaa c red", "aaa c blue", "aaa"])
    assert image.pixel(0, 0) == text_to_rgb("red", None)


def test_unknown_key_is_black():
    image = parse_xpm(["1 1 1 3", "aaa c red", "bbb"])
    assert image.pixel(0, 0) == 0


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1", "a c red", "a"],
        ["1 1 1 1", "a s red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
    ],
)
def test_parse_xpm_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_parse_xpm_text_with_comments():
    image = parse_xpm_text(SAMPLE)
    assert (image.width, image.height) == (3, 2)
    assert image.pixel(0, 0) == 0x00FF00
    assert image.pixel(1, 0) == 0xFF000000
    assert image.pixel(1, 1) == image.pixel(2, 0)


def test_load_xpm_matches_text(tmp_path):
    path = tmp_path / "wall.xpm"
    path.write_text(SAMPLE)
    assert load_xpm(path) == parse_xpm_text(SAMPLE)


def test_load_xpm_missing(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "missing.xpm")


def test_pixel_out_of_range():
    image = XpmImage(1, 1, ((5,),))
    assert image.pixel(0, 0) == 5
    with pytest.raises(IndexError):
        image.pixel(1, 0)
    with pytest.raises(IndexError):
        image.pixel(0, -1)