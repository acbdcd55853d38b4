import pytest

from solong.colors import lookup_color
from solong.xpm import (
    Image,
    XpmError,
    quoted_strings,
    split_words,
    strip_comments,
    xpm_from_data,
    xpm_from_file,
)

SMALL = ["2 1 2 1", "a c #FF0000", "b c None", "ab"]


def test_split_words_spaces_and_tabs():
    assert split_words("  a  b\tc  ") == ["a", "b", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_strip_comments_keeps_length_and_removes_block():
    text = 'a/*xyz*/b "q"'
    out = strip_comments(text)
    assert len(out) == len(text)
    assert "xyz" not in out
    assert out.startswith("a") and out.endswith('b "q"')


def test_strip_comments_ignores_quoted():
    text = '"/*x*/" "//y"'
    assert strip_comments(text) == text


def test_strip_comments_line_comment():
    text = 'x // note\n"z"'
    out = strip_comments(text)
    assert "note" not in out
    assert len(out) == len(text)
    assert out.endswith('"z"')


def test_quoted_strings():
    assert list(quoted_strings('x "ab" y "cd" "unterminated')) == ["ab", "cd"]


def test_small_image():
    img = xpm_from_data(SMALL)
    assert (img.width, img.height) == (2, 1)
    assert img.pixel(0, 0) == 0xFF0000
    assert img.pixel(1, 0) == 0xFF000000


def test_named_colors():
    img = xpm_from_data(["2 1 2 1", "a c red", "b c light grey", "ab"])
    assert img.pixel(0, 0) == lookup_color("red")
    assert img.pixel(1, 0) == lookup_color("light grey")


def test_unknown_pixel_key_is_zero():
    img = xpm_from_data(["2 1 1 1", "a c white", "az"])
    assert img.pixel(0, 0) == lookup_color("white")
    assert img.pixel(1, 0) == 0


def test_duplicate_keys_short_keeps_last():
    img = xpm_from_data(["1 1 2 1", "a c red", "a c blue", "a"])
    assert img.pixel(0, 0) == lookup_color("blue")


def test_duplicate_keys_long_keeps_first():
    img = xpm_from_data(["1 1 2 3", "aaa c red", "aaa c blue", "aaa"])
    assert img.pixel(0, 0) == lookup_color("red")


@pytest.mark.parametrize(
    "rows",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1"],
        [],
        ["1 1 1 1", "a red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
    ],
)
def test_bad_data_raises(rows):
    with pytest.raises(XpmError):
        xpm_from_data(rows)


def test_file_matches_data(tmp_path):
    content = (
        "/* XPM */\n"
        "static char *img[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        '"2 1 2 1",\n'
        '"a c #FF0000",\n'
        '"b c None", // transparent\n'
        '"ab"\n'
        "};\n"
    )
    path = tmp_path / "tile.xpm"
    path.write_text(content)
    assert xpm_from_file(path) == xpm_from_data(SMALL)


def test_missing_file(tmp_path):
    with pytest.raises(XpmError):
        xpm_from_file(tmp_path / "missing.xpm")


def test_set_pixel_round_trip_and_bounds():
    img = Image(3, 2)
    img.set_pixel(2, 1, 0x123456)
    assert img.pixel(2, 1) == 0x123456
    assert img.pixel(0, 0) == 0
    with pytest.raises(IndexError):
        img.pixel(3, 0)


def test_data_byte_order():
    img = xpm_from_data(SMALL)
    assert img.size_line == img.width * img.bits_per_pixel // 8
    assert img.data[:4] == (0xFF0000).to_bytes(4, "little")
    img.endian = 1
    assert img.data[4:8] == (0xFF000000).to_bytes(4, "big")