import pytest

from solong.xpm import (
    TRANSPARENT,
    XpmError,
    XpmImage,
    load_xpm,
    parse_xpm,
    parse_xpm_text,
    split_words,
    strip_comments,
)

SAMPLE_LINES = ["2 2 2 1", "a c #FF0000", "b c None", "ab", "ba"]

SAMPLE_FILE = """/* XPM */
static char *tile[] = {
/* columns rows colors chars-per-pixel */
"2 2 2 1 ",
"a c #FF0000",
"b c None",
// pixels
"ab",
"ba"
};
"""


def test_split_words_on_spaces_and_tabs():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_strip_block_comment_keeps_length():
    text = "/* XPM */\nx"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result == " " * 9 + "\nx"


def test_strip_line_comment_removes_newline():
    assert strip_comments("ab// c\nd") == "ab" + " " * 5 + "d"


def test_comment_markers_inside_quotes_are_kept():
    text = '"a/*b*/" "c//d"'
    assert strip_comments(text) == text


def test_parse_basic_image():
    image = parse_xpm(SAMPLE_LINES)
    assert (image.width, image.height) == (2, 2)
    assert image.pixel(0, 0) == 0xFF0000
    assert image.pixel(1, 0) == TRANSPARENT
    assert image.pixel(0, 1) == image.pixel(1, 0)
    assert image.pixel(1, 1) == image.pixel(0, 0)


def test_named_color_with_two_words():
    image = parse_xpm(["1 1 1 1", "x c dark red", "x"])
    assert image.pixel(0, 0) == 0x8B0000


def test_unknown_key_gives_black():
    image = parse_xpm(["2 1 1 1", "a c white", "az"])
    assert image.pixel(0, 0) == 0xFFFFFF
    assert image.pixel(1, 0) == 0


def test_short_keys_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c red", "a c blue", "a"])
    assert image.pixel(0, 0) == 0xFF


def test_long_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c red", "abc c blue", "abc"])
    assert image.pixel(0, 0) == 0xFF0000


def test_rows_have_declared_width():
    image = parse_xpm(["3 2 1 1", ". c black", "...", "..."])
    assert len(image.pixels) == image.height
    assert all(len(row) == image.width for row in image.pixels)


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1", "a c red", "a"],
        ["1 1 1 1", "a s red", "a"],
        ["1 1 1 1", "a c"],
        ["1 2 1 1", "a c red", "a"],
        [],
    ],
)
def test_bad_data_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_pixel_out_of_range():
    image = parse_xpm(SAMPLE_LINES)
    with pytest.raises(IndexError):
        image.pixel(2, 0)
    with pytest.raises(IndexError):
        image.pixel(0, -1)


def test_parse_text_matches_lines():
    assert parse_xpm_text(SAMPLE_FILE) == parse_xpm(SAMPLE_LINES)


def test_load_file(tmp_path):
    path = tmp_path / "tile.xpm"
    path.write_text(SAMPLE_FILE)
    image = load_xpm(path)
    assert isinstance(image, XpmImage)
    assert image == parse_xpm(SAMPLE_LINES)


def test_load_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "missing.xpm")


def test_load_empty_file(tmp_path):
    path = tmp_path / "empty.xpm"
    path.write_bytes(b"")
    with pytest.raises(XpmError):
        load_xpm(path)