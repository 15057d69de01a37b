import pytest

from xpmkit.colors import lookup_color
from xpmkit.xpm import (
    XpmError,
    XpmImage,
    parse_xpm,
    pixel_key,
    quoted_lines,
    strip_comments,
    text_to_rgb,
    xpm_file_to_image,
    xpm_to_image,
)

SAMPLE = ["2 2 2 1", ". c #FF0000", "x c None", ".x", "x."]

SAMPLE_FILE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars */
"2 2 2 1",
". c #FF0000",
"x c None",
// rows
".x",
"x."
};
"""


def test_strip_comments_keeps_length_and_removes_comments():
    result = strip_comments(SAMPLE_FILE)
    assert len(result) == len(SAMPLE_FILE)
    assert "/*" not in result
    assert "//" not in result
    assert '"2 2 2 1"' in result


def test_strip_comments_leaves_quoted_text():
    text = '"a/*b*/" /* gone */'
    result = strip_comments(text)
    assert result.startswith('"a/*b*/"')
    assert "gone" not in result


def test_quoted_lines():
    assert list(quoted_lines('x "ab" y "cd" "e')) == ["ab", "cd"]


def test_quoted_lines_of_stripped_file():
    assert list(quoted_lines(strip_comments(SAMPLE_FILE))) == SAMPLE


def test_pixel_key_uses_only_first_chars():
    assert pixel_key("ABC", 1) == pixel_key("A", 1) == ord("A")
    assert pixel_key("ABX", 2) == pixel_key("AB", 2)
    assert pixel_key("AB", 2) != pixel_key("BA", 2)


def test_text_to_rgb_hex():
    assert text_to_rgb("#FF0000", None) == 0xFF0000


def test_text_to_rgb_full_hex_wraps_to_minus_one():
    assert text_to_rgb("#FFFFFFFF", None) == -1


def test_text_to_rgb_names():
    assert text_to_rgb("red", None) == lookup_color("red")
    assert text_to_rgb("light", "blue") == lookup_color("light blue")
    assert text_to_rgb("None", None) == -1
    assert text_to_rgb("nosuchcolour", None) == 0


def test_parse_sample():
    image = parse_xpm(SAMPLE)
    assert (image.width, image.height) == (2, 2)
    assert image.pixel(0, 0) == 0xFF0000
    assert image.pixel(1, 0) == 0xFF000000
    assert image.pixel(0, 1) == 0xFF000000
    assert image.pixel(1, 1) == 0xFF0000


def test_pixels_length_matches_size():
    image = xpm_to_image(SAMPLE)
    assert len(image.pixels) == image.width * image.height


def test_pixel_out_of_range():
    image = xpm_to_image(SAMPLE)
    with pytest.raises(IndexError):
        image.pixel(2, 0)


def test_named_colour_with_two_words():
    image = xpm_to_image(["1 1 1 1", "a c light blue", "a"])
    assert image.pixel(0, 0) == lookup_color("light blue")


def test_unknown_pixel_character_is_zero():
    image = xpm_to_image(["2 1 1 1", "a c #00FF00", "az"])
    assert image.pixels == (0x00FF00, 0)


def test_short_keys_last_definition_wins():
    image = xpm_to_image(["1 1 2 1", "a c #0000FF", "a c #00FF00", "a"])
    assert image.pixel(0, 0) == 0x00FF00


def test_long_keys_first_definition_wins():
    image = xpm_to_image(["1 1 2 3", "aaa c #0000FF", "aaa c #00FF00", "aaa"])
    assert image.pixel(0, 0) == 0x0000FF


def test_multichar_keys():
    image = xpm_to_image(["2 1 2 2", "ab c #FF0000", "ba c #00FF00", "baab"])
    assert image.pixels == (0x00FF00, 0xFF0000)


@pytest.mark.parametrize(
    "data",
    [
        [],
        ["0 2 2 1"],
        ["2 2 2"],
        ["2 2 two 1"],
        ["1 1 1 1", "a #FF0000", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 1 1 1", "a c #FF0000"],
        ["1 2 1 1", "a c #FF0000", "a"],
    ],
)
def test_invalid_data_raises(data):
    with pytest.raises(XpmError):
        parse_xpm(data)


def test_file_matches_in_memory(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE_FILE)
    from_file = xpm_file_to_image(path)
    assert isinstance(from_file, XpmImage)
    assert from_file == xpm_to_image(SAMPLE)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        xpm_file_to_image(tmp_path / "absent.xpm")