import pytest

from xpmkit.textscan import find, find_unquoted, split_words


def test_find_locates_needle():
    text = "static char *xpm[] = {"
    pos = find(text, "xpm", len(text))
    assert text[pos:pos + 3] == "xpm"
    assert pos == text.index("xpm")


def test_find_missing_returns_minus_one():
    assert find("abcdef", "xyz", 10) == -1


def test_find_needle_longer_than_limit():
    assert find("abcdef", "cde", 2) == -1


def test_find_unquoted_skips_quoted_match():
    text = '"a/*b" /*c'
    pos = find_unquoted(text, "/*", len(text))
    assert text[pos:pos + 2] == "/*"
    assert pos > text.index('"', 1)


def test_find_unquoted_only_inside_quotes():
    text = 'x "/* inside */" y'
    assert find_unquoted(text, "/*", len(text)) == -1


def test_find_unquoted_unquoted_text_matches_find():
    text = "one // two // three"
    assert find_unquoted(text, "//", len(text)) == find(text, "//", len(text))


def test_find_unquoted_limit():
    assert find_unquoted("/*", "/*", 1) == -1


def test_find_unquoted_needle_longer_than_text():
    assert find_unquoted("a", "abc", 10) == -1


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  16 16  2\t1 ", ["16", "16", "2", "1"]),
        ("", []),
        (" \t ", []),
        ("a\nb c", ["a\nb", "c"]),
        ("single", ["single"]),
    ],
)
def test_split_words(text, expected):
    assert split_words(text) == expected


def test_split_words_join_round_trip():
    words = ["c", "#FF0000", "s", "red"]
    assert split_words(" \t".join(words)) == words