import pytest

from xpmkit.colors import color_names, lookup_color


@pytest.mark.parametrize(
    "name, value",
    [
        ("snow", 0xFFFAFA),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("red", 0xFF0000),
        ("lightgoldenrodyellow", 0xFAFAD2),
        ("grey50", 0x7F7F7F),
    ],
)
def test_known_values(name, value):
    assert lookup_color(name) == value


def test_none_is_transparent_marker():
    assert lookup_color("none") == -1


def test_lookup_ignores_case():
    assert lookup_color("ReD") == lookup_color("red")
    assert lookup_color("GHOST WHITE") == lookup_color("ghost white")


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        lookup_color("not-a-colour")


def test_names_are_unique_and_resolvable():
    names = color_names()
    assert len(names) == len(set(names))
    assert "snow" in names and "none" in names
    for name in names:
        assert -1 <= lookup_color(name) <= 0xFFFFFF


def test_gray_and_grey_spellings_agree():
    for level in range(101):
        assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_names_keep_table_order():
    names = color_names()
    assert names[0] == "snow"
    assert names[-1] == "none"
    assert names.index("snow") < names.index("red") < names.index("gray0")