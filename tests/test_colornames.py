import pytest

from fractol.colornames import color_by_name


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("snow", 0xFFFAFA),
        ("ghost white", 0xF8F8FF),
        ("black", 0x0),
        ("navy", 0x80),
        ("cornflowerblue", 0x6495ED),
        ("snow4", 0x8B8989),
        ("thistle4", 0x8B7B8B),
        ("gray50", 0x7F7F7F),
        ("grey100", 0xFFFFFF),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_names(name, expected):
    assert color_by_name(name) == expected


def test_lookup_ignores_case():
    assert color_by_name("SNOW") == color_by_name("snow")
    assert color_by_name("Ghost White") == color_by_name("ghost white")


def test_first_duplicate_entry_wins():
    assert color_by_name("dark slate") == 0x2F4F4F
    assert color_by_name("light slate") == 0x778899
    assert color_by_name("light goldenrod") == 0xFAFAD2


def test_none_is_transparent():
    assert color_by_name("none") == -1


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        color_by_name("not a colour")


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_spellings_agree(level):
    gray = color_by_name(f"gray{level}")
    assert gray == color_by_name(f"grey{level}")
    red, green, blue = (gray >> 16) & 0xFF, (gray >> 8) & 0xFF, gray & 0xFF
    assert red == green == blue


def test_gray_levels_increase():
    values = [color_by_name(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    assert values[0] == color_by_name("black")
    assert values[-1] == color_by_name("white")


def test_spaced_and_joined_names_agree():
    assert color_by_name("misty rose") == color_by_name("mistyrose")
    assert color_by_name("dark grey") == color_by_name("darkgray")


def test_first_numbered_shade_matches_plain_name():
    assert color_by_name("ivory1") == color_by_name("ivory")
    assert color_by_name("red1") == color_by_name("red")