import pytest

from solong.colors import color_by_name


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("ghost white", 0xF8F8FF),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("lightgreen", 0x90EE90),
        ("gray50", 0x7F7F7F),
    ],
)
def test_known_names(name, expected):
    assert color_by_name(name) == expected


def test_lookup_ignores_case():
    assert color_by_name("SNOW") == color_by_name("snow")
    assert color_by_name("Ghost White") == 0xF8F8FF


def test_first_entry_wins_for_duplicate_names():
    # "dark slate" and "light slate" appear several times; the first counts.
    assert color_by_name("dark slate") == 0x2F4F4F
    assert color_by_name("light slate") == 0x778899
    assert color_by_name("light goldenrod") == 0xFAFAD2


def test_none_is_transparent():
    assert color_by_name("none") == -1
    assert color_by_name("None") == -1


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        color_by_name("no such colour")


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_agree(level):
    assert color_by_name(f"gray{level}") == color_by_name(f"grey{level}")


@pytest.mark.parametrize(
    "spaced, joined",
    [
        ("alice blue", "aliceblue"),
        ("misty rose", "mistyrose"),
        ("dark orange", "darkorange"),
        ("light pink", "lightpink"),
        ("dark red", "darkred"),
    ],
)
def test_spaced_and_joined_forms_agree(spaced, joined):
    assert color_by_name(spaced) == color_by_name(joined)


@pytest.mark.parametrize(
    "base", ["snow", "bisque", "ivory", "azure", "gold", "tomato", "orchid"]
)
def test_first_numbered_variant_matches_base(base):
    assert color_by_name(f"{base}1") == color_by_name(base)


def test_values_fit_in_24_bits():
    names = ["snow", "thistle4", "darkmagenta", "gray100", "cyan", "purple"]
    for name in names:
        assert 0 <= color_by_name(name) <= 0xFFFFFF