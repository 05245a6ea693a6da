import pytest

from wirefdf.colors import NONE_COLOR, lookup_color


@pytest.mark.parametrize(
    "name, value",
    [
        ("red", 0xFF0000),
        ("snow", 0xFFFAFA),
        ("navy", 0x80),
        ("light green", 0x90EE90),
        ("gray100", 0xFFFFFF),
        ("black", 0x0),
    ],
)
def test_known_names(name, value):
    assert lookup_color(name) == value


def test_lookup_ignores_case():
    assert lookup_color("RED") == lookup_color("red")
    assert lookup_color("Ghost White") == lookup_color("ghost white")


def test_none_is_transparent():
    assert lookup_color("none") == NONE_COLOR
    assert lookup_color("None") == -1


def test_first_duplicate_entry_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


@pytest.mark.parametrize("number", [0, 1, 17, 50, 99, 100])
def test_gray_and_grey_agree(number):
    assert lookup_color(f"gray{number}") == lookup_color(f"grey{number}")


def test_spaced_and_joined_names_agree():
    assert lookup_color("navy blue") == lookup_color("navyblue")
    assert lookup_color("dark orange") == lookup_color("darkorange")


def test_numbered_variant_one_matches_base():
    assert lookup_color("red1") == lookup_color("red")
    assert lookup_color("snow1") == lookup_color("snow")


def test_values_fit_in_24_bits():
    for name in ("white", "thistle4", "purple", "yellow", "blue4"):
        assert 0 <= lookup_color(name) <= 0xFFFFFF


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_empty_name_raises():
    with pytest.raises(KeyError):
        lookup_color("")