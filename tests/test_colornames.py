import pytest

from fdfview.colornames import COLORS, lookup_color, parse_color


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("white", 0xFFFFFF),
        ("black", 0x000000),
        ("snow", 0xFFFAFA),
        ("ghost white", 0xF8F8FF),
        ("red", 0xFF0000),
        ("lightgreen", 0x90EE90),
        ("none", -1),
        ("gray50", 0x7F7F7F),
        ("snow2", 0xEEE9E9),
        ("thistle4", 0x8B7B8B),
    ],
)
def test_lookup_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_is_case_insensitive():
    assert lookup_color("GhOsT WhItE") == lookup_color("ghost white")
    assert lookup_color("RED") == 0xFF0000


def test_every_name_found_in_upper_case():
    for name, value in COLORS.items():
        assert lookup_color(name.upper()) == value


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_unknown_name_is_none():
    assert lookup_color("not a colour") is None


def test_gray_and_grey_agree():
    for level in range(101):
        assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_gray_levels_are_neutral_and_increasing():
    values = [lookup_color(f"gray{level}") for level in range(101)]
    assert values[0] == 0
    assert values[100] == 0xFFFFFF
    assert values == sorted(values)
    for value in values:
        red, green, blue = value >> 16, (value >> 8) & 0xFF, value & 0xFF
        assert red == green == blue


def test_colors_are_in_rgb_range():
    for name, value in COLORS.items():
        if name == "none":
            continue
        assert 0 <= value <= 0xFFFFFF


def test_parse_named_color():
    assert parse_color("white") == 0xFFFFFF


def test_parse_joins_suffix():
    assert parse_color("ghost", "white") == 0xF8F8FF
    assert parse_color("navy", "blue") == 0x000080


def test_parse_unknown_is_zero():
    assert parse_color("nonexistent") == 0
    assert parse_color("ghost", "nothing") == 0


@pytest.mark.parametrize("value", [0x000000, 0x123456, 0xFF8000, 0xFFFFFF])
def test_parse_hex_round_trip(value):
    assert parse_color(f"#{value:06x}") == value
    assert parse_color(f"#{value:06X}") == value


def test_parse_hex_ignores_suffix():
    assert parse_color("#ff0000", "white") == 0xFF0000


def test_parse_hex_stops_at_non_digit():
    assert parse_color("#ffzz") == 0xFF


def test_parse_hex_without_digits_is_zero():
    assert parse_color("#") == 0
    assert parse_color("#zz") == 0


def test_parse_hex_accepts_prefix():
    assert parse_color("#0xff") == 0xFF


def test_parse_hex_wraps_to_signed_32_bits():
    assert parse_color("#ffffffff") == -1


def test_parse_name_truncated_to_limit():
    long_name = "a" * 40
    assert parse_color(long_name, "b" * 40) == 0
    assert parse_color("ghost", "white" + "x" * 100) == 0