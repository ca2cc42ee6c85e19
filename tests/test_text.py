import pytest

from fdfview.text import (
    apply_indexed,
    bounded_concat,
    bounded_copy,
    compare_n,
    find_char,
    find_within,
    format_int,
    join,
    map_indexed,
    parse_int,
    rfind_char,
    split_words,
    substring,
    trim,
    word_count,
)


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("  \t-17", -17), ("+8abc", 8), ("\n\v\f\r 305 9", 305)],
)
def test_parse_int_reads_leading_number(text, expected):
    assert parse_int(text) == expected


def test_parse_int_rejects_multiple_signs():
    assert parse_int("--5") == 0
    assert parse_int("+-5") == 0


def test_parse_int_without_digits_is_zero():
    assert parse_int("abc") == 0
    assert parse_int("") == 0


def test_parse_int_map_cell_with_color_suffix():
    assert parse_int("10,0xFF0000") == 10


@pytest.mark.parametrize("number", [0, 7, -567890, 2147483647, -2147483648])
def test_format_int_round_trips(number):
    assert format_int(number) == str(number)
    assert parse_int(format_int(number)) == number


def test_split_words_from_sentence():
    assert split_words("Hello world how are you", " ") == [
        "Hello",
        "world",
        "how",
        "are",
        "you",
    ]


def test_split_words_skips_repeated_separators():
    assert split_words("  0  1   2 ", " ") == ["0", "1", "2"]
    assert split_words("   ", " ") == []


def test_split_words_requires_single_char():
    with pytest.raises(ValueError):
        split_words("a b", "  ")


@pytest.mark.parametrize("line", ["0 0 1 0", "  a  b ", "", "x"])
def test_word_count_matches_split(line):
    assert word_count(line, " ") == len(split_words(line, " "))


def test_find_char_and_rfind_char():
    text = "abcabc"
    assert find_char(text, "b") == text.index("b")
    assert rfind_char(text, "b") == text.rindex("b")
    assert find_char(text, "z") is None
    assert rfind_char(text, "z") is None


def test_nul_search_finds_end():
    assert find_char("abc", "\0") == len("abc")
    assert rfind_char("abc", "\0") == len("abc")


def test_compare_n_equal_prefix():
    assert compare_n("map.fdf", "map.txt", 4) == 0
    assert compare_n("same", "same", 100) == 0


def test_compare_n_sign_of_difference():
    assert compare_n("abc", "abd", 3) < 0
    assert compare_n("abd", "abc", 3) > 0
    assert compare_n("ab", "abc", 3) < 0
    assert compare_n("abc", "ab", 3) > 0


def test_compare_n_zero_count():
    assert compare_n("a", "b", 0) == 0


def test_find_within():
    haystack = "hello world"
    assert find_within(haystack, "world", len(haystack)) == haystack.index("world")
    assert find_within(haystack, "world", len(haystack) - 1) is None
    assert find_within(haystack, "", 0) == 0
    assert find_within(haystack, "xyz", len(haystack)) is None


def test_trim():
    assert trim("  xx hello xx  ", " x") == "hello"
    assert trim("", " ") == ""
    assert trim("xxxx", "x") == ""
    assert trim("keep", "") == "keep"


def test_substring():
    text = "heightmap"
    assert substring(text, 0, 6) == "height"
    assert substring(text, 6, 100) == "map"
    assert substring(text, 50, 3) == ""


def test_substring_rejects_negative():
    with pytest.raises(ValueError):
        substring("abc", -1, 2)


def test_join():
    assert join("HHH", "BB") == "HHHBB"
    assert join("", "x") == "x"


def test_bounded_copy():
    source = "abcdef"
    copied, length = bounded_copy(source, 4)
    assert copied == source[:3]
    assert length == len(source)
    assert bounded_copy(source, 0) == ("", len(source))
    assert bounded_copy(source, 100) == (source, len(source))


def test_bounded_concat_fits():
    result, length = bounded_concat("abc", "def", 10)
    assert result == "abcdef"
    assert length == len("abcdef")


def test_bounded_concat_truncates():
    result, length = bounded_concat("abc", "def", 5)
    assert result == "abcd"
    assert length == len("abc") + len("def")


def test_bounded_concat_full_destination():
    result, length = bounded_concat("abcdef", "gh", 3)
    assert result == "abcdef"
    assert length == 3 + len("gh")


def test_map_indexed():
    assert map_indexed("abc", lambda i, c: c.upper() if i % 2 == 0 else c) == "AbC"
    assert map_indexed("", lambda i, c: c) == ""


def test_apply_indexed_in_place():
    chars = list("abcd")
    apply_indexed(chars, lambda i, c: c.upper() if i >= 2 else None)
    assert chars == ["a", "b", "C", "D"]