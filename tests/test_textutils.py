import pytest

from pipex.textutils import (
    bounded_concat,
    bounded_copy,
    compare_prefix,
    count_words,
    find_char,
    find_within,
    format_int,
    parse_int,
    rfind_char,
    split_words,
    substring,
    trim,
)


# parse_int / format_int

def test_parse_int_source_example():
    assert parse_int(" \t-765491") == -765491


def test_parse_int_plus_sign_and_trailing_garbage():
    assert parse_int("\n\v+42abc") == 42


def test_parse_int_no_digits_is_zero():
    assert parse_int("   xyz") == 0


def test_parse_int_double_sign_is_zero():
    assert parse_int("--5") == 0


def test_format_int_minimum_int():
    assert format_int(-2147483648) == "-2147483648"


def test_format_int_zero():
    assert format_int(0) == "0"


@pytest.mark.parametrize("value", [0, 7, -7, 2147483647, -2147483648, 1000])
def test_format_parse_round_trip(value):
    assert parse_int(format_int(value)) == value


# split_words / count_words

def test_split_words_drops_empty_pieces():
    assert split_words("  ls   -l  ", " ") == ["ls", "-l"]


def test_split_words_path_like():
    assert split_words("/usr/bin::/bin:", ":") == ["/usr/bin", "/bin"]


def test_split_words_empty_text():
    assert split_words("", " ") == []


def test_split_words_only_separators():
    assert split_words("::::", ":") == []


@pytest.mark.parametrize("text", ["a b c", "  x  ", "", "grep -v foo", "one"])
def test_count_words_matches_split(text):
    assert count_words(text, " ") == len(split_words(text, " "))


def test_split_words_rejects_multi_char_separator():
    with pytest.raises(ValueError):
        split_words("a,b", ",,")


def test_split_join_round_trip():
    words = ["cat", "-e", "file"]
    assert split_words(" ".join(words), " ") == words


# trim

def test_trim_source_example():
    text = "abbbbbMy name is Piotrbbabbba bbb"
    result = trim(text, "ab")
    assert result == "My name is Piotrbbabbba "
    assert result[0] not in "ab"
    assert text.find(result) >= 0


def test_trim_everything_removed():
    assert trim("aaaa", "a") == ""


def test_trim_empty_set_keeps_text():
    assert trim("  x  ", "") == "  x  "


# substring

def test_substring_source_example():
    assert substring("abcdefgh", 6, 6) == "gh"


def test_substring_start_past_end():
    assert substring("abc", 10, 2) == ""


def test_substring_start_at_end():
    assert substring("abc", 3, 5) == ""


def test_substring_negative_start_raises():
    with pytest.raises(ValueError):
        substring("abc", -1, 2)


# find_within

def test_find_within_source_example_not_found():
    assert find_within("Foo Bar Baz", "Baa", 8) is None


def test_find_within_empty_needle():
    assert find_within("Foo", "", 0) == 0


def test_find_within_respects_limit():
    haystack = "Foo Bar Baz"
    index = find_within(haystack, "Bar", len(haystack))
    assert haystack[index:index + 3] == "Bar"
    assert find_within(haystack, "Bar", index + 2) is None
    assert find_within(haystack, "Bar", index + 3) == index


def test_find_within_negative_limit_raises():
    with pytest.raises(ValueError):
        find_within("abc", "a", -1)


# compare_prefix

def test_compare_prefix_source_example_sign():
    first, second = "fdsdfaaggr", "fdzsfaaggr"
    result = compare_prefix(first, second, 3)
    assert result == ord("s") - ord("z")
    assert compare_prefix(second, first, 3) == -result


def test_compare_prefix_equal_within_limit():
    assert compare_prefix("PATH=x", "PATHy", 4) == 0


def test_compare_prefix_zero_limit():
    assert compare_prefix("a", "b", 0) == 0


def test_compare_prefix_shorter_string_is_smaller():
    assert compare_prefix("PAT", "PATH", 10) < 0
    assert compare_prefix("PATH", "PAT", 10) > 0


def test_compare_prefix_identical():
    assert compare_prefix("same", "same", 100) == 0


# find_char / rfind_char

def test_find_char_source_example():
    text = "fdsaffdggra"
    index = find_char(text, "a")
    assert text[index] == "a"
    assert "a" not in text[:index]


def test_rfind_char_source_example():
    text = "fdasffdggr"
    index = rfind_char(text, "a")
    assert text[index] == "a"
    assert "a" not in text[index + 1:]


def test_find_char_missing():
    assert find_char("abc", "z") is None
    assert rfind_char("abc", "z") is None


def test_find_char_nul_gives_length():
    assert find_char("abc", "\0") == len("abc")
    assert rfind_char("abc", "\0") == len("abc")


def test_find_char_rejects_multi_char():
    with pytest.raises(ValueError):
        find_char("abc", "ab")


# bounded_copy / bounded_concat

def test_bounded_copy_zero_size():
    assert bounded_copy("BBBB", 0) == ("", len("BBBB"))


def test_bounded_copy_truncates():
    src = "hello world"
    copied, length = bounded_copy(src, 6)
    assert copied == src[:5]
    assert length == len(src)


def test_bounded_copy_fits():
    assert bounded_copy("abc", 10) == ("abc", 3)


def test_bounded_concat_source_example():
    assert bounded_concat("Test", "12345", 10) == ("Test12345", 9)


def test_bounded_concat_truncates():
    result, length = bounded_concat("Test", "12345", 7)
    assert len(result) == 6
    assert result.startswith("Test")
    assert length == len("Test") + len("12345")


def test_bounded_concat_size_not_above_dest():
    assert bounded_concat("Test", "12345", 3) == ("Test", 3 + len("12345"))


def test_bounded_concat_negative_size_raises():
    with pytest.raises(ValueError):
        bounded_concat("a", "b", -1)