import pytest

from minitalk.text import (
    BoundedCopy,
    split,
    strchr,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strncpy,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strlen_counts_characters():
    assert strlen("hello") == len("hello")


def test_strlen_none_and_empty_are_zero():
    assert strlen(None) == 0
    assert strlen("") == 0


def test_strchr_finds_first():
    assert strchr("banana", "a") == "banana".index("a")


def test_strchr_missing_is_none():
    assert strchr("banana", "z") is None


def test_strchr_terminator_finds_end():
    assert strchr("abc", "\0") == len("abc")


def test_strchr_rejects_multi_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strrchr_finds_last():
    assert strrchr("banana", "a") == "banana".rindex("a")


def test_strrchr_missing_and_terminator():
    assert strrchr("banana", "q") is None
    assert strrchr("banana", "\0") == len("banana")


def test_strncmp_equal_prefix():
    assert strncmp("abcdef", "abcxyz", 3) == 0


def test_strncmp_difference_sign():
    assert strncmp("abd", "abc", 3) == ord("d") - ord("c")
    assert strncmp("abc", "abd", 3) < 0


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 5) == -ord("c")


def test_strncmp_zero_count():
    assert strncmp("a", "b", 0) == 0


def test_strncmp_negative_count():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_found_within_length():
    assert strnstr("hello world", "world", 11) == "hello world".index("world")


def test_strnstr_cut_by_length():
    assert strnstr("hello world", "world", 10) is None


def test_strnstr_empty_needle():
    assert strnstr("hello", "", 0) == 0


def test_strlcpy_fits():
    assert strlcpy("hello", 10) == BoundedCopy("hello", len("hello"))


def test_strlcpy_truncates():
    result = strlcpy("hello", 3)
    assert result.text == "hello"[:2]
    assert result.length == len("hello")


def test_strlcpy_zero_size():
    assert strlcpy("hello", 0) == BoundedCopy("", len("hello"))


@pytest.mark.parametrize("size", [0, 1, 3, 5, 6, 20])
def test_strncpy_matches_strlcpy(size):
    assert strncpy("hello", size) == strlcpy("hello", size)


def test_strlcat_fits():
    result = strlcat("foo", "bar", 20)
    assert result.text == "foobar"
    assert result.length == len("foo") + len("bar")


def test_strlcat_truncates():
    result = strlcat("foo", "bar", 5)
    assert len(result.text) == 4
    assert result.text.startswith("foo")
    assert result.length == len("foobar")


def test_strlcat_full_buffer():
    assert strlcat("foobar", "xyz", 3) == BoundedCopy("foobar", 3 + len("xyz"))


def test_strlcat_zero_size():
    assert strlcat("foo", "xyz", 0) == BoundedCopy("foo", len("xyz"))


def test_strjoin():
    assert strjoin("Hello", "World") == "HelloWorld"
    assert strjoin("", "") == ""


def test_strmapi_uses_index():
    result = strmapi("abc", lambda i, c: c.upper() if i % 2 == 0 else c)
    assert result == "AbC"


def test_strmapi_identity_round_trip():
    assert strmapi("minitalk", lambda i, c: c) == "minitalk"


def test_striteri_mutates_in_place():
    chars = list("abc")
    assert striteri(chars, lambda i, c: c.upper()) is None
    assert chars == list("ABC")


def test_substr_basic():
    assert substr("Hello World", 6, 5) == "World"


def test_substr_length_clamped():
    assert substr("Hello", 2, 100) == "Hello"[2:]


def test_substr_start_past_end():
    assert substr("Hello", 10, 3) == ""


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("Hello", -1, 2)


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"


def test_strtrim_everything():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim("  hi  ", "") == "  hi  "


def test_split_basic():
    assert split("Hello World This is a test", " ") == [
        "Hello", "World", "This", "is", "a", "test",
    ]


def test_split_repeated_delimiters():
    assert split("Hello  World   This   is   a  test", " ") == [
        "Hello", "World", "This", "is", "a", "test",
    ]


def test_split_leading_trailing():
    assert split("  Hello World  ", " ") == ["Hello", "World"]


def test_split_only_delimiters_and_empty():
    assert split("     ", " ") == []
    assert split("", " ") == []


def test_split_no_delimiter():
    assert split("HelloWorld", " ") == ["HelloWorld"]


def test_split_join_round_trip():
    words = split("a,b,,c,", ",")
    assert ",".join(words) == "a,b,c"


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("a b", "")