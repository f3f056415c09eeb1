import string

import pytest

from minitalk.chars import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    tolower,
    toupper,
)


@pytest.mark.parametrize("char", string.ascii_letters)
def test_isalpha_accepts_letters(char):
    assert isalpha(ord(char)) is True


@pytest.mark.parametrize("char", "0@[`{ \n")
def test_isalpha_rejects_non_letters(char):
    assert isalpha(ord(char)) is False


def test_isalpha_rejects_non_ascii_letter():
    assert isalpha(ord("é")) is False


@pytest.mark.parametrize("char", string.digits)
def test_isdigit_accepts_digits(char):
    assert isdigit(ord(char)) is True


@pytest.mark.parametrize("char", "a/:Z ")
def test_isdigit_rejects_others(char):
    assert isdigit(ord(char)) is False


def test_isalnum_matches_union_of_letters_and_digits():
    for code in range(256):
        assert isalnum(code) == (isalpha(code) or isdigit(code))


def test_isalnum_rejects_punctuation():
    assert isalnum(ord("!")) is False


def test_isascii_bounds():
    assert isascii(0) is True
    assert isascii(127) is True
    assert isascii(128) is False
    assert isascii(-1) is False


def test_isprint_bounds():
    assert isprint(ord(" ")) is True
    assert isprint(ord("~")) is True
    assert isprint(31) is False
    assert isprint(127) is False


def test_isprint_matches_string_printable_without_whitespace_controls():
    expected = {ord(c) for c in string.printable if c.isprintable()}
    actual = {code for code in range(256) if isprint(code)}
    assert actual == expected


@pytest.mark.parametrize("lower, upper", zip(string.ascii_lowercase, string.ascii_uppercase))
def test_case_conversion_round_trip(lower, upper):
    assert toupper(ord(lower)) == ord(upper)
    assert tolower(ord(upper)) == ord(lower)
    assert tolower(toupper(ord(lower))) == ord(lower)


@pytest.mark.parametrize("char", "09@[`{ !")
def test_case_conversion_leaves_others_unchanged(char):
    assert toupper(ord(char)) == ord(char)
    assert tolower(ord(char)) == ord(char)


def test_toupper_is_idempotent():
    for code in range(256):
        assert toupper(toupper(code)) == toupper(code)
        assert tolower(tolower(code)) == tolower(code)