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

CODES = range(-5, 300)


def _ascii_char(code):
    return 0 <= code < 128 and chr(code)


@pytest.mark.parametrize("code", CODES)
def test_isalpha_matches_ascii_letters(code):
    expected = bool(_ascii_char(code)) and chr(code) in string.ascii_letters
    assert isalpha(code) is expected


@pytest.mark.parametrize("code", CODES)
def test_isdigit_matches_ascii_digits(code):
    expected = bool(_ascii_char(code)) and chr(code) in string.digits
    assert isdigit(code) is expected


@pytest.mark.parametrize("code", CODES)
def test_isalnum_is_union_of_alpha_and_digit(code):
    assert isalnum(code) == (isalpha(code) or isdigit(code))


def test_isascii_bounds():
    assert isascii(0) is True
    assert isascii(127) is True
    assert isascii(128) is False
    assert isascii(-1) is False


def test_isprint_bounds():
    assert isprint(31) is False
    assert isprint(32) is True
    assert isprint(126) is True
    assert isprint(127) is False


def test_isprint_matches_printable_minus_control_whitespace():
    printable = set(string.printable) - set("\t\n\r\x0b\x0c")
    assert {chr(c) for c in range(128) if isprint(c)} == printable


def test_case_conversion_on_strings():
    assert "".join(toupper(c) for c in string.ascii_lowercase) == string.ascii_uppercase
    assert "".join(tolower(c) for c in string.ascii_uppercase) == string.ascii_lowercase


@pytest.mark.parametrize("code", [c for c in CODES if not (0 <= c < 128 and chr(c).isalpha())])
def test_case_conversion_leaves_non_letters(code):
    assert tolower(code) == code
    assert toupper(code) == code


def test_case_conversion_keeps_int_kind():
    assert tolower(ord("Q")) == ord("q")
    assert toupper(ord("q")) == ord("Q")


def test_accepts_single_character_strings():
    assert isalpha("x") is True
    assert isdigit("7") is True
    assert isalnum("!") is False


def test_rejects_multi_character_strings():
    with pytest.raises(ValueError):
        isalpha("ab")


def test_rejects_non_character_types():
    with pytest.raises(TypeError):
        isdigit(1.5)