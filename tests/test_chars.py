import string

import pytest

from libft.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("ch", string.ascii_letters)
def test_is_alpha_letters(ch):
    assert is_alpha(ch) is True
    assert is_alpha(ord(ch)) is True


@pytest.mark.parametrize("ch", string.digits + string.punctuation + " \t\n")
def test_is_alpha_non_letters(ch):
    assert is_alpha(ch) is False


def test_is_alpha_rejects_non_ascii_letters():
    assert is_alpha("é") is False
    assert is_alpha(ord("A") - 1) is False
    assert is_alpha(ord("z") + 1) is False


@pytest.mark.parametrize("code", range(256))
def test_is_digit_matches_ascii_digits(code):
    assert is_digit(code) == (chr(code) in string.digits)


@pytest.mark.parametrize("code", range(256))
def test_is_alnum_is_alpha_or_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@pytest.mark.parametrize("code", range(256))
def test_is_alnum_matches_ascii_tables(code):
    expected = chr(code) in string.ascii_letters + string.digits
    assert is_alnum(code) == expected


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False
    assert is_ascii("~") is True


def test_is_print_bounds():
    assert is_print(32) is True
    assert is_print(126) is True
    assert is_print(31) is False
    assert is_print(127) is False
    assert is_print("\n") is False


@pytest.mark.parametrize("code", range(128))
def test_is_print_matches_python_printable(code):
    ch = chr(code)
    expected = ch in string.printable and ch not in "\t\n\r\x0b\x0c"
    assert is_print(code) == expected


@pytest.mark.parametrize("ch", string.ascii_lowercase)
def test_to_upper_letters(ch):
    assert to_upper(ch) == ch.upper()
    assert to_upper(ord(ch)) == ord(ch.upper())


@pytest.mark.parametrize("ch", string.ascii_uppercase)
def test_to_lower_letters(ch):
    assert to_lower(ch) == ch.lower()
    assert to_lower(ord(ch)) == ord(ch.lower())


@pytest.mark.parametrize("ch", string.digits + string.punctuation + " ")
def test_case_conversion_leaves_others_unchanged(ch):
    assert to_upper(ch) == ch
    assert to_lower(ch) == ch


def test_case_conversion_ignores_non_ascii():
    assert to_upper("é") == "é"
    assert to_lower("É") == "É"
    assert to_upper(-5) == -5


@pytest.mark.parametrize("ch", string.ascii_letters)
def test_case_round_trip(ch):
    assert to_lower(to_upper(ch)) == ch.lower()
    assert to_upper(to_lower(ch)) == ch.upper()


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)
    with pytest.raises(TypeError):
        to_lower(None)