import string

import pytest

from tetrafit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("code", range(0, 256))
def test_is_alpha_matches_ascii_letters(code):
    assert is_alpha(code) == (chr(code) in string.ascii_letters)


@pytest.mark.parametrize("code", range(0, 256))
def test_is_digit_matches_ascii_digits(code):
    assert is_digit(code) == (chr(code) in string.digits)


@pytest.mark.parametrize("code", range(0, 256))
def test_is_alnum_is_alpha_or_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@pytest.mark.parametrize("code", range(-5, 300))
def test_is_ascii_range(code):
    assert is_ascii(code) == (0 <= code <= 127)


@pytest.mark.parametrize("code", range(0, 200))
def test_is_print_range(code):
    assert is_print(code) == (32 <= code <= 126)


def test_is_print_edges_with_strings():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print("\x7f") is False


@pytest.mark.parametrize("letter", string.ascii_lowercase)
def test_upper_lower_round_trip(letter):
    upper = to_upper(letter)
    assert upper == letter.upper()
    assert to_lower(upper) == letter


@pytest.mark.parametrize("ch", string.digits + string.punctuation + " ")
def test_case_conversion_leaves_non_letters(ch):
    assert to_upper(ch) == ch
    assert to_lower(ch) == ch


def test_case_conversion_keeps_int_kind():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")


def test_case_conversion_ignores_non_ascii_letters():
    assert to_upper("é") == "é"
    assert to_lower("É") == "É"


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_non_character_rejected():
    with pytest.raises(TypeError):
        is_digit(3.5)