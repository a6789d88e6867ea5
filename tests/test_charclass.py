import string

import pytest

from minish.charclass import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_letters_are_alpha_not_digit(c):
    assert is_alpha(c) is True
    assert is_digit(c) is False
    assert is_alnum(c) is True


@pytest.mark.parametrize("c", list(string.digits))
def test_digits(c):
    assert is_digit(c) is True
    assert is_alpha(c) is False
    assert is_alnum(c) is True


@pytest.mark.parametrize("c", list(string.punctuation + " \t\n"))
def test_punctuation_and_space_not_alnum(c):
    assert is_alnum(c) is False
    assert is_alpha(c) is False


def test_non_ascii_letter_is_not_alpha():
    assert is_alpha("é") is False
    assert is_alnum("ß") is False


def test_integer_codes_accepted():
    assert is_alpha(ord("m")) is True
    assert is_digit(ord("7")) is True
    assert is_digit(ord("a")) is False


def test_ascii_range():
    assert all(is_ascii(code) for code in range(128))
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_print_range():
    assert all(is_print(code) for code in range(32, 127))
    assert is_print(31) is False
    assert is_print(127) is False
    assert is_print(" ") is True


@pytest.mark.parametrize("c", list(string.ascii_lowercase))
def test_to_upper_matches_str_upper(c):
    assert to_upper(c) == c.upper()


@pytest.mark.parametrize("c", list(string.ascii_uppercase))
def test_to_lower_matches_str_lower(c):
    assert to_lower(c) == c.lower()


@pytest.mark.parametrize("c", list(string.digits + string.punctuation + "éÉ"))
def test_conversion_leaves_other_characters(c):
    assert to_upper(c) == c
    assert to_lower(c) == c


def test_conversion_keeps_integer_kind():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(to_upper(ord("q"))) == ord("q")


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_case_round_trip(c):
    assert to_upper(to_lower(c)) == c.upper()
    assert to_lower(to_upper(c)) == c.lower()


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(3.5)