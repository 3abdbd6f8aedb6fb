import pytest

from pwentropy.length import (
    get_length,
    get_reversed_string,
    remove_more_than_two_from_sequence,
    remove_more_than_two_repeating_chars,
)


@pytest.mark.parametrize(
    "s, seq, expected",
    [
        ("12345678", "0123456789", "12"),
        ("abcqwertyabc", "qwertyuiop", "abcqwabc"),
        ("", "", ""),
        ("", "12345", ""),
    ],
)
def test_remove_more_than_two_from_sequence(s, seq, expected):
    assert remove_more_than_two_from_sequence(s, seq) == expected


def test_sequence_without_match_is_unchanged():
    assert remove_more_than_two_from_sequence("xyz", "0123456789") == "xyz"


@pytest.mark.parametrize("s, expected", [("abcd", "dcba"), ("1234", "4321")])
def test_get_reversed_string(s, expected):
    assert get_reversed_string(s) == expected


@pytest.mark.parametrize(
    "s, expected",
    [
        ("aaaa", "aa"),
        ("bbbbbbbaaaaaaaaa", "bbaa"),
        ("ab", "ab"),
        ("", ""),
    ],
)
def test_remove_repeating_chars(s, expected):
    assert remove_more_than_two_repeating_chars(s) == expected


@pytest.mark.parametrize(
    "password, expected",
    [
        ("aaaa", 2),
        ("11112222", 4),
        ("aa123456", 4),
        ("876543", 2),
        ("qwerty123456z", 5),
        ("abcdefghijkl123456", 4),
        ("asdfghjkl123456", 4),
    ],
)
def test_get_length(password, expected):
    assert get_length(password) == expected


def test_get_length_counts_utf8_bytes():
    assert get_length("ü") == 2


def test_get_length_empty():
    assert get_length("") == 0