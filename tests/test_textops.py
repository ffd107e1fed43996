import string

import pytest

from numcraft.textops import (
    CharClass,
    classify_char,
    classify_char_ctype,
    greater_string,
    is_palindrome,
    reverse,
)


@pytest.mark.parametrize("text", ["madam", "racecar", "a", "", "abba"])
def test_palindromes(text):
    assert is_palindrome(text) is True


@pytest.mark.parametrize("text", ["hello", "ab", "Madam"])
def test_non_palindromes(text):
    assert is_palindrome(text) is False


@pytest.mark.parametrize("text", ["hello world", "", "x", "abc123"])
def test_reverse_round_trip(text):
    assert reverse(reverse(text)) == text
    assert len(reverse(text)) == len(text)


def test_reverse_first_becomes_last():
    text = "string"
    assert reverse(text)[0] == text[-1]
    assert reverse(text)[-1] == text[0]


def test_palindrome_equals_its_reverse():
    assert reverse("level") == "level"
    assert reverse("levels") != "levels"
    assert is_palindrome(reverse("levels")) is False


def test_greater_string_returns_greater():
    assert greater_string("banana", "apple") == "banana"
    assert greater_string("apple", "banana") == "banana"


def test_greater_string_prefix():
    assert greater_string("abc", "abcd") == "abcd"


def test_greater_string_case_sorts_uppercase_first():
    assert greater_string("Zebra", "apple") == "apple"


def test_greater_string_equal_is_none():
    assert greater_string("same", "same") is None


@pytest.mark.parametrize(
    "ch, expected",
    [
        ("A", CharClass.CAPITAL),
        ("Z", CharClass.CAPITAL),
        ("a", CharClass.SMALL),
        ("z", CharClass.SMALL),
        ("0", CharClass.DIGIT),
        ("9", CharClass.DIGIT),
        ("@", CharClass.SPECIAL),
        ("[", CharClass.SPECIAL),
        ("`", CharClass.SPECIAL),
        ("{", CharClass.SPECIAL),
        (" ", CharClass.SPECIAL),
        ("\x7f", CharClass.SPECIAL),
        ("\x00", CharClass.SPECIAL),
    ],
)
def test_classify_char(ch, expected):
    assert classify_char(ch) is expected


def test_classify_char_outside_ascii_is_none():
    assert classify_char("é") is None


@pytest.mark.parametrize(
    "ch, expected",
    [
        ("Q", CharClass.CAPITAL),
        ("q", CharClass.SMALL),
        ("5", CharClass.DIGIT),
        ("!", CharClass.SPECIAL),
        ("~", CharClass.SPECIAL),
        (" ", CharClass.OTHER),
        ("\t", CharClass.OTHER),
        ("\x7f", CharClass.OTHER),
        ("é", CharClass.OTHER),
    ],
)
def test_classify_char_ctype(ch, expected):
    assert classify_char_ctype(ch) is expected


def test_classifiers_agree_on_printable_non_space_ascii():
    for ch in string.ascii_letters + string.digits + string.punctuation:
        assert classify_char(ch) is classify_char_ctype(ch)


def test_char_class_descriptions():
    assert classify_char("A").value == "capital letter"
    assert classify_char_ctype(" ").value == "space or other character"


@pytest.mark.parametrize("bad", ["", "ab"])
def test_classifiers_reject_non_single_characters(bad):
    with pytest.raises(ValueError):
        classify_char(bad)
    with pytest.raises(ValueError):
        classify_char_ctype(bad)