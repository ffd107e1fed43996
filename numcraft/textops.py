"""String checks and character classification."""

from __future__ import annotations

import enum
import string

__all__ = [
    "CharClass",
    "is_palindrome",
    "reverse",
    "greater_string",
    "classify_char",
    "classify_char_ctype",
]


class CharClass(enum.Enum):
    """Kind of a single character."""

    CAPITAL = "capital letter"
    SMALL = "small letter"
    DIGIT = "digit"
    SPECIAL = "special character"
    OTHER = "space or other character"


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same backwards, character for character."""
    return text == text[::-1]


def reverse(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def greater_string(first: str, second: str) -> str | None:
    """Return the lexicographically greater of two strings.

    Equal strings give None.
    """
    if first > second:
        return first
    if first < second:
        return second
    return None


def _check_single(ch: str) -> None:
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")


def classify_char(ch: str) -> CharClass | None:
    """Classify an ASCII character by its code range.

    Everything in ASCII that is not a letter or a digit, spaces and control
    characters included, is special. Characters outside ASCII give None.
    Raises ValueError unless ``ch`` is exactly one character.
    """
    _check_single(ch)
    code = ord(ch)
    if ord("A") <= code <= ord("Z"):
        return CharClass.CAPITAL
    if ord("a") <= code <= ord("z"):
        return CharClass.SMALL
    if ord("0") <= code <= ord("9"):
        return CharClass.DIGIT
    if code <= 127:
        return CharClass.SPECIAL
    return None


def classify_char_ctype(ch: str) -> CharClass:
    """Classify a character as the C locale's character classes do.

    Only printable ASCII punctuation is special; spaces, control characters
    and anything outside ASCII are OTHER. Raises ValueError unless ``ch``
    is exactly one character.
    """
    _check_single(ch)
    if ch in string.ascii_uppercase:
        return CharClass.CAPITAL
    if ch in string.ascii_lowercase:
        return CharClass.SMALL
    if ch in string.digits:
        return CharClass.DIGIT
    if ch in string.punctuation:
        return CharClass.SPECIAL
    return CharClass.OTHER