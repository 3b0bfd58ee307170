"""Character classification over a fixed ASCII alphabet.

Every character falls into exactly one class. Anything outside ASCII
letters and digits (punctuation, whitespace, non-ASCII) counts as special.
"""

import string
from enum import Enum
from typing import NamedTuple


class CharacterClass(str, Enum):
    """Character classes used by the composition and feedback passes."""
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    DIGIT = "digit"
    SPECIAL = "special"


class CharacterClassCounts(NamedTuple):
    """Presence of each character class in one password."""
    has_lower: bool
    has_upper: bool
    has_digit: bool
    has_special: bool

    def distinct(self) -> int:
        """Number of classes present (0-4)."""
        return sum(self)


_LOWERCASE = frozenset(string.ascii_lowercase)
_UPPERCASE = frozenset(string.ascii_uppercase)
_DIGITS = frozenset(string.digits)


def classify_char(char: str) -> CharacterClass:
    """Classify a single character."""
    if char in _LOWERCASE:
        return CharacterClass.LOWERCASE
    if char in _UPPERCASE:
        return CharacterClass.UPPERCASE
    if char in _DIGITS:
        return CharacterClass.DIGIT
    return CharacterClass.SPECIAL


def detect_character_classes(password: str) -> CharacterClassCounts:
    """Compute which character classes appear in a password.

    Args:
        password: Password to inspect (may be empty)

    Returns:
        CharacterClassCounts with one flag per class
    """
    present = {classify_char(c) for c in password}
    return CharacterClassCounts(
        has_lower=CharacterClass.LOWERCASE in present,
        has_upper=CharacterClass.UPPERCASE in present,
        has_digit=CharacterClass.DIGIT in present,
        has_special=CharacterClass.SPECIAL in present,
    )
