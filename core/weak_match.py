"""Similarity scoring against a dictionary of known weak passwords.

Rules are checked in order and the first match wins:

1. Exact match with a dictionary entry scores 0.
2. For each entry of at least MIN_WEAK_ENTRY_LENGTH characters:
   - prefix extension (entry + 1 or 2 trailing characters) scores 1 or 3
   - substring containment scores 3, 5 or 6 depending on how many
     characters surround the entry
3. Otherwise the password is scored on length alone (7-10).

Entries are tried longest first, ties broken alphabetically, so the most
specific entry is the one reported when several could match.
"""

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Collection, Optional

from core.config import MIN_WEAK_ENTRY_LENGTH


class MatchReason(str, Enum):
    """Why a password received its common-password score."""
    NO_MATCH = "no_match"
    EXACT_MATCH = "exact_match"
    MINOR_MODIFICATION = "minor_modification"
    # Part of the published tag set; no rule currently assigns it
    MODERATE_MODIFICATION = "moderate_modification"
    SUBSTRING_FOUND = "substring_found"


@dataclass(frozen=True)
class MatchResult:
    score: float
    reason: MatchReason
    matched_entry: Optional[str] = None
    suggestion: Optional[str] = None


EXACT_MATCH_TIP = "This is a very common password! Choose something unique."
ONE_CHAR_APPENDED_TIP = "Avoid adding just one character to a common password."
TWO_CHARS_APPENDED_TIP = "Avoid adding just two characters to a common password."
SUBSTRING_TIP = "Your password contains the common password '{entry}'. Avoid building on common passwords."

# extra characters -> score, for prefix extensions
_PREFIX_SCORES = {
    1: (1.0, ONE_CHAR_APPENDED_TIP),
    2: (3.0, TWO_CHARS_APPENDED_TIP),
}


@lru_cache(maxsize=8)
def _ordered_candidates(weak_passwords: frozenset) -> tuple[str, ...]:
    """Entries eligible for prefix/substring rules, longest first."""
    eligible = (w for w in weak_passwords if len(w) >= MIN_WEAK_ENTRY_LENGTH)
    return tuple(sorted(eligible, key=lambda w: (-len(w), w)))


def _substring_score(extra: int) -> float:
    if extra <= 3:
        return 3.0
    if extra <= 5:
        return 5.0
    return 6.0


def _length_only_score(length: int) -> float:
    if length >= 12:
        return 10.0
    if length >= 10:
        return 9.0
    if length >= 8:
        return 8.0
    return 7.0


def match_weak_password(password: str, weak_passwords: Collection[str]) -> MatchResult:
    """Score how closely a password resembles a known weak password.

    Args:
        password: Password to check
        weak_passwords: Case-sensitive collection of known weak passwords.
            Not modified. May be empty.

    Returns:
        MatchResult with a score in [0, 10], the reason tag, the matched
        dictionary entry and a suggestion (None when nothing matched)
    """
    if password in weak_passwords:
        return MatchResult(0.0, MatchReason.EXACT_MATCH, password, EXACT_MATCH_TIP)

    for weak in _ordered_candidates(frozenset(weak_passwords)):
        extra = len(password) - len(weak)

        if password.startswith(weak) and extra in _PREFIX_SCORES:
            score, tip = _PREFIX_SCORES[extra]
            return MatchResult(score, MatchReason.MINOR_MODIFICATION, weak, tip)

        if weak in password:
            return MatchResult(
                _substring_score(extra),
                MatchReason.SUBSTRING_FOUND,
                weak,
                SUBSTRING_TIP.format(entry=weak),
            )

    return MatchResult(_length_only_score(len(password)), MatchReason.NO_MATCH)
