"""Length-based entropy scoring.

Entropy is estimated as length * log2(R) with R fixed at the 95 printable
ASCII characters, regardless of which characters the password actually uses.
This is an upper bound, not a measured entropy.
"""

import math
from typing import Optional

from core.config import (
    MIN_PASSWORD_LENGTH,
    RECOMMENDED_PASSWORD_LENGTH,
    PRINTABLE_ASCII_CHARACTERS,
    MIN_ENTROPY_BITS,
    MAX_ENTROPY_BITS,
    MAX_SUB_SCORE,
)


SHORT_PASSWORD_NOTE = (
    f"Use at least {MIN_PASSWORD_LENGTH} characters. NIST recommends a minimum of "
    f"{MIN_PASSWORD_LENGTH} characters, with {RECOMMENDED_PASSWORD_LENGTH} or more as best practice."
)


def estimate_entropy_bits(password: str) -> float:
    """Upper-bound entropy estimate in bits."""
    return len(password) * math.log2(PRINTABLE_ASCII_CHARACTERS)


def score_length(password: str) -> float:
    """Score a password by length on a 0-10 scale.

    Passwords shorter than the minimum length score 0 no matter what they
    contain. Longer passwords are scored by linearly normalizing the entropy
    estimate between MIN_ENTROPY_BITS and MAX_ENTROPY_BITS.

    Args:
        password: Password to score

    Returns:
        Score in [0, 10]
    """
    if len(password) < MIN_PASSWORD_LENGTH:
        return 0.0

    entropy = estimate_entropy_bits(password)
    norm = (entropy - MIN_ENTROPY_BITS) / (MAX_ENTROPY_BITS - MIN_ENTROPY_BITS)
    norm = min(max(norm, 0.0), 1.0)

    return norm * MAX_SUB_SCORE


def length_advisory(password: str) -> Optional[str]:
    """Return the minimum-length note for short passwords, else None."""
    if len(password) < MIN_PASSWORD_LENGTH:
        return SHORT_PASSWORD_NOTE
    return None
