"""Password evaluation entry point.

Combines the three sub-scores into a single result:

- length_score: entropy estimate from length (0-10)
- common_password_score: distance from known weak passwords (0-10)
- composition_score: character class diversity (0-10)

total is their sum (0-30). The evaluation does no I/O; rendering,
logging and dictionary loading belong to the caller.
"""

from dataclasses import dataclass
from typing import Collection

from core.composition import score_composition
from core.feedback import generate_feedback
from core.length_score import score_length, length_advisory
from core.weak_match import MatchReason, match_weak_password


@dataclass(frozen=True)
class ScoreResult:
    """Outcome of one password evaluation."""
    length_score: float
    common_password_score: float
    composition_score: float
    total: float
    feedback: tuple[str, ...]
    match_reason: MatchReason = MatchReason.NO_MATCH

    def to_dict(self) -> dict:
        """JSON-safe representation."""
        return {
            "length_score": self.length_score,
            "common_password_score": self.common_password_score,
            "composition_score": self.composition_score,
            "total": self.total,
            "feedback": list(self.feedback),
            "match_reason": self.match_reason.value,
        }


def evaluate_password(password: str, weak_passwords: Collection[str] = ()) -> ScoreResult:
    """Evaluate a password against all scoring heuristics.

    Feedback lists missing character classes first (lowercase, uppercase,
    digit, special), then the short-length note and the weak-password
    suggestion when they apply. Duplicates are dropped.

    Args:
        password: Password to evaluate (may be empty)
        weak_passwords: Known weak passwords, treated as read-only

    Returns:
        Immutable ScoreResult
    """
    length_score = score_length(password)
    match = match_weak_password(password, weak_passwords)
    composition_score = score_composition(password)

    notes = generate_feedback(password)
    for note in (length_advisory(password), match.suggestion):
        if note:
            notes.append(note)

    return ScoreResult(
        length_score=length_score,
        common_password_score=match.score,
        composition_score=composition_score,
        total=length_score + match.score + composition_score,
        feedback=tuple(dict.fromkeys(notes)),
        match_reason=match.reason,
    )
