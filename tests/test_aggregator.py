"""Tests for the combined password evaluation."""

import dataclasses

import pytest

from core.aggregator import ScoreResult, evaluate_password
from core.feedback import ADD_DIGITS, ADD_SPECIAL, ADD_UPPERCASE
from core.length_score import SHORT_PASSWORD_NOTE
from core.weak_match import EXACT_MATCH_TIP, MatchReason


WEAK = frozenset({"password", "qwerty", "letmein", "123456"})

SAMPLES = [
    "",
    "a",
    "qwerty",
    "password",
    "password1",
    "password12",
    "abcdefgh",
    "xqwertyxxxxx",
    "Tr0ub4dour&9",
    "correct horse battery staple",
    "ÅÄÖåäö123",
]


class TestEvaluatePassword:

    def test_lowercase_only_eight_characters(self):
        result = evaluate_password("abcdefgh")
        assert result.composition_score == 2
        assert result.length_score == pytest.approx(3.14, abs=0.01)
        assert result.common_password_score == 8.0
        assert result.feedback == (ADD_UPPERCASE, ADD_DIGITS, ADD_SPECIAL)
        assert result.match_reason == MatchReason.NO_MATCH

    def test_strong_password(self):
        result = evaluate_password("Tr0ub4dour&9xyz", WEAK)
        assert result.total == 30.0
        assert result.feedback == ()

    def test_no_dictionary_defaults_to_length_scoring(self):
        result = evaluate_password("Tr0ub4dour&9")
        assert result.common_password_score == 10.0

    def test_exact_match(self):
        result = evaluate_password("qwerty", WEAK)
        assert result.common_password_score == 0.0
        assert result.length_score == 0.0
        assert result.match_reason == MatchReason.EXACT_MATCH

    def test_feedback_order(self):
        """Class suggestions first, then the length note, then the match tip."""
        result = evaluate_password("qwerty", WEAK)
        assert result.feedback == (
            ADD_UPPERCASE, ADD_DIGITS, ADD_SPECIAL, SHORT_PASSWORD_NOTE, EXACT_MATCH_TIP,
        )

    def test_minor_modification(self):
        result = evaluate_password("password1", WEAK)
        assert result.common_password_score == 1.0
        assert result.match_reason == MatchReason.MINOR_MODIFICATION

    def test_empty_password(self):
        result = evaluate_password("", WEAK)
        assert result.length_score == 0.0
        assert result.composition_score == 0.0
        assert result.common_password_score == 7.0
        assert result.total == 7.0
        assert len(result.feedback) == 5

    @pytest.mark.parametrize("password", SAMPLES)
    def test_total_is_sum_of_sub_scores(self, password):
        result = evaluate_password(password, WEAK)
        assert result.total == pytest.approx(
            result.length_score + result.common_password_score + result.composition_score
        )
        assert 0.0 <= result.total <= 30.0
        for score in (result.length_score, result.common_password_score, result.composition_score):
            assert 0.0 <= score <= 10.0

    @pytest.mark.parametrize("password", SAMPLES)
    def test_feedback_has_no_duplicates(self, password):
        feedback = evaluate_password(password, WEAK).feedback
        assert len(feedback) == len(set(feedback))

    def test_idempotent(self):
        assert evaluate_password("password12", WEAK) == evaluate_password("password12", WEAK)


class TestScoreResult:

    def test_immutable(self):
        result = evaluate_password("abc")
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.total = 30.0

    def test_to_dict(self):
        data = evaluate_password("password1", WEAK).to_dict()
        assert data["match_reason"] == "minor_modification"
        assert data["common_password_score"] == 1.0
        assert isinstance(data["feedback"], list)
        assert set(data) == {
            "length_score", "common_password_score", "composition_score",
            "total", "feedback", "match_reason",
        }

    def test_default_match_reason(self):
        result = ScoreResult(0.0, 7.0, 0.0, 7.0, ())
        assert result.match_reason == MatchReason.NO_MATCH
