"""Password Strength Advisor Core Package.

Provides modular components for password strength evaluation:
- config: Centralized configuration constants
- classifier: Character class detection
- length_score: Length/entropy sub-score
- composition: Character diversity sub-score
- weak_match: Similarity to known weak passwords
- feedback: Improvement suggestions
- aggregator: Combined evaluation entry point
- storage: Weak password dictionary loading
- siem: Audit event logging
"""

# Configuration constants
from core.config import (
    WEAK_PASSWORDS_FILE,
    LOG_DIR,
    SIEM_LOG_FILE,
    MIN_PASSWORD_LENGTH,
    RECOMMENDED_PASSWORD_LENGTH,
    MAX_PASSWORD_LENGTH,
)

# Character classes
from core.classifier import (
    CharacterClass,
    CharacterClassCounts,
    classify_char,
    detect_character_classes,
)

# Sub-scores
from core.length_score import estimate_entropy_bits, score_length, length_advisory
from core.composition import score_composition
from core.weak_match import MatchReason, MatchResult, match_weak_password
from core.feedback import generate_feedback

# Evaluation
from core.aggregator import ScoreResult, evaluate_password

# Storage utilities
from core.storage import StorageError, ensure_directories, load_weak_passwords

# SIEM logging
from core.siem import (
    log_siem_event,
    get_siem_events,
    count_events_by_status,
    reset_siem_logging,
)

__all__ = [
    # Config
    "WEAK_PASSWORDS_FILE",
    "LOG_DIR",
    "SIEM_LOG_FILE",
    "MIN_PASSWORD_LENGTH",
    "RECOMMENDED_PASSWORD_LENGTH",
    "MAX_PASSWORD_LENGTH",
    # Classifier
    "CharacterClass",
    "CharacterClassCounts",
    "classify_char",
    "detect_character_classes",
    # Scoring
    "estimate_entropy_bits",
    "score_length",
    "length_advisory",
    "score_composition",
    "MatchReason",
    "MatchResult",
    "match_weak_password",
    "generate_feedback",
    "ScoreResult",
    "evaluate_password",
    # Storage
    "StorageError",
    "ensure_directories",
    "load_weak_passwords",
    # SIEM
    "log_siem_event",
    "get_siem_events",
    "count_events_by_status",
    "reset_siem_logging",
]
