"""Password strength checking service.

Wraps the scoring core with the bundled weak password dictionary,
a strength rating, and SIEM audit logging. Used by the CLI and the API.
"""

from threading import Lock
from typing import Collection, Optional

from core import ScoreResult, evaluate_password, load_weak_passwords, log_siem_event
from core.config import WEAK_PASSWORDS_FILE, STRONG_TOTAL_THRESHOLD, MEDIUM_TOTAL_THRESHOLD


# Module-level cached dictionary, loaded on first use
_cached_weak_passwords: Optional[frozenset[str]] = None
_cache_lock = Lock()


def get_weak_passwords() -> frozenset[str]:
    """Get the weak password dictionary, loading it on first use.

    A missing or unreadable file yields an empty set; evaluations then
    fall back to length-only similarity scoring.
    """
    global _cached_weak_passwords
    with _cache_lock:
        if _cached_weak_passwords is None:
            _cached_weak_passwords = load_weak_passwords(WEAK_PASSWORDS_FILE)
            log_siem_event(
                "dictionary_loaded",
                "SUCCESS" if _cached_weak_passwords else "DEGRADED",
                details={"entries": len(_cached_weak_passwords)}
            )
        return _cached_weak_passwords


def clear_cached_weak_passwords() -> None:
    """Drop the cached dictionary so the next call reloads it."""
    global _cached_weak_passwords
    with _cache_lock:
        _cached_weak_passwords = None


def rate_total(total: float) -> str:
    """Map a 0-30 total to a strength rating."""
    if total >= STRONG_TOTAL_THRESHOLD:
        return "Strong"
    elif total >= MEDIUM_TOTAL_THRESHOLD:
        return "Medium"
    else:
        return "Weak"


def analyze_password(
    password: str,
    weak_passwords: Optional[Collection[str]] = None,
    source: str = "cli",
    audit: bool = True
) -> ScoreResult:
    """Evaluate a password and record the outcome in the SIEM log.

    Args:
        password: Password to evaluate
        weak_passwords: Dictionary to match against (bundled dictionary if None)
        source: Caller recorded in the audit event
        audit: Whether to write an audit event

    Returns:
        ScoreResult from the scoring core
    """
    if weak_passwords is None:
        weak_passwords = get_weak_passwords()

    result = evaluate_password(password, weak_passwords)

    if audit:
        rating = rate_total(result.total)
        log_siem_event(
            "password_evaluated",
            rating.upper(),
            source=source,
            details={
                "length": len(password),
                "total": round(result.total, 2),
                "match_reason": result.match_reason.value,
            }
        )

    return result


def check_password_strength(
    password: str,
    weak_passwords: Optional[Collection[str]] = None
) -> tuple[str, list[str]]:
    """Check a password and return its rating with feedback.

    Returns:
        Tuple of (strength, feedback_list), strength being
        "Strong", "Medium" or "Weak"
    """
    result = analyze_password(password, weak_passwords)
    return rate_total(result.total), list(result.feedback)
