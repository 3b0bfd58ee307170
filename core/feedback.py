"""Improvement suggestions for missing character classes."""

from core.classifier import detect_character_classes


ADD_LOWERCASE = "Add lowercase letters (a-z)."
ADD_UPPERCASE = "Add uppercase letters (A-Z)."
ADD_DIGITS = "Add numbers (0-9)."
ADD_SPECIAL = "Add special characters (!@#$%^&*, etc.)."


def generate_feedback(password: str) -> list[str]:
    """List one suggestion per missing character class.

    Order is fixed: lowercase, uppercase, digit, special. A password that
    uses all four classes gets an empty list.
    """
    classes = detect_character_classes(password)
    feedback = []

    if not classes.has_lower:
        feedback.append(ADD_LOWERCASE)
    if not classes.has_upper:
        feedback.append(ADD_UPPERCASE)
    if not classes.has_digit:
        feedback.append(ADD_DIGITS)
    if not classes.has_special:
        feedback.append(ADD_SPECIAL)

    return feedback
