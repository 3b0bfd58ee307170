"""Character diversity scoring."""

from core.classifier import detect_character_classes


# Distinct character classes -> score. Discrete bands, not a curve.
COMPOSITION_BANDS = {
    0: 0.0,  # only the empty password
    1: 2.0,
    2: 5.0,
    3: 8.0,
    4: 10.0,
}


def score_composition(password: str) -> float:
    """Score a password by how many character classes it uses (0-10)."""
    return COMPOSITION_BANDS[detect_character_classes(password).distinct()]
