"""Password testing CLI flows.

Scores a password and prints the breakdown with suggestions.
"""

from core import ScoreResult
from password_checker import analyze_password, rate_total

from cli.prompts import prompt_for_password, confirm_action


def render_result(result: ScoreResult) -> None:
    """Print sub-scores, total, rating and suggestions."""
    print(f"\nLength Score: {result.length_score:.2f} / 10")
    print(f"Common Password Score: {result.common_password_score:.2f} / 10")
    print(f"Character Diversity Score: {result.composition_score:.2f} / 10")
    print(f"Total: {result.total:.2f} / 30")
    print(f"Password Strength: {rate_total(result.total)}")

    if result.feedback:
        print("Suggestions:")
        for tip in result.feedback:
            print(f"  - {tip}")


def test_password_flow() -> None:
    """Let the user test passwords until they stop."""
    print("\n--- Test a Password ---")

    while True:
        user_pwd = prompt_for_password()
        if user_pwd is None:
            print("Canceled password test.")
            return
        if not user_pwd:
            print("No password entered.")
            return

        render_result(analyze_password(user_pwd, source="cli"))

        if not confirm_action("\nTest another password?"):
            return
