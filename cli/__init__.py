"""CLI package for the Password Strength Advisor.

Provides modular CLI flows for password testing and activity review.
"""

from cli.tester import render_result, test_password_flow
from cli.activity import review_activity_flow

__all__ = [
    "render_result",
    "test_password_flow",
    "review_activity_flow",
]
