"""Shared CLI prompt utilities.

Common input prompts used across CLI flows.
"""

import getpass
from typing import Optional


def prompt_for_password() -> Optional[str]:
    """Prompt for a password without echoing it to the terminal.

    Returns:
        Entered password, or None to cancel
    """
    pwd = getpass.getpass("Enter the password you want to test ('q' to cancel): ")
    if pwd.strip().lower() in ['q', 'exit']:
        return None
    return pwd


def confirm_action(prompt: str) -> bool:
    """Ask a yes/no question.

    Returns:
        True if the user answered 'y'
    """
    response = input(f"{prompt} (y/n): ").strip().lower()
    return response == 'y'
