"""Centralized file I/O operations.

Loads the weak password dictionary and handles log directory setup.
Dictionary load failures are non-fatal: the scorer falls back to
length-only similarity scoring when the set is empty.
"""

import logging
import os
import sys

from core.config import LOG_DIR, WEAK_PASSWORDS_FILE


logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


def ensure_directories(directory: str = LOG_DIR) -> None:
    """Create the log directory if it doesn't exist.

    On Unix systems, directories are created with mode 0700 (owner only).

    Raises:
        StorageError: If the directory cannot be created
    """
    if not directory:
        return

    try:
        if sys.platform != "win32":
            os.makedirs(directory, mode=0o700, exist_ok=True)
        else:
            os.makedirs(directory, exist_ok=True)
    except OSError as e:
        raise StorageError(f"Failed to create {directory}: {e}")


def load_weak_passwords(filepath: str = WEAK_PASSWORDS_FILE) -> frozenset[str]:
    """Load the weak password dictionary.

    The file is plain UTF-8 text with one password per line. Only line
    terminators are stripped; entries are otherwise kept verbatim
    (case-sensitive, no comments).

    Args:
        filepath: Path to the dictionary file

    Returns:
        Frozen set of entries, or an empty set if the file is missing
        or unreadable
    """
    if not os.path.exists(filepath):
        logger.warning("Weak password dictionary not found: %s", filepath)
        return frozenset()

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            entries = frozenset(line.rstrip("\r\n") for line in f)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read weak password dictionary %s: %s", filepath, e)
        return frozenset()

    logger.info("Loaded %d weak passwords from %s", len(entries), filepath)
    return entries


def file_exists(filepath: str) -> bool:
    """Check if file exists."""
    return os.path.exists(filepath)
