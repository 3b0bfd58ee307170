"""Centralized configuration constants.

All configurable values in one place for easy maintenance.
File locations and presentation settings can be overridden via environment variables.
"""

import os

# Base directories
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DATA_DIR = os.path.join(BASE_DIR, "data")

# Weak password dictionary (one entry per line)
WEAK_PASSWORDS_FILE = os.environ.get(
    "WEAK_PASSWORDS_FILE", os.path.join(DATA_DIR, "weak_passwords.txt")
)

# Logging
LOG_DIR = os.environ.get("LOG_DIR", "logs")
SIEM_LOG_FILE = os.path.join(LOG_DIR, "siem_events.jsonl")
SIEM_LOG_MAX_BYTES = int(os.environ.get("SIEM_LOG_MAX_BYTES", 10 * 1024 * 1024))  # 10MB default
SIEM_LOG_BACKUP_COUNT = int(os.environ.get("SIEM_LOG_BACKUP_COUNT", 5))

# Length policy - NIST SP 800-63B
MIN_PASSWORD_LENGTH = 8
RECOMMENDED_PASSWORD_LENGTH = 15

# Entropy estimate (bits)
PRINTABLE_ASCII_CHARACTERS = 95
MIN_ENTROPY_BITS = 40
MAX_ENTROPY_BITS = 80

# Every sub-score is in [0, MAX_SUB_SCORE]
MAX_SUB_SCORE = 10.0

# Dictionary entries shorter than this never trigger prefix/substring rules
MIN_WEAK_ENTRY_LENGTH = 4

# API input limit (the scoring core imposes none)
MAX_PASSWORD_LENGTH = int(os.environ.get("MAX_PASSWORD_LENGTH", "128"))

# Rating bands on the 0-30 total
STRONG_TOTAL_THRESHOLD = 24
MEDIUM_TOTAL_THRESHOLD = 15

# HTTPS enforcement
# Set REQUIRE_HTTPS=true in production so passwords never travel in cleartext
REQUIRE_HTTPS = os.environ.get("REQUIRE_HTTPS", "false").lower() == "true"
