"""Shared fixtures: isolate the SIEM log and the dictionary cache per test."""

import os
import sys

import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import core.siem as siem
import password_checker


@pytest.fixture(autouse=True)
def siem_log_file(tmp_path, monkeypatch):
    """Point the SIEM log at a temporary file."""
    siem.reset_siem_logging()
    log_file = str(tmp_path / "logs" / "siem_events.jsonl")
    monkeypatch.setattr(siem, "SIEM_LOG_FILE", log_file)
    yield log_file
    siem.reset_siem_logging()


@pytest.fixture(autouse=True)
def fresh_dictionary_cache():
    """Start every test with an unloaded dictionary cache."""
    password_checker.clear_cached_weak_passwords()
    yield
    password_checker.clear_cached_weak_passwords()
