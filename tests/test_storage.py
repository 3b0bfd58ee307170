"""Tests for dictionary loading and directory setup."""

import logging
import os

import pytest

from core.config import WEAK_PASSWORDS_FILE
from core.storage import StorageError, ensure_directories, load_weak_passwords


class TestLoadWeakPasswords:

    def test_one_entry_per_line(self, tmp_path):
        path = tmp_path / "weak.txt"
        path.write_text("password\nqwerty\nLetMeIn\n", encoding="utf-8")
        assert load_weak_passwords(str(path)) == frozenset({"password", "qwerty", "LetMeIn"})

    def test_windows_line_endings(self, tmp_path):
        path = tmp_path / "weak.txt"
        path.write_bytes(b"password\r\nqwerty\r\n")
        assert load_weak_passwords(str(path)) == frozenset({"password", "qwerty"})

    def test_no_trailing_newline(self, tmp_path):
        path = tmp_path / "weak.txt"
        path.write_text("password\nqwerty", encoding="utf-8")
        assert load_weak_passwords(str(path)) == frozenset({"password", "qwerty"})

    def test_entries_kept_verbatim(self, tmp_path):
        """No trimming beyond the line terminator."""
        path = tmp_path / "weak.txt"
        path.write_text("  spaced  \n#notacomment\n", encoding="utf-8")
        entries = load_weak_passwords(str(path))
        assert "  spaced  " in entries
        assert "#notacomment" in entries

    def test_missing_file_is_empty(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="core.storage"):
            entries = load_weak_passwords(str(tmp_path / "missing.txt"))
        assert entries == frozenset()
        assert "not found" in caplog.text

    def test_undecodable_file_is_empty(self, tmp_path, caplog):
        path = tmp_path / "weak.txt"
        path.write_bytes(b"password\n\xff\xfe\xfa\n")
        with caplog.at_level(logging.WARNING, logger="core.storage"):
            assert load_weak_passwords(str(path)) == frozenset()
        assert "Could not read" in caplog.text

    def test_bundled_dictionary(self):
        entries = load_weak_passwords(WEAK_PASSWORDS_FILE)
        assert len(entries) >= 50
        assert {"password", "123456", "qwerty", "letmein"} <= entries


class TestEnsureDirectories:

    def test_creates_directory(self, tmp_path):
        target = tmp_path / "logs" / "nested"
        ensure_directories(str(target))
        assert os.path.isdir(target)

    def test_existing_directory_ok(self, tmp_path):
        ensure_directories(str(tmp_path))
        assert os.path.isdir(tmp_path)

    def test_unwritable_location_raises(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        with pytest.raises(StorageError):
            ensure_directories(str(blocker / "logs"))
