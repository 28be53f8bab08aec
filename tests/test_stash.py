"""Tests for the backup stash."""

import re

import pytest
from unittest.mock import patch

from code_cleanup.models.backup import BackupEntry
from code_cleanup.services.stash import StashManager
from code_cleanup.utils.errors import StashError


class TestBackup:
    """Test writing backups."""

    def test_creates_stash_with_parents(self, tmp_path):
        stash = StashManager(tmp_path / "missing" / "root" / ".stash")
        stash.ensure()
        assert stash.exists()

    def test_backup_name_and_content(self, stash):
        name = stash.backup("main.py", "print('hi')\n")

        assert re.fullmatch(r"main\.py\.\d+\.bak", name)
        assert (stash.stash_path / name).read_text(encoding="utf-8") == "print('hi')\n"

    def test_same_millisecond_gets_unique_name(self, stash):
        with patch("code_cleanup.services.stash.timestamp_ms", return_value=1700000000000):
            first = stash.backup("main.py", "one")
            second = stash.backup("main.py", "two")

        assert first == "main.py.1700000000000.bak"
        assert second == "main.py.1700000000001.bak"
        assert (stash.stash_path / first).read_text() == "one"
        assert (stash.stash_path / second).read_text() == "two"

    def test_existing_backup_is_never_overwritten(self, stash):
        stash.ensure()
        taken = stash.stash_path / "main.py.1700000000000.bak"
        taken.write_text("written by another process")

        with patch("code_cleanup.services.stash.timestamp_ms", return_value=1700000000000):
            name = stash.backup("main.py", "mine")

        assert name == "main.py.1700000000001.bak"
        assert taken.read_text() == "written by another process"

    def test_backup_keeps_crlf(self, stash):
        name = stash.backup("win.py", "a\r\nb\r\n")

        assert (stash.stash_path / name).read_bytes() == b"a\r\nb\r\n"
        assert stash.read_backup(stash.get_backup(name)) == "a\r\nb\r\n"

    def test_ensure_failure_raises_stash_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        stash = StashManager(blocker)

        with pytest.raises(StashError, match="Failed to create stash directory"):
            stash.ensure()


class TestListing:
    """Test listing and lookup of backups."""

    def test_list_newest_first(self, stash):
        stash.ensure()
        (stash.stash_path / "a.py.1000.bak").write_text("a1")
        (stash.stash_path / "a.py.3000.bak").write_text("a3")
        (stash.stash_path / "b.js.2000.bak").write_text("b2")
        (stash.stash_path / "notes.txt").write_text("stray")

        names = [entry.stash_filename for entry in stash.list_backups()]
        assert names == ["a.py.3000.bak", "b.js.2000.bak", "a.py.1000.bak"]

    def test_list_without_stash(self, stash):
        assert stash.list_backups() == []

    def test_find_latest_backup(self, stash):
        stash.ensure()
        (stash.stash_path / "a.py.1000.bak").write_text("old")
        (stash.stash_path / "a.py.3000.bak").write_text("new")

        entry = stash.find_latest_backup("a.py")
        assert entry.stash_filename == "a.py.3000.bak"
        assert stash.read_backup(entry) == "new"
        assert stash.find_latest_backup("other.py") is None

    def test_get_backup_rejects_paths(self, stash):
        stash.ensure()
        (stash.stash_path / "a.py.1000.bak").write_text("x")

        assert stash.get_backup("a.py.1000.bak") is not None
        assert stash.get_backup("../a.py.1000.bak") is None
        assert stash.get_backup("missing.py.1.bak") is None

    def test_entry_parsing(self, tmp_path):
        path = tmp_path / "archive.tar.gz.1700000000000.bak"
        path.write_text("12345")

        entry = BackupEntry.from_path(path)
        assert entry.original_name == "archive.tar.gz"
        assert entry.timestamp_ms == 1700000000000
        assert entry.size_bytes == 5
        assert entry.relative_path == ".stash/archive.tar.gz.1700000000000.bak"
        assert entry.describe().startswith(
            "archive.tar.gz.1700000000000.bak - archive.tar.gz captured 2023-11-14T22:13:20+00:00"
        )
        assert BackupEntry.from_path(tmp_path / "readme.md") is None


class TestPurge:
    """Test purging the stash."""

    def test_no_stash_directory(self, stash):
        assert stash.purge() == "No stash directory found."

    def test_already_empty(self, stash):
        stash.ensure()
        assert stash.purge() == "Stash directory is already empty."

    def test_removes_all_files(self, stash):
        stash.backup("a.py", "a")
        stash.backup("b.py", "b")
        (stash.stash_path / "stray.txt").write_text("x")

        assert stash.purge() == "Cleaned up stash directory. Removed 3 file(s)."
        assert list(stash.stash_path.iterdir()) == []
        assert stash.exists()

    def test_subdirectories_are_left_alone(self, stash):
        stash.ensure()
        (stash.stash_path / "nested").mkdir()

        assert stash.purge() == "Stash directory is already empty."
        assert (stash.stash_path / "nested").is_dir()

    def test_os_error_is_reported(self, stash):
        stash.backup("a.py", "a")

        with patch("pathlib.Path.unlink", side_effect=PermissionError("denied")):
            assert stash.purge() == "Failed to clean up stash: denied"
