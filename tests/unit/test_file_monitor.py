"""Unit tests for FileMonitor."""

import os

import pytest

from antisync.services.file_monitor import FileMonitor


def touch_later(path, seconds=10):
    """Move a file's modification time forward."""
    st = path.stat()
    os.utime(path, ns=(st.st_atime_ns, st.st_mtime_ns + seconds * 1_000_000_000))


class TestFileMonitor:
    """Test FileMonitor class."""

    def test_record_and_check_unmodified(self, tmp_path):
        """Test recording file and checking it hasn't been modified."""
        monitor = FileMonitor()
        test_file = tmp_path / "post.txt"
        test_file.write_text("~ public dev\n")

        monitor.record(test_file)

        assert not monitor.is_modified(test_file)

    def test_detect_modification(self, tmp_path):
        """Test detecting file modification."""
        monitor = FileMonitor()
        test_file = tmp_path / "post.txt"
        test_file.write_text("~ public dev\n")
        monitor.record(test_file)

        touch_later(test_file)

        assert monitor.is_modified(test_file)

    def test_unrecorded_file_counts_as_modified(self, tmp_path):
        """Test that files never recorded are treated as modified."""
        test_file = tmp_path / "post.txt"
        test_file.write_text("text")

        assert FileMonitor().is_modified(test_file)

    def test_refresh(self, tmp_path):
        """Test that refresh accepts the current state."""
        monitor = FileMonitor()
        test_file = tmp_path / "post.txt"
        test_file.write_text("text")
        monitor.record(test_file)
        touch_later(test_file)

        monitor.refresh(test_file)

        assert not monitor.is_modified(test_file)

    def test_record_missing_file(self, tmp_path):
        """Test recording a file that does not exist."""
        with pytest.raises(FileNotFoundError):
            FileMonitor().record(tmp_path / "missing.txt")
