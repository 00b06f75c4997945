"""Unit tests for logging setup."""

import json

import pytest
import structlog

from antisync.utils.logging import configure_logging, default_log_file, get_logger


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


def read_events(log_file):
    return [json.loads(line) for line in log_file.read_text().splitlines()]


class TestConfigureLogging:
    """Test configure_logging."""

    def test_default_location(self, isolated_home):
        """Test the log file lives in the user's cache directory."""
        log_file = configure_logging()

        assert log_file == default_log_file()
        assert log_file == isolated_home / ".cache" / "antisync" / "logs" / "antisync.log"
        assert log_file.parent.is_dir()

    def test_json_lines(self, tmp_path):
        """Test that events are written as JSON with context."""
        log_file = configure_logging(tmp_path / "logs" / "test.log")

        get_logger("test").info("entry_created", path="posts/a.txt", id=42)

        [event] = read_events(log_file)
        assert event["event"] == "entry_created"
        assert event["level"] == "info"
        assert event["id"] == 42
        assert "timestamp" in event

    def test_debug_filtered_by_default(self, tmp_path):
        log_file = configure_logging(tmp_path / "test.log")

        get_logger("test").debug("api_request", url="http://blog.test")

        assert read_events(log_file) == []

    def test_level_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("ANTISYNC_LOG_LEVEL", "debug")
        log_file = configure_logging(tmp_path / "test.log")

        get_logger("test").debug("api_request", url="http://blog.test")

        assert [e["event"] for e in read_events(log_file)] == ["api_request"]

    def test_unknown_level_falls_back_to_info(self, tmp_path, monkeypatch):
        monkeypatch.setenv("ANTISYNC_LOG_LEVEL", "LOUD")
        log_file = configure_logging(tmp_path / "test.log")

        logger = get_logger("test")
        logger.debug("hidden")
        logger.info("shown")

        assert [e["event"] for e in read_events(log_file)] == ["shown"]
