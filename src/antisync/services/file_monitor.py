"""Modification tracking for source files between parse and rewrite."""

from pathlib import Path
from typing import Dict


class FileMonitor:
    """
    Remember file modification times to detect external edits.

    A source file is parsed, its entry is sent to the remote, and only then
    is the assigned id written back. If the file was edited in the meantime,
    the rewrite must not clobber those edits.

    Example:
        >>> monitor = FileMonitor()
        >>> monitor.record(path)          # when parsing
        >>> monitor.is_modified(path)     # before rewriting
        False
    """

    def __init__(self) -> None:
        self._mtimes: Dict[Path, int] = {}

    def record(self, path: Path) -> None:
        """
        Record the current modification time of a file.

        Raises:
            FileNotFoundError: If file doesn't exist
        """
        self._mtimes[path] = path.stat().st_mtime_ns

    def is_modified(self, path: Path) -> bool:
        """
        Check whether a file changed since it was recorded.

        Returns:
            True if modified or never recorded, False otherwise

        Raises:
            FileNotFoundError: If file doesn't exist
        """
        if path not in self._mtimes:
            return True
        return path.stat().st_mtime_ns != self._mtimes[path]

    def refresh(self, path: Path) -> None:
        """Re-record a file after antisync itself rewrote it."""
        self.record(path)
