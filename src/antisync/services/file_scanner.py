"""Recursive discovery of source files."""

from pathlib import Path
from typing import Iterable, Iterator


class FileSet:
    """Files found by recursively scanning paths.

    Hidden entries (names starting with ``.``) inside scanned directories
    are skipped. A path reachable more than once, e.g. ``posts`` and
    ``posts/2024``, is only listed once.

    Example:
        >>> files = FileSet([Path("posts"), Path("drafts/intro.txt")])
        >>> for path in files:
        ...     print(path)
    """

    def __init__(self, paths: Iterable[Path] = ()):
        self._files: list[Path] = []
        self._seen: set[Path] = set()
        for path in paths:
            self.add(path)

    def add(self, path: Path) -> "FileSet":
        """Add a file, or every file below a directory."""
        path = Path(path)
        if path in self._seen:
            return self
        self._seen.add(path)
        if path.is_dir():
            for child in sorted(path.iterdir()):
                if not child.name.startswith("."):
                    self.add(child)
        else:
            self._files.append(path)
        return self

    def __iter__(self) -> Iterator[Path]:
        return iter(self._files)

    def __len__(self) -> int:
        return len(self._files)
