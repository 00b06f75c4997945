"""File operations: atomic rewrites and id back-injection.

When the remote assigns an id to a new entry, the id is written into the
entry's source file so the next run sees the entry as already published:

    ~ public prod          becomes          ~ public prod 1234
"""

import os
from pathlib import Path
from typing import Optional

from antisync_markup import DIRECTIVE_MARKER
from antisync.services.exceptions import FileModifiedError
from antisync.services.file_monitor import FileMonitor
from antisync.utils.logging import get_logger


logger = get_logger(__name__)


def _ensure_unmodified(path: Path, file_monitor: Optional[FileMonitor], stage: str) -> None:
    if file_monitor is not None and file_monitor.is_modified(path):
        raise FileModifiedError(str(path), f"Source changed since it was parsed ({stage})")


def atomic_write(
    path: Path,
    content: str,
    file_monitor: Optional[FileMonitor] = None
) -> None:
    """
    Replace a file's content without ever leaving it half written.

    The content goes to a hidden sibling file which is fsynced and then
    renamed over ``path``. With a monitor, the file is checked for external
    edits both before writing and right before the rename. The original
    file's permissions and line endings are preserved.

    Raises:
        FileModifiedError: If the file changed since the monitor recorded it
        OSError: On file I/O errors
    """
    _ensure_unmodified(path, file_monitor, "before write")

    temp_path = path.with_name(f".{path.name}.antisync-{os.getpid()}")
    try:
        with open(temp_path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        if path.exists():
            os.chmod(temp_path, path.stat().st_mode)

        _ensure_unmodified(path, file_monitor, "before rename")
        temp_path.replace(path)
    except BaseException as e:
        temp_path.unlink(missing_ok=True)
        if not isinstance(e, FileModifiedError):
            logger.error("file_rewrite_failed", path=str(path), error=str(e))
        raise

    if file_monitor is not None:
        file_monitor.refresh(path)
    logger.debug("file_rewritten", path=str(path), size=len(content))


def public_directive(target: str, public_id: Optional[int] = None) -> str:
    """Render a ``public`` directive line (without newline)."""
    line = f"{DIRECTIVE_MARKER} public {target}"
    if public_id is not None:
        line += f" {public_id}"
    return line


def inject_id(
    target: str,
    path: Path,
    public_id: int,
    file_monitor: Optional[FileMonitor] = None
) -> int:
    """
    Write a newly assigned id into the ``public`` directive of a source file.

    Every line equal (after stripping) to ``~ public <target>`` is replaced
    by ``~ public <target> <id>``; all other lines are kept byte for byte.

    Args:
        target: Deployment target name
        path: Source file
        public_id: Id assigned by the remote
        file_monitor: Optional FileMonitor to refuse clobbering external edits

    Returns:
        Number of lines replaced

    Raises:
        FileModifiedError: If file was modified since it was recorded
        OSError: On file I/O errors
    """
    search = public_directive(target)
    replace = public_directive(target, public_id) + "\n"

    with open(path, encoding="utf-8", newline="") as f:
        lines = f.readlines()

    replaced = 0
    for i, line in enumerate(lines):
        if line.strip() == search:
            lines[i] = replace
            replaced += 1

    atomic_write(path, "".join(lines), file_monitor)
    logger.info("id_injected", path=str(path), target=target, id=public_id, lines=replaced)
    return replaced
