"""Status and push workflows.

Every source file is parsed for the selected target. Files that are not
published to that target are skipped silently; files that fail to parse
are reported and skipped. Each remaining entry is classified against the
remote index and handed to a command:

- NEW: no id yet, never published
- BACKUP: has an id the remote does not know (e.g. restoring a wiped server)
- SAME: remote signature equals the local one
- CHANGED: remote signature differs
"""

from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, Protocol

import antisync_markup
from antisync_markup import Entry, ParseError
from antisync.services.file_monitor import FileMonitor
from antisync.services.exceptions import FileModifiedError
from antisync.services.file_operations import inject_id, public_directive
from antisync.services.file_scanner import FileSet
from antisync.services.http_client import AntiblogClient
from antisync.utils.console import Reporter
from antisync.utils.logging import get_logger


logger = get_logger(__name__)


class EntryStatus(Enum):
    """Local entry compared with the remote index."""

    NEW = "new"
    BACKUP = "backup"
    SAME = "same"
    CHANGED = "changed"


class SyncCommand(Protocol):
    """What a command does with each classified entry."""

    def handle(self, status: EntryStatus, path: Path, entry: Entry) -> None: ...

    def wrap_up(self) -> None: ...


class SyncSession:
    """
    Parses source files for one target and feeds them to a command.

    Attributes:
        target: Deployment target name
        client: API client for that target
        reporter: Console output
        file_monitor: Modification times of parsed files
    """

    def __init__(self, target: str, client: AntiblogClient, reporter: Reporter):
        self.target = target
        self.client = client
        self.reporter = reporter
        self.file_monitor = FileMonitor()

    def each_parsed(self, paths: Iterable[Path]) -> Iterator[tuple[Path, Entry]]:
        """
        Yield ``(path, entry)`` for every published source file.

        Parse errors are reported per file and do not stop the scan.
        """
        for path in FileSet(paths):
            try:
                self.file_monitor.record(path)
                entry = antisync_markup.load(self.target, path)
            except ParseError as e:
                logger.warning("parse_failed", path=str(path), line=e.line, error=e.message)
                self.reporter.error(f"{path}\n    {e}")
                continue
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("read_failed", path=str(path), error=str(e))
                self.reporter.error(f"{path}\n    {e}")
                continue
            logger.debug("entry_parsed", path=str(path), publish=entry.publish, id=entry.public_id)
            if entry.publish:
                yield path, entry

    def entry_status(self, entry: Entry) -> EntryStatus:
        """Classify an entry against the remote index."""
        if entry.is_new:
            return EntryStatus.NEW
        remote_signature = self.client.index().get(entry.public_id)
        if remote_signature is None:
            return EntryStatus.BACKUP
        if remote_signature == entry.signature:
            return EntryStatus.SAME
        return EntryStatus.CHANGED

    def run(self, command: SyncCommand, paths: Iterable[Path]) -> None:
        """Classify every published entry and hand it to the command."""
        for path, entry in self.each_parsed(paths):
            status = self.entry_status(entry)
            logger.info("entry_classified", path=str(path), status=status.value)
            command.handle(status, path, entry)
        command.wrap_up()


class StatusCommand:
    """Report what ``push`` would do, plus remote entries with no source file."""

    def __init__(self, session: SyncSession):
        self.reporter = session.reporter
        self.client = session.client
        self.unseen = dict(session.client.index())

    def handle(self, status: EntryStatus, path: Path, entry: Entry) -> None:
        if entry.public_id is not None:
            self.unseen.pop(entry.public_id, None)
        if status is EntryStatus.SAME:
            self.reporter.babble(str(path), "SAME")
        else:
            self.reporter.say(str(path), status.name)

    def wrap_up(self) -> None:
        for public_id in self.unseen:
            self.reporter.say(self.client.entry_url(public_id), "MISSING")


class PushCommand:
    """Publish new entries and re-upload changed or missing ones."""

    def __init__(self, session: SyncSession):
        self.session = session
        self.reporter = session.reporter
        self.client = session.client

    def handle(self, status: EntryStatus, path: Path, entry: Entry) -> None:
        if status is EntryStatus.NEW:
            self.create(path, entry)
        elif status is EntryStatus.SAME:
            self.reporter.babble(str(path), "SAME")
        else:
            self.update(path, entry)

    def create(self, path: Path, entry: Entry) -> None:
        public_id = self.client.create(entry)
        logger.info("entry_created", path=str(path), id=public_id)
        try:
            inject_id(self.session.target, path, public_id, self.session.file_monitor)
        except (FileModifiedError, OSError) as e:
            logger.error("id_injection_skipped", path=str(path), id=public_id, error=str(e))
            directive = public_directive(self.session.target, public_id)
            self.reporter.error(f"{e}\n    Published anyway; add '{directive}' to the file by hand")
            return
        self.reporter.ok(f"{path} => {self.client.entry_url(public_id)}")

    def update(self, path: Path, entry: Entry) -> None:
        self.client.update(entry)
        logger.info("entry_updated", path=str(path), id=entry.public_id)
        self.reporter.ok(f"{path} => {self.client.entry_url(entry.public_id)}")

    def wrap_up(self) -> None:
        pass
