"""Content builder: owns the buffers and the active section writer."""

from typing import Optional

from antisync_markup.buffer import LineBuffer
from antisync_markup.writers import (
    CodeWriter,
    ContentWriter,
    FootnoteWriter,
    PoemWriter,
    SectionWriter,
)


class NoContentError(Exception):
    """Raised by ``ContentBuilder.export`` when the body renders to nothing."""


class ContentBuilder:
    """Routes source lines into the body and summary buffers.

    Attributes:
        primary: Body buffer
        summary: Summary buffer
        active: Writer that currently receives lines
    """

    def __init__(self) -> None:
        self.primary = LineBuffer()
        self.summary = LineBuffer()
        self.footnote = FootnoteWriter(self.primary)
        self.sections: dict[str, SectionWriter] = {
            "content": ContentWriter(self.primary),
            "summary": ContentWriter(self.summary),
            "poem": PoemWriter(self.primary),
            "code": CodeWriter(self.primary),
            "footnote": self.footnote,
        }
        self.active: SectionWriter = self.sections["content"]

    def switch_to(self, name: str) -> bool:
        """Make the named section active.

        Args:
            name: Section name (content, summary, poem, code, footnote)

        Returns:
            True if ``name`` is a section, False otherwise
        """
        writer = self.sections.get(name)
        if writer is None:
            return False
        self.active.finish()
        self.active = writer
        self.active.start()
        return True

    def push(self, line: str) -> None:
        self.active.push(line)

    def insert_summary(self) -> None:
        """Copy the summary written so far into the body."""
        self.primary.extend(self.summary)

    def export(self) -> tuple[str, Optional[str]]:
        """Render body and summary.

        The active section is not finished, so a section still open at the
        end of the source is not closed.

        Returns:
            Tuple of (content, summary); summary is None when empty

        Raises:
            NoContentError: If the body is empty after stripping
        """
        self.footnote.dump()
        content = self.primary.format()
        if content is None:
            raise NoContentError("No content")
        return content, self.summary.format()
