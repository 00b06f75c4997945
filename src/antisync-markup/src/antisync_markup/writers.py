"""Section writers: how raw source lines land in a line buffer.

Each ``~ <section>`` directive activates one writer. The builder calls
``finish()`` on the writer being left and ``start()`` on the writer being
entered, so writers can open and close their own markup.
"""

from abc import ABC, abstractmethod

from antisync_markup.buffer import LineBuffer, Marker

LINE_BREAK = "<br />\n"
CODE_OPEN = "<pre>\n"
CODE_CLOSE = "</pre>\n"
FOOTER_RULE = "\n<hr />\n"
FOOTNOTE_BREAK = "<br />"


def _is_blank(line: str) -> bool:
    return not line.strip()


class SectionWriter(ABC):
    """Common interface of all section writers.

    Attributes:
        buffer: Target buffer that receives the section's output
    """

    def __init__(self, buffer: LineBuffer):
        self.buffer = buffer

    def start(self) -> None:
        """Called when the section becomes active."""

    @abstractmethod
    def push(self, line: str) -> None:
        """Append one raw source line."""

    def finish(self) -> None:
        """Called when another section takes over."""


class ContentWriter(SectionWriter):
    """Plain prose: blank lines separate paragraphs, other lines pass through.

    Used for both the body and the summary.
    """

    def push(self, line: str) -> None:
        self.buffer.append(Marker.SEPARATOR if _is_blank(line) else line)


class PoemWriter(SectionWriter):
    """Verse: one line break per line, blank lines start a new stanza."""

    def start(self) -> None:
        self.buffer.append(Marker.SEPARATOR)

    def push(self, line: str) -> None:
        if _is_blank(line):
            self.buffer.append(Marker.BLANK_LINE, Marker.SEPARATOR)
            return
        if self.buffer.last is not Marker.SEPARATOR:
            self.buffer.append(LINE_BREAK)
        self.buffer.append(line.rstrip())

    def finish(self) -> None:
        self.buffer.append(Marker.BLANK_LINE, Marker.SEPARATOR)


class CodeWriter(SectionWriter):
    """Preformatted text wrapped in a ``<pre>`` block, lines kept verbatim."""

    def start(self) -> None:
        self.buffer.append(CODE_OPEN)

    def push(self, line: str) -> None:
        self.buffer.append(Marker.BLANK_LINE if _is_blank(line) else line)

    def finish(self) -> None:
        self.buffer.append(CODE_CLOSE)


def _footnote_ref(number: int, name_prefix: str, href_prefix: str) -> str:
    return f"<a name='{name_prefix}{number}' href='#{href_prefix}{number}'><sup>{number}</sup></a>"


class FootnoteWriter(SectionWriter):
    """Footnotes collected into a footer below the body.

    Every ``~ footnote`` directive places a numbered forward reference
    (``tx<n>``) in the body and a matching back reference (``nm<n>``) in
    the footer; the section's lines follow the back reference.

    Attributes:
        buffer: Primary (body) buffer
        footer: Footer buffer holding the footnote texts
        count: Number of footnotes started so far
    """

    def __init__(self, buffer: LineBuffer):
        super().__init__(buffer)
        self.footer = LineBuffer()
        self.count = 0

    def start(self) -> None:
        self.buffer.rstrip_last()
        if self.count:
            self.footer.append(FOOTNOTE_BREAK)
        self.count += 1
        self.buffer.append(_footnote_ref(self.count, "tx", "nm"))
        self.footer.append(_footnote_ref(self.count, "nm", "tx"))

    def push(self, line: str) -> None:
        self.footer.append(line)

    def dump(self) -> None:
        """Move the footer under a horizontal rule at the end of the body."""
        if len(self.footer):
            self.buffer.append(FOOTER_RULE, "\n".join(self.footer))
