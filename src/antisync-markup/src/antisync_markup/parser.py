"""Directive interpreter for antiblog markup.

A source file is a sequence of lines. Lines starting with ``~`` are
directives: they either switch the active section (``~ poem``,
``~ code``, ...) or set entry metadata (``~ title``, ``~ tags``, ...).
Every other line is text for the active section.

Example:
    >>> entry = parse_text("dev", "~ public dev\\n~ title Hello\\n\\nHello, world")
    >>> entry.title, entry.content, entry.is_new
    ('Hello', 'Hello, world', True)
"""

import io
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Optional

from antisync_markup.builder import ContentBuilder, NoContentError
from antisync_markup.entry import Entry, EntryBuilder, SeriesRef
from antisync_markup.errors import ParseError

DIRECTIVE_MARKER = "~"


class DirectiveInterpreter:
    """Consumes the lines of one source file and produces an ``Entry``.

    Attributes:
        target: Deployment target name; ``public`` and ``redirect``
                directives for other targets are ignored
        line_count: Number of lines consumed so far
    """

    def __init__(self, target: str):
        self.target = target
        self.line_count = 0
        self._builder = ContentBuilder()
        self._entry = EntryBuilder()

    def error(self, message: str) -> ParseError:
        return ParseError(message, self.line_count)

    def duplicate(self, item: str) -> ParseError:
        return self.error(f"Multiple '{DIRECTIVE_MARKER} {item}'")

    def push(self, line: str) -> "DirectiveInterpreter":
        """Consume one source line.

        Raises:
            ParseError: If the line is a malformed or repeated directive
        """
        self.line_count += 1
        if line.startswith(DIRECTIVE_MARKER):
            # First token is the marker plus anything glued to it
            tokens = line.split()
            name = tokens[1] if len(tokens) > 1 else ""
            self.handle_directive(name, tokens[2:])
        else:
            self._builder.push(line)
        return self

    def handle_directive(self, name: str, args: list[str]) -> None:
        if self._builder.switch_to(name):
            return
        directive = DIRECTIVES.get(name)
        if directive is None:
            raise self.error(f"Unsupported directive '{name}'")
        if not directive.accepts(len(args)):
            raise self.error(f"Bad number of arguments for '{name}'")
        directive.handler(self, *args)

    def export(self) -> Entry:
        """Render the collected content and freeze the entry.

        Raises:
            ParseError: If the file has no content
        """
        try:
            content, summary = self._builder.export()
        except NoContentError as e:
            raise self.error(str(e)) from e
        return self._entry.freeze(content, summary)

    # Directive handlers

    def insert_summary(self) -> None:
        self._builder.insert_summary()

    def meta(self, token: str) -> None:
        if self._entry.metalink is not None:
            raise self.duplicate("metalink")
        self._entry.metalink = token

    def public(self, target: str, public_id: Optional[str] = None) -> None:
        if target != self.target:
            return
        if self._entry.publish:
            raise self.duplicate(f"public {self.target}")
        self._entry.public_id = self._parse_int(public_id, "id") if public_id is not None else None
        self._entry.publish = True

    def redirect(self, target: str, url: str) -> None:
        if target != self.target:
            return
        if self._entry.redirect_url is not None:
            raise self.duplicate(f"redirect {self.target}")
        self._entry.redirect_url = url

    def tags(self, *tokens: str) -> None:
        self._entry.tags.extend(tokens)

    def series(self, name: str, index: str) -> None:
        self._entry.series.append(SeriesRef(name, self._parse_int(index, "series index")))

    def symlink(self, token: str) -> None:
        if self._entry.symlink is not None:
            raise self.duplicate("symlink")
        self._entry.symlink = token

    def title(self, *tokens: str) -> None:
        self._entry.title = " ".join(tokens)

    def _parse_int(self, value: str, what: str) -> int:
        try:
            return int(value)
        except ValueError:
            raise self.error(f"Bad {what} '{value}'") from None


@dataclass(frozen=True)
class Directive:
    """Metadata directive: handler plus accepted argument count.

    Attributes:
        handler: Unbound ``DirectiveInterpreter`` method
        min_args: Minimum number of arguments
        max_args: Maximum number of arguments (None for unlimited)
    """

    handler: Callable[..., None]
    min_args: int
    max_args: Optional[int]

    def accepts(self, count: int) -> bool:
        if count < self.min_args:
            return False
        return self.max_args is None or count <= self.max_args


DIRECTIVES: dict[str, Directive] = {
    "insert-summary": Directive(DirectiveInterpreter.insert_summary, 0, 0),
    "meta": Directive(DirectiveInterpreter.meta, 1, 1),
    "public": Directive(DirectiveInterpreter.public, 1, 2),
    "redirect": Directive(DirectiveInterpreter.redirect, 2, 2),
    "tags": Directive(DirectiveInterpreter.tags, 0, None),
    "series": Directive(DirectiveInterpreter.series, 2, 2),
    "symlink": Directive(DirectiveInterpreter.symlink, 1, 1),
    "title": Directive(DirectiveInterpreter.title, 0, None),
}


def parse_lines(target: str, lines: Iterable[str]) -> Entry:
    """Parse an iterable of source lines into an entry.

    Args:
        target: Deployment target name (e.g. "dev", "prod")
        lines: Source lines, with or without trailing newlines

    Returns:
        Frozen entry

    Raises:
        ParseError: If the source is malformed or has no content
    """
    interpreter = DirectiveInterpreter(target)
    for line in lines:
        interpreter.push(line)
    return interpreter.export()


def parse_text(target: str, text: str) -> Entry:
    """Parse source text, split on ``\\n`` only, into an entry (see ``parse_lines``)."""
    return parse_lines(target, io.StringIO(text, newline="\n"))


def load(target: str, path: Path) -> Entry:
    """Read and parse a source file.

    Lines are split on ``\\n`` only and keep their line endings, so CRLF
    sources render with CRLF.

    Raises:
        ParseError: If the source is malformed or has no content
        OSError: If the file cannot be read
    """
    with open(path, encoding="utf-8", newline="\n") as f:
        return parse_lines(target, f)
