"""Antiblog markup parser - Turn plain-text sources into publishable entries.

This package parses the small ``~``-directive markup language used for
antiblog posts into structured entries: rendered HTML body, optional
summary, and metadata (title, tags, series, links, publication state).

Key features:
- Section writers for prose, poems, code and footnotes
- Static directive dispatch with per-line error reporting
- Immutable entries with an order-stable signature for change detection

Example:
    >>> from antisync_markup import parse_text
    >>> entry = parse_text("prod", "~ public prod 42\\n\\nHello, world")
    >>> entry.to_map()["id"]
    42
"""

from antisync_markup.buffer import LineBuffer, Marker
from antisync_markup.builder import ContentBuilder
from antisync_markup.entry import Entry, EntryBuilder, SeriesRef
from antisync_markup.errors import ParseError
from antisync_markup.parser import (
    DIRECTIVE_MARKER,
    DirectiveInterpreter,
    load,
    parse_lines,
    parse_text,
)
from antisync_markup.signature import signature

__version__ = "0.1.0"

__all__ = [
    "ContentBuilder",
    "DIRECTIVE_MARKER",
    "DirectiveInterpreter",
    "Entry",
    "EntryBuilder",
    "LineBuffer",
    "Marker",
    "ParseError",
    "SeriesRef",
    "load",
    "parse_lines",
    "parse_text",
    "signature",
]
