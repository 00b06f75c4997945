"""Parsed entries and their canonical (wire) form."""

from dataclasses import dataclass, field
from typing import Any, Optional

from antisync_markup.signature import signature as compute_signature


@dataclass(frozen=True)
class SeriesRef:
    """Position of an entry within a named series."""

    name: str
    index: int

    def to_map(self) -> dict[str, Any]:
        return {"series": self.name, "index": self.index}


@dataclass(frozen=True)
class Entry:
    """One parsed source file, immutable after parsing.

    Attributes:
        content: Rendered HTML body
        summary: Rendered summary, if the file has one
        title: Entry title
        metalink: Meta-link token (``~ meta``)
        symlink: Symbolic link name (``~ symlink``)
        redirect_url: Redirect target for the parse target, if any
        series: Series memberships in source order
        tags: Tags in source order
        public_id: Remote id; None means the entry was never published
        publish: True when a ``~ public`` directive matched the target
    """

    content: str
    summary: Optional[str] = None
    title: Optional[str] = None
    metalink: Optional[str] = None
    symlink: Optional[str] = None
    redirect_url: Optional[str] = None
    series: tuple[SeriesRef, ...] = ()
    tags: tuple[str, ...] = ()
    public_id: Optional[int] = None
    publish: bool = False

    @property
    def is_new(self) -> bool:
        """True if the remote has not assigned an id yet."""
        return self.public_id is None

    def content_map(self) -> dict[str, Any]:
        """Build the fields that take part in the signature.

        A redirect entry is represented by its URL alone.
        """
        if self.redirect_url is not None:
            return {"url": self.redirect_url}

        result: dict[str, Any] = {
            "body": self.content,
            "series": [ref.to_map() for ref in self.series],
        }
        if self.title is not None:
            result["title"] = self.title
        if self.symlink is not None:
            result["symlink"] = self.symlink
        if self.summary is not None:
            result["summary"] = self.summary
        if self.tags:
            result["tags"] = list(self.tags)
        if self.metalink is not None:
            result["metalink"] = self.metalink
        return result

    @property
    def signature(self) -> str:
        return compute_signature(self.content_map())

    def to_map(self) -> dict[str, Any]:
        """Build the payload sent to the remote API.

        The ``id`` key is added after the signature is computed, so an
        entry keeps its signature when it gets published.
        """
        result = self.content_map()
        result["signature"] = compute_signature(result)
        if self.public_id is not None:
            result["id"] = self.public_id
        return result


@dataclass
class EntryBuilder:
    """Mutable accumulator filled in while a file is being parsed."""

    title: Optional[str] = None
    metalink: Optional[str] = None
    symlink: Optional[str] = None
    redirect_url: Optional[str] = None
    series: list[SeriesRef] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    public_id: Optional[int] = None
    publish: bool = False

    def freeze(self, content: str, summary: Optional[str]) -> Entry:
        """Produce the immutable entry once the content is rendered."""
        return Entry(
            content=content,
            summary=summary,
            title=self.title,
            metalink=self.metalink,
            symlink=self.symlink,
            redirect_url=self.redirect_url,
            series=tuple(self.series),
            tags=tuple(self.tags),
            public_id=self.public_id,
            publish=self.publish,
        )
