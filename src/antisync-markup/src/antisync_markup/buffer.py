"""Line buffers holding rendered text and layout markers.

A buffer is an ordered list of elements. Each element is either literal
text (a plain ``str``) or a ``Marker``. Markers are only turned into text
when the buffer is formatted, so leading and trailing layout can be
dropped without touching the literal content.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Optional, Union


class Marker(Enum):
    """Symbolic layout elements stored alongside literal text."""

    BLANK_LINE = "blank_line"
    SEPARATOR = "separator"


Element = Union[str, Marker]

TRANSLATION_TABLE = {
    Marker.BLANK_LINE: "\n",
    Marker.SEPARATOR: '</div><div class="stuff">\n',
}


@dataclass
class LineBuffer:
    """Ordered sequence of literal strings and markers.

    Attributes:
        elements: Buffer contents in insertion order
    """

    elements: list[Element] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(self.elements)

    @property
    def last(self) -> Optional[Element]:
        """Last element, or None for an empty buffer."""
        return self.elements[-1] if self.elements else None

    def append(self, *elements: Element) -> None:
        """Append one or more elements in order."""
        self.elements.extend(elements)

    def extend(self, elements: Iterable[Element]) -> None:
        self.elements.extend(elements)

    def rstrip_last(self) -> None:
        """Remove trailing whitespace from the last element if it is literal."""
        if self.elements and isinstance(self.elements[-1], str):
            self.elements[-1] = self.elements[-1].rstrip()

    def strip(self) -> None:
        """Drop markers from both ends of the buffer.

        After stripping, the first and last elements (if any) are literal text.
        """
        while self.elements and isinstance(self.elements[0], Marker):
            self.elements.pop(0)
        while self.elements and isinstance(self.elements[-1], Marker):
            self.elements.pop()

    def format(self) -> Optional[str]:
        """Render the buffer to a string.

        Returns:
            Concatenated text with markers translated, or None if nothing
            but markers was ever written
        """
        self.strip()
        if not self.elements:
            return None
        return "".join(
            TRANSLATION_TABLE[element] if isinstance(element, Marker) else element
            for element in self.elements
        )
