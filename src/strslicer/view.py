"""Non-owning views into a slicer's source.

A StrView records the source object and a [start, end) span. Creating a
view never copies text; the substring is only built when the view is
converted with str() or read through .text.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

__all__ = ["StrView"]


@dataclass(frozen=True, slots=True, eq=False)
class StrView:
    """Immutable span over a shared source string.

    Views compare by text: two views are equal when they cover the same
    characters, and a view equals a plain str with the same characters.
    Hashing follows the text so views and strings can share dict keys.

    Example:
        >>> view = StrView("images/cat.jpeg", 7, 10)
        >>> view == "cat"
        True
        >>> len(view)
        3
        >>> view.span
        (7, 10)
    """

    source: str
    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end <= len(self.source):
            msg = (
                f"View span [{self.start}, {self.end}) is not within "
                f"a source of length {len(self.source)}"
            )
            raise ValueError(msg)

    @property
    def text(self) -> str:
        """Materialize the viewed characters as a new str."""
        return self.source[self.start : self.end]

    @property
    def span(self) -> tuple[int, int]:
        """(start, end) offsets into the source."""
        return (self.start, self.end)

    def is_empty(self) -> bool:
        return self.start == self.end

    def __len__(self) -> int:
        return self.end - self.start

    def __bool__(self) -> bool:
        return self.end > self.start

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"StrView({self.text!r}, {self.start}, {self.end})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StrView):
            if other.source is self.source and other.span == self.span:
                return True
            return len(other) == len(self) and other.text == self.text
        if isinstance(other, str):
            return len(other) == len(self) and self.source.startswith(other, self.start)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.text)

    def __contains__(self, item: str) -> bool:
        return self.source.find(item, self.start, self.end) != -1
