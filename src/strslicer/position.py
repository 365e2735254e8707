"""Line/column location of slicer offsets.

LinePosition is the single place where newlines are counted. The slicer
uses it to locate diagnostics and for its repr; LineTracker keeps one and
advances it incrementally as the slicer moves, so each character is
scanned at most once.

LF is the line delimiter (see constants). Python 3.13+. Zero external
dependencies.
"""

from dataclasses import dataclass

from strslicer.constants import NEWLINE

__all__ = ["LinePosition", "locate"]


@dataclass(frozen=True, slots=True)
class LinePosition:
    """Line information for one offset in a source.

    Attributes:
        offset: Character offset the position describes
        line: Newlines passed before offset (0-based line index)
        line_start: Offset of the first character of the line

    Example:
        >>> position = locate("ab\\ncdef", 5)
        >>> (position.line, position.line_start, position.column)
        (1, 3, 2)
        >>> position.line_col()
        (2, 3)
    """

    offset: int = 0
    line: int = 0
    line_start: int = 0

    @property
    def column(self) -> int:
        """0-based column of offset."""
        return self.offset - self.line_start

    def line_col(self) -> tuple[int, int]:
        """(line, column), 1-based like text editors."""
        return (self.line + 1, self.column + 1)

    def advanced(self, source: str, new_offset: int) -> "LinePosition":
        """Return the position of new_offset, scanning only [offset, new_offset).

        Offsets at or before the current one return self unchanged.
        """
        if new_offset <= self.offset:
            return self
        passed = source.count(NEWLINE, self.offset, new_offset)
        if not passed:
            return LinePosition(new_offset, self.line, self.line_start)
        last = source.rfind(NEWLINE, self.offset, new_offset)
        return LinePosition(new_offset, self.line + passed, last + 1)

    def __str__(self) -> str:
        line, column = self.line_col()
        return f"{line}:{column}"


def locate(source: str, offset: int, start: int = 0) -> LinePosition:
    """Locate offset, counting lines from start.

    Args:
        source: Source text
        offset: Character offset, clamped into [start, len(source)]
        start: Offset treated as line 1, column 1

    Example:
        >>> str(locate("line1\\nline2", 8))
        '2:3'
    """
    offset = max(start, min(offset, len(source)))
    return LinePosition(start, 0, start).advanced(source, offset)
