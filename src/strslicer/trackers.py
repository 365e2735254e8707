"""Position trackers for StrSlicer.

A tracker observes every position change of the slicer it is attached to
and maintains derived position information (such as the current line) so
that callers do not have to rescan the source.

Python 3.13+. Zero external dependencies.
"""

from typing import Protocol

from strslicer.position import LinePosition, locate

__all__ = ["LineTracker", "Tracker"]


class Tracker(Protocol):
    """Observer notified whenever a slicer changes position.

    Slicers only move forward, so update() always receives
    old_pos <= new_pos.
    """

    @property
    def pos(self) -> object:
        """Tracked position value, returned by StrSlicer.tracker_pos."""
        ...

    def update(self, source: str, old_pos: int, new_pos: int) -> None:
        """Record a move of the slicer from old_pos to new_pos."""
        ...


class LineTracker:
    """Tracks the line the slicer is on.

    Advances a LinePosition incrementally: each update only scans the
    characters between the old and new position. Lines are counted from
    the position of the first move, so a slicer over a view reports lines
    relative to the start of the view.

    Example:
        >>> from strslicer import as_slicer
        >>> slicer = as_slicer("Line 1\\nLine 2\\nLine 3", tracker=LineTracker())
        >>> slicer.skip_to_end()
        >>> slicer.tracker_pos
        2
    """

    __slots__ = ("_anchor", "_position", "_source")

    def __init__(self) -> None:
        self._source = ""
        self._anchor: int | None = None
        self._position = LinePosition()

    @property
    def pos(self) -> int:
        """Number of newlines passed (0-based line index)."""
        return self._position.line

    @property
    def lines(self) -> int:
        return self._position.line

    @property
    def line_start(self) -> int:
        """Offset of the first character of the current line."""
        return self._position.line_start

    @property
    def column(self) -> int:
        """0-based column of the last position seen."""
        return self._position.column

    def line_col(self, pos: int | None = None) -> tuple[int, int]:
        """(line, column) of pos, 1-based like text editors.

        Args:
            pos: Offset to locate; defaults to the last position seen.
                Offsets past the last position are scanned from there.
        """
        if pos is None:
            return self._position.line_col()
        if pos >= self._position.offset:
            return self._position.advanced(self._source, pos).line_col()
        return locate(self._source, pos, self._anchor or 0).line_col()

    def update(self, source: str, old_pos: int, new_pos: int) -> None:
        if self._anchor is None:
            self._anchor = old_pos
            self._source = source
            self._position = LinePosition(old_pos, 0, old_pos)
        self._position = self._position.advanced(source, new_pos)

    def __repr__(self) -> str:
        position = self._position
        return f"LineTracker(lines={position.line}, line_start={position.line_start})"
