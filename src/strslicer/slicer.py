"""Forward-only string slicer for delimiter-driven parsing.

Walks over an immutable source string, carving it into StrView spans.

Design:
    - Position is a character offset; it only moves forward or stays
    - Every slice is a StrView over the same source object (no copying)
    - "Not found" is absence (None or False), never an exception
    - Exceptions are reserved for misuse (bad jump targets, bad patterns)

Boundary convention:
    slice_until() stops AT the delimiter and does not consume it.
    Call skip_over() to step past it, or use slice_until_after().

Slicing a view:
    A slicer built from a StrView scans the view's span of the underlying
    source in place. Positions and returned views keep using offsets into
    that underlying source.

Example:
    >>> slicer = as_slicer("images/cat.jpeg")
    >>> directory = slicer.slice_until("/")
    >>> slicer.skip_over("/")
    True
    >>> filename = slicer.slice_until(".")
    >>> slicer.skip_over(".")
    True
    >>> extension = slicer.slice_to_end()
    >>> (str(directory), str(filename), str(extension))
    ('images', 'cat', 'jpeg')

Python 3.13+. Zero external dependencies.
"""

import logging

from strslicer.constants import CARRIAGE_RETURN, NEWLINE
from strslicer.diagnostics import (
    DiagnosticFormatter,
    ErrorTemplate,
    OutputFormat,
    SlicerPositionError,
    SourceSpan,
)
from strslicer.patterns import Pattern, find_pattern, match_at
from strslicer.position import locate
from strslicer.trackers import Tracker
from strslicer.view import StrView

__all__ = ["StrSlicer", "as_slicer"]

logger = logging.getLogger(__name__)

_log_formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)


def _is_space(char: str) -> bool:
    return char.isspace()


def _is_not_space(char: str) -> bool:
    return not char.isspace()


def _require_int(name: str, value: object) -> None:
    # bool is an int subclass but never a meaningful offset
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(ErrorTemplate.invalid_offset_type(name, value).message)


class StrSlicer:
    """Cursor over a source string or a view of one.

    Slicing methods (slice_*) return StrView spans of the source. Methods
    that can fail to find their target return None (slices) or False
    (skips) and leave the position unchanged.

    Thread Safety:
        Not thread-safe. Give each thread its own slicer; the source string
        itself may be shared by any number of slicers.
    """

    __slots__ = ("_end", "_pos", "_source", "_start", "_tracker")

    def __init__(self, source: str | StrView, tracker: Tracker | None = None) -> None:
        """Create a slicer positioned at the start of source.

        Args:
            source: Text to slice. A StrView is scanned in place over its
                underlying source, limited to the view's span.
            tracker: Optional observer notified of every position change

        Raises:
            TypeError: If source is neither a str nor a StrView
        """
        if isinstance(source, StrView):
            self._source = source.source
            self._start = source.start
            self._end = source.end
        elif isinstance(source, str):
            self._source = source
            self._start = 0
            self._end = len(source)
        else:
            diagnostic = ErrorTemplate.invalid_source(source)
            raise TypeError(diagnostic.message)
        self._pos = self._start
        self._tracker = tracker

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def source(self) -> str:
        """Underlying source string (the whole string, even for a view)."""
        return self._source

    @property
    def pos(self) -> int:
        """Current character offset into the source."""
        return self._pos

    @property
    def start(self) -> int:
        """Offset the slicer started at (0 unless built from a view)."""
        return self._start

    @property
    def end(self) -> int:
        """Offset the slicer stops at."""
        return self._end

    @property
    def is_at_end(self) -> bool:
        return self._pos >= self._end

    @property
    def tracker(self) -> Tracker | None:
        return self._tracker

    @property
    def tracker_pos(self) -> object:
        """Position reported by the attached tracker, or None without one."""
        if self._tracker is None:
            return None
        return self._tracker.pos

    def as_str(self) -> str:
        """Return the text the slicer operates on."""
        if self._start == 0 and self._end == len(self._source):
            return self._source
        return self._source[self._start : self._end]

    def remainder(self) -> StrView | None:
        """View of the unconsumed text, without moving.

        Returns:
            View from the current position to the end, or None at the end
        """
        if self.is_at_end:
            return None
        return StrView(self._source, self._pos, self._end)

    def __str__(self) -> str:
        return self.as_str()

    def __repr__(self) -> str:
        where = locate(self._source, self._pos, self._start)
        return f"StrSlicer(pos={self._pos}, at={where}, length={self._end - self._start})"

    # ------------------------------------------------------------------
    # Movement
    # ------------------------------------------------------------------

    def _move(self, new_pos: int) -> None:
        old_pos = self._pos
        if new_pos == old_pos:
            return
        if self._tracker is not None:
            self._tracker.update(self._source, old_pos, new_pos)
        self._pos = new_pos

    def _view_to(self, end: int) -> StrView:
        start = self._pos
        self._move(end)
        return StrView(self._source, start, end)

    def _span_here(self) -> SourceSpan:
        line, column = locate(self._source, self._pos, self._start).line_col()
        return SourceSpan(start=self._pos, end=self._pos, line=line, column=column)

    def jump_to(self, pos: int) -> None:
        """Move to an absolute position.

        Args:
            pos: Target offset, between the current position and the end

        Raises:
            TypeError: If pos is not an int
            SlicerPositionError: If pos lies outside the sliced range or
                before the current position. The position is left unchanged.
        """
        _require_int("Position", pos)
        if not self._start <= pos <= self._end:
            diagnostic = ErrorTemplate.position_out_of_bounds(
                self._source, pos, self._start, self._end, self._span_here()
            )
            logger.debug("Rejected jump to %d: %s", pos, _log_formatter.format(diagnostic))
            raise SlicerPositionError(diagnostic)
        if pos < self._pos:
            diagnostic = ErrorTemplate.position_behind_cursor(
                self._source, pos, self._pos, self._span_here()
            )
            logger.debug("Rejected jump to %d: %s", pos, _log_formatter.format(diagnostic))
            raise SlicerPositionError(diagnostic)
        self._move(pos)

    def skip_to_end(self) -> None:
        self._move(self._end)

    def slice_to_end(self) -> StrView:
        """Consume the rest of the source.

        Always succeeds. Returns an empty view when already at the end,
        so a second call yields an empty view.

        Example:
            >>> slicer = as_slicer("abc")
            >>> str(slicer.slice_to_end())
            'abc'
            >>> len(slicer.slice_to_end())
            0
        """
        return self._view_to(self._end)

    def skip_num_chars(self, count: int) -> None:
        """Skip up to count characters, stopping at the end.

        Raises:
            TypeError: If count is not an int
            ValueError: If count is negative
        """
        _require_int("Character count", count)
        if count < 0:
            raise ValueError(ErrorTemplate.negative_count(count).message)
        self._move(min(self._pos + count, self._end))

    def slice_num_chars(self, count: int) -> StrView | None:
        """Consume up to count characters.

        Returns:
            View of the consumed characters, or None if already at the end

        Raises:
            TypeError: If count is not an int
            ValueError: If count is negative
        """
        _require_int("Character count", count)
        if count < 0:
            raise ValueError(ErrorTemplate.negative_count(count).message)
        if self.is_at_end:
            return None
        return self._view_to(min(self._pos + count, self._end))

    # ------------------------------------------------------------------
    # Pattern operations
    # ------------------------------------------------------------------

    def is_next(self, pattern: Pattern) -> bool:
        """Check whether pattern matches at the current position."""
        return match_at(pattern, self._source, self._pos, self._end) is not None

    def skip_over(self, pattern: Pattern) -> bool:
        """Step past pattern if it is next.

        Returns:
            True if the pattern was next and has been consumed, False
            otherwise (position unchanged)

        Example:
            >>> slicer = as_slicer("123456")
            >>> slicer.skip_over("123")
            True
            >>> slicer.skip_over("123")
            False
            >>> slicer.pos
            3
        """
        end = match_at(pattern, self._source, self._pos, self._end)
        if end is None:
            return False
        self._move(end)
        return True

    def skip_until(self, pattern: Pattern) -> bool:
        """Move to the first occurrence of pattern, leaving it next.

        Returns:
            True if found, False otherwise (position unchanged)
        """
        found = find_pattern(pattern, self._source, self._pos, self._end)
        if found is None:
            return False
        self._move(found[0])
        return True

    def slice_until(self, pattern: Pattern) -> StrView | None:
        """Consume text up to the first occurrence of pattern.

        The delimiter itself is not consumed.

        Returns:
            View of the text before the delimiter (possibly empty), or None
            if the delimiter does not occur (position unchanged)

        Example:
            >>> slicer = as_slicer("This is a sentence.")
            >>> str(slicer.slice_until("sentence"))
            'This is a '
            >>> slicer.slice_until("missing") is None
            True
        """
        found = find_pattern(pattern, self._source, self._pos, self._end)
        if found is None:
            return None
        return self._view_to(found[0])

    def skip_until_after(self, pattern: Pattern) -> bool:
        """Move past the first occurrence of pattern.

        Returns:
            True if found, False otherwise (position unchanged)
        """
        found = find_pattern(pattern, self._source, self._pos, self._end)
        if found is None:
            return False
        self._move(found[1])
        return True

    def slice_until_after(self, pattern: Pattern) -> StrView | None:
        """Consume text through the first occurrence of pattern.

        Returns:
            View including the delimiter, or None if the delimiter does not
            occur (position unchanged)
        """
        found = find_pattern(pattern, self._source, self._pos, self._end)
        if found is None:
            return None
        return self._view_to(found[1])

    # ------------------------------------------------------------------
    # Character classes
    # ------------------------------------------------------------------

    def _run_end(self, pattern: Pattern) -> int:
        # A run ends where the opposite class starts, or at the end.
        found = find_pattern(pattern, self._source, self._pos, self._end)
        return self._end if found is None else found[0]

    def skip_whitespace(self) -> None:
        self._move(self._run_end(_is_not_space))

    def slice_whitespace(self) -> StrView | None:
        """Consume the run of whitespace at the current position.

        Returns:
            View of the whitespace (empty if none is next), or None at the end
        """
        if self.is_at_end:
            return None
        return self._view_to(self._run_end(_is_not_space))

    def skip_non_whitespace(self) -> None:
        self._move(self._run_end(_is_space))

    def slice_non_whitespace(self) -> StrView | None:
        """Consume the run of non-whitespace characters at the current position.

        Example:
            >>> slicer = as_slicer("This is a sentence.")
            >>> str(slicer.slice_non_whitespace())
            'This'
        """
        if self.is_at_end:
            return None
        return self._view_to(self._run_end(_is_space))

    # ------------------------------------------------------------------
    # Lines
    # ------------------------------------------------------------------

    def skip_line(self) -> None:
        """Skip past the rest of the line, including its LF."""
        if not self.skip_until_after(NEWLINE):
            self.skip_to_end()

    def slice_line(self) -> StrView | None:
        """Consume the rest of the line.

        The returned view excludes the line ending (LF or CRLF). A final
        line without a terminator is returned as well.

        Returns:
            View of the line content, or None at the end

        Example:
            >>> slicer = as_slicer("Line 1\\r\\nLine 2")
            >>> str(slicer.slice_line())
            'Line 1'
            >>> str(slicer.slice_line())
            'Line 2'
            >>> slicer.slice_line() is None
            True
        """
        if self.is_at_end:
            return None
        start = self._pos
        self.skip_line()
        end = self._pos
        if end > start and self._source[end - 1] == NEWLINE:
            end -= 1
            if end > start and self._source[end - 1] == CARRIAGE_RETURN:
                end -= 1
        return StrView(self._source, start, end)


def as_slicer(source: str | StrView, tracker: Tracker | None = None) -> StrSlicer:
    """Create a StrSlicer over source.

    Args:
        source: Text to slice, or a view to slice in place
        tracker: Optional position tracker (for example LineTracker())

    Returns:
        New slicer positioned at the start of source

    Example:
        >>> line = as_slicer("key=value\\nnext").slice_line()
        >>> fields = as_slicer(line)
        >>> str(fields.slice_until("="))
        'key'
        >>> fields.skip_over("=")
        True
        >>> str(fields.slice_to_end())
        'value'
    """
    return StrSlicer(source, tracker)
