"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from strslicer.constants import MAX_DISPLAY_LENGTH, TRUNCATION_MARKER

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate", "truncate_for_display"]


def truncate_for_display(source: str, max_length: int = MAX_DISPLAY_LENGTH) -> tuple[bool, str]:
    """Cut source to at most max_length characters for quoting in messages.

    Returns:
        (truncated, text) tuple

    Example:
        >>> truncate_for_display("abcdef", 3)
        (True, 'abc')
        >>> truncate_for_display("abc", 3)
        (False, 'abc')
    """
    if len(source) <= max_length:
        return (False, source)
    return (True, source[:max_length])


def _quote(source: str) -> str:
    truncated, text = truncate_for_display(source)
    marker = TRUNCATION_MARKER if truncated else ""
    return f"`{text}`{marker}"


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def position_out_of_bounds(
        source: str,
        position: int,
        start: int = 0,
        end: int | None = None,
        span: SourceSpan | None = None,
    ) -> Diagnostic:
        """Jump target lies outside the sliced range.

        Args:
            source: Source the slicer operates on
            position: Requested jump target
            start: First offset of the sliced range
            end: End of the sliced range (defaults to the source length)
            span: Location of the cursor when the jump was requested

        Returns:
            Diagnostic for POSITION_OUT_OF_BOUNDS
        """
        if end is None:
            end = len(source)
        msg = f"Position {position} is out of bounds of {_quote(source[start:end])}"
        return Diagnostic(
            code=DiagnosticCode.POSITION_OUT_OF_BOUNDS,
            message=msg,
            span=span,
            hint=f"Positions must lie between {start} and {end}",
        )

    @staticmethod
    def position_behind_cursor(
        source: str, position: int, current: int, span: SourceSpan | None = None
    ) -> Diagnostic:
        """Jump target precedes the current position.

        Args:
            source: Source the slicer operates on
            position: Requested jump target
            current: Current cursor position
            span: Location of the cursor when the jump was requested

        Returns:
            Diagnostic for POSITION_BEHIND_CURSOR
        """
        msg = f"Cannot jump back to position {position} from position {current}"
        return Diagnostic(
            code=DiagnosticCode.POSITION_BEHIND_CURSOR,
            message=msg,
            span=span,
            hint=(
                f"Slicers only move forward; create a new slicer over {_quote(source)} "
                "to rescan earlier text"
            ),
        )

    @staticmethod
    def invalid_pattern(pattern: object) -> Diagnostic:
        """Pattern is neither a string nor a character predicate."""
        msg = f"Invalid pattern type: {type(pattern).__name__}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_PATTERN,
            message=msg,
            hint=(
                "Pass a str or StrView delimiter, or a callable taking one character "
                "and returning bool"
            ),
        )

    @staticmethod
    def invalid_source(source: object) -> Diagnostic:
        """Slicer source is not a string."""
        msg = f"Slicer source must be str or StrView, got {type(source).__name__}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_SOURCE,
            message=msg,
            hint="Decode bytes before slicing",
        )

    @staticmethod
    def negative_count(count: int) -> Diagnostic:
        """Character count is negative."""
        msg = f"Character count must be >= 0, got {count}"
        return Diagnostic(
            code=DiagnosticCode.NEGATIVE_COUNT,
            message=msg,
        )

    @staticmethod
    def invalid_offset_type(name: str, value: object) -> Diagnostic:
        """Position or count is not an int."""
        msg = f"{name} must be int, got {type(value).__name__}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_OFFSET_TYPE,
            message=msg,
            hint="Offsets and counts are character indices; convert with int() first",
        )
