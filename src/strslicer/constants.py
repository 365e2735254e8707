"""Shared constants for strslicer.

Placing constants here avoids circular imports between the slicer,
trackers and diagnostics, and provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Line handling
    "NEWLINE",
    "CARRIAGE_RETURN",
    # Error display
    "MAX_DISPLAY_LENGTH",
    "TRUNCATION_MARKER",
]

# ============================================================================
# LINE HANDLING
# ============================================================================
#
# Line-oriented operations (skip_line, slice_line, LineTracker) use LF as
# the line delimiter. CRLF input works because the LF is still present;
# slice_line strips the trailing CR. CR-only line endings are NOT treated
# as line breaks.

NEWLINE: str = "\n"
CARRIAGE_RETURN: str = "\r"

# ============================================================================
# ERROR DISPLAY
# ============================================================================

# Maximum number of source characters quoted in an error message.
# Longer sources are cut and suffixed with TRUNCATION_MARKER.
MAX_DISPLAY_LENGTH: int = 256

TRUNCATION_MARKER: str = "[...]"
