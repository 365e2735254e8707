"""Pattern matching primitives used by StrSlicer.

A pattern is either:
    - str or StrView: a literal delimiter (single characters included).
      The empty string matches zero-width at any position.
    - Callable[[str], bool]: a predicate over single characters. It
      matches exactly one character for which it returns True.

Both functions search source[pos:end] without copying it and report
matches as (start, end) offsets so the slicer can treat literal and
predicate patterns uniformly.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable
from typing import TypeAlias

from strslicer.diagnostics import ErrorTemplate
from strslicer.view import StrView

__all__ = ["Pattern", "find_pattern", "match_at", "validate_pattern"]

Pattern: TypeAlias = str | StrView | Callable[[str], bool]


def validate_pattern(pattern: object) -> str | Callable[[str], bool]:
    """Normalize pattern to a str or a predicate.

    Views are materialized; delimiters are short, the searched text is not.

    Raises:
        TypeError: If pattern is not a str, StrView or callable
    """
    if isinstance(pattern, StrView):
        return pattern.text
    if isinstance(pattern, str) or callable(pattern):
        return pattern
    diagnostic = ErrorTemplate.invalid_pattern(pattern)
    raise TypeError(diagnostic.message)


def match_at(pattern: Pattern, source: str, pos: int, end: int | None = None) -> int | None:
    """Return the end offset of a match starting exactly at pos.

    Args:
        pattern: Delimiter or predicate
        source: Text to search
        pos: Offset the match must start at
        end: Matches may not extend past this offset (default: source length)

    Returns:
        End offset of the match, or None if the pattern is not next

    Example:
        >>> match_at("/", "a/b", 1)
        2
        >>> match_at(str.isdigit, "a1", 0) is None
        True
    """
    pattern = validate_pattern(pattern)
    if end is None:
        end = len(source)
    if isinstance(pattern, str):
        if source.startswith(pattern, pos, end):
            return pos + len(pattern)
        return None
    if pos < end and pattern(source[pos]):
        return pos + 1
    return None


def find_pattern(
    pattern: Pattern, source: str, pos: int, end: int | None = None
) -> tuple[int, int] | None:
    """Find the first match in source[pos:end].

    Only the first occurrence is reported; overlapping or adjacent later
    occurrences are not examined.

    Returns:
        (start, end) of the first match, or None if there is none

    Example:
        >>> find_pattern(".", "cat.jpeg", 0)
        (3, 4)
        >>> find_pattern(str.isspace, "ab c", 0)
        (2, 3)
        >>> find_pattern("/", "cat", 0) is None
        True
        >>> find_pattern(".", "cat.jpeg", 0, 3) is None
        True
    """
    pattern = validate_pattern(pattern)
    if end is None:
        end = len(source)
    if isinstance(pattern, str):
        index = source.find(pattern, pos, end)
        if index == -1:
            return None
        return (index, index + len(pattern))
    for index in range(pos, end):
        if pattern(source[index]):
            return (index, index + 1)
    return None
