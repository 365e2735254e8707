"""Hypothesis property-based tests for StrSlicer.

Tests partitioning, absence handling and forward-only movement.
Complements test_slicer.py with property-based testing.
"""

from __future__ import annotations

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from strslicer import LineTracker, as_slicer

# ============================================================================
# HYPOTHESIS STRATEGIES
# ============================================================================

source_text = st.text(min_size=0, max_size=200)

delimiters = st.text(min_size=1, max_size=4)

# Operations applied in random sequences; each takes a slicer and a delimiter.
operations = st.sampled_from(
    [
        lambda s, d: s.slice_until(d),
        lambda s, d: s.skip_over(d),
        lambda s, d: s.skip_until(d),
        lambda s, d: s.slice_until_after(d),
        lambda s, d: s.slice_num_chars(len(d)),
        lambda s, d: s.slice_whitespace(),
        lambda s, d: s.slice_non_whitespace(),
        lambda s, d: s.slice_line(),
        lambda s, d: s.slice_to_end(),
    ]
)


# ============================================================================
# PROPERTY TESTS - PARTITIONING
# ============================================================================


class TestPartition:
    """slice_until + skip_over + slice_to_end partitions the source."""

    @given(before=source_text, delimiter=delimiters, after=source_text)
    @settings(max_examples=200)
    def test_partition_reconstructs_source(
        self, before: str, delimiter: str, after: str
    ) -> None:
        """PROPERTY: head + delimiter + tail == source."""
        source = before + delimiter + after
        slicer = as_slicer(source)

        head = slicer.slice_until(delimiter)
        assert head is not None
        assert slicer.skip_over(delimiter) is True
        tail = slicer.slice_to_end()

        assert head.text + delimiter + tail.text == source
        assert head.start == 0
        assert head.end + len(delimiter) == tail.start
        assert tail.end == len(source)
        assert delimiter not in head.text

    @given(source=source_text, delimiter=delimiters)
    @settings(max_examples=200)
    def test_absent_delimiter_leaves_position(self, source: str, delimiter: str) -> None:
        """PROPERTY: absent delimiter returns None and does not move."""
        assume(delimiter not in source)
        slicer = as_slicer(source)

        assert slicer.slice_until(delimiter) is None
        assert slicer.pos == 0
        assert slicer.slice_to_end() == source

    @given(source=source_text, delimiter=delimiters)
    @settings(max_examples=200)
    def test_slice_until_matches_str_find(self, source: str, delimiter: str) -> None:
        """PROPERTY: slice_until agrees with str.partition."""
        slicer = as_slicer(source)
        head, sep, _ = source.partition(delimiter)

        view = slicer.slice_until(delimiter)

        if sep:
            assert view == head
        else:
            assert view is None


# ============================================================================
# PROPERTY TESTS - SKIP_OVER / SLICE_TO_END
# ============================================================================


class TestSkipAndEnd:
    """skip_over and slice_to_end properties."""

    @given(source=source_text, delimiter=delimiters)
    @settings(max_examples=200)
    def test_skip_over_mismatch_does_not_move(self, source: str, delimiter: str) -> None:
        """PROPERTY: skip_over on a non-matching prefix returns False."""
        assume(not source.startswith(delimiter))
        slicer = as_slicer(source)

        assert slicer.skip_over(delimiter) is False
        assert slicer.pos == 0

    @given(source=source_text)
    @settings(max_examples=100)
    def test_slice_to_end_idempotent(self, source: str) -> None:
        """PROPERTY: second slice_to_end is empty."""
        slicer = as_slicer(source)

        assert slicer.slice_to_end() == source
        assert slicer.slice_to_end() == ""
        assert slicer.is_at_end


# ============================================================================
# PROPERTY TESTS - MONOTONIC POSITION
# ============================================================================


class TestForwardOnly:
    """Position never moves backward."""

    @given(
        source=source_text,
        steps=st.lists(st.tuples(operations, delimiters), max_size=20),
    )
    @settings(max_examples=200)
    def test_position_is_monotonic_and_in_bounds(self, source: str, steps: list) -> None:
        """PROPERTY: 0 <= pos <= len(source) and pos never decreases."""
        slicer = as_slicer(source)
        previous = slicer.pos

        for operation, delimiter in steps:
            operation(slicer, delimiter)
            assert previous <= slicer.pos <= len(source)
            previous = slicer.pos

    @given(source=source_text)
    @settings(max_examples=100)
    def test_slice_line_covers_all_lines(self, source: str) -> None:
        """PROPERTY: slice_line yields the same lines as str.split on LF."""
        slicer = as_slicer(source)
        lines = []
        while (line := slicer.slice_line()) is not None:
            lines.append(line.text)

        *terminated, last = source.split("\n")
        expected = [item.removesuffix("\r") for item in terminated]
        if last:
            expected.append(last)
        assert lines == expected

    @given(
        source=st.text(alphabet="ab\n", max_size=100),
        cuts=st.lists(st.integers(min_value=0, max_value=100), max_size=10),
    )
    @settings(max_examples=200)
    def test_line_tracker_matches_count(self, source: str, cuts: list[int]) -> None:
        """PROPERTY: LineTracker agrees with counting newlines directly."""
        slicer = as_slicer(source, tracker=LineTracker())

        for cut in sorted(cuts):
            target = min(cut, len(source))
            if target < slicer.pos:
                continue
            slicer.jump_to(target)
            assert slicer.tracker_pos == source.count("\n", 0, target)
