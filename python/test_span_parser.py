"""Tests for span_parser module."""

import pytest

from cell_types import Excluded, Included, Span, Unbounded
from cellselect import Segment
from span_parser import parse_segment, parse_span


class TestParseSpan:
    """Tests for the span parser."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("..", Span(Unbounded(), Unbounded())),
            ("2..", Span(Included(2), Unbounded())),
            ("..3", Span(Unbounded(), Excluded(3))),
            ("..=3", Span(Unbounded(), Included(3))),
            ("1..3", Span(Included(1), Excluded(3))),
            ("1..=3", Span(Included(1), Included(3))),
            ("4", Span(Included(4), Included(4))),
            ("12..40", Span(Included(12), Excluded(40))),
        ],
    )
    def test_valid_forms(self, text: str, expected: Span) -> None:
        """Every accepted form maps to its endpoints."""
        assert parse_span(text) == expected

    def test_whitespace_is_ignored(self) -> None:
        """Spaces around the dots and the text are allowed."""
        assert parse_span("  1 .. 3 ") == Span.between(1, 3)
        assert parse_span(" 7 ") == Span.at(7)

    def test_parsed_span_resolves(self) -> None:
        """Parsed spans resolve like hand-built ones."""
        assert parse_span("1..").resolve(5) == (1, 5)
        assert parse_span("..=2").resolve(5) == (0, 3)

    @pytest.mark.parametrize("text", ["", "abc", "1...3", "..=", "-1..", "1..-2", "1,2", "=3"])
    def test_invalid_forms_raise(self, text: str) -> None:
        """Anything else is rejected."""
        with pytest.raises(ValueError, match="Invalid span"):
            parse_span(text)

    def test_error_details(self) -> None:
        """The error names the input and lists the valid forms."""
        with pytest.raises(ValueError) as exc_info:
            parse_span("x..")

        error_msg = str(exc_info.value)
        assert "'x..'" in error_msg
        assert "Valid formats" in error_msg
        assert "'a..b' / 'a..=b'" in error_msg


class TestParseSegment:
    """Tests for the segment parser."""

    def test_simple_segment(self) -> None:
        """Rows then columns, separated by a comma."""
        segment = parse_segment("1..,..=2")
        assert segment == Segment(Span.starting_at(1), Span.up_to_inclusive(2))

    def test_segment_cells(self) -> None:
        """A parsed segment selects like a hand-built one."""
        assert parse_segment("1..,1..").cells(2, 3) == [(1, 1), (1, 2)]
        assert parse_segment("1..2,1..2").cells(2, 3) == [(1, 1)]

    def test_wrong_part_count_raises(self) -> None:
        """Exactly one comma is required."""
        with pytest.raises(ValueError, match="found 3 part"):
            parse_segment("1,2,3")
        with pytest.raises(ValueError, match="found 1 part"):
            parse_segment("1..")

    def test_invalid_rows_reported(self) -> None:
        """A bad row span is reported as such."""
        with pytest.raises(ValueError, match="Invalid rows in segment"):
            parse_segment("a,..")

    def test_invalid_columns_reported(self) -> None:
        """A bad column span is reported as such."""
        with pytest.raises(ValueError, match="Invalid columns in segment"):
            parse_segment("..,b")
