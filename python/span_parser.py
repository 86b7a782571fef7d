"""
Span parsing utilities for cellselect.

Spans are written the way range literals read:

    ..      every index
    2..     from 2 to the end
    ..3     up to, but not including, 3
    ..=3    up to and including 3
    1..3    1 and 2
    1..=3   1, 2 and 3
    4       just 4
"""

from __future__ import annotations

import re

from cell_types import Bound, Excluded, Included, Span, Unbounded
from cellselect import Segment

__all__ = ["parse_span", "parse_segment"]

_SPAN_PATTERN = re.compile(r"^(?P<start>\d*)\s*(?P<dots>\.\.=?)\s*(?P<end>\d*)$")

_VALID_FORMS = (
    "  Valid formats:\n"
    "    - '..': every index\n"
    "    - 'a..': from a to the end\n"
    "    - '..b' / '..=b': up to b, exclusive / inclusive\n"
    "    - 'a..b' / 'a..=b': from a to b, exclusive / inclusive\n"
    "    - 'a': the single index a"
)


def parse_span(text: str) -> Span:
    """
    Parse a span from its compact string form.

    Args:
        text: Span text such as "1..", "..=3" or "2"

    Returns:
        The parsed Span

    Raises:
        ValueError: if the text is not one of the accepted forms
    """
    stripped = text.strip()

    if stripped.isdigit():
        return Span.at(int(stripped))

    match = _SPAN_PATTERN.match(stripped)
    if match is None or (match["dots"] == "..=" and not match["end"]):
        error_msg = f"Invalid span: '{text}'\n" + _VALID_FORMS
        raise ValueError(error_msg)

    start: Bound = Included(int(match["start"])) if match["start"] else Unbounded()
    if not match["end"]:
        end: Bound = Unbounded()
    elif match["dots"] == "..=":
        end = Included(int(match["end"]))
    else:
        end = Excluded(int(match["end"]))

    return Span(start, end)


def parse_segment(text: str) -> Segment:
    """
    Parse a rectangular segment written as "<rows>,<columns>".

    Example:
        "1..,..=2" -> Segment(rows 1.., columns ..=2)

    Raises:
        ValueError: if there is not exactly one comma, or either span is invalid
    """
    parts = text.split(",")
    if len(parts) != 2:
        error_msg = (
            f"Invalid segment: '{text}'\n"
            f"  Expected '<rows>,<columns>', found {len(parts)} part(s)"
        )
        raise ValueError(error_msg)

    rows_text, columns_text = parts
    try:
        rows = parse_span(rows_text)
    except ValueError as exc:
        raise ValueError(f"Invalid rows in segment '{text}'\n{exc}") from exc
    try:
        columns = parse_span(columns_text)
    except ValueError as exc:
        raise ValueError(f"Invalid columns in segment '{text}'\n{exc}") from exc

    return Segment(rows, columns)
