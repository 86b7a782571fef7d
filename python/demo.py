"""
Demonstration script for cellselect selections.
"""

import logging

from ascii_render import RenderOptions, render_gallery, render_selection
from cellselect import (
    Cell,
    Columns,
    Frame,
    Full,
    Rows,
    Segment,
    Span,
)
from span_parser import parse_segment, parse_span
from styling import Modify, Padding, StyleSheet


def demo() -> None:
    """Show the selector catalog against a 5x4 grid."""
    count_rows, count_columns = 5, 4

    selections = {
        "full": Full(),
        "frame": Frame(),
        "first row": Rows.first(),
        "last row - 1": Rows.last().shifted_backward(1),
        "first col + 2": Columns.first().shifted_forward(2),
        "last col": Columns.last(),
        "rows 1..3": Rows(Span.between(1, 3)),
        "cols ..=1": Columns(Span.up_to_inclusive(1)),
        "1..,1..": Segment(Span.starting_at(1), Span.starting_at(1)),
        "cell 2,2": Cell(2, 2),
    }

    print("=" * 60)
    print(f"Selector catalog on a {count_rows}x{count_columns} grid:")
    print("=" * 60)
    print(render_gallery(selections, count_rows, count_columns))


def combination_demo() -> None:
    """Show chained unions and differences."""
    count_rows, count_columns = 5, 4

    selections = {
        "frame - header": Frame().difference_from(Rows.first()),
        "header | cell": Rows.first().union_with(Cell(3, 1)),
        "full - frame": Full().difference_from(Frame()),
        "body - last col": Segment(parse_span("1.."), parse_span(".."))
        .difference_from(Columns.last()),
    }

    print("=" * 60)
    print("Combinations:")
    print("=" * 60)
    print(render_gallery(selections, count_rows, count_columns))


def styling_demo() -> None:
    """Pad the body of a sheet and print the resulting paddings."""
    sheet = StyleSheet(3, 3)
    body = parse_segment("1..,..")

    Modify(body).with_option(Padding.new(1, 1, 0, 0).set_fill("<", ">", " ", " ")).apply(sheet)

    print("=" * 60)
    print("Padded cells of a 3x3 sheet (body only):")
    print("=" * 60)
    print("\n".join(render_selection(body, 3, 3, "body", RenderOptions(highlight=False))))
    for (row, column), padding in sorted(sheet.paddings.items()):
        print(
            f"  ({row}, {column}): left={padding.left.size}{padding.left.fill!r}"
            f" right={padding.right.size}{padding.right.fill!r}"
        )


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")

    demo()
    print()
    combination_demo()
    print()
    styling_demo()
