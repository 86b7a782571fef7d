"""Tests for ascii_render module."""

import logging

import pytest

from ascii_render import RenderOptions, preview_width, render_gallery, render_selection
from cellselect import Cell, Columns, EmptySelector, Frame, Full, Rows

PLAIN = RenderOptions(highlight=False)


class TestRenderSelection:
    """Tests for single selection previews."""

    def test_first_row(self) -> None:
        """Selected cells are marked, the rest dotted."""
        lines = render_selection(Rows.first(), 2, 3, options=PLAIN)
        assert lines == [
            "┌─────────┐",
            "│ #  #  # │",
            "│ .  .  . │",
            "└─────────┘",
        ]

    def test_narrow_cells(self) -> None:
        """A cell width of 1 draws one character per cell."""
        options = RenderOptions(cell_width=1, highlight=False)
        lines = render_selection(Full().difference_from(Frame()), 3, 3, options=options)
        assert lines == ["┌───┐", "│...│", "│.#.│", "│...│", "└───┘"]

    def test_custom_characters(self) -> None:
        """Marker characters come from the options."""
        options = RenderOptions(selected_char="x", unselected_char=" ", cell_width=1, highlight=False)
        lines = render_selection(Columns.last(), 2, 2, options=options)
        assert lines[1:3] == ["│ x│", "│ x│"]

    def test_title_in_border(self) -> None:
        """A title that fits is centred in the top border."""
        lines = render_selection(EmptySelector(), 1, 4, title="t", options=PLAIN)
        assert lines[0] == "┌──── t ─────┐"
        assert len(lines[0]) == preview_width(4, 3)

    def test_title_too_long_is_dropped(self) -> None:
        """A title wider than the border is left out."""
        lines = render_selection(EmptySelector(), 1, 1, title="very long title", options=PLAIN)
        assert lines[0] == "┌───┐"

    def test_empty_extent(self) -> None:
        """An empty grid is just its border."""
        assert render_selection(Full(), 0, 0, options=PLAIN) == ["┌┐", "└┘"]

    def test_out_of_range_cells_ignored(self, caplog: pytest.LogCaptureFixture) -> None:
        """Cells outside the extent are not drawn."""
        with caplog.at_level(logging.DEBUG, logger="ascii_render"):
            lines = render_selection(Cell(9, 9), 1, 1, options=PLAIN)
        assert lines[1] == "│ . │"
        assert "(9, 9) outside 1x1" in caplog.text

    def test_highlight_keeps_marker(self) -> None:
        """Highlighted cells still show the marker character."""
        lines = render_selection(Cell(0, 0), 1, 2)
        assert "#" in lines[1]
        assert "." in lines[1]


class TestRenderGallery:
    """Tests for flow layout of several previews."""

    def test_side_by_side(self) -> None:
        """Previews that fit share lines, separated by two spaces."""
        output = render_gallery(
            {"a": Rows.first(), "b": Rows.last()},
            2,
            1,
            options=RenderOptions(cell_width=1, highlight=False),
        )
        assert output.split("\n") == [
            "┌─┐  ┌─┐",
            "│#│  │.│",
            "│.│  │#│",
            "└─┘  └─┘",
            "",
        ]

    def test_wraps_to_terminal_width(self) -> None:
        """Previews that do not fit start a new row."""
        output = render_gallery(
            {"a": Full(), "b": Full(), "c": Full()},
            1,
            2,
            terminal_width=10,
            options=RenderOptions(cell_width=1, highlight=False),
        )
        lines = output.split("\n")
        # Each preview is 4 wide, so two fit per row: 4 + 2 + 4 = 10
        assert lines[0] == "┌──┐  ┌──┐"
        assert lines[3] == ""
        assert lines[4] == "┌──┐"
        assert len(lines) == 8

    def test_empty_gallery(self) -> None:
        """No selections renders nothing."""
        assert render_gallery({}, 2, 2) == ""
