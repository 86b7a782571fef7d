"""
ASCII previews of selections.

Draws a grid extent as a boxed character grid with the selected cells marked,
either one selection at a time or several side by side in flow layout.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from cellselect import Selector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderOptions:
    """How previews are drawn."""

    selected_char: str = "#"
    unselected_char: str = "."
    cell_width: int = 3
    highlight: bool = True  # Selected cells get a white background


# =============================================================================
# Single Preview
# =============================================================================


def render_selection(
    selector: Selector,
    count_rows: int,
    count_columns: int,
    title: str | None = None,
    options: RenderOptions = RenderOptions(),
    colorize: Callable[[str], str] | None = None,
) -> list[str]:
    """
    Render one selection as a boxed character grid.

    Args:
        selector: The selection to preview
        count_rows: Rows of the previewed grid
        count_columns: Columns of the previewed grid
        title: Optional title centred in the top border
        options: Characters, cell width and highlighting
        colorize: Optional colorizer for the border

    Returns:
        List of strings representing the rendered lines
    """
    if colorize is None:
        colorize = lambda s: s

    selected: set[tuple[int, int]] = set()
    for row, col in selector.cells(count_rows, count_columns):
        if 0 <= row < count_rows and 0 <= col < count_columns:
            selected.add((row, col))
        else:
            logger.debug(
                "render_selection: cell (%d, %d) outside %dx%d not drawn",
                row,
                col,
                count_rows,
                count_columns,
            )

    cell_width = options.cell_width
    grid_width = preview_width(count_columns, cell_width)
    label = f" {title} " if title else ""

    lines: list[str] = []

    # Top border, with the title centred when it fits
    title_line = "┌" + "─" * (grid_width - 2) + "┐"
    if label and len(label) <= grid_width - 2:
        title_start = (grid_width - len(label)) // 2
        title_line = (
            "┌" +
            "─" * (title_start - 1) +
            label +
            "─" * (grid_width - title_start - len(label) - 1) +
            "┐"
        )
    lines.append(colorize(title_line))

    for r_idx in range(count_rows):
        line_parts = [colorize("│")]

        for c_idx in range(count_columns):
            is_selected = (r_idx, c_idx) in selected
            char = options.selected_char if is_selected else options.unselected_char
            content = char if cell_width == 1 else char.center(cell_width)

            if is_selected and options.highlight:
                content = chalk.bgWhite.black(content)

            line_parts.append(content)

        line_parts.append(colorize("│"))
        lines.append("".join(line_parts))

    lines.append(colorize("└" + "─" * (grid_width - 2) + "┘"))

    return lines


def preview_width(count_columns: int, cell_width: int) -> int:
    """Visible width of a preview, borders included."""
    return count_columns * cell_width + 2


# =============================================================================
# Flow Layout
# =============================================================================


def render_gallery(
    selections: dict[str, Selector],
    count_rows: int,
    count_columns: int,
    terminal_width: int = 120,
    options: RenderOptions = RenderOptions(),
) -> str:
    """
    Render several selections over the same extent in flow layout.

    Args:
        selections: Titles mapped to selectors, drawn in insertion order
        count_rows: Rows of the previewed grid
        count_columns: Columns of the previewed grid
        terminal_width: Maximum width for layout (default 120)
        options: Characters, cell width and highlighting

    Returns:
        Rendered ASCII string with all previews in flow layout
    """
    colors: list[Callable[[str], str]] = [
        chalk.red,
        chalk.green,
        chalk.yellow,
        chalk.blue,
        chalk.magenta,
        chalk.cyan,
    ]

    width = preview_width(count_columns, options.cell_width)
    rendered: list[list[str]] = [
        render_selection(
            selector,
            count_rows,
            count_columns,
            title,
            options,
            colors[i % len(colors)] if options.highlight else None,
        )
        for i, (title, selector) in enumerate(selections.items())
    ]

    output_lines: list[str] = []
    grid_spacing = 2  # spaces between previews

    current_row: list[list[str]] = []
    current_row_width = 0

    for preview in rendered:
        needed_width = width
        if current_row:
            needed_width += grid_spacing

        if current_row and current_row_width + needed_width > terminal_width:
            _flush_preview_row(current_row, output_lines, grid_spacing)
            current_row = []
            current_row_width = 0

        current_row.append(preview)
        current_row_width += needed_width

    if current_row:
        _flush_preview_row(current_row, output_lines, grid_spacing)

    return "\n".join(output_lines)


def _flush_preview_row(
    row_previews: list[list[str]],
    output_lines: list[str],
    grid_spacing: int,
) -> None:
    """Helper to flush a row of previews to output_lines."""
    # All previews in a gallery share one extent, so they have equal height.
    for line_idx in range(len(row_previews[0])):
        output_lines.append((" " * grid_spacing).join(p[line_idx] for p in row_previews))

    # Add spacing between rows
    output_lines.append("")
