"""
Interactive demo for cellselect.
Display a selection on a resizable grid and cycle through selectors with the keyboard.
"""

import logging
import sys

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ascii_render import render_selection
from cellselect import (
    Cell,
    Columns,
    Frame,
    Full,
    Rows,
    Selector,
    Span,
)
from span_parser import parse_segment

SELECTIONS: dict[str, Selector] = {
    "Full()": Full(),
    "Frame()": Frame(),
    "Rows.first()": Rows.first(),
    "Rows.last()": Rows.last(),
    "Rows.last().shifted_backward(1)": Rows.last().shifted_backward(1),
    "Columns.first().shifted_forward(1)": Columns.first().shifted_forward(1),
    "Columns(1..)": Columns(Span.starting_at(1)),
    "Segment(1..,1..)": parse_segment("1..,1.."),
    "Frame() - Rows.first()": Frame().difference_from(Rows.first()),
    "Cell(0, 0) | Cell(1, 2)": Cell(0, 0).union_with(Cell(1, 2)),
}


class InteractiveDemo:
    """Interactive explorer for selections."""

    def __init__(self, selections: dict[str, Selector], count_rows: int = 4, count_columns: int = 5) -> None:
        self.names = list(selections)
        self.selections = selections
        self.count_rows = count_rows
        self.count_columns = count_columns
        self.current = 0
        self.console = Console()
        self.status_message = "Ready"

    @property
    def selector(self) -> Selector:
        return self.selections[self.names[self.current]]

    def generate_display(self) -> Panel:
        """Generate the current display with the preview and status."""
        name = self.names[self.current]
        cells = self.selector.cells(self.count_rows, self.count_columns)
        preview = "\n".join(render_selection(self.selector, self.count_rows, self.count_columns, title=name))

        status = Text()
        status.append("Selector: ", style="bold")
        status.append(f"{name}\n")
        status.append("Extent: ", style="bold")
        status.append(f"{self.count_rows} rows x {self.count_columns} columns\n")
        status.append("Cells: ", style="bold")
        status.append(f"{len(cells)}\n\n")

        # Convert ANSI-colored preview text to Rich Text properly
        status.append(Text.from_ansi(preview))
        status.append("\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  W / S - Fewer / more rows\n")
        status.append("  A / D - Fewer / more columns\n")
        status.append("  N / P - Next / previous selector\n")
        status.append("  Q - Quit\n\n")

        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="cellselect Interactive Demo", border_style="green", width=80)

    def resize(self, rows_delta: int, columns_delta: int) -> None:
        """Grow or shrink the extent, never below zero."""
        self.count_rows = max(0, self.count_rows + rows_delta)
        self.count_columns = max(0, self.count_columns + columns_delta)
        self.status_message = f"Extent is now {self.count_rows}x{self.count_columns}"

    def cycle(self, step: int) -> None:
        """Move to another selector."""
        self.current = (self.current + step) % len(self.names)
        self.status_message = f"Showing {self.names[self.current]}"

    def run(self) -> None:
        """Run the interactive demo."""
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())

                    key = readchar.readkey()

                    if key.lower() == 'q':
                        self.status_message = "Quitting..."
                        live.update(self.generate_display())
                        break
                    elif key.lower() == 'w':
                        self.resize(-1, 0)
                    elif key.lower() == 's':
                        self.resize(1, 0)
                    elif key.lower() == 'a':
                        self.resize(0, -1)
                    elif key.lower() == 'd':
                        self.resize(0, 1)
                    elif key.lower() == 'n':
                        self.cycle(1)
                    elif key.lower() == 'p':
                        self.cycle(-1)
                    else:
                        self.status_message = f"Unknown key: {repr(key)}"

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == 'sublime':
        # Running from IDE - just render every selection once
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s: %(message)s')

        for name, selector in SELECTIONS.items():
            print("\n".join(render_selection(selector, 4, 5, title=name)))
            print()
    else:
        InteractiveDemo(SELECTIONS).run()
